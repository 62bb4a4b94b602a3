from enum import Enum


class LinkBucket(Enum):
    FAMILY = "family"
    RELEASE_SCOPED = "release_scoped"
    IGNORED = "ignored"
