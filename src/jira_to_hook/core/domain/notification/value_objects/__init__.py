from .link_bucket import LinkBucket
from .transition_kind import TransitionKind

__all__ = ["LinkBucket", "TransitionKind"]
