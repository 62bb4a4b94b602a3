from jira_to_hook.core.domain.events.transition_event import IssueLink, IssueRef
from jira_to_hook.core.domain.notification.value_objects.link_bucket import LinkBucket

FAMILY_PREFIX = "MD-"
RELEASE_LINK_TYPE = "Release link"


class LinkClassifier:
    def classify(self, link: IssueLink) -> tuple[LinkBucket, IssueRef | None]:
        # MD- membership is checked before the link type.
        issue = link.linked_issue
        if issue is None:
            return LinkBucket.IGNORED, None

        if issue.has_prefix(FAMILY_PREFIX):
            return LinkBucket.FAMILY, issue

        if link.type_name == RELEASE_LINK_TYPE:
            return LinkBucket.RELEASE_SCOPED, issue

        return LinkBucket.IGNORED, issue
