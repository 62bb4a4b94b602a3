from collections.abc import Iterable

from jira_to_hook.application.core.services.issue_line_renderer import IssueLineRenderer
from jira_to_hook.application.core.services.link_classifier import LinkClassifier
from jira_to_hook.application.ports.tracker_link_port import TrackerLinkPort
from jira_to_hook.core.domain.events.transition_event import IssueLink
from jira_to_hook.core.domain.notification.aggregate_result import AggregateResult
from jira_to_hook.core.domain.notification.value_objects.link_bucket import LinkBucket

RELEASE_CAPACITY = 10


class ScopeAggregator:
    """
    Walks the links of the subject issue and collects two candidate blocks:
    the MD- family (uncapped) and the release-linked issues (capped).

    When the release list overflows by a single issue, that issue is listed
    anyway; a larger overflow becomes one "...and other N issue(s)" line
    pointing to the scope query.
    """

    def __init__(
        self,
        links: TrackerLinkPort,
        classifier: LinkClassifier | None = None,
        renderer: IssueLineRenderer | None = None,
    ):
        self.links = links
        self.classifier = classifier or LinkClassifier()
        self.renderer = renderer or IssueLineRenderer(links)

    def aggregate(
        self,
        root_key: str,
        issue_links: Iterable[IssueLink],
        capacity: int = RELEASE_CAPACITY,
    ) -> AggregateResult:
        family_lines: list[str] = []
        release_lines: list[str] = []
        release_count = 0
        last_release_line = ""

        for link in issue_links:
            bucket, issue = self.classifier.classify(link)
            if bucket is LinkBucket.IGNORED or issue is None:
                continue

            line = self.renderer.render_bullet(issue)
            if bucket is LinkBucket.FAMILY:
                family_lines.append(line)
                continue

            release_count += 1
            last_release_line = line
            if len(release_lines) < capacity:
                release_lines.append(line)

        overflow_text = ""
        overflow = release_count - capacity
        if overflow == 1:
            release_lines.append(last_release_line)
        elif overflow > 1:
            overflow_text = (
                f"- ...and <{self.links.scope_url(root_key)}|other {overflow} issue(s)>"
            )

        return AggregateResult(
            family_lines=tuple(family_lines),
            release_lines=tuple(release_lines),
            release_total_count=release_count,
            release_overflow_text=overflow_text,
        )
