from jira_to_hook.application.core.services.issue_line_renderer import IssueLineRenderer
from jira_to_hook.application.ports.tracker_link_port import TrackerLinkPort
from jira_to_hook.core.domain.events.transition_event import IssueRef
from jira_to_hook.core.domain.notification.aggregate_result import AggregateResult
from jira_to_hook.core.domain.notification.value_objects.transition_kind import TransitionKind


class MessageComposer:
    """
    Builds the chat text for one qualifying transition.

    Family (MD-) issues take priority: once any is present the release list
    is reduced to a single "...with N issue(s) in scope" line.
    """

    def __init__(self, links: TrackerLinkPort, renderer: IssueLineRenderer | None = None):
        self.links = links
        self.renderer = renderer or IssueLineRenderer(links)

    def compose(self, kind: TransitionKind, issue: IssueRef, aggregate: AggregateResult) -> str:
        lines = [f"{kind.status_phrase}: {self.renderer.render(issue)}"]

        if aggregate.family_lines:
            lines.extend(aggregate.family_lines)
            if aggregate.release_total_count > 0:
                lines.append(
                    f"- ...with <{self.links.scope_url(issue.key)}"
                    f"|{aggregate.release_total_count} issue(s) in scope>"
                )
        elif aggregate.release_lines:
            lines.extend(aggregate.release_lines)
            if aggregate.release_overflow_text:
                lines.append(aggregate.release_overflow_text)

        return "\n".join(lines)
