from jira_to_hook.application.ports.tracker_link_port import TrackerLinkPort
from jira_to_hook.core.domain.events.transition_event import IssueRef


class IssueLineRenderer:
    """Renders issues as Slack mrkdwn fragments: *<url|KEY>* (_summary_)."""

    def __init__(self, links: TrackerLinkPort):
        self.links = links

    def render(self, issue: IssueRef) -> str:
        url = self.links.browse_url(issue.key)
        return f"*<{url}|{issue.key}>* (_{issue.summary}_)"

    def render_bullet(self, issue: IssueRef) -> str:
        return f"- {self.render(issue)}"
