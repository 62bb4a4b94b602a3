from urllib.parse import quote

from jira_to_hook.application.ports.tracker_link_port import TrackerLinkPort

SCOPE_JQL = 'issue in linkedIssues("{key}") AND project != MD'


class JiraLinkBuilder(TrackerLinkPort):
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def browse_url(self, issue_key: str) -> str:
        return f"{self.base_url}/browse/{issue_key}"

    def scope_url(self, issue_key: str) -> str:
        jql = quote(SCOPE_JQL.format(key=issue_key), safe="()!")
        return f"{self.base_url}/issues/?jql={jql}"
