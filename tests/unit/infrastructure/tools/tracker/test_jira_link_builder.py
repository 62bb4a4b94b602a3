from jira_to_hook.infrastructure.tools.tracker.jira_link_builder import JiraLinkBuilder


def test_browse_url():
    assert JiraLinkBuilder("https://jira.example.com").browse_url("QA-1") == "https://jira.example.com/browse/QA-1"


def test_strips_trailing_slash_from_base():
    assert JiraLinkBuilder("https://jira.example.com/").browse_url("MD-3") == "https://jira.example.com/browse/MD-3"


def test_scope_url_is_encoded_jql():
    url = JiraLinkBuilder("https://jira.example.com").scope_url("QA-12")

    assert url == (
        "https://jira.example.com/issues/?jql="
        "issue%20in%20linkedIssues(%22QA-12%22)%20AND%20project%20!%3D%20MD"
    )
