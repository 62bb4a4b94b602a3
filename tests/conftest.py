import pytest

from jira_to_hook.core.domain.events.transition_event import (
    IssueFields,
    IssueLink,
    IssueRef,
    Transition,
    TransitionEvent,
)
from jira_to_hook.infrastructure.configuration.main_settings import Settings
from jira_to_hook.infrastructure.tools.tracker.jira_link_builder import JiraLinkBuilder

JIRA_URL = "https://jira.example.com"
HOOK_URL = "https://hooks.example.com/services/T000/B000/XXX"


def make_issue(key: str, summary: str = "", links: list[IssueLink] | None = None) -> IssueRef:
    return IssueRef(key=key, fields=IssueFields(summary=summary, issue_links=tuple(links or ())))


def make_link(key: str, summary: str = "", type_name: str | None = "Release link") -> IssueLink:
    return IssueLink(type_name=type_name, linked_issue=make_issue(key, summary))


def release_links(count: int, start: int = 1) -> list[IssueLink]:
    return [make_link(f"BE-{n}", f"Backend change {n}") for n in range(start, start + count)]


def make_event(
    name: str = "Deploy",
    key: str = "QA-1",
    summary: str = "Fix bug",
    links: list[IssueLink] | None = None,
) -> TransitionEvent:
    return TransitionEvent(
        webhook_event_name="jira:issue_updated",
        transition=Transition(name=name, from_status="Ready", to_status="Done"),
        issue=make_issue(key, summary, links),
    )


@pytest.fixture
def settings(monkeypatch):
    for var in ("JIRA_BASE_URL", "BIND_ADDRESS", "DESTINATION_HOOK_URL"):
        monkeypatch.delenv(var, raising=False)
    return Settings(
        jira_base_url=JIRA_URL,
        bind_address="localhost:8080",
        destination_hook_url=HOOK_URL,
        app_name="TestJiraToHook",
        _env_file=None,
    )


@pytest.fixture
def links() -> JiraLinkBuilder:
    return JiraLinkBuilder(JIRA_URL)
