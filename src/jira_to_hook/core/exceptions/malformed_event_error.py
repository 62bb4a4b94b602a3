from __future__ import annotations

from dataclasses import dataclass

from jira_to_hook.core.exceptions.jira_to_hook_error import JiraToHookError


@dataclass(eq=False)
class MalformedEventError(JiraToHookError):
    """A transition arrived without the issue data needed to describe it."""

    message: str
    issue_key: str | None = None

    def __str__(self) -> str:
        key = f" issue={self.issue_key}" if self.issue_key else ""
        return f"{self.message}{key}"
