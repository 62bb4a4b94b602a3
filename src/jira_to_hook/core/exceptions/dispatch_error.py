from __future__ import annotations

from dataclasses import dataclass

from jira_to_hook.core.exceptions.jira_to_hook_error import JiraToHookError


@dataclass(eq=False)
class DispatchError(JiraToHookError):
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.message}{code}"
