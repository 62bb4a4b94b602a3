from __future__ import annotations

from jira_to_hook.core.exceptions.jira_to_hook_error import JiraToHookError


class ConfigurationError(JiraToHookError):
    """Raised when configuration is invalid or incomplete."""
