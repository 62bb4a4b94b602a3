from jira_to_hook.core.exceptions.configuration_error import ConfigurationError
from jira_to_hook.core.exceptions.dispatch_error import DispatchError
from jira_to_hook.core.exceptions.jira_to_hook_error import JiraToHookError
from jira_to_hook.core.exceptions.malformed_event_error import MalformedEventError

__all__ = [
    "ConfigurationError",
    "DispatchError",
    "JiraToHookError",
    "MalformedEventError",
]
