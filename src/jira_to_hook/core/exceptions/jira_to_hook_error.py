class JiraToHookError(Exception):
    """Base class for every error raised by the service."""
