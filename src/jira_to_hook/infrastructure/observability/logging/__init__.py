from jira_to_hook.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from jira_to_hook.infrastructure.observability.logging.event_schema_processor import (
    event_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "event_schema_processor",
]
