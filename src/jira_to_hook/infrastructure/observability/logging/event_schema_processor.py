"""Structlog processor that nests flat log events into the service schema.

Root fields (timestamp, level, service, environment, ids, event) stay at the
top; processing, error and request context are grouped into sub-blocks and
anything left over lands in ``extra``.
"""

from __future__ import annotations

import os
from typing import Any


def _pop_block(event_dict: dict[str, Any], prefix: str, trigger: str) -> dict[str, Any] | None:
    """Collect every ``{prefix}_*`` key into one block, if ``{prefix}_{trigger}`` is set."""
    if f"{prefix}_{trigger}" not in event_dict:
        return None
    keys = [key for key in event_dict if key.startswith(f"{prefix}_")]
    return {key[len(prefix) + 1:]: event_dict.pop(key) for key in keys}


def event_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result: dict[str, Any] = {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "jira-to-hook"),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "event": event_dict.pop("event", ""),
    }

    for prefix, trigger in (("processing", "status"), ("error", "type"), ("context", "endpoint")):
        block = _pop_block(event_dict, prefix, trigger)
        if block is not None:
            result[prefix] = block

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
