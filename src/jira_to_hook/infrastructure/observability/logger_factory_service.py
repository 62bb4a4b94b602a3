"""Structlog setup for the service.

Stdlib loggers handed out by ``LoggerFactoryService`` and native structlog
loggers (the correlation middleware) share one processor chain, so every
line carries the same schema whichever API emitted it. The renderer comes
from ``Settings.log_format`` or, when unset, from the deployment env.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from jira_to_hook.infrastructure.observability.logging.event_schema_processor import (
    event_schema_processor,
)

_RENDERERS = {
    "json": structlog.processors.JSONRenderer,
    "console": lambda: structlog.dev.ConsoleRenderer(colors=True),
}
_JSON_ENVS = frozenset({"qa", "staging", "prod", "production"})

_handler: logging.Handler | None = None


def select_renderer(log_format: str | None = None, env: str = "local") -> Any:
    """An explicit known format wins; otherwise shared envs get JSON and the rest console."""
    name = (log_format or "").lower()
    if name not in _RENDERERS:
        name = "json" if env.lower() in _JSON_ENVS else "console"
    return _RENDERERS[name]()


def _shared_chain() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        event_schema_processor,
    ]


def configure_logging(
    level: str | int = logging.INFO, log_format: str | None = None, env: str = "local"
) -> logging.Handler:
    """
    (Re)install the stdout handler on the root logger and point structlog at
    the same renderer. Only the handler installed here is replaced, other
    root handlers are left alone.
    """
    global _handler  # noqa: PLW0603
    renderer = select_renderer(log_format, env)
    chain = _shared_chain()

    structlog.configure(
        processors=[*chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer]
        )
    )
    root.addHandler(_handler)
    root.setLevel(level if isinstance(level, int) else level.upper())
    return _handler


class LoggerFactoryService:
    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        return logging.getLogger(name)
