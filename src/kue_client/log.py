"""Logger interface used by the client.

Any object with structlog-style ``debug`` and ``error`` methods can be
plugged into :class:`kue_client.Client`, e.g. ``structlog.get_logger()``.
Logging is disabled by default through :func:`null_logger`.
"""

from typing import Any, Protocol

import structlog


class Logger(Protocol):
    """Structured logger accepting an event name and keyword context."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


def _drop_event(logger, method_name, event_dict):
    raise structlog.DropEvent


def null_logger() -> Logger:
    """Return a structlog logger that discards every event.

    Its processor chain is fixed, so global structlog configuration
    (including ``structlog.testing.capture_logs``) never sees its events.
    """
    return structlog.wrap_logger(structlog.ReturnLogger(), processors=[_drop_event])
