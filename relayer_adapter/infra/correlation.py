"""
Request-scoped correlation IDs

A registry lookup runs inside a CorrelationContext; every log line written
during it (registry call, token calls) carries the same "[id] " prefix.
"""

import contextvars
import uuid
from typing import Optional

_correlation_id: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "relayer_correlation_id", default=None
)


def get_correlation_id() -> Optional[str]:
    return _correlation_id.get()


def log_prefix() -> str:
    """Log line prefix for the active lookup (empty outside a context)."""
    cid = _correlation_id.get()
    return f"[{cid}] " if cid else ""


class CorrelationContext:
    """
    Scope one lookup under a fresh correlation ID

    Usage:
        with CorrelationContext("relayer"):
            logger.info(f"{log_prefix()}Fetching relayer")
    """

    def __init__(self, kind: str):
        self.correlation_id = f"{kind}_{uuid.uuid4().hex[:12]}"
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> str:
        self._token = _correlation_id.set(self.correlation_id)
        return self.correlation_id

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._token is not None:
            _correlation_id.reset(self._token)
            self._token = None
