# src/logging/context.py — v1
"""Contextual logging support: attach document and identifier to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Set per hover request by the resolver.
_document: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "document", default=None
)
_identifier: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "identifier", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    document: str | None = None
    identifier: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        document=_document.get(),
        identifier=_identifier.get(),
    )


def set_document_context(document: str) -> None:
    """Set document-level context (called once per hover request)."""
    _document.set(document)
    _identifier.set(None)


def set_identifier_context(identifier: str | None) -> None:
    """Set the identifier being resolved."""
    _identifier.set(identifier)


def clear_context() -> None:
    """Reset all context variables."""
    _document.set(None)
    _identifier.set(None)
