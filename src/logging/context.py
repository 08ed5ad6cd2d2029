# src/logging/context.py — v1
"""Contextual logging support: attach run_id, algorithm and iteration to records.

The detector updates the iteration for every edge-removal round so that each
log line can be tied to the round that produced it.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_algorithm: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "algorithm", default=None
)
_iteration: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "iteration", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    algorithm: str | None = None
    iteration: int | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        algorithm=_algorithm.get(),
        iteration=_iteration.get(),
    )


def set_run_context(run_id: str, algorithm: str) -> None:
    """Set run-level context (called once per detection run)."""
    _run_id.set(run_id)
    _algorithm.set(algorithm)
    _iteration.set(None)


def set_iteration_context(iteration: int | None) -> None:
    """Set the current edge-removal round."""
    _iteration.set(iteration)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _algorithm.set(None)
    _iteration.set(None)
