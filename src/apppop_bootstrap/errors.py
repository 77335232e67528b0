"""Exceptions raised by bootstrap phases.

Phases raise; the ``init`` command is the only place that turns them into
console output and a non-zero exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .runner import CommandResult


class BootstrapError(Exception):
    """A fatal failure in one phase of the bootstrap."""

    def __init__(self, message: str, detail: str | None = None, hints: Sequence[str] = ()):
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.hints = list(hints)


class CommandError(BootstrapError):
    """A subprocess exited non-zero."""

    def __init__(self, message: str, result: "CommandResult", hints: Sequence[str] = ()):
        super().__init__(message, detail=result.output_summary(), hints=hints)
        self.result = result
