"""Reporting interface consumed by the invoker."""

from __future__ import annotations

from typing import Protocol


class Reporter(Protocol):
    """The reporting primitives a hook runner exposes to a hook action."""

    def write(self, text: str) -> None:
        """Emit raw text, such as the analysis tool's output."""
        ...  # pragma: no cover

    def success(self, message: str, halts_execution: bool) -> None:
        """Report that the hook passed.

        Args:
            message: Human-readable summary.
            halts_execution: Stop the hook runner after reporting.
        """
        ...  # pragma: no cover

    def error(self, message: str, exit_code: int) -> None:
        """Report a terminal failure carrying the exit code for the commit."""
        ...  # pragma: no cover
