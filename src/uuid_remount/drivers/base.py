"""Interface for running external utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a single external command.

    `error` is set only when the process could not be launched. A nonzero
    `exit_code` is a regular result that callers inspect themselves.
    """

    exit_code: int
    stdout: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.exit_code == 0


class CommandExecutor(Protocol):
    """Minimal interface for command runners."""

    def run(self, command_line: str) -> CommandResult:
        """Runs a whitespace-separated command line and waits for it."""
