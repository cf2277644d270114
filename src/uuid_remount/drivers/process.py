"""Command executor backed by child processes."""

from __future__ import annotations

import subprocess

from structlog import get_logger

from .base import CommandResult


class SubprocessExecutor:
    """Runs one external process per call; no retries and no timeout."""

    name = "subprocess"

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def run(self, command_line: str) -> CommandResult:
        argv = command_line.split()
        if not argv:
            return CommandResult(exit_code=-1, error=ValueError("Empty command line"))

        try:
            proc = subprocess.run(argv, capture_output=True, text=True, errors="replace", check=False)
        except OSError as exc:
            self._logger.warning("command-launch-failed", argv=argv, error=str(exc))
            return CommandResult(exit_code=-1, error=exc)

        stdout = "\n".join((proc.stdout or "").splitlines())
        self._logger.debug("command-finished", argv=argv, exit_code=proc.returncode)
        if proc.returncode != 0 and proc.stderr:
            self._logger.debug("command-stderr", argv=argv, stderr=proc.stderr.strip()[:500])
        return CommandResult(exit_code=proc.returncode, stdout=stdout)


__all__ = ["SubprocessExecutor"]
