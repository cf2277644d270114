"""Filesystem detection based on the `file` utility."""

from __future__ import annotations

from typing import Iterable

from structlog import get_logger

from uuid_remount.core.errors import CommandExecutionError, UnknownFilesystemError
from uuid_remount.core.models import PROBE_ORDER, FileSystemType, MountTool
from uuid_remount.drivers import CommandExecutor
from uuid_remount.shared.config import ToolPaths
from .detector import FileSystemDetector


def match_filesystem(probe_output: str) -> FileSystemType | None:
    """Returns the first filesystem whose name occurs in `probe_output`."""

    text = probe_output.lower()
    for fs_type in PROBE_ORDER:
        if fs_type.value in text:
            return fs_type
    return None


class FileProbeDetector(FileSystemDetector):
    """Runs `file -sL <device>` and matches known filesystem names in its output."""

    def __init__(self, executor: CommandExecutor, *, tools: ToolPaths | None = None) -> None:
        self._executor = executor
        self._tools = tools or ToolPaths()
        self._logger = get_logger(__name__)

    def supported_filesystems(self) -> Iterable[FileSystemType]:
        return PROBE_ORDER

    def detect(self, device: str) -> FileSystemType:
        result = self._executor.run(f"{self._tools[MountTool.FILE]} -sL {device}")
        if result.error is not None:
            raise CommandExecutionError(f"Could not run the filesystem probe for {device}: {result.error}") from result.error
        if result.exit_code != 0:
            raise CommandExecutionError(
                f"Filesystem probe for {device} exited with code {result.exit_code}",
                exit_code=result.exit_code,
            )

        fs_type = match_filesystem(result.stdout)
        if fs_type is None:
            self._logger.warning("filesystem-unknown", device=device, probe=result.stdout[:200])
            raise UnknownFilesystemError(f"Unknown filesystem type on {device}")

        self._logger.info("filesystem-detected", device=device, filesystem=fs_type.value)
        return fs_type


__all__ = ["FileProbeDetector", "match_filesystem"]
