"""Filesystem detection interface."""

from __future__ import annotations

from typing import Iterable, Protocol

from uuid_remount.core.models import FileSystemType


class FileSystemDetector(Protocol):
    """Interface for components that classify a device's filesystem."""

    def supported_filesystems(self) -> Iterable[FileSystemType]:
        """Returns the filesystem types this detector can report."""

    def detect(self, device: str) -> FileSystemType:
        """Classifies the filesystem on `device` or raises a `RemountError`."""
