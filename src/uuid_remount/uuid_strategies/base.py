"""Interface of per-filesystem UUID regeneration strategies."""

from __future__ import annotations

from typing import Iterable, Protocol

from uuid_remount.core.errors import UnsupportedFilesystemError
from uuid_remount.core.models import FileSystemType
from uuid_remount.core.session import MountSession


class UuidStrategy(Protocol):
    """Regenerates the on-disk UUID of an unmounted device."""

    name: str
    filesystems: tuple[FileSystemType, ...]

    def regenerate(self, session: MountSession) -> str | None:
        """Assigns a new UUID and returns it when known."""


def strategy_for(fs_type: FileSystemType, strategies: Iterable[UuidStrategy]) -> UuidStrategy:
    """Picks the strategy registered for `fs_type`."""

    for strategy in strategies:
        if fs_type in strategy.filesystems:
            return strategy
    raise UnsupportedFilesystemError(f"No UUID strategy for filesystem {fs_type!r}")
