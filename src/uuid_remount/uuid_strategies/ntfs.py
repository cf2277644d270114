"""NTFS placeholder strategy."""

from __future__ import annotations

from structlog import get_logger

from uuid_remount.core.models import FileSystemType
from uuid_remount.core.session import MountSession


class NtfsUuidStrategy:
    """Leaves the NTFS serial number untouched; the device is mounted as is."""

    name = "ntfs"
    filesystems = (FileSystemType.NTFS,)

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    def regenerate(self, session: MountSession) -> str | None:
        # TODO: regenerate the volume serial with ntfslabel --new-serial once it can be verified on snapshots.
        self._logger.info("uuid-unchanged", device=session.device, strategy=self.name)
        return None


__all__ = ["NtfsUuidStrategy"]
