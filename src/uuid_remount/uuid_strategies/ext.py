"""UUID regeneration for ext2/ext3/ext4."""

from __future__ import annotations

from structlog import get_logger

from uuid_remount.core.errors import UuidGenerationError
from uuid_remount.core.models import FileSystemType, MountTool
from uuid_remount.core.session import MountSession
from uuid_remount.drivers import CommandExecutor
from uuid_remount.shared.config import ToolPaths
from .blkid import query_device_uuid


class ExtUuidStrategy:
    """Randomizes the UUID with `tune2fs` and reads it back with `blkid`.

    Works on the unmounted device, no mount needed. A failed randomize leaves
    the on-disk UUID in an unknown state (`UuidGenerationError`); a failed
    read-back only means the new value is not known (`DeviceUuidQueryError`).
    """

    name = "ext"
    filesystems = tuple(fs_type for fs_type in FileSystemType if fs_type.is_ext_family)

    def __init__(self, executor: CommandExecutor, *, tools: ToolPaths | None = None) -> None:
        self._executor = executor
        self._tools = tools or ToolPaths()
        self._logger = get_logger(__name__)

    def regenerate(self, session: MountSession) -> str | None:
        device = session.device
        result = self._executor.run(f"{self._tools[MountTool.TUNE2FS]} -U random {device}")
        if not result.ok:
            raise UuidGenerationError(f"tune2fs could not assign a random UUID to {device} (exit code {result.exit_code})")

        uuid = query_device_uuid(self._executor, device, tools=self._tools)
        self._logger.info("uuid-regenerated", device=device, uuid=uuid, strategy=self.name)
        return uuid


__all__ = ["ExtUuidStrategy"]
