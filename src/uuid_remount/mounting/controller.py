"""Mount, unmount and mount-state queries through the system utilities."""

from __future__ import annotations

import re

from structlog import get_logger

from uuid_remount.core.errors import MountFailedError, UnmountFailedError, UnsupportedFilesystemError
from uuid_remount.core.models import FileSystemType, MountTool
from uuid_remount.drivers import CommandExecutor
from uuid_remount.shared.config import ToolPaths


_MOUNT_TOOLS: dict[FileSystemType, MountTool] = {
    FileSystemType.EXT2: MountTool.MOUNT,
    FileSystemType.EXT3: MountTool.MOUNT,
    FileSystemType.EXT4: MountTool.MOUNT,
    FileSystemType.XFS: MountTool.MOUNT,
    FileSystemType.NTFS: MountTool.NTFS_3G,
}


def tool_for_filesystem(fs_type: FileSystemType) -> MountTool:
    """Selects the mount tool for a filesystem; anything unmapped is rejected."""

    try:
        return _MOUNT_TOOLS[fs_type]
    except (KeyError, TypeError):
        raise UnsupportedFilesystemError(f"No mount tool for filesystem {fs_type!r}") from None


def listing_contains(listing: str, path_or_device: str) -> bool:
    """True when `path_or_device` is a whole token of a listing line, followed by a separator."""

    if not path_or_device:
        return False
    pattern = re.compile(rf"(?:^|\s){re.escape(path_or_device)}\s")
    return any(pattern.search(line + "\n") for line in listing.splitlines())


class MountController:
    """Thin wrapper over `mount`, `umount` and `ntfs-3g`."""

    def __init__(self, executor: CommandExecutor, *, tools: ToolPaths | None = None) -> None:
        self._executor = executor
        self._tools = tools or ToolPaths()
        self._logger = get_logger(__name__)

    def mount(self, fs_type: FileSystemType, device: str, target: str, options: str = "") -> None:
        tool = tool_for_filesystem(fs_type)
        command = " ".join(part for part in (self._tools[tool], options, device, target) if part)
        self._logger.debug("mounting", device=device, target=target, tool=tool.value, options=options or None)

        result = self._executor.run(command)
        if not result.ok:
            raise MountFailedError(f"Failed to mount {device} at {target} (exit code {result.exit_code})")
        self._logger.info("mounted", device=device, target=target)

    def unmount(self, path_or_device: str) -> None:
        result = self._executor.run(f"{self._tools[MountTool.UMOUNT]} {path_or_device}")
        if not result.ok:
            raise UnmountFailedError(f"Failed to unmount {path_or_device} (exit code {result.exit_code})")
        self._logger.info("unmounted", target=path_or_device)

    def is_mounted(self, path_or_device: str) -> bool:
        """Checks the current mount listing for a device or mount point."""

        result = self._executor.run(self._tools[MountTool.MOUNT])
        if not result.ok:
            raise MountFailedError(f"Could not list mounts (exit code {result.exit_code})")
        mounted = listing_contains(result.stdout, path_or_device)
        self._logger.debug("mount-state", target=path_or_device, mounted=mounted)
        return mounted


__all__ = ["MountController", "tool_for_filesystem", "listing_contains"]
