"""UUID regeneration for XFS."""

from __future__ import annotations

from typing import Callable
from uuid import uuid4

from structlog import get_logger

from uuid_remount.core.errors import UuidGenerationError
from uuid_remount.core.models import FileSystemType, MountTool
from uuid_remount.core.session import MountSession
from uuid_remount.drivers import CommandExecutor
from uuid_remount.mounting import MountController
from uuid_remount.shared.config import ToolPaths

NOUUID_OPTIONS = "-o rw,nouuid"


class XfsUuidStrategy:
    """Sets a fresh UUID with `xfs_admin` after a nouuid mount/unmount cycle.

    `xfs_admin` refuses a device with a dirty log, which is what a snapshot of
    a mounted filesystem has. Mounting with `nouuid` replays the log and the
    unmount leaves it clean. The order mount, unmount, set must not change.
    """

    name = "xfs"
    filesystems = (FileSystemType.XFS,)

    def __init__(
        self,
        executor: CommandExecutor,
        controller: MountController,
        *,
        tools: ToolPaths | None = None,
        uuid_factory: Callable[[], str] | None = None,
    ) -> None:
        self._executor = executor
        self._controller = controller
        self._tools = tools or ToolPaths()
        self._uuid_factory = uuid_factory or (lambda: str(uuid4()))
        self._logger = get_logger(__name__)

    def regenerate(self, session: MountSession) -> str | None:
        device = session.device
        new_uuid = self._uuid_factory()

        self._register(session)

        result = self._executor.run(f"{self._tools[MountTool.XFS_ADMIN]} -U {new_uuid} {device}")
        if not result.ok:
            raise UuidGenerationError(f"xfs_admin could not set UUID {new_uuid} on {device} (exit code {result.exit_code})")

        self._logger.info("uuid-regenerated", device=device, uuid=new_uuid, strategy=self.name)
        return new_uuid

    def _register(self, session: MountSession) -> None:
        self._logger.debug("xfs-nouuid-registration", device=session.device, target=session.mount_path)
        self._controller.mount(FileSystemType.XFS, session.device, session.mount_path, NOUUID_OPTIONS)
        self._controller.unmount(session.device)


__all__ = ["XfsUuidStrategy", "NOUUID_OPTIONS"]
