"""Remount pipeline: detection, UUID regeneration, mount and verification."""

from __future__ import annotations

from typing import Callable, Iterable

import structlog

from uuid_remount.core.errors import MountFailedError, RemountError
from uuid_remount.core.models import MountRequest, MountStage
from uuid_remount.core.session import MountSession
from uuid_remount.drivers import CommandExecutor, SubprocessExecutor
from uuid_remount.fs_detection import FileProbeDetector, FileSystemDetector
from uuid_remount.mounting import MountController, tool_for_filesystem
from uuid_remount.shared.config import ToolPaths
from uuid_remount.uuid_strategies import UuidStrategy, default_strategies, strategy_for


class DeviceMounter:
    """Orchestrates one remount run over a single device.

    Stages run strictly in order and the first failure ends the run. Nothing
    is rolled back: a device whose UUID was changed keeps the new UUID even
    when the mount fails afterwards.
    """

    def __init__(
        self,
        request: MountRequest,
        *,
        detector: FileSystemDetector,
        controller: MountController,
        strategies: Iterable[UuidStrategy],
    ) -> None:
        self._request = request
        self._detector = detector
        self._controller = controller
        self._strategies = tuple(strategies)
        self._logger = structlog.get_logger(__name__).bind(device=request.device, mount_path=request.mount_path)
        self._session = MountSession(request=request)

    @classmethod
    def with_executor(
        cls,
        request: MountRequest,
        executor: CommandExecutor | None = None,
        *,
        tools: ToolPaths | None = None,
    ) -> "DeviceMounter":
        """Wires the default detector, controller and strategies around one executor."""

        executor = executor or SubprocessExecutor()
        controller = MountController(executor, tools=tools)
        return cls(
            request,
            detector=FileProbeDetector(executor, tools=tools),
            controller=controller,
            strategies=default_strategies(executor, controller, tools=tools),
        )

    @property
    def session(self) -> MountSession:
        return self._session

    def start(self) -> MountSession:
        """Runs all stages and returns the finished session."""

        self._logger.info("remount-started")
        self._run_stage(MountStage.BIND_ARGS, self.bind_args)
        self._run_stage(MountStage.CHANGE_DEV_UUID, self.change_device_uuid)
        self._run_stage(MountStage.MOUNT_DEVICE, self.mount_device)
        self._run_stage(MountStage.CHECK, self.check)
        self._logger.info(
            "remount-complete",
            filesystem=self._session.filesystem.value if self._session.filesystem else None,
            uuid=self._session.uuid,
        )
        return self._session

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def bind_args(self) -> None:
        fs_type = self._detector.detect(self._request.device)
        self._session.filesystem = fs_type
        self._session.mount_tool = tool_for_filesystem(fs_type)

    def change_device_uuid(self) -> None:
        strategy = strategy_for(self._session.require_filesystem(), self._strategies)
        new_uuid = strategy.regenerate(self._session)
        if new_uuid is not None:
            self._session.uuid = new_uuid

    def mount_device(self) -> None:
        self._controller.mount(self._session.require_filesystem(), self._request.device, self._request.mount_path)

    def check(self) -> None:
        device, mount_path = self._request.device, self._request.mount_path
        if self._controller.is_mounted(device) or self._controller.is_mounted(mount_path):
            return
        raise MountFailedError(f"{device} is not listed as mounted at {mount_path} after mounting")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _run_stage(self, stage: MountStage, action: Callable[[], None]) -> None:
        expected = self._session.next_stage()
        if stage is not expected:
            raise RuntimeError(f"Stage {stage.value} is out of order, expected {expected}")

        self._logger.debug("stage-started", stage=stage.value)
        try:
            action()
        except RemountError as exc:
            self._logger.error("stage-failed", stage=stage.value, kind=exc.kind.value, error=str(exc))
            raise
        self._session.mark_completed(stage)
        self._logger.debug("stage-completed", stage=stage.value)


__all__ = ["DeviceMounter"]
