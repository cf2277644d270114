"""Working state of one remount run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .models import STAGE_ORDER, FileSystemType, MountRequest, MountStage, MountTool


@dataclass(slots=True)
class MountSession:
    """Mutable state owned by a single orchestration run."""

    request: MountRequest
    filesystem: FileSystemType | None = None
    mount_tool: MountTool | None = None
    uuid: str | None = None
    completed_stages: List[MountStage] = field(default_factory=list)

    @property
    def device(self) -> str:
        return self.request.device

    @property
    def mount_path(self) -> str:
        return self.request.mount_path

    def next_stage(self) -> MountStage | None:
        """Returns the stage that has to run next, or None when all are done."""

        done = len(self.completed_stages)
        return STAGE_ORDER[done] if done < len(STAGE_ORDER) else None

    def mark_completed(self, stage: MountStage) -> None:
        """Records a finished stage; stages must complete strictly in order."""

        expected = self.next_stage()
        if stage is not expected:
            raise RuntimeError(f"Stage {stage.value} cannot complete before {expected.value if expected else 'nothing'}")
        self.completed_stages.append(stage)

    def require_filesystem(self) -> FileSystemType:
        if self.filesystem is None:
            raise RuntimeError("Filesystem type has not been resolved")
        return self.filesystem

    @property
    def finished(self) -> bool:
        return self.next_stage() is None
