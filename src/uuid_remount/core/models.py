"""Data model shared by the remount pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class FileSystemType(str, Enum):
    """Filesystems whose UUID can be regenerated before mounting."""

    EXT2 = "ext2"
    EXT3 = "ext3"
    EXT4 = "ext4"
    XFS = "xfs"
    NTFS = "ntfs"

    @property
    def is_ext_family(self) -> bool:
        return self in (FileSystemType.EXT2, FileSystemType.EXT3, FileSystemType.EXT4)


# Detection checks the probe output against the names in this order; first match wins.
PROBE_ORDER: tuple[FileSystemType, ...] = (
    FileSystemType.EXT2,
    FileSystemType.EXT3,
    FileSystemType.EXT4,
    FileSystemType.XFS,
    FileSystemType.NTFS,
)


class MountTool(str, Enum):
    """External utilities the pipeline drives."""

    MOUNT = "mount"
    UMOUNT = "umount"
    NTFS_3G = "ntfs-3g"
    TUNE2FS = "tune2fs"
    BLKID = "blkid"
    FILE = "file"
    XFS_ADMIN = "xfs_admin"


class MountStage(str, Enum):
    """Pipeline stages, listed in execution order."""

    BIND_ARGS = "bind_args"
    CHANGE_DEV_UUID = "change_dev_uuid"
    MOUNT_DEVICE = "mount_device"
    CHECK = "check"


STAGE_ORDER: tuple[MountStage, ...] = tuple(MountStage)


@dataclass(frozen=True, slots=True)
class MountRequest:
    """Input of a single remount run."""

    device: str
    mount_path: str
    context: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))
