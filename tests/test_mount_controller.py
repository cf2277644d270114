"""Tests for the mount controller."""

from __future__ import annotations

import pytest

from tests.scripted import failed, ok
from uuid_remount.core.errors import MountFailedError, UnmountFailedError, UnsupportedFilesystemError
from uuid_remount.core.models import FileSystemType, MountTool
from uuid_remount.mounting import MountController, listing_contains, tool_for_filesystem


MOUNT_LISTING = "\n".join(
    [
        "proc on /proc type proc (rw,nosuid,nodev,noexec,relatime)",
        "/dev/sda1 on / type ext4 (rw,relatime)",
        "/dev/sdb10 on /mnt/data-old type ext4 (rw,relatime)",
        "/dev/mapper/vg_test-xfs_lv on /home/data1 type xfs (rw,relatime,attr2,inode64,noquota)",
    ]
)


@pytest.mark.parametrize(
    ("fs_type", "tool"),
    [
        (FileSystemType.EXT2, MountTool.MOUNT),
        (FileSystemType.EXT3, MountTool.MOUNT),
        (FileSystemType.EXT4, MountTool.MOUNT),
        (FileSystemType.XFS, MountTool.MOUNT),
        (FileSystemType.NTFS, MountTool.NTFS_3G),
    ],
)
def test_tool_mapping_is_total_over_supported_types(fs_type: FileSystemType, tool: MountTool) -> None:
    assert tool_for_filesystem(fs_type) is tool


@pytest.mark.parametrize("value", ["btrfs", None, "EXT4"])
def test_tool_mapping_fails_closed(value) -> None:
    with pytest.raises(UnsupportedFilesystemError):
        tool_for_filesystem(value)  # type: ignore[arg-type]


def test_mount_builds_command_without_options(executor) -> None:
    executor.on("mount", ok())

    MountController(executor).mount(FileSystemType.EXT4, "/dev/sdb1", "/mnt/data")

    assert executor.calls == ["mount /dev/sdb1 /mnt/data"]


def test_mount_passes_options(executor) -> None:
    executor.on("mount", ok())

    MountController(executor).mount(FileSystemType.XFS, "/dev/sdb1", "/mnt/data", "-o rw,nouuid")

    assert executor.calls == ["mount -o rw,nouuid /dev/sdb1 /mnt/data"]


def test_mount_uses_ntfs_3g_for_ntfs(executor) -> None:
    executor.on("ntfs-3g", ok())

    MountController(executor).mount(FileSystemType.NTFS, "/dev/sdc1", "/mnt/win")

    assert executor.calls == ["ntfs-3g /dev/sdc1 /mnt/win"]


def test_mount_failure_raises(executor) -> None:
    executor.on("mount", failed(32))

    with pytest.raises(MountFailedError):
        MountController(executor).mount(FileSystemType.EXT4, "/dev/sdb1", "/mnt/data")


def test_unmount(executor) -> None:
    executor.on("umount", ok())

    MountController(executor).unmount("/dev/sdb1")

    assert executor.calls == ["umount /dev/sdb1"]


def test_unmount_failure_raises(executor) -> None:
    executor.on("umount", failed(32))

    with pytest.raises(UnmountFailedError):
        MountController(executor).unmount("/mnt/data")


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("/dev/sda1", True),
        ("/", True),
        ("/home/data1", True),
        ("/dev/mapper/vg_test-xfs_lv", True),
        ("/dev/sdb1", False),
        ("/mnt/data", False),
        ("/home/data", False),
        ("xfs_lv", False),
    ],
)
def test_is_mounted_matches_whole_entries_only(executor, target: str, expected: bool) -> None:
    executor.on("mount", ok(MOUNT_LISTING))

    assert MountController(executor).is_mounted(target) is expected
    assert executor.calls == ["mount"]


def test_is_mounted_raises_when_listing_fails(executor) -> None:
    executor.on("mount", failed(1))

    with pytest.raises(MountFailedError):
        MountController(executor).is_mounted("/dev/sdb1")


def test_listing_contains_requires_separator_after_entry() -> None:
    assert listing_contains("/dev/sdb1 on /mnt/data type ext4 (rw)", "/mnt/data")
    assert not listing_contains("/dev/sdb1 on /mnt/data2 type ext4 (rw)", "/mnt/data")
    assert not listing_contains("/dev/sdb1 on /mnt/data type ext4 (rw)", "")
