"""Tests for the `file`-based filesystem detector."""

from __future__ import annotations

import pytest

from tests.scripted import failed, ok
from uuid_remount.core.errors import CommandExecutionError, ErrorKind, UnknownFilesystemError
from uuid_remount.core.models import PROBE_ORDER, FileSystemType, MountTool
from uuid_remount.drivers import CommandResult
from uuid_remount.fs_detection import FileProbeDetector, match_filesystem
from uuid_remount.shared.config import ToolPaths


@pytest.mark.parametrize(
    ("probe_output", "expected"),
    [
        ("/dev/sdb1: Linux rev 1.0 ext2 filesystem data, UUID=0c1f (large files)", FileSystemType.EXT2),
        ("/dev/sdb1: Linux rev 1.0 ext3 filesystem data, UUID=0c1f (needs journal recovery)", FileSystemType.EXT3),
        ("/dev/sdb1: Linux rev 1.0 ext4 filesystem data, UUID=0c1f (extents) (64bit)", FileSystemType.EXT4),
        ("/dev/vg/lv_snap: SGI XFS filesystem data (blksz 4096, inosz 512, v2 dirs)", FileSystemType.XFS),
        ("/dev/sdc1: DOS/MBR boot sector, code offset 0x52+2, OEM-ID \"NTFS    \"", FileSystemType.NTFS),
    ],
)
def test_detect_maps_probe_output(executor, probe_output: str, expected: FileSystemType) -> None:
    executor.on("file", ok(probe_output))

    detected = FileProbeDetector(executor).detect("/dev/sdb1")

    assert detected is expected
    assert executor.calls == ["file -sL /dev/sdb1"]


def test_detect_unknown_filesystem(executor) -> None:
    executor.on("file", ok("/dev/sdb1: data"))

    with pytest.raises(UnknownFilesystemError) as excinfo:
        FileProbeDetector(executor).detect("/dev/sdb1")

    assert excinfo.value.kind is ErrorKind.UNKNOWN_FILESYSTEM


def test_detect_surfaces_probe_failure_separately(executor) -> None:
    executor.on("file", failed(2))

    with pytest.raises(CommandExecutionError) as excinfo:
        FileProbeDetector(executor).detect("/dev/sdb1")

    assert excinfo.value.exit_code == 2
    assert not isinstance(excinfo.value, UnknownFilesystemError)


def test_detect_surfaces_launch_failure(executor) -> None:
    executor.on("file", CommandResult(exit_code=-1, error=FileNotFoundError("file")))

    with pytest.raises(CommandExecutionError):
        FileProbeDetector(executor).detect("/dev/sdb1")


def test_detect_uses_configured_binary(executor) -> None:
    executor.on("/usr/local/bin/file", ok("ext4 filesystem data"))
    tools = ToolPaths().with_overrides({MountTool.FILE: "/usr/local/bin/file"})

    FileProbeDetector(executor, tools=tools).detect("/dev/sdb1")

    assert executor.calls == ["/usr/local/bin/file -sL /dev/sdb1"]


def test_match_filesystem_is_first_match_in_probe_order() -> None:
    assert match_filesystem("EXT4 journal, previously xfs") is FileSystemType.EXT4
    assert match_filesystem("ntfs image holding an ext2 file") is FileSystemType.EXT2
    assert match_filesystem("ISO 9660 CD-ROM filesystem data") is None


def test_supported_filesystems_follow_probe_order(executor) -> None:
    assert tuple(FileProbeDetector(executor).supported_filesystems()) == PROBE_ORDER
    assert set(PROBE_ORDER) == set(FileSystemType)
