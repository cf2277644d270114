"""Device UUID lookup through `blkid`."""

from __future__ import annotations

import re

from uuid_remount.core.errors import DeviceUuidQueryError
from uuid_remount.core.models import MountTool
from uuid_remount.drivers import CommandExecutor
from uuid_remount.shared.config import ToolPaths

# `PARTUUID=` and `UUID_SUB=` must not match, only the bare `UUID=` key.
_UUID_RE = re.compile(r'(?<![\w-])uuid="(?P<uuid>[^"]*)"', re.IGNORECASE)


def parse_uuid(blkid_output: str) -> str | None:
    match = _UUID_RE.search(blkid_output)
    if match is None or not match.group("uuid"):
        return None
    return match.group("uuid")


def query_device_uuid(executor: CommandExecutor, device: str, *, tools: ToolPaths | None = None) -> str:
    """Returns the filesystem UUID reported by `blkid` for `device`."""

    tools = tools or ToolPaths()
    result = executor.run(f"{tools[MountTool.BLKID]} {device}")
    if not result.ok:
        raise DeviceUuidQueryError(f"Failed to query the UUID of {device} (exit code {result.exit_code})")

    uuid = parse_uuid(result.stdout)
    if uuid is None:
        raise DeviceUuidQueryError(f"No UUID reported for {device}")
    return uuid
