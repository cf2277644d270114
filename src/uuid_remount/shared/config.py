"""Application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping

from uuid_remount.core.models import MountTool

ENV_PREFIX = "UUID_REMOUNT_"


def tool_env_key(tool: MountTool) -> str:
    """Environment variable overriding the binary for `tool`, e.g. `UUID_REMOUNT_NTFS_3G_BIN`."""

    return f"{ENV_PREFIX}{tool.value.upper().replace('-', '_')}_BIN"


@dataclass(frozen=True, slots=True)
class ToolPaths:
    """Binary used for each external utility."""

    binaries: Mapping[MountTool, str] = field(default_factory=dict)

    def __getitem__(self, tool: MountTool) -> str:
        return self.binaries.get(tool) or tool.value

    def with_overrides(self, overrides: Mapping[MountTool, str]) -> "ToolPaths":
        merged = dict(self.binaries)
        merged.update({tool: path for tool, path in overrides.items() if path})
        return replace(self, binaries=merged)


@dataclass(slots=True)
class AppConfig:
    """General application configuration."""

    tools: ToolPaths = field(default_factory=ToolPaths)
    error_reports_dir: Path | None = None

    @classmethod
    def default(cls) -> "AppConfig":
        """Builds the default configuration: tools resolved through PATH."""

        return cls()


def load_app_config(environ: Mapping[str, str] | None = None) -> AppConfig:
    """Loads configuration from the environment.

    Supported variables:
    - `UUID_REMOUNT_<TOOL>_BIN`: binary for a tool (`MOUNT`, `UMOUNT`, `NTFS_3G`,
      `TUNE2FS`, `BLKID`, `FILE`, `XFS_ADMIN`)
    - `UUID_REMOUNT_ERROR_DIR`: directory for error reports

    Blank values are ignored.
    """

    env = os.environ if environ is None else environ
    config = AppConfig.default()

    overrides = {}
    for tool in MountTool:
        value = (env.get(tool_env_key(tool)) or "").strip()
        if value:
            overrides[tool] = value
    config.tools = config.tools.with_overrides(overrides)

    error_dir = (env.get(f"{ENV_PREFIX}ERROR_DIR") or "").strip()
    if error_dir:
        config.error_reports_dir = Path(error_dir)
    return config
