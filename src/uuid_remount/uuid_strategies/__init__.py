"""Per-filesystem UUID regeneration strategies."""

from __future__ import annotations

from uuid_remount.drivers import CommandExecutor
from uuid_remount.mounting import MountController
from uuid_remount.shared.config import ToolPaths

from .base import UuidStrategy, strategy_for
from .blkid import parse_uuid, query_device_uuid
from .ext import ExtUuidStrategy
from .ntfs import NtfsUuidStrategy
from .xfs import XfsUuidStrategy


def default_strategies(
    executor: CommandExecutor,
    controller: MountController,
    *,
    tools: ToolPaths | None = None,
) -> tuple[UuidStrategy, ...]:
    """Builds one strategy per supported filesystem family."""

    return (
        ExtUuidStrategy(executor, tools=tools),
        XfsUuidStrategy(executor, controller, tools=tools),
        NtfsUuidStrategy(),
    )


__all__ = [
	"UuidStrategy",
	"strategy_for",
	"default_strategies",
	"parse_uuid",
	"query_device_uuid",
	"ExtUuidStrategy",
	"XfsUuidStrategy",
	"NtfsUuidStrategy",
]
