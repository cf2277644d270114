"""uuid-remount package initialisation."""

__all__ = [
    "core",
    "drivers",
    "fs_detection",
    "uuid_strategies",
    "mounting",
    "shared",
]
