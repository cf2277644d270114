"""Error kinds raised by the remount pipeline.

Every error is terminal for the current run. Stages raise a fresh instance of
the matching subclass and the orchestrator lets it propagate unchanged.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    UNSUPPORTED_FILESYSTEM = "unsupported_filesystem"
    UNKNOWN_FILESYSTEM = "unknown_filesystem"
    DEVICE_UUID_QUERY_FAILED = "device_uuid_query_failed"
    UUID_GENERATION_FAILED = "uuid_generation_failed"
    UNMOUNT_FAILED = "unmount_failed"
    MOUNT_FAILED = "mount_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"


class RemountError(RuntimeError):
    """Base class for pipeline failures."""

    kind: ErrorKind


class UnsupportedFilesystemError(RemountError):
    """Filesystem has no UUID strategy or mount tool."""

    kind = ErrorKind.UNSUPPORTED_FILESYSTEM


class UnknownFilesystemError(RemountError):
    """Probe succeeded but matched none of the known filesystem names."""

    kind = ErrorKind.UNKNOWN_FILESYSTEM


class DeviceUuidQueryError(RemountError):
    kind = ErrorKind.DEVICE_UUID_QUERY_FAILED


class UuidGenerationError(RemountError):
    kind = ErrorKind.UUID_GENERATION_FAILED


class UnmountFailedError(RemountError):
    kind = ErrorKind.UNMOUNT_FAILED


class MountFailedError(RemountError):
    kind = ErrorKind.MOUNT_FAILED


class CommandExecutionError(RemountError):
    """A probe tool could not be launched or exited nonzero."""

    kind = ErrorKind.COMMAND_EXECUTION_FAILED

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


__all__ = [
    "ErrorKind",
    "RemountError",
    "UnsupportedFilesystemError",
    "UnknownFilesystemError",
    "DeviceUuidQueryError",
    "UuidGenerationError",
    "UnmountFailedError",
    "MountFailedError",
    "CommandExecutionError",
]
