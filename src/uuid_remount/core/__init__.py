"""Domain layer: data model, errors and the remount pipeline.

The orchestrator lives in `uuid_remount.core.mount_manager`.
"""

from . import errors, models, session
from .errors import ErrorKind, RemountError
from .models import FileSystemType, MountRequest, MountStage, MountTool
from .session import MountSession

__all__ = [
	"errors",
	"models",
	"session",
	"ErrorKind",
	"RemountError",
	"FileSystemType",
	"MountRequest",
	"MountStage",
	"MountTool",
	"MountSession",
]
