"""Adapters for the external utilities."""

from .base import CommandExecutor, CommandResult
from .process import SubprocessExecutor

__all__ = [
	"CommandExecutor",
	"CommandResult",
	"SubprocessExecutor",
]
