"""Filesystem type detection for block devices."""

from .detector import FileSystemDetector
from .file_probe import FileProbeDetector, match_filesystem

__all__ = ["FileSystemDetector", "FileProbeDetector", "match_filesystem"]
