"""Shared modules: configuration, logging, error reports."""

from .config import AppConfig, ToolPaths, load_app_config
from .error_reporting import ErrorReport, get_error_reports_dir, write_error_report
from .logging import configure_logging

__all__ = [
	"AppConfig",
	"ToolPaths",
	"load_app_config",
	"configure_logging",
	"ErrorReport",
	"get_error_reports_dir",
	"write_error_report",
]
