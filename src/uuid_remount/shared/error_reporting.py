from __future__ import annotations

import json
import os
import platform
import sys
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any
from uuid import uuid4

ERROR_DIR_ENV = "UUID_REMOUNT_ERROR_DIR"

@dataclass(frozen=True, slots=True)
class ErrorReport:
    path: Path
    created_at: datetime

def get_error_reports_dir(override: Path | None = None) -> Path:
    """Returns a writable directory for error reports.

    Priority:
    1) explicit `override` (from `AppConfig.error_reports_dir`)
    2) `UUID_REMOUNT_ERROR_DIR` env var
    3) Fallback: `~/.uuid_remount/error_reports`
    """

    env_override = (os.getenv(ERROR_DIR_ENV) or "").strip()
    if override is not None:
        base = Path(override)
    elif env_override:
        base = Path(env_override)
    else:
        base = Path.home() / ".uuid_remount" / "error_reports"

    base.mkdir(parents=True, exist_ok=True)
    return base

def _safe_app_version() -> str:
    try:
        return metadata.version("uuid-remount")
    except metadata.PackageNotFoundError:
        return "unknown"

def write_error_report(
    error: BaseException,
    *,
    where: str,
    context: dict[str, Any] | None = None,
    reports_dir: Path | None = None,
) -> ErrorReport:
    """Writes a timestamped error report with the full traceback and returns its path."""

    target_dir = get_error_reports_dir(reports_dir)
    created_at = datetime.now(timezone.utc)
    stamp = created_at.strftime("%Y%m%d_%H%M%S")
    path = target_dir / f"error_{stamp}_{uuid4().hex[:8]}.txt"

    kind = getattr(error, "kind", None)
    header = {
        "created_at": created_at.isoformat(),
        "where": where,
        "app_version": _safe_app_version(),
        "python": sys.version.replace("\n", " "),
        "platform": platform.platform(),
        "executable": sys.executable,
        "cwd": str(Path.cwd()),
        "context": dict(context or {}),
        "error_type": type(error).__name__,
        "error_kind": getattr(kind, "value", kind),
        "error_message": str(error),
    }

    tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))

    content = (
        "uuid-remount Error Report\n"
        "=========================\n\n"
        + json.dumps(header, ensure_ascii=False, indent=2, default=str)
        + "\n\nTraceback\n---------\n"
        + tb
    )

    path.write_text(content, encoding="utf-8", errors="replace")
    return ErrorReport(path=path, created_at=created_at)
