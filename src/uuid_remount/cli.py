"""Command-line interface for remounting devices with colliding UUIDs."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from pathlib import Path
from typing import Any

import structlog

from uuid_remount.core import MountRequest, RemountError
from uuid_remount.core.mount_manager import DeviceMounter
from uuid_remount.drivers import CommandExecutor
from uuid_remount.shared import configure_logging, load_app_config, write_error_report


def _context_arg(value: str) -> dict[str, Any]:
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ArgumentTypeError(f"context is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ArgumentTypeError("context must be a JSON object")
    return parsed


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="uuid-remount",
        description="Mounts a block device after regenerating its filesystem UUID, "
        "e.g. an LVM snapshot whose UUID collides with the origin volume.",
    )
    parser.add_argument("--dev", required=True, help="Device file path")
    parser.add_argument(
        "--path",
        required=True,
        type=Path,
        help="Mount path, an empty directory or a nonexistent path",
    )
    parser.add_argument(
        "--ctx",
        type=_context_arg,
        default="{}",
        help="Reserved parameter, a JSON object (default: {})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs, including every external command",
    )
    return parser


def _prepare_mount_path(path: Path) -> str | None:
    """Creates a missing mount path; returns an error message when the path is unusable."""

    try:
        if path.exists():
            if not path.is_dir():
                return "mount path is not a directory"
            if any(path.iterdir()):
                return "mount path is not empty"
            return None
        path.mkdir(parents=True)
    except OSError as exc:
        return f"mount path cannot be prepared: {exc}"
    return None


def _report_failure(exc: BaseException, mounter: DeviceMounter, reports_dir: Path | None) -> None:
    request = mounter.session.request
    report = write_error_report(
        exc,
        where="cli.remount",
        context={
            "device": request.device,
            "mount_path": request.mount_path,
            "completed_stages": [stage.value for stage in mounter.session.completed_stages],
        },
        reports_dir=reports_dir,
    )
    structlog.get_logger(__name__).error("error-report-written", path=str(report.path))


def _run_remount(args: Namespace, executor: CommandExecutor | None = None) -> int:
    logger = structlog.get_logger(__name__)
    config = load_app_config()

    problem = _prepare_mount_path(args.path)
    if problem is not None:
        logger.error("mount-path-invalid", path=str(args.path), reason=problem)
        return 1

    # `mount` lists absolute mount points only.
    mount_path = args.path.resolve()
    request = MountRequest(device=args.dev, mount_path=str(mount_path), context=args.ctx)
    mounter = DeviceMounter.with_executor(request, executor, tools=config.tools)

    try:
        session = mounter.start()
    except RemountError as exc:
        logger.exception("mount-failed", kind=exc.kind.value, error=str(exc))
        _report_failure(exc, mounter, config.error_reports_dir)
        return 1
    except Exception as exc:
        logger.exception("mount-failed", error=str(exc))
        _report_failure(exc, mounter, config.error_reports_dir)
        return 1

    logger.info(
        "device-mounted",
        device=session.device,
        mount_path=session.mount_path,
        filesystem=session.filesystem.value if session.filesystem else None,
        uuid=session.uuid,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=10 if args.verbose else 20)
    return _run_remount(args)


if __name__ == "__main__":
    sys.exit(main())
