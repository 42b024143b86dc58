"""Application entry point for the reportlens inspector."""

from __future__ import annotations

import argparse
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from rich.console import Console

import settings
from adapters.memory_store import InMemoryStore, load_snapshot, read_snapshot
from adapters.report_formatting import format_action_line, format_report_table, report_title
from adapters.translator import DictTranslator
from core.config import DisplayConfig
from core.models import DEFAULT_TIME_ZONE, Report, Snapshot
from core.report_utils import (
    can_show_recipient_local_time,
    find_last_accessed_report,
    get_room_welcome_message,
)
from core.session import SessionTracker

NAME = "REPORTLENS"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets: list[str] = []
        for secret in secrets:
            self.add_secret(secret)

    def add_secret(self, secret: Optional[str]) -> None:
        """Mask another value, e.g. the session email once a snapshot is read."""

        if not secret or secret in self._secrets:
            return
        self._secrets.append(secret)
        # Longest first so a secret containing another is masked whole.
        self._secrets.sort(key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _redaction_enabled(config: dict) -> bool:
    redact_cfg = config.get("redact", {}) if config else {}
    return bool(redact_cfg.get("enabled", False))


def _collect_redaction_values(config: dict) -> list[str]:
    if not _redaction_enabled(config):
        return []
    values = []
    if settings.SESSION_EMAIL_OVERRIDE:
        values.append(settings.SESSION_EMAIL_OVERRIDE)
    for name in config["redact"].get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return values


def _configure_logging() -> Optional[_RedactingFormatter]:
    """Install log handlers and return the formatter when redaction is on."""

    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return None

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    secrets = _collect_redaction_values(config)
    formatter = _RedactingFormatter(secrets, fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/reportlens.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return None

    logging.basicConfig(level=level, handlers=handlers)
    return formatter if _redaction_enabled(config) else None


def _open_store(path: str) -> InMemoryStore:
    try:
        return load_snapshot(path)
    except (FileNotFoundError, ValueError) as exc:
        logging.getLogger(__name__).error("Cannot load snapshot: %s", exc)
        raise SystemExit(1) from exc


def _load(path: str) -> Snapshot:
    store = _open_store(path)
    tracker = SessionTracker(store)
    try:
        session_email = settings.SESSION_EMAIL_OVERRIDE or tracker.email
        return read_snapshot(store, session_email=session_email)
    finally:
        tracker.close()


def _find_report(snapshot: Snapshot, report_id: str) -> Report:
    for report in snapshot.reports:
        if report.report_id == report_id:
            return report
    raise SystemExit(f"Unknown report: {report_id}")


def _show_reports(console: Console, snapshot: Snapshot, translator: DictTranslator) -> None:
    console.print(format_report_table(snapshot.reports, snapshot.policies, translator))


def _show_last(
    console: Console,
    snapshot: Snapshot,
    ignore_default_rooms: bool,
) -> None:
    report = find_last_accessed_report(snapshot.reports, ignore_default_rooms)
    if report is None:
        console.print("No visited reports.")
        return
    console.print(f"{report.report_id} | {report_title(report)}", markup=False)
    if can_show_recipient_local_time(snapshot.personal_details, report):
        recipient = snapshot.personal_details[report.participants[0]]
        timezone = recipient.timezone or DEFAULT_TIME_ZONE
        console.print(f"Recipient timezone: {timezone.selected}")


def _show_actions(
    console: Console,
    snapshot: Snapshot,
    report_id: str,
    display: DisplayConfig,
) -> None:
    report = _find_report(snapshot, report_id)
    actions = snapshot.actions.get(report.report_id or "", ())
    if not actions:
        console.print("No actions.")
        return
    for action in actions:
        console.print(format_action_line(action, snapshot.session_email, display.last_message_chars), markup=False)


def _show_welcome(
    console: Console,
    snapshot: Snapshot,
    report_id: str,
    translator: DictTranslator,
) -> None:
    report = _find_report(snapshot, report_id)
    message = get_room_welcome_message(report, snapshot.policies, translator)
    console.print(message.phrase1, markup=False)
    console.print(message.phrase2, markup=False)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="reportlens")
    parser.add_argument("--snapshot", default=None, help="Path to a store snapshot JSON file")
    parser.add_argument("--no-banner", action="store_true", help="Skip the ASCII banner")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("reports", help="List every report with its category")
    last_parser = subparsers.add_parser("last", help="Show the most recently visited report")
    last_parser.add_argument(
        "--ignore-default-rooms",
        action="store_true",
        help="Skip admins, announce and domain rooms",
    )
    actions_parser = subparsers.add_parser("actions", help="List actions and edit/delete rights")
    actions_parser.add_argument("report_id")
    welcome_parser = subparsers.add_parser("welcome", help="Show a room's welcome message")
    welcome_parser.add_argument("report_id")

    args = parser.parse_args(argv)
    if not args.no_banner:
        _print_banner()
    redactor = _configure_logging()
    logger = logging.getLogger(__name__)

    snapshot_path = args.snapshot or settings.SNAPSHOT_PATH
    logger.info("Reading snapshot %s", snapshot_path)
    snapshot = _load(snapshot_path)
    if redactor is not None:
        redactor.add_secret(snapshot.session_email)
    logger.info("Acting as %s", snapshot.session_email or "signed-out user")
    translator = DictTranslator(settings.TRANSLATIONS)
    display = DisplayConfig(last_message_chars=settings.LAST_MESSAGE_CHARS)
    console = Console()

    if args.command == "last":
        _show_last(console, snapshot, args.ignore_default_rooms)
        return
    if args.command == "actions":
        _show_actions(console, snapshot, args.report_id, display)
        return
    if args.command == "welcome":
        _show_welcome(console, snapshot, args.report_id, translator)
        return
    _show_reports(console, snapshot, translator)


if __name__ == "__main__":
    main()
