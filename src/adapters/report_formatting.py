"""Shared report formatting helpers.

Keeping formatting here prevents drift between CLI commands and keeps the
labels consistent regardless of which command prints them.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from rich.table import Table
from rich.text import Text

from core.constants import ChatType
from core.models import Report, ReportAction
from core.ports import TranslatorPort
from core.report_utils import (
    can_delete_action,
    can_edit_action,
    chat_includes_concierge,
    format_last_message_text,
    get_chat_room_subtitle,
    get_participants_title,
    is_admin_room,
    is_announce_room,
    is_archived_room,
    is_concierge_chat_report,
    is_deleted_action,
    is_policy_expense_chat,
    is_user_created_policy_room,
)


def report_kind(report: Report) -> str:
    """Return a short label for the room category."""

    if is_admin_room(report):
        return "admins"
    if is_announce_room(report):
        return "announce"
    if report.chat_type == ChatType.DOMAIN_ALL:
        return "domain"
    if is_user_created_policy_room(report):
        return "room"
    if is_policy_expense_chat(report):
        return "expense"
    return "chat"


def report_flags(report: Report) -> list[str]:
    flags: list[str] = []
    if is_archived_room(report):
        flags.append("archived")
    if is_concierge_chat_report(report):
        flags.append("concierge")
    elif chat_includes_concierge(report):
        flags.append("with concierge")
    return flags


def report_title(report: Report) -> str:
    """Prefer the report name, falling back to the participants."""

    if report.report_name:
        return report.report_name
    return get_participants_title(report.participants or ())


def format_report_table(
    reports: Iterable[Report],
    policies: Optional[Mapping[str, Any]],
    translator: TranslatorPort,
) -> Table:
    """Create the table printed by the ``reports`` command."""

    table = Table(title="Reports")
    table.add_column("ID", no_wrap=True)
    table.add_column("Title")
    table.add_column("Kind")
    table.add_column("Workspace")
    table.add_column("Flags")

    for report in reports:
        table.add_row(
            report.report_id or "",
            Text(report_title(report)),
            report_kind(report),
            Text(get_chat_room_subtitle(report, policies, translator)),
            ", ".join(report_flags(report)),
        )
    return table


def _action_text(action: ReportAction) -> str:
    if not action.message:
        return ""
    part = action.message[0]
    return part.text or part.html or ""


def format_action_line(
    action: ReportAction,
    session_email: Optional[str],
    max_chars: int,
) -> str:
    """Return one line describing an action and what the user may do with it."""

    if is_deleted_action(action):
        return f"{action.actor_email or '?'}: [deleted]"

    markers = []
    if can_edit_action(action, session_email):
        markers.append("edit")
    if can_delete_action(action, session_email):
        markers.append("delete")
    if action.report_action_id is None:
        markers.append("pending")

    text = format_last_message_text(_action_text(action), max_chars).replace("\n", " ")
    line = f"{action.actor_email or '?'}: {text}"
    if markers:
        line = f"{line} ({', '.join(markers)})"
    return line
