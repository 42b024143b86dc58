from __future__ import annotations

from adapters.report_formatting import (
    format_action_line,
    format_report_table,
    report_flags,
    report_kind,
    report_title,
)
from adapters.translator import DictTranslator
from core.constants import CONCIERGE_EMAIL, ActionType, ChatType, StateNum, StatusNum
from core.models import MessagePart, Report, ReportAction

ME = "me@example.com"


def test_report_kind_and_flags() -> None:
    archived = Report(
        report_id="1",
        chat_type=ChatType.POLICY_ROOM,
        status_num=StatusNum.CLOSED,
        state_num=StateNum.SUBMITTED,
    )
    assert report_kind(archived) == "room"
    assert report_flags(archived) == ["archived"]
    assert report_kind(Report(report_id="2", chat_type=ChatType.DOMAIN_ALL)) == "domain"
    assert report_kind(Report(report_id="3")) == "chat"
    assert report_flags(Report(report_id="4", participants=(CONCIERGE_EMAIL,))) == ["concierge"]


def test_report_title_falls_back_to_participants() -> None:
    assert report_title(Report(report_id="1", report_name="#general")) == "#general"
    report = Report(report_id="2", participants=("+15005550006@expensify.sms", ME))
    assert report_title(report) == f"+15005550006, {ME}"


def test_report_table_has_one_row_per_report() -> None:
    reports = [Report(report_id="1"), Report(report_id="2", chat_type=ChatType.POLICY_ROOM)]
    table = format_report_table(reports, {}, DictTranslator())
    assert table.row_count == 2


def test_action_line_markers() -> None:
    attachment = ReportAction(
        actor_email=ME,
        action_name=ActionType.ADDCOMMENT,
        report_action_id="1",
        message=(MessagePart(html="<img>", text="[Attachment]"),),
    )
    assert format_action_line(attachment, ME, 200) == f"{ME}: [Attachment] (delete)"

    pending = ReportAction(
        actor_email=ME,
        action_name=ActionType.ADDCOMMENT,
        message=(MessagePart(html="hello there", text="hello there"),),
    )
    assert format_action_line(pending, ME, 5) == f"{ME}: hello (pending)"

    deleted = ReportAction(actor_email=ME, action_name=ActionType.ADDCOMMENT, report_action_id="2")
    assert format_action_line(deleted, ME, 200) == f"{ME}: [deleted]"
