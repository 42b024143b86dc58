"""Report classification and display helpers (core domain).

Every function here is a pure function of its arguments. The current user's
identity is passed in explicitly; see ``core.session.SessionTracker`` for the
store-backed cache of that value.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, List, Mapping, Optional, Union

from core.constants import (
    ATTACHMENT_MESSAGE_TEXT,
    CONCIERGE_EMAIL,
    DEFAULT_ROOM_TYPES,
    EXPENSIFY_EMAILS,
    LAST_MESSAGE_TEXT_MAX_LENGTH,
    POLICY_COLLECTION,
    SMS_DOMAIN,
    ActionType,
    ChatType,
    StateNum,
    StatusNum,
    TranslationKey,
)
from core.models import DEFAULT_TIME_ZONE, PersonalDetails, Report, ReportAction, WelcomeMessage
from core.ports import TranslatorPort

ReportCollection = Union[Mapping[str, Optional[Report]], Iterable[Optional[Report]]]

_SMS_DOMAIN_PATTERN = re.compile(re.escape(SMS_DOMAIN) + r"$", re.IGNORECASE)


def remove_sms_domain(login: str) -> str:
    return _SMS_DOMAIN_PATTERN.sub("", login)


def get_participants_title(logins: Iterable[str]) -> str:
    """Return the comma-separated display title for a list of logins."""

    return ", ".join(remove_sms_domain(login) for login in logins)


def is_attachment_text(text: Optional[str]) -> bool:
    return text == ATTACHMENT_MESSAGE_TEXT


def sort_by_last_visited(reports: ReportCollection) -> List[Report]:
    """Return valid reports sorted by last visit, oldest first.

    Accepts either a mapping (values are used) or any iterable of reports.
    Reports without an id are dropped. Reports never visited sort last, and
    ties keep their input order.
    """

    values = reports.values() if isinstance(reports, Mapping) else reports
    valid = [report for report in values if report and report.report_id]
    return sorted(
        valid,
        key=lambda report: (
            report.last_visited_timestamp is None,
            report.last_visited_timestamp or 0,
        ),
    )


def _first_message_text(action: ReportAction) -> str:
    if not action.message:
        return ""
    return action.message[0].text or ""


def can_delete_action(action: ReportAction, session_email: Optional[str]) -> bool:
    """Whether the current user may delete this action.

    Only confirmed ADDCOMMENT actions written by the current user qualify;
    optimistic actions have no report_action_id yet.
    """

    return bool(
        session_email is not None
        and action.actor_email == session_email
        and action.report_action_id
        and action.action_name == ActionType.ADDCOMMENT
    )


def can_edit_action(action: ReportAction, session_email: Optional[str]) -> bool:
    """Whether the current user may edit this action.

    Same rules as deleting, except attachments can never be edited.
    """

    return can_delete_action(action, session_email) and not is_attachment_text(
        _first_message_text(action)
    )


def _chat_type(report: Optional[Report]) -> str:
    if report is None:
        return ""
    return report.chat_type or ""


def is_default_room(report: Optional[Report]) -> bool:
    return _chat_type(report) in DEFAULT_ROOM_TYPES


def is_admin_room(report: Optional[Report]) -> bool:
    return _chat_type(report) == ChatType.POLICY_ADMINS


def is_announce_room(report: Optional[Report]) -> bool:
    return _chat_type(report) == ChatType.POLICY_ANNOUNCE


def is_user_created_policy_room(report: Optional[Report]) -> bool:
    return _chat_type(report) == ChatType.POLICY_ROOM


def is_policy_expense_chat(report: Optional[Report]) -> bool:
    return _chat_type(report) == ChatType.POLICY_EXPENSE_CHAT


def is_chat_room(report: Optional[Report]) -> bool:
    return is_user_created_policy_room(report) or is_default_room(report)


def is_archived_room(report: Optional[Report]) -> bool:
    """A room is archived once its report is closed after submission."""

    if not is_chat_room(report) and not is_policy_expense_chat(report):
        return False
    return report.status_num == StatusNum.CLOSED and report.state_num == StateNum.SUBMITTED


def find_last_accessed_report(
    reports: ReportCollection, ignore_default_rooms: bool = False
) -> Optional[Report]:
    """Return the most recently visited report, or None."""

    sorted_reports = sort_by_last_visited(reports)
    if ignore_default_rooms:
        sorted_reports = [report for report in sorted_reports if not is_default_room(report)]
    if not sorted_reports:
        return None
    return sorted_reports[-1]


def _policy_name(policies: Optional[Mapping[str, Any]], report: Report) -> Optional[str]:
    if not policies:
        return None
    policy = policies.get(f"{POLICY_COLLECTION}{report.policy_id}")
    if policy is None:
        return None
    if isinstance(policy, Mapping):
        return policy.get("name")
    return getattr(policy, "name", None)


def _workspace_name(
    report: Report,
    policies: Optional[Mapping[str, Any]],
    translator: TranslatorPort,
) -> str:
    name = _policy_name(policies, report)
    if name is None:
        return translator.translate(TranslationKey.UNAVAILABLE_WORKSPACE)
    return name


def get_chat_room_subtitle(
    report: Report,
    policies: Optional[Mapping[str, Any]],
    translator: TranslatorPort,
) -> str:
    """Return the policy or domain name a room is tied to.

    ``policies`` is keyed with the store prefix, e.g. ``policy_ABC123``.
    """

    if (
        not is_default_room(report)
        and not is_user_created_policy_room(report)
        and not is_policy_expense_chat(report)
    ):
        return ""
    if report.chat_type == ChatType.DOMAIN_ALL:
        # domainAll rooms are named "#domain.com"
        return report.report_name[1:]
    if is_archived_room(report):
        return report.old_policy_name
    if is_policy_expense_chat(report) and report.is_own_policy_expense_chat:
        return translator.translate(TranslationKey.WORKSPACE)
    return _workspace_name(report, policies, translator)


def get_room_welcome_message(
    report: Report,
    policies: Optional[Mapping[str, Any]],
    translator: TranslatorPort,
) -> WelcomeMessage:
    """Return the welcome phrases for a room based on its type."""

    workspace_name = _workspace_name(report, policies, translator)
    substitutions = {"workspaceName": workspace_name}

    if is_admin_room(report):
        return WelcomeMessage(
            phrase1=translator.translate(TranslationKey.ADMIN_ROOM_PART_ONE, substitutions),
            phrase2=translator.translate(TranslationKey.ADMIN_ROOM_PART_TWO),
        )
    if is_announce_room(report):
        return WelcomeMessage(
            phrase1=translator.translate(TranslationKey.ANNOUNCE_ROOM_PART_ONE, substitutions),
            phrase2=translator.translate(TranslationKey.ANNOUNCE_ROOM_PART_TWO, substitutions),
        )
    # User created rooms and any other room type.
    return WelcomeMessage(
        phrase1=translator.translate(TranslationKey.USER_ROOM_PART_ONE),
        phrase2=translator.translate(TranslationKey.USER_ROOM_PART_TWO),
    )


def is_concierge_chat_report(report: Optional[Report]) -> bool:
    """True only for the 1:1 DM with Concierge."""

    participants = (report.participants if report else None) or ()
    return len(participants) == 1 and participants[0] == CONCIERGE_EMAIL


def chat_includes_concierge(report: Optional[Report]) -> bool:
    participants = (report.participants if report else None) or ()
    return CONCIERGE_EMAIL in participants


def has_expensify_emails(emails: Iterable[str]) -> bool:
    """Whether any automated account is among the given emails."""

    return not EXPENSIFY_EMAILS.isdisjoint(emails)


def can_show_recipient_local_time(
    personal_details: Mapping[str, PersonalDetails],
    report: Optional[Report],
) -> bool:
    """Whether the recipient's local time row should be shown for a report."""

    participants = (report.participants if report else None) or ()
    if has_expensify_emails(participants) or len(participants) > 1:
        return False
    if not participants:
        return False

    recipient = personal_details.get(participants[0])
    if recipient is None:
        return False
    timezone = recipient.timezone or DEFAULT_TIME_ZONE
    return bool(timezone.selected)


def is_deleted_action(action: ReportAction) -> bool:
    # Deleted comments have no message parts or an empty html part.
    return len(action.message) == 0 or action.message[0].html == ""


def format_last_message_text(
    last_message_text: Any, max_length: int = LAST_MESSAGE_TEXT_MAX_LENGTH
) -> str:
    """Clip the last message preview to a fixed length."""

    return str(last_message_text)[:max_length]
