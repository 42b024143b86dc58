from __future__ import annotations

from typing import Any, Mapping, Optional

from core.constants import ChatType, StateNum, StatusNum, TranslationKey
from core.models import Policy, Report
from core.report_utils import get_chat_room_subtitle, get_room_welcome_message


class FakeTranslator:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Optional[Mapping[str, Any]]]] = []

    def translate(self, key: str, substitutions: Optional[Mapping[str, Any]] = None) -> str:
        self.calls.append((key, substitutions))
        if substitutions:
            return f"{key}:{substitutions['workspaceName']}"
        return key


POLICIES = {"policy_A1": Policy(policy_id="A1", name="Acme Inc")}


def test_subtitle_empty_for_direct_chat() -> None:
    report = Report(report_id="1", policy_id="A1")
    assert get_chat_room_subtitle(report, POLICIES, FakeTranslator()) == ""


def test_subtitle_for_domain_room_strips_hash() -> None:
    report = Report(report_id="1", chat_type=ChatType.DOMAIN_ALL, report_name="#Acme")
    assert get_chat_room_subtitle(report, POLICIES, FakeTranslator()) == "Acme"


def test_subtitle_for_archived_room_uses_old_policy_name() -> None:
    report = Report(
        report_id="1",
        chat_type=ChatType.POLICY_ROOM,
        policy_id="A1",
        old_policy_name="Old Acme",
        status_num=StatusNum.CLOSED,
        state_num=StateNum.SUBMITTED,
    )
    assert get_chat_room_subtitle(report, POLICIES, FakeTranslator()) == "Old Acme"


def test_subtitle_for_own_expense_chat() -> None:
    report = Report(
        report_id="1",
        chat_type=ChatType.POLICY_EXPENSE_CHAT,
        policy_id="A1",
        is_own_policy_expense_chat=True,
    )
    assert get_chat_room_subtitle(report, POLICIES, FakeTranslator()) == TranslationKey.WORKSPACE


def test_subtitle_uses_policy_name_or_unavailable() -> None:
    room = Report(report_id="1", chat_type=ChatType.POLICY_ROOM, policy_id="A1")
    assert get_chat_room_subtitle(room, POLICIES, FakeTranslator()) == "Acme Inc"
    assert get_chat_room_subtitle(room, {"policy_A1": {"name": "Raw"}}, FakeTranslator()) == "Raw"

    missing = Report(report_id="2", chat_type=ChatType.POLICY_ADMINS, policy_id="ZZ")
    subtitle = get_chat_room_subtitle(missing, POLICIES, FakeTranslator())
    assert subtitle == TranslationKey.UNAVAILABLE_WORKSPACE


def test_welcome_message_for_admin_room() -> None:
    report = Report(report_id="1", chat_type=ChatType.POLICY_ADMINS, policy_id="A1")
    message = get_room_welcome_message(report, POLICIES, FakeTranslator())
    assert message.phrase1 == f"{TranslationKey.ADMIN_ROOM_PART_ONE}:Acme Inc"
    assert message.phrase2 == TranslationKey.ADMIN_ROOM_PART_TWO


def test_welcome_message_for_announce_room() -> None:
    report = Report(report_id="1", chat_type=ChatType.POLICY_ANNOUNCE, policy_id="A1")
    message = get_room_welcome_message(report, POLICIES, FakeTranslator())
    assert message.phrase1 == f"{TranslationKey.ANNOUNCE_ROOM_PART_ONE}:Acme Inc"
    assert message.phrase2 == f"{TranslationKey.ANNOUNCE_ROOM_PART_TWO}:Acme Inc"


def test_welcome_message_for_user_room() -> None:
    report = Report(report_id="1", chat_type=ChatType.POLICY_ROOM, policy_id="missing")
    translator = FakeTranslator()
    message = get_room_welcome_message(report, POLICIES, translator)
    assert message.phrase1 == TranslationKey.USER_ROOM_PART_ONE
    assert message.phrase2 == TranslationKey.USER_ROOM_PART_TWO
    assert (TranslationKey.UNAVAILABLE_WORKSPACE, None) in translator.calls
