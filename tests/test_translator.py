from __future__ import annotations

from adapters.translator import DictTranslator
from core.constants import ChatType, TranslationKey
from core.models import Policy, Report
from core.report_utils import get_room_welcome_message


def test_substitutes_workspace_name() -> None:
    translator = DictTranslator()
    phrase = translator.translate(TranslationKey.ANNOUNCE_ROOM_PART_TWO, {"workspaceName": "Acme"})
    assert phrase == " to chat about anything Acme related."


def test_overrides_and_missing_keys() -> None:
    translator = DictTranslator({TranslationKey.WORKSPACE: "Espacio"})
    assert translator.translate(TranslationKey.WORKSPACE) == "Espacio"
    assert translator.translate("does.not.exist") == "does.not.exist"


def test_unknown_placeholders_are_kept() -> None:
    translator = DictTranslator({"greeting": "Hi {name} from {workspaceName}"})
    assert translator.translate("greeting", {"workspaceName": "Acme"}) == "Hi {name} from Acme"


def test_literal_braces_survive_with_and_without_substitutions() -> None:
    translator = DictTranslator({"k": "a {{b}} {} {0}"})
    assert translator.translate("k") == "a {{b}} {} {0}"
    assert translator.translate("k", {"workspaceName": "x"}) == "a {{b}} {} {0}"


def test_welcome_message_with_positional_braces_in_override() -> None:
    translator = DictTranslator({TranslationKey.ADMIN_ROOM_PART_ONE: "Admins of {workspaceName} {}"})
    report = Report(report_id="1", chat_type=ChatType.POLICY_ADMINS, policy_id="A1")
    message = get_room_welcome_message(report, {"policy_A1": Policy(policy_id="A1", name="Acme")}, translator)
    assert message.phrase1 == "Admins of Acme {}"
