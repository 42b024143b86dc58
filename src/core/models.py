"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to the store's raw camelCase records. Builders translate those
records once, turning every missing optional field into an explicit ``None``
or empty value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

from core.constants import DEFAULT_TIME_ZONE_NAME


@dataclass(frozen=True)
class Report:
    """A conversation record (1:1, group, or room)."""

    report_id: Optional[str]
    chat_type: Optional[str] = None
    report_name: str = ""
    policy_id: Optional[str] = None
    is_own_policy_expense_chat: bool = False
    old_policy_name: str = ""
    status_num: Optional[int] = None
    state_num: Optional[int] = None
    last_visited_timestamp: Optional[float] = None
    participants: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class MessagePart:
    """One fragment of a report action's message."""

    html: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class ReportAction:
    """A single event in a report's timeline.

    ``report_action_id`` stays ``None`` while the action is an optimistic
    local write that the server has not confirmed yet.
    """

    actor_email: Optional[str]
    action_name: str
    report_action_id: Optional[str] = None
    message: Tuple[MessagePart, ...] = ()


@dataclass(frozen=True)
class Timezone:
    selected: Union[str, bool, None] = None
    automatic: bool = False


DEFAULT_TIME_ZONE = Timezone(selected=DEFAULT_TIME_ZONE_NAME, automatic=True)


@dataclass(frozen=True)
class PersonalDetails:
    """Profile data for one participant."""

    login: str
    display_name: str = ""
    timezone: Optional[Timezone] = None


@dataclass(frozen=True)
class Policy:
    policy_id: str
    name: str


@dataclass(frozen=True)
class WelcomeMessage:
    """Two phrases shown at the top of an empty room."""

    phrase1: str
    phrase2: str


@dataclass(frozen=True)
class Snapshot:
    """Everything the CLI reads out of the store in one pass."""

    session_email: Optional[str]
    reports: Tuple[Report, ...] = ()
    actions: Mapping[str, Tuple[ReportAction, ...]] = field(default_factory=dict)
    personal_details: Mapping[str, PersonalDetails] = field(default_factory=dict)
    policies: Mapping[str, Policy] = field(default_factory=dict)


def _optional_str(value: Any) -> Optional[str]:
    # A falsy id (None, "", 0) means the record has no identity yet.
    if not value:
        return None
    return str(value)


def report_from_dict(raw: Mapping[str, Any]) -> Report:
    """Build a Report from a store record."""

    participants = raw.get("participants")
    return Report(
        report_id=_optional_str(raw.get("reportID")),
        chat_type=raw.get("chatType") or None,
        report_name=raw.get("reportName") or "",
        policy_id=_optional_str(raw.get("policyID")),
        is_own_policy_expense_chat=bool(raw.get("isOwnPolicyExpenseChat", False)),
        old_policy_name=raw.get("oldPolicyName") or "",
        status_num=raw.get("statusNum"),
        state_num=raw.get("stateNum"),
        last_visited_timestamp=raw.get("lastVisitedTimestamp"),
        participants=tuple(participants) if participants is not None else None,
    )


def action_from_dict(raw: Mapping[str, Any]) -> ReportAction:
    """Build a ReportAction from a store record."""

    parts = tuple(
        MessagePart(html=part.get("html"), text=part.get("text"))
        for part in raw.get("message") or []
    )
    return ReportAction(
        actor_email=raw.get("actorEmail"),
        action_name=raw.get("actionName", ""),
        report_action_id=_optional_str(raw.get("reportActionID")),
        message=parts,
    )


def personal_details_from_dict(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, PersonalDetails]:
    """Build the login -> PersonalDetails map from the store record."""

    details: dict[str, PersonalDetails] = {}
    for login, entry in raw.items():
        if not entry:
            continue
        raw_timezone = entry.get("timezone")
        timezone = None
        if raw_timezone:
            timezone = Timezone(
                selected=raw_timezone.get("selected"),
                automatic=bool(raw_timezone.get("automatic", False)),
            )
        details[login] = PersonalDetails(
            login=login,
            display_name=entry.get("displayName") or "",
            timezone=timezone,
        )
    return details


def policy_map_from_dict(raw: Mapping[str, Mapping[str, Any]]) -> dict[str, Policy]:
    """Keep the store's ``policy_<id>`` keys and build Policy values."""

    policies: dict[str, Policy] = {}
    for key, entry in raw.items():
        if not entry or "name" not in entry:
            continue
        policy_id = str(entry.get("id") or key.rpartition("_")[2])
        policies[key] = Policy(policy_id=policy_id, name=entry["name"])
    return policies
