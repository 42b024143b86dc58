"""In-memory observable key-value store adapter.

Implements the core KeyValueStorePort. Subscribers receive the current value
as soon as they connect and every change after that. Keys ending with ``_``
address a collection; collection subscribers are called once per member key.
Nothing is persisted.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any, Optional

from core.constants import (
    PERSONAL_DETAILS_KEY,
    POLICY_COLLECTION,
    REPORT_ACTIONS_COLLECTION,
    REPORT_COLLECTION,
    SESSION_KEY,
)
from core.models import (
    Snapshot,
    action_from_dict,
    personal_details_from_dict,
    policy_map_from_dict,
    report_from_dict,
)
from core.ports import StoreCallback

LOGGER = logging.getLogger(__name__)


def _is_collection_key(key: str) -> bool:
    return key.endswith("_")


class InMemoryStore:
    """Dictionary-backed store that satisfies the KeyValueStorePort contract."""

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})
        self._subscribers: dict[int, tuple[str, StoreCallback]] = {}
        self._next_connection_id = 1

    def get(self, key: str) -> Any:
        return copy.deepcopy(self._data.get(key))

    def collection(self, prefix: str) -> dict[str, Any]:
        """Return all members whose key starts with the collection prefix."""

        return {
            key: copy.deepcopy(value)
            for key, value in self._data.items()
            if key.startswith(prefix) and value is not None
        }

    def set(self, key: str, value: Any) -> None:
        if value is None:
            self._data.pop(key, None)
        else:
            self._data[key] = copy.deepcopy(value)
        self._notify(key)

    def merge(self, key: str, changes: dict[str, Any]) -> None:
        """Shallow-merge a dict into the stored value."""

        current = self._data.get(key)
        if isinstance(current, dict):
            merged = {**current, **changes}
        else:
            merged = dict(changes)
        self._data[key] = copy.deepcopy(merged)
        self._notify(key)

    def connect(self, key: str, callback: StoreCallback) -> int:
        connection_id = self._next_connection_id
        self._next_connection_id += 1
        self._subscribers[connection_id] = (key, callback)
        LOGGER.debug("Connection %s subscribed to %s", connection_id, key)

        if _is_collection_key(key):
            for member_key, value in self.collection(key).items():
                callback(value, member_key)
        else:
            callback(self.get(key), key)
        return connection_id

    def disconnect(self, connection_id: int) -> None:
        if self._subscribers.pop(connection_id, None) is None:
            LOGGER.warning("Disconnect for unknown connection %s", connection_id)

    def _notify(self, key: str) -> None:
        value = self._data.get(key)
        for subscribed_key, callback in list(self._subscribers.values()):
            if subscribed_key == key or (
                _is_collection_key(subscribed_key) and key.startswith(subscribed_key)
            ):
                callback(copy.deepcopy(value), key)


def load_snapshot(path: str) -> InMemoryStore:
    """Seed a store from a JSON file whose top-level keys are store keys."""

    if not os.path.exists(path):
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        raw = json.load(handle)

    if not isinstance(raw, dict):
        raise ValueError(f"Snapshot must be a JSON object: {path}")

    LOGGER.info("Loaded %s keys from %s", len(raw), path)
    return InMemoryStore(raw)


def read_snapshot(store: InMemoryStore, session_email: Optional[str] = None) -> Snapshot:
    """Build core models out of everything the store currently holds.

    ``session_email`` overrides whatever the store has under the session key.
    """

    if session_email is None:
        session = store.get(SESSION_KEY) or {}
        session_email = session.get("email")

    reports = tuple(report_from_dict(raw) for raw in store.collection(REPORT_COLLECTION).values())

    actions = {}
    for key, raw_actions in store.collection(REPORT_ACTIONS_COLLECTION).items():
        report_id = key[len(REPORT_ACTIONS_COLLECTION) :]
        # Actions are keyed by sequence number; keep them in timeline order.
        ordered = sorted(raw_actions.items(), key=lambda item: _sequence(item[0]))
        actions[report_id] = tuple(action_from_dict(raw) for _, raw in ordered if raw)

    return Snapshot(
        session_email=session_email,
        reports=reports,
        actions=actions,
        personal_details=personal_details_from_dict(store.get(PERSONAL_DETAILS_KEY) or {}),
        policies=policy_map_from_dict(store.collection(POLICY_COLLECTION)),
    )


def _sequence(key: str) -> tuple[int, str]:
    try:
        return int(key), key
    except ValueError:
        return 0, key
