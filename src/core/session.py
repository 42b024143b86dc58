"""Current-user identity cache backed by the key-value store."""

from __future__ import annotations

import logging
from typing import Any, Optional

from core.constants import SESSION_KEY
from core.models import ReportAction
from core.ports import KeyValueStorePort
from core.report_utils import can_delete_action, can_edit_action

LOGGER = logging.getLogger(__name__)


class SessionTracker:
    """Keep the latest session email pushed by the store.

    The store owns delivery; the tracker only records the last value it saw.
    """

    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store
        self._email: Optional[str] = None
        self._connection_id: Optional[int] = store.connect(SESSION_KEY, self._on_session)

    def _on_session(self, value: Any, key: str) -> None:
        email = value.get("email") if value else None
        if email != self._email:
            LOGGER.debug("Session identity changed (%s)", "signed in" if email else "signed out")
        self._email = email

    @property
    def email(self) -> Optional[str]:
        return self._email

    def can_edit(self, action: ReportAction) -> bool:
        return can_edit_action(action, self._email)

    def can_delete(self, action: ReportAction) -> bool:
        return can_delete_action(action, self._email)

    def close(self) -> None:
        """Stop listening to session updates."""

        if self._connection_id is None:
            return
        self._store.disconnect(self._connection_id)
        self._connection_id = None
