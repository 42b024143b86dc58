"""Ports (interfaces) used by the report helpers.

Ports define the minimal contracts for the key-value store and localization
collaborators so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol

StoreCallback = Callable[[Any, str], None]


class TranslatorPort(Protocol):
    """Localization lookup required by the display helpers."""

    def translate(self, key: str, substitutions: Optional[Mapping[str, Any]] = None) -> str:
        ...


class KeyValueStorePort(Protocol):
    """Observable store operations required by the session tracker."""

    def connect(self, key: str, callback: StoreCallback) -> int:
        ...

    def disconnect(self, connection_id: int) -> None:
        ...
