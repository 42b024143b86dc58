"""Mapping-backed localization adapter.

Implements the core TranslatorPort with named ``{name}`` placeholders. Only
the strings reportlens itself shows are bundled; anything else comes from
``config.json`` overrides.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from core.constants import TranslationKey

LOGGER = logging.getLogger(__name__)

DEFAULT_STRINGS: dict[str, str] = {
    TranslationKey.WORKSPACE: "Workspace",
    TranslationKey.UNAVAILABLE_WORKSPACE: "Unavailable workspace",
    TranslationKey.ADMIN_ROOM_PART_ONE: (
        "Collaboration among {workspaceName} admins starts here! \U0001f389\nUse "
    ),
    TranslationKey.ADMIN_ROOM_PART_TWO: (
        " to chat about topics such as workspace configurations and more."
    ),
    TranslationKey.ANNOUNCE_ROOM_PART_ONE: (
        "Collaboration between all {workspaceName} members starts here! \U0001f389\nUse "
    ),
    TranslationKey.ANNOUNCE_ROOM_PART_TWO: " to chat about anything {workspaceName} related.",
    TranslationKey.USER_ROOM_PART_ONE: (
        "Collaboration starts here! \U0001f389\nUse this space to chat about anything "
    ),
    TranslationKey.USER_ROOM_PART_TWO: " related.",
}


_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class DictTranslator:
    """Translator that looks keys up in a flat dict."""

    def __init__(self, strings: Optional[Mapping[str, str]] = None) -> None:
        self._strings = dict(DEFAULT_STRINGS)
        if strings:
            self._strings.update(strings)

    def translate(self, key: str, substitutions: Optional[Mapping[str, Any]] = None) -> str:
        template = self._strings.get(key)
        if template is None:
            LOGGER.warning("Missing translation for %s", key)
            return key
        values = substitutions or {}
        # Only named placeholders with a value are filled; other braces stay literal.
        return _PLACEHOLDER.sub(
            lambda match: str(values[match.group(1)]) if match.group(1) in values else match.group(0),
            template,
        )
