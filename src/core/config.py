"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.constants import LAST_MESSAGE_TEXT_MAX_LENGTH


@dataclass(frozen=True)
class DisplayConfig:
    """Display settings consumed by the formatting adapters."""

    last_message_chars: int = LAST_MESSAGE_TEXT_MAX_LENGTH
