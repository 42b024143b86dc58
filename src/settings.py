"""Static configuration for reportlens.

All user-editable settings (snapshot location, display limits, translation
overrides, logging) live in a single JSON file for quick edits without
touching Python. Every section is optional.
"""

import json
import os

from dotenv import load_dotenv

from core.constants import LAST_MESSAGE_TEXT_MAX_LENGTH

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json, or an empty config when the file is absent."""

    if not os.path.exists(CONFIG_PATH):
        return {}

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        config = json.load(handle)
    if not isinstance(config, dict):
        raise ValueError(f"Config must be a JSON object: {CONFIG_PATH}")
    return config


def _resolve_path(path: str) -> str:
    if os.path.isabs(path):
        return path
    return os.path.join(PROJECT_ROOT, path)


load_dotenv()

_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# Store snapshot the CLI reads; the environment wins over config.json.
SNAPSHOT_PATH = _resolve_path(
    os.getenv("REPORTLENS_SNAPSHOT") or _CONFIG.get("snapshot_path", "snapshot.json")
)

# Forces the current identity instead of the snapshot's session key.
SESSION_EMAIL_OVERRIDE = os.getenv("REPORTLENS_SESSION_EMAIL") or None

# Message previews are clipped to this many characters.
_display = _CONFIG.get("display", {})
LAST_MESSAGE_CHARS = int(_display.get("last_message_chars", LAST_MESSAGE_TEXT_MAX_LENGTH))

# Translation overrides layered over the bundled English strings.
TRANSLATIONS = _CONFIG.get("translations", {})

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
