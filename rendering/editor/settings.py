"""
Auto-match toggles for the rich editor's code blocks.

The toggles live in client-side key/value storage (browser localStorage,
or a Django session when edited server-side) as one JSON object under
AUTO_MATCH_STORAGE_KEY:

    {"parens": true, "brackets": true, "doubleQuotes": true,
     "singleQuotes": true, "backticks": true}

Missing or unreadable data falls back to the all-enabled defaults, field by
field. Curly braces have no toggle: they are always auto-closed.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields, replace

logger = logging.getLogger(__name__)

AUTO_MATCH_STORAGE_KEY = "codeBlockAutoMatch"

# field name -> JSON key
_JSON_KEYS = {
    "parens": "parens",
    "brackets": "brackets",
    "double_quotes": "doubleQuotes",
    "single_quotes": "singleQuotes",
    "backticks": "backticks",
}


@dataclass(frozen=True)
class AutoMatchSettings:
    parens: bool = True
    brackets: bool = True
    double_quotes: bool = True
    single_quotes: bool = True
    backticks: bool = True

    @classmethod
    def from_json_dict(cls, data: dict) -> "AutoMatchSettings":
        values = {}
        for field in fields(cls):
            value = data.get(_JSON_KEYS[field.name])
            if isinstance(value, bool):
                values[field.name] = value
        return cls(**values)

    def to_json_dict(self) -> dict:
        return {_JSON_KEYS[name]: value for name, value in asdict(self).items()}


DEFAULT_SETTINGS = AutoMatchSettings()


def load_settings(store) -> AutoMatchSettings:
    """Read the toggles from ``store``; any problem yields the defaults."""
    raw = store.get(AUTO_MATCH_STORAGE_KEY)
    if raw is None:
        return DEFAULT_SETTINGS

    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        logger.warning(f"Ignoring malformed auto-match settings: {e}")
        return DEFAULT_SETTINGS

    if not isinstance(data, dict):
        logger.warning("Ignoring auto-match settings that are not a JSON object")
        return DEFAULT_SETTINGS

    return AutoMatchSettings.from_json_dict(data)


def save_settings(store, settings: AutoMatchSettings) -> None:
    store[AUTO_MATCH_STORAGE_KEY] = json.dumps(settings.to_json_dict())


def update_settings(store, current: AutoMatchSettings, **changes) -> AutoMatchSettings:
    """Apply ``changes`` (field=bool) and persist the result immediately."""
    updated = replace(current, **changes)
    save_settings(store, updated)
    return updated
