"""Screen-scoped key-to-action routing.

Only the menu and confirm screens react to keypad input; every other screen
treats keys as inert. The cancel key bypasses the tables and always closes
the device.
"""

from __future__ import annotations

import enum

from burner_phone.models import Screen

CANCEL_KEY = "escape"

NAV_KEY_IDS = frozenset({"up", "down", "call", "hang"})
KEYPAD_KEY_IDS = frozenset({*"0123456789", "*", "#"})
KEY_IDS = NAV_KEY_IDS | KEYPAD_KEY_IDS | {CANCEL_KEY}

# Terminal key names that stand in for handset keys.
_KEY_ALIASES: dict[str, str] = {
    "enter": "call",
    "backspace": "hang",
    "delete": "hang",
    "asterisk": "*",
    "number_sign": "#",
}


class Action(str, enum.Enum):
    SELECT_PREVIOUS = "select_previous"
    SELECT_NEXT = "select_next"
    OPEN_CONFIRM = "open_confirm"
    CONFIRM_ORDER = "confirm_order"
    BACK_TO_MENU = "back_to_menu"
    CLOSE = "close"


KEY_TABLES: dict[Screen, dict[str, Action]] = {
    Screen.MENU: {
        "up": Action.SELECT_PREVIOUS,
        "down": Action.SELECT_NEXT,
        "call": Action.OPEN_CONFIRM,
        "hang": Action.CLOSE,
    },
    Screen.CONFIRM: {
        "call": Action.CONFIRM_ORDER,
        "hang": Action.BACK_TO_MENU,
    },
}


def normalize_key(raw: str | None) -> str | None:
    """Map a raw key name (button id or Textual key) to a handset key id."""
    if not raw:
        return None
    key = raw.strip().lower()
    key = _KEY_ALIASES.get(key, key)
    if key.startswith("digit") and key[5:].isdigit():
        key = key[5:]
    if key not in KEY_IDS:
        return None
    return key


def resolve(screen: Screen, key: str) -> Action | None:
    """Return the action ``key`` triggers on ``screen``, or None when inert."""
    if key == CANCEL_KEY:
        return Action.CLOSE
    table = KEY_TABLES.get(screen)
    if table is None:
        return None
    return table.get(key)
