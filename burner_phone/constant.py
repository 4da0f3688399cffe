"""Static keypad layout and screen artwork."""

from __future__ import annotations

DEFAULT_BRAND = "CELLTOWA"

# Soft keys flank the nav pair: call on the left, hang on the right.
SOFT_KEYS: list[dict[str, str]] = [
    {"key": "call", "label": "☎", "classes": "call-btn"},
    {"key": "hang", "label": "✆", "classes": "hang-btn"},
]

NAV_KEYS: list[dict[str, str]] = [
    {"key": "up", "label": "▲", "classes": "nav-btn"},
    {"key": "down", "label": "▼", "classes": "nav-btn"},
]

KEYPAD_KEYS: list[dict[str, str]] = [
    {"key": "1", "label": "⚯"},
    {"key": "2", "label": "ABC"},
    {"key": "3", "label": "DEF"},
    {"key": "4", "label": "GHI"},
    {"key": "5", "label": "JKL"},
    {"key": "6", "label": "MNO"},
    {"key": "7", "label": "PQRS"},
    {"key": "8", "label": "TUV"},
    {"key": "9", "label": "WXYZ"},
    {"key": "*", "label": ""},
    {"key": "0", "label": "+"},
    {"key": "#", "label": ""},
]

SIGNAL_BAR_COUNT = 5
BATTERY_BAR_COUNT = 5

HOME_ART = """\
──▄────▄▄▄▄▄▄▄────▄───
─▀▀▄─▄█████████▄─▄▀▀──
─────██─▀███▀─██──────
───▄─▀████▀████▀─▄────
─▀█────██▀█▀██────█▀──"""

MENU_TITLE = "SELECT"
MESSAGES_TITLE = "✉ MESSAGES"
SEND_LABEL = "SEND"
REPLY_LABEL = "REPLY"
EMPTY_MENU_LABEL = "(no items)"
