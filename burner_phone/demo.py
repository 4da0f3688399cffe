"""Scripted host messages for the development build."""

from __future__ import annotations

from typing import Any

DEMO_MENU_ITEMS: list[dict[str, Any]] = [
    {"id": "weed", "name": "Weed", "price": 100, "quantity": 10},
    {"id": "coke", "name": "Coke", "price": 250, "quantity": 2},
    {"id": "heroin", "name": "Heroin", "price": 500, "quantity": 3},
    {"id": "mdma", "name": "MDMA", "price": 175, "quantity": 5},
    {"id": "meth", "name": "Meth", "price": 300, "quantity": 1},
    {"id": "meth2", "name": "Meth2", "price": 300, "quantity": 1},
    {"id": "meth3", "name": "Meth3", "price": 300, "quantity": 1},
]


def demo_script(brand: str) -> list[tuple[float, dict[str, Any]]]:
    """Return ``(delay_seconds, message)`` pairs replayed through the router."""
    return [
        (0.0, {"name": "build", "payload": {"brand": brand}}),
        (0.2, {"name": "set_text", "payload": {"text": "Yo got supply in?", "is_message": True, "send": True}}),
        (2.0, {"name": "set_menu", "payload": {"items": DEMO_MENU_ITEMS}}),
    ]


# Extra host messages bound to function keys in the development build.
DEMO_HOTKEYS: dict[str, dict[str, Any]] = {
    "f1": {"name": "set_text", "payload": {"text": "Yo got supply in?"}},
    "f2": {"name": "set_menu", "payload": {"items": DEMO_MENU_ITEMS}},
    "f3": {"name": "set_text", "payload": {"text": "NAH MAN COPS EVERYWHERE"}},
    "f4": {"name": "set_screen", "payload": {"screen": "home"}},
    "f5": {"name": "build", "payload": {"brand": "CELLTOWA"}},
}
