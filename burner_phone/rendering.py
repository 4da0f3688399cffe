"""Markup builders for the phone chrome and each screen's content region."""

from __future__ import annotations

from typing import Callable

from rich.text import Text

from burner_phone.constant import (
    BATTERY_BAR_COUNT,
    EMPTY_MENU_LABEL,
    HOME_ART,
    MENU_TITLE,
    MESSAGES_TITLE,
    REPLY_LABEL,
    SEND_LABEL,
    SIGNAL_BAR_COUNT,
)
from burner_phone.models import PhoneState, Screen

ACTIVE_ROW_STYLE = "bold reverse"
TITLE_STYLE = "bold"

# Lines above the first menu row: the title.
_MENU_HEADER_LINES = 1


def build_header(brand: str) -> Text:
    text = Text(justify="center")
    text.append("▬▬▬▬", style="dim")
    text.append("\n")
    text.append(brand, style="bold")
    return text


def build_signal_bars() -> Text:
    text = Text()
    for level in range(1, SIGNAL_BAR_COUNT + 1):
        text.append("▁▂▃▄▅▆▇█"[min(level * 2 - 1, 7)])
    text.append(" ⏚")
    return text


def build_battery_bars() -> Text:
    text = Text(justify="right")
    text.append("▮" * BATTERY_BAR_COUNT)
    text.append(" ▭")
    return text


def format_quantity(quantity: float) -> str:
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"


def format_price(price: float) -> str:
    if float(price).is_integer():
        return f"${int(price)}"
    return f"${price:.2f}"


def render_home(state: PhoneState) -> Text:
    return Text(HOME_ART, no_wrap=True)


def render_text(state: PhoneState) -> Text:
    if not state.is_message:
        return Text(state.screen_text)
    return render_message(state)


def render_message(state: PhoneState) -> Text:
    text = Text()
    text.append(MESSAGES_TITLE, style=TITLE_STYLE)
    text.append("\n\n")
    text.append(state.screen_text)
    text.append("\n\n")
    text.append(SEND_LABEL if state.is_sending else REPLY_LABEL, style="bold reverse")
    return text


def render_menu(state: PhoneState) -> Text:
    text = Text(no_wrap=True, overflow="ellipsis")
    text.append(MENU_TITLE, style=TITLE_STYLE)
    if not state.menu_items:
        text.append(f"\n{EMPTY_MENU_LABEL}", style="dim")
        return text

    for idx, item in enumerate(state.menu_items):
        text.append("\n")
        if idx == state.menu_selected:
            text.append(f"➤ {item.name}", style=ACTIVE_ROW_STYLE)
        else:
            text.append(f"  {item.name}")
    return text


def render_confirm(state: PhoneState) -> Text:
    selected = state.selected_item()
    if selected is None:
        return render_menu(state)

    text = Text()
    text.append(selected.name, style=TITLE_STYLE)
    text.append("\n\n")
    text.append(f"Qty:   {format_quantity(selected.quantity)}\n")
    text.append(f"Price: {format_price(selected.price)}")
    return text


SCREEN_RENDERERS: dict[Screen, Callable[[PhoneState], Text]] = {
    Screen.HOME: render_home,
    Screen.TEXT: render_text,
    Screen.MENU: render_menu,
    Screen.CONFIRM: render_confirm,
}


def render_screen(state: PhoneState) -> Text:
    """Render the content region for the active screen, falling back to home."""
    renderer = SCREEN_RENDERERS.get(state.current_screen, render_home)
    return renderer(state)


def active_row(state: PhoneState) -> int | None:
    """Line index of the highlighted menu row within the rendered content."""
    if state.current_screen != Screen.MENU or state.selected_item() is None:
        return None
    return _MENU_HEADER_LINES + state.menu_selected
