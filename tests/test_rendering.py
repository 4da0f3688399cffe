from __future__ import annotations

from burner_phone.constant import HOME_ART
from burner_phone.models import MenuItem, PhoneState, Screen
from burner_phone.rendering import (
    ACTIVE_ROW_STYLE,
    active_row,
    build_header,
    format_price,
    format_quantity,
    render_screen,
)


def make_state(**kwargs) -> PhoneState:
    state = PhoneState()
    for key, value in kwargs.items():
        setattr(state, key, value)
    return state


ITEMS = [
    MenuItem(id="weed", name="Weed", price=100, quantity=10),
    MenuItem(id="coke", name="Coke", price=250.5, quantity=2),
]


def test_home_shows_art():
    assert render_screen(make_state()).plain == HOME_ART


def test_unknown_screen_falls_back_to_home():
    state = make_state(current_screen="settings")
    assert render_screen(state).plain == HOME_ART


def test_plain_text_screen():
    state = make_state(current_screen=Screen.TEXT, screen_text="Yo")
    assert render_screen(state).plain == "Yo"


def test_message_screen_send_and_reply_footer():
    sending = render_screen(make_state(current_screen=Screen.TEXT, screen_text="Yo", is_message=True, is_sending=True))
    replying = render_screen(make_state(current_screen=Screen.TEXT, screen_text="Yo", is_message=True))

    assert "MESSAGES" in sending.plain
    assert sending.plain.endswith("SEND")
    assert replying.plain.endswith("REPLY")


def test_menu_marks_exactly_one_active_row():
    state = make_state(current_screen=Screen.MENU, menu_items=list(ITEMS), menu_selected=1)
    text = render_screen(state)

    lines = text.plain.split("\n")
    assert lines[0] == "SELECT"
    assert [line.startswith("➤") for line in lines[1:]] == [False, True]
    active_spans = [span for span in text.spans if span.style == ACTIVE_ROW_STYLE]
    assert len(active_spans) == 1
    assert text.plain[active_spans[0].start : active_spans[0].end] == "➤ Coke"


def test_empty_menu_placeholder():
    text = render_screen(make_state(current_screen=Screen.MENU))
    assert "(no items)" in text.plain


def test_confirm_shows_selected_details():
    state = make_state(current_screen=Screen.CONFIRM, menu_items=list(ITEMS), menu_selected=0)
    plain = render_screen(state).plain

    assert plain.startswith("Weed")
    assert "Qty:   10" in plain
    assert "Price: $100" in plain


def test_confirm_with_invalid_selection_renders_menu():
    state = make_state(current_screen=Screen.CONFIRM, menu_items=[], menu_selected=3)
    assert render_screen(state).plain.startswith("SELECT")


def test_active_row_only_on_menu():
    state = make_state(current_screen=Screen.MENU, menu_items=list(ITEMS), menu_selected=1)
    assert active_row(state) == 2
    state.current_screen = Screen.CONFIRM
    assert active_row(state) is None


def test_format_price():
    assert format_price(100) == "$100"
    assert format_price(250.5) == "$250.50"


def test_header_carries_brand():
    assert "CELLTOWA" in build_header("CELLTOWA").plain


def test_format_quantity():
    assert format_quantity(2.0) == "2"
    assert format_quantity(3.5) == "3.5"


def test_confirm_shows_fractional_quantity():
    item = MenuItem(id="weed", name="Weed", price=100, quantity=3.5)
    state = make_state(current_screen=Screen.CONFIRM, menu_items=[item], menu_selected=0)
    assert "Qty:   3.5" in render_screen(state).plain
