"""Textual app that hosts the phone and acts as its render surface."""

from __future__ import annotations

import logging
from typing import Any

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Container, Grid, Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.events import Key
from textual.geometry import Region
from textual.widgets import Button, Static

from burner_phone.config import DEV_MODE, HOST_WS_URL, TYPEWRITER_INTERVAL_MS
from burner_phone.constant import DEFAULT_BRAND, KEYPAD_KEYS, NAV_KEYS, SOFT_KEYS
from burner_phone.controller import PhoneController
from burner_phone.demo import DEMO_HOTKEYS, demo_script
from burner_phone.host_link import HostLink
from burner_phone.outbound import HttpOutboundChannel, LoggingOutboundChannel, OutboundChannel
from burner_phone.rendering import build_battery_bars, build_header, build_signal_bars
from burner_phone.router import MessageRouter

logger = logging.getLogger(__name__)


class KeyButton(Button, can_focus=False):
    """Handset key; never takes focus so Enter and the arrows reach the app."""


class ScreenScroll(VerticalScroll, can_focus=False):
    """Scrollable content region of the handset display."""


def key_label(key: str, letters: str) -> Text:
    text = Text(key, style="bold")
    if letters:
        text.append(f" {letters}", style="dim")
    return text


class TextualSurface:
    """Mount adapter: the only code that touches the phone's widgets."""

    def __init__(self, app: App) -> None:
        self._app = app

    def mount(self, brand: str) -> None:
        try:
            self._app.query_one("#brand", Static).update(build_header(brand))
            self._app.query_one("#phone", Container).remove_class("closed")
            self._app.query_one("#closed-notice", Static).add_class("hidden")
        except NoMatches:
            return

    def update(self, markup: Text) -> None:
        try:
            self._app.query_one("#screen-content", Static).update(markup)
        except NoMatches:
            return

    def scroll_to_row(self, row: int) -> None:
        # Wait for the repaint so the new row has a size.
        self._app.call_after_refresh(self._scroll_now, row)

    def clear(self) -> None:
        try:
            self._app.query_one("#screen-content", Static).update("")
            self._app.query_one("#phone", Container).add_class("closed")
            self._app.query_one("#closed-notice", Static).remove_class("hidden")
        except NoMatches:
            return

    def _scroll_now(self, row: int) -> None:
        try:
            scroll = self._app.query_one("#screen-scroll", ScreenScroll)
        except NoMatches:
            return
        scroll.scroll_to_region(Region(0, row, max(1, scroll.size.width), 1), animate=False)


class PhoneApp(App):
    """A Textual app rendering a keypad phone driven by host messages."""

    TITLE = "Burner Phone"

    CSS = """
    Screen {
        align: center middle;
    }

    #phone {
        width: 34;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 0 1;
    }

    #phone.closed {
        display: none;
    }

    #brand {
        width: 100%;
        margin-bottom: 1;
    }

    #status {
        height: 1;
    }

    #signal, #battery {
        width: 1fr;
    }

    #screen-scroll {
        height: 9;
        border: tall $surface;
        background: #9bbc0f 20%;
        padding: 0 1;
        scrollbar-size-vertical: 1;
    }

    #soft-keys {
        height: 3;
        margin-top: 1;
    }

    #nav {
        width: 1fr;
        height: 3;
    }

    KeyButton {
        min-width: 4;
        width: 1fr;
        height: 1;
        border: none;
        margin: 0 1 0 0;
    }

    #soft-keys > KeyButton {
        height: 3;
    }

    #keypad {
        grid-size: 3;
        grid-gutter: 0 1;
        height: auto;
        margin-top: 1;
    }

    #footer {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }

    #closed-notice {
        color: $text-muted;
    }

    .hidden {
        display: none;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        outbound: OutboundChannel | None = None,
        *,
        dev_mode: bool = DEV_MODE,
        host_url: str = HOST_WS_URL,
        brand: str = DEFAULT_BRAND,
        interval_ms: int = TYPEWRITER_INTERVAL_MS,
        autostart: bool = True,
    ) -> None:
        super().__init__()
        self.dev_mode = dev_mode
        self.brand = brand
        self.autostart = autostart
        if outbound is None:
            outbound = LoggingOutboundChannel() if dev_mode else HttpOutboundChannel()
        self.outbound = outbound
        self.surface = TextualSurface(self)
        self.controller = PhoneController(self.surface, outbound, self, interval_ms=interval_ms)
        self.router = MessageRouter(self.controller)
        self.host_link: HostLink | None = None if dev_mode else HostLink(self.router.dispatch, host_url)

    def compose(self) -> ComposeResult:
        yield Static("No device. Waiting for host…", id="closed-notice")
        with Container(id="phone", classes="closed"):
            yield Static(build_header(self.brand), id="brand")
            with Horizontal(id="status"):
                yield Static(build_signal_bars(), id="signal")
                yield Static(build_battery_bars(), id="battery")
            with ScreenScroll(id="screen-scroll"):
                yield Static(id="screen-content")
            with Horizontal(id="soft-keys"):
                yield self._key_button(SOFT_KEYS[0]["key"], SOFT_KEYS[0]["label"], SOFT_KEYS[0]["classes"])
                with Vertical(id="nav"):
                    for nav in NAV_KEYS:
                        yield self._key_button(nav["key"], nav["label"], nav["classes"])
                yield self._key_button(SOFT_KEYS[1]["key"], SOFT_KEYS[1]["label"], SOFT_KEYS[1]["classes"])
            with Grid(id="keypad"):
                for pad in KEYPAD_KEYS:
                    yield self._key_button(pad["key"], key_label(pad["key"], pad["label"]))
            yield Static("═══", id="footer")

    def _key_button(self, key: str, label: Any, classes: str = "") -> KeyButton:
        return KeyButton(label, name=key, classes=f"key {classes}".strip())

    async def on_mount(self) -> None:
        if not self.autostart:
            return
        if self.dev_mode:
            logger.info("Development build: replaying demo script")
            self._schedule_demo()
            return
        assert self.host_link is not None
        await self.host_link.start()

    async def on_unmount(self) -> None:
        if self.host_link is not None:
            await self.host_link.stop()
        if isinstance(self.outbound, HttpOutboundChannel):
            await self.outbound.aclose()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.controller.handle_key(event.button.name)
        event.stop()

    def on_key(self, event: Key) -> None:
        if self.dev_mode and event.key in DEMO_HOTKEYS:
            self.router.dispatch(DEMO_HOTKEYS[event.key])
            event.stop()
            return
        if self.controller.handle_key(event.key):
            event.stop()

    def _schedule_demo(self) -> None:
        elapsed = 0.0
        for delay, message in demo_script(self.brand):
            elapsed += delay
            self.set_timer(elapsed, lambda message=message: self.router.dispatch(message))
