"""Screen state machine for the burner phone."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Protocol

from rich.text import Text

from burner_phone.config import TYPEWRITER_INTERVAL_MS
from burner_phone.keys import Action, normalize_key, resolve
from burner_phone.models import MenuItem, PhoneState, Screen
from burner_phone.outbound import OutboundChannel
from burner_phone.rendering import active_row, render_screen
from burner_phone.typewriter import Scheduler, Typewriter

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    """The only thing allowed to touch what the user sees."""

    def mount(self, brand: str) -> None: ...

    def update(self, markup: Text) -> None: ...

    def scroll_to_row(self, row: int) -> None: ...

    def clear(self) -> None: ...


class PhoneController:
    """Owns PhoneState and applies every host- and key-triggered transition."""

    def __init__(
        self,
        surface: RenderSurface,
        outbound: OutboundChannel,
        scheduler: Scheduler,
        *,
        interval_ms: int = TYPEWRITER_INTERVAL_MS,
    ) -> None:
        self.state = PhoneState()
        self._surface = surface
        self._outbound = outbound
        self._typewriter = Typewriter(scheduler, interval_ms=interval_ms)
        self._is_open = False
        self._actions: dict[Action, Callable[[], None]] = {
            Action.SELECT_PREVIOUS: self._select_previous,
            Action.SELECT_NEXT: self._select_next,
            Action.OPEN_CONFIRM: self._open_confirm,
            Action.CONFIRM_ORDER: self._confirm_order,
            Action.BACK_TO_MENU: self._back_to_menu,
            Action.CLOSE: self.close,
        }

    @property
    def is_open(self) -> bool:
        """True between ``build`` and ``close``; key input is only accepted then."""
        return self._is_open

    @property
    def typing(self) -> bool:
        return self._typewriter.running

    # Host-triggered transitions

    def build(self, brand: str) -> None:
        self._typewriter.cancel()
        self.state.reset()
        self.state.brand = brand
        self._is_open = True
        self._surface.mount(brand)
        logger.info("phone built brand=%r", brand)
        self._render()

    def set_text(self, text: str, is_message: bool = False, send: bool = False) -> None:
        self._typewriter.cancel()
        self.state.screen_text = ""
        self.state.is_message = is_message
        self.state.is_sending = send
        self.state.current_screen = Screen.TEXT
        self._render()
        self._typewriter.start(text, self._append_char)

    def set_menu(self, items: Iterable[MenuItem]) -> None:
        self.state.menu_items = list(items)
        self.state.menu_selected = 0
        self.state.current_screen = Screen.MENU
        logger.debug("menu set with %d items", len(self.state.menu_items))
        self._render_and_scroll()

    def set_screen(self, name: str | Screen) -> None:
        try:
            screen = Screen(name)
        except ValueError:
            logger.warning("set_screen: unknown screen %r ignored", name)
            return

        if screen == Screen.CONFIRM and self.state.selected_item() is None:
            logger.warning("set_screen: no valid selection for confirm, showing menu")
            screen = Screen.MENU
        self.state.current_screen = screen
        self._render()

    def close(self) -> None:
        self._typewriter.cancel()
        self.state.reset()
        self._is_open = False
        self._surface.clear()
        logger.info("phone closed")
        self._outbound.notify_close()

    # Key-triggered transitions

    def handle_key(self, raw_key: str | None) -> bool:
        """Route a raw key press; returns True when it triggered an action."""
        if not self._is_open:
            return False
        key = normalize_key(raw_key)
        if key is None:
            return False
        action = resolve(self.state.current_screen, key)
        if action is None:
            return False
        logger.debug("key %r on %s -> %s", key, self.state.current_screen.value, action.value)
        self._actions[action]()
        return True

    def _select_previous(self) -> None:
        if not self.state.menu_items:
            return
        self.state.menu_selected = max(0, self.state.menu_selected - 1)
        self._render_and_scroll()

    def _select_next(self) -> None:
        if not self.state.menu_items:
            return
        self.state.menu_selected = min(len(self.state.menu_items) - 1, self.state.menu_selected + 1)
        self._render_and_scroll()

    def _open_confirm(self) -> None:
        if self.state.selected_item() is None:
            logger.debug("confirm refused: nothing selected")
            return
        self.state.current_screen = Screen.CONFIRM
        self._render()

    def _confirm_order(self) -> None:
        selected = self.state.selected_item()
        if selected is None:
            logger.warning("confirm_order: selection out of range, back to menu")
            self._back_to_menu()
            return
        logger.info("confirm_order item_id=%r", selected.id)
        self._outbound.notify_confirm_order(selected.id)

    def _back_to_menu(self) -> None:
        self.state.current_screen = Screen.MENU
        self._render_and_scroll()

    # Rendering

    def _append_char(self, char: str) -> None:
        self.state.screen_text += char
        self._render()

    def _render(self) -> None:
        self._surface.update(render_screen(self.state))

    def _render_and_scroll(self) -> None:
        self._render()
        row = active_row(self.state)
        if row is not None:
            self._surface.scroll_to_row(row)
