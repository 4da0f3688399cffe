"""Domain models for the burner phone."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from burner_phone.constant import DEFAULT_BRAND


class Screen(str, enum.Enum):
    """The four mutually exclusive display modes."""

    HOME = "home"
    TEXT = "text"
    MENU = "menu"
    CONFIRM = "confirm"


@dataclass(frozen=True)
class MenuItem:
    """A selectable entry pushed by the host."""

    id: str
    name: str
    price: float
    quantity: float


@dataclass
class PhoneState:
    """Mutable device state owned by the controller."""

    brand: str = DEFAULT_BRAND
    current_screen: Screen = Screen.HOME
    menu_items: list[MenuItem] = field(default_factory=list)
    menu_selected: int = 0
    screen_text: str = ""
    is_message: bool = False
    is_sending: bool = False

    def reset(self) -> None:
        """Return every field except the brand to its default."""
        self.current_screen = Screen.HOME
        self.menu_items = []
        self.menu_selected = 0
        self.screen_text = ""
        self.is_message = False
        self.is_sending = False

    def selected_item(self) -> MenuItem | None:
        if not (0 <= self.menu_selected < len(self.menu_items)):
            return None
        return self.menu_items[self.menu_selected]
