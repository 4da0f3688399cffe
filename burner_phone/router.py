"""Inbound host message validation and dispatch."""

from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from burner_phone.constant import DEFAULT_BRAND
from burner_phone.controller import PhoneController
from burner_phone.models import MenuItem

logger = logging.getLogger(__name__)


class MessageName(str, enum.Enum):
    BUILD = "build"
    SET_TEXT = "set_text"
    SET_MENU = "set_menu"
    SET_SCREEN = "set_screen"
    CLOSE_PHONE = "close_phone"


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class BuildPayload(_Payload):
    brand: str = DEFAULT_BRAND


class SetTextPayload(_Payload):
    text: str
    is_message: Optional[bool] = False
    send: Optional[bool] = False


class MenuItemPayload(_Payload):
    id: str
    name: str
    price: float = 0
    quantity: float = 0

    def to_item(self) -> MenuItem:
        return MenuItem(id=self.id, name=self.name, price=self.price, quantity=self.quantity)


class SetMenuPayload(_Payload):
    items: list[MenuItemPayload] = Field(default_factory=list)
    # Accepted for host compatibility; the device does not use it.
    rep_level: Any = None


class SetScreenPayload(_Payload):
    screen: str


class ClosePhonePayload(_Payload):
    pass


PAYLOAD_MODELS: dict[MessageName, type[_Payload]] = {
    MessageName.BUILD: BuildPayload,
    MessageName.SET_TEXT: SetTextPayload,
    MessageName.SET_MENU: SetMenuPayload,
    MessageName.SET_SCREEN: SetScreenPayload,
    MessageName.CLOSE_PHONE: ClosePhonePayload,
}

Handler = Callable[[Any], None]


class MessageRouter:
    """Maps host message names to PhoneController entry points."""

    def __init__(self, controller: PhoneController) -> None:
        self.controller = controller
        self._handlers: dict[MessageName, Handler] = {}
        self.register(MessageName.BUILD, self._on_build)
        self.register(MessageName.SET_TEXT, self._on_set_text)
        self.register(MessageName.SET_MENU, self._on_set_menu)
        self.register(MessageName.SET_SCREEN, self._on_set_screen)
        self.register(MessageName.CLOSE_PHONE, self._on_close_phone)

    def register(self, name: MessageName, handler: Handler) -> None:
        if name in self._handlers:
            raise ValueError(f"handler already registered for {name.value!r}")
        self._handlers[name] = handler

    def dispatch(self, message: dict[str, Any]) -> bool:
        """Validate and route one message; returns True when a handler ran."""
        if not isinstance(message, dict):
            logger.warning("Dropping non-object message: %r", message)
            return False

        raw_name, payload = _split_message(message)
        try:
            name = MessageName(raw_name)
        except (ValueError, TypeError):
            logger.warning("Handler missing: %s", raw_name)
            return False

        if name != MessageName.BUILD and not self.controller.is_open:
            logger.info("Dropping %s: phone is not open", name.value)
            return False

        try:
            validated = PAYLOAD_MODELS[name].model_validate(payload)
        except ValidationError as exc:
            logger.warning("Invalid %s payload: %s", name.value, exc)
            return False

        self._handlers[name](validated)
        return True

    def _on_build(self, payload: BuildPayload) -> None:
        self.controller.build(payload.brand)

    def _on_set_text(self, payload: SetTextPayload) -> None:
        self.controller.set_text(payload.text, bool(payload.is_message), bool(payload.send))

    def _on_set_menu(self, payload: SetMenuPayload) -> None:
        if payload.rep_level is not None:
            logger.debug("set_menu rep_level=%r ignored", payload.rep_level)
        self.controller.set_menu(item.to_item() for item in payload.items)

    def _on_set_screen(self, payload: SetScreenPayload) -> None:
        self.controller.set_screen(payload.screen)

    def _on_close_phone(self, payload: ClosePhonePayload) -> None:
        self.controller.close()


def _split_message(message: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
    """Accept ``{name, payload}`` envelopes and flat ``{func, ...}`` NUI messages."""
    if "func" in message:
        fields = {key: value for key, value in message.items() if key != "func"}
        return message["func"], fields
    payload = message.get("payload")
    return message.get("name"), payload if isinstance(payload, dict) else {}
