"""Shared fakes for driving the phone without a terminal."""

from __future__ import annotations

from typing import Callable

import pytest
from rich.text import Text

from burner_phone.controller import PhoneController
from burner_phone.models import MenuItem
from burner_phone.outbound import LoggingOutboundChannel
from burner_phone.router import MessageRouter


class FakeTimer:
    def __init__(self, scheduler: "FakeScheduler", delay: float, callback: Callable[[], None]) -> None:
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


class FakeScheduler:
    """Collects timers and fires them only when told to."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def set_timer(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self, delay, callback)
        self.timers.append(timer)
        return timer

    def pending(self) -> list[FakeTimer]:
        return [timer for timer in self.timers if not timer.stopped]

    def tick(self) -> int:
        """Fire every timer due now, ignoring stop(); returns how many fired."""
        due, self.timers = self.timers, []
        for timer in due:
            timer.callback()
        return len(due)

    def run_all(self, limit: int = 10_000) -> None:
        for _ in range(limit):
            if not self.tick():
                return
        raise AssertionError("scheduler did not settle")


class RecordingSurface:
    def __init__(self) -> None:
        self.mounted: list[str] = []
        self.frames: list[Text] = []
        self.scrolled: list[int] = []
        self.cleared = 0

    def mount(self, brand: str) -> None:
        self.mounted.append(brand)

    def update(self, markup: Text) -> None:
        self.frames.append(markup)

    def scroll_to_row(self, row: int) -> None:
        self.scrolled.append(row)

    def clear(self) -> None:
        self.cleared += 1

    @property
    def last_plain(self) -> str:
        return self.frames[-1].plain if self.frames else ""


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def outbound() -> LoggingOutboundChannel:
    return LoggingOutboundChannel()


@pytest.fixture
def controller(surface, outbound, scheduler) -> PhoneController:
    return PhoneController(surface, outbound, scheduler)


@pytest.fixture
def phone(controller) -> PhoneController:
    controller.build("CELLTOWA")
    return controller


@pytest.fixture
def router(controller) -> MessageRouter:
    return MessageRouter(controller)


@pytest.fixture
def items() -> list[MenuItem]:
    return [
        MenuItem(id="weed", name="Weed", price=100, quantity=10),
        MenuItem(id="coke", name="Coke", price=250, quantity=2),
        MenuItem(id="meth", name="Meth", price=300, quantity=1),
    ]
