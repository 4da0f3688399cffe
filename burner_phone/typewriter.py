"""Timed character-by-character text reveal."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Protocol

from burner_phone.config import TYPEWRITER_INTERVAL_MS

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    """Deferred-callback source; Textual's ``App.set_timer`` fits this shape."""

    def set_timer(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


def reveal_steps(text: str) -> Iterator[str]:
    """Yield the characters of ``text`` in reveal order, one per step."""
    yield from text


class Typewriter:
    """Reveal a string one character per tick.

    Every ``start`` bumps a generation counter and stops the pending timer, so
    a callback from an older sequence finds a stale generation and does nothing.
    """

    def __init__(self, scheduler: Scheduler, *, interval_ms: int = TYPEWRITER_INTERVAL_MS) -> None:
        self._scheduler = scheduler
        self._interval = max(0, interval_ms) / 1000
        self._generation = 0
        self._pending: TimerHandle | None = None
        self._running = False

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def running(self) -> bool:
        return self._running

    def start(
        self,
        text: str,
        on_step: Callable[[str], None],
        on_done: Callable[[], None] | None = None,
    ) -> int:
        self.cancel()
        generation = self._generation
        steps = reveal_steps(text)
        self._running = True

        def step() -> None:
            if generation != self._generation:
                return
            self._pending = None
            char = next(steps, None)
            if char is None:
                self._running = False
                if on_done is not None:
                    on_done()
                return
            on_step(char)
            # on_step may have restarted or cancelled us.
            if generation != self._generation:
                return
            self._pending = self._scheduler.set_timer(self._interval, step)

        step()
        return generation

    def cancel(self) -> None:
        """Invalidate the in-flight sequence, if any."""
        self._generation += 1
        if self._running:
            logger.debug("typewriter: cancelled sequence %d", self._generation - 1)
        self._running = False
        if self._pending is not None:
            self._pending.stop()
            self._pending = None
