"""Websocket client that carries host messages to the device."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Callable, Optional
from urllib.parse import urlparse

import websockets

from burner_phone.config import HOST_RECONNECT_DELAY_SECONDS, HOST_WS_URL

logger = logging.getLogger(__name__)

MessageHandler = Callable[[dict[str, Any]], Any]


class HostLinkError(RuntimeError):
    """Raised when the host link cannot be started."""


class HostLink:
    """Keeps a websocket open to the host and hands each message to ``handler``.

    Handlers run synchronously on the event loop, one message at a time, so a
    message is fully applied before the next one is read.
    """

    def __init__(
        self,
        handler: MessageHandler,
        url: str = HOST_WS_URL,
        *,
        reconnect_delay: float = HOST_RECONNECT_DELAY_SECONDS,
    ) -> None:
        self.url = url
        self._handler = handler
        self._reconnect_delay = reconnect_delay
        self._conn: Optional[Any] = None
        self._task: Optional[asyncio.Task[None]] = None
        self._stop_event = asyncio.Event()

    @property
    def connected(self) -> bool:
        return self._conn is not None

    async def start(self) -> None:
        if urlparse(self.url).scheme not in {"ws", "wss"}:
            raise HostLinkError(f"host link needs a ws:// or wss:// url, got {self.url!r}")
        if self._task is not None:
            return
        self._stop_event.clear()
        self._task = asyncio.create_task(self._run(), name="host-link")

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            except Exception as e:
                logger.warning("Error during host link cleanup: %s", e)
        self._task = None
        await self._close_conn()

    async def send(self, message: dict[str, Any]) -> None:
        if not self._conn:
            logger.warning("Cannot send message - host link not connected")
            return
        try:
            await self._conn.send(json.dumps(message))
        except websockets.ConnectionClosed:
            logger.warning("Cannot send message - host link closed")

    async def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                logger.info("Connecting to host %s", self.url)
                self._conn = await websockets.connect(self.url, ping_interval=None)
                await self._listen()
            except asyncio.CancelledError:
                raise
            except websockets.ConnectionClosedOK:
                logger.info("Host link closed cleanly")
            except websockets.ConnectionClosedError as exc:
                logger.warning("Host link closed: %s", exc)
            except OSError as exc:
                logger.warning("Host link connect failed: %s", exc)
            except Exception:
                logger.exception("Host link listener crashed")
            finally:
                await self._close_conn()

            if self._stop_event.is_set():
                break
            await asyncio.sleep(self._reconnect_delay)

    async def _listen(self) -> None:
        assert self._conn is not None
        async for raw in self._conn:
            try:
                message = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning("Invalid JSON from host: %s", raw)
                continue

            if isinstance(message, dict) and message.get("type") == "ping":
                await self.send({"type": "pong"})
                continue

            try:
                self._handler(message)
            except Exception as e:
                logger.exception("Error in host message handler: %s", e)

    async def _close_conn(self) -> None:
        if self._conn is None:
            return
        conn, self._conn = self._conn, None
        try:
            await conn.close()
        except Exception as e:
            logger.warning("Error closing host websocket: %s", e)
