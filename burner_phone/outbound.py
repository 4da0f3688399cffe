"""Fire-and-forget notifications from the device back to the host."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

import httpx

from burner_phone.config import CALLBACK_BASE_URL, OUTBOUND_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

CONFIRM_ORDER = "confirm_order"
CLOSE_BURNER = "close_burner"


class OutboundChannel(Protocol):
    def notify_confirm_order(self, item_id: str) -> None: ...

    def notify_close(self) -> None: ...


class HttpOutboundChannel:
    """POST each event to ``<base>/nui:<event>`` without waiting for the reply."""

    def __init__(
        self,
        base_url: str = CALLBACK_BASE_URL,
        *,
        timeout: float = OUTBOUND_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url.rstrip("/"), timeout=timeout, transport=transport)
        self._pending: set[asyncio.Task[None]] = set()

    def notify_confirm_order(self, item_id: str) -> None:
        self._spawn(CONFIRM_ORDER, {"item_id": item_id})

    def notify_close(self) -> None:
        self._spawn(CLOSE_BURNER, {})

    def _spawn(self, event: str, payload: dict[str, Any]) -> None:
        try:
            task = asyncio.get_running_loop().create_task(self._post(event, payload), name=f"outbound-{event}")
        except RuntimeError:
            logger.warning("outbound.%s: no running event loop, dropping", event)
            return
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _post(self, event: str, payload: dict[str, Any]) -> None:
        try:
            response = await self._client.post(f"/nui:{event}", json=payload)
            response.raise_for_status()
            logger.info("outbound.%s: delivered %s", event, payload)
        except httpx.TimeoutException:
            logger.error("outbound.%s: request timeout", event)
        except httpx.NetworkError as e:
            logger.error("outbound.%s: network error - %s", event, e)
        except httpx.HTTPStatusError as e:
            logger.error("outbound.%s: HTTP %d - %s", event, e.response.status_code, e.response.text)
        except Exception as e:
            logger.exception("outbound.%s: unexpected error - %s", event, e)

    async def drain(self) -> None:
        """Wait for in-flight posts; used on shutdown and in tests."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        await self.drain()
        try:
            await self._client.aclose()
        except Exception as e:
            logger.warning("Error closing HTTP client: %s", e)


class LoggingOutboundChannel:
    """Development build stand-in: records events instead of posting them."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def notify_confirm_order(self, item_id: str) -> None:
        self._record(CONFIRM_ORDER, {"item_id": item_id})

    def notify_close(self) -> None:
        self._record(CLOSE_BURNER, {})

    def _record(self, event: str, payload: dict[str, Any]) -> None:
        logger.info("outbound.%s (dev): %s", event, payload)
        self.events.append((event, payload))
