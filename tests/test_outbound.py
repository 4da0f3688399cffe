from __future__ import annotations

import asyncio
import json
import logging

import httpx

from burner_phone.outbound import HttpOutboundChannel, LoggingOutboundChannel


def test_http_channel_posts_nui_callbacks():
    seen: list[tuple[str, dict]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={"ok": True})

    async def scenario() -> None:
        channel = HttpOutboundChannel("https://burner_phone", transport=httpx.MockTransport(handler))
        channel.notify_confirm_order("weed")
        channel.notify_close()
        await channel.aclose()

    asyncio.run(scenario())

    assert sorted(seen) == sorted([("/nui:confirm_order", {"item_id": "weed"}), ("/nui:close_burner", {})])


def test_http_channel_swallows_host_errors(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    async def scenario() -> None:
        channel = HttpOutboundChannel("https://burner_phone", transport=httpx.MockTransport(handler))
        channel.notify_close()
        await channel.aclose()

    with caplog.at_level(logging.ERROR):
        asyncio.run(scenario())

    assert "outbound.close_burner: HTTP 500" in caplog.text


def test_http_channel_swallows_network_errors(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async def scenario() -> None:
        channel = HttpOutboundChannel("https://burner_phone", transport=httpx.MockTransport(handler))
        channel.notify_confirm_order("coke")
        await channel.aclose()

    with caplog.at_level(logging.ERROR):
        asyncio.run(scenario())

    assert "network error" in caplog.text


def test_notify_is_fire_and_forget():
    release = asyncio.Event()

    async def slow(request: httpx.Request) -> httpx.Response:
        await release.wait()
        return httpx.Response(200)

    async def scenario() -> bool:
        channel = HttpOutboundChannel("https://burner_phone", transport=httpx.MockTransport(slow))
        channel.notify_close()
        # notify returned while the post is still in flight
        in_flight = bool(channel._pending)
        release.set()
        await channel.aclose()
        return in_flight

    assert asyncio.run(scenario()) is True


def test_http_channel_without_loop_drops(caplog):
    channel = HttpOutboundChannel("https://burner_phone", transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    with caplog.at_level(logging.WARNING):
        channel.notify_close()
    assert "no running event loop" in caplog.text


def test_logging_channel_records_events():
    channel = LoggingOutboundChannel()
    channel.notify_confirm_order("meth")
    channel.notify_close()
    assert channel.events == [("confirm_order", {"item_id": "meth"}), ("close_burner", {})]
