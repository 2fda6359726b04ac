from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import aclosing
from typing import Any

from sse_starlette.sse import EventSourceResponse

from finagent.log import logger
from finagent.router.params import StreamEvent

STREAM_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}


def encode_event(event: StreamEvent) -> dict[str, str]:
    """SSE payload for one event, serialized as `data: <JSON>`."""
    return {"data": event.model_dump_json()}


async def close_after_terminal(events: AsyncIterator[StreamEvent]) -> AsyncIterator[StreamEvent]:
    """
    Relay events in order and stop right after the first `message` or
    `error` event. Anything the source still has is discarded with a
    warning, and the source is closed when we stop.
    """
    async with aclosing(events) as source:
        async for event in source:
            yield event
            if event.is_terminal:
                extra = await anext(source, None)
                if extra is not None:
                    logger.warning(f"Discarding {extra.type} event after terminal {event.type} event")
                return


class ChatEventSourceResponse(EventSourceResponse):
    """
    An EventSourceResponse streaming `StreamEvent`s as `data: <JSON>\\n\\n` frames.

    A client disconnect cancels the producing generator, and with it any
    agent run and tool calls it is awaiting.
    """

    def __init__(
        self,
        events: AsyncIterator[StreamEvent],
        status_code: int = 200,
        ping: int | None = None,
        **kwargs: Any,
    ):
        async def event_generator():
            try:
                async for event in close_after_terminal(events):
                    logger.debug(f"Sending {event.type} frame")
                    yield encode_event(event)
            except asyncio.CancelledError:
                logger.info("Client disconnected, stream cancelled")
                raise

        super().__init__(
            content=event_generator(),
            status_code=status_code,
            headers={**STREAM_HEADERS, **kwargs.pop("headers", {})},
            ping=ping,
            sep="\n",
            **kwargs,
        )
