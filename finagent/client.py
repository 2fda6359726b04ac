"""Streaming client for the finagent chat endpoint."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Any

import httpx
from httpx_sse import aconnect_sse

from finagent.log import logger
from finagent.router.params import StreamEvent


class FinanceAgentClient:
    """API client for a running finagent server."""

    def __init__(self, base_url: str, timeout: float = 60.0):
        """Initialize the API client.

        Args:
            base_url: The base URL of the API.
            timeout: Read timeout for the event stream, in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout)
        logger.info(f"Initialized API client with base URL: {self.base_url}")

    async def health(self) -> dict[str, Any]:
        """Check that the server is up.

        Returns:
            The payload of `GET /`.
        """
        url = f"{self.base_url}/"
        logger.info(f"Making GET request to: {url}")
        response = await self.client.get(url)
        response.raise_for_status()
        return response.json()

    async def chat_stream(self, message: str) -> AsyncGenerator[StreamEvent, None]:
        """Stream the agent's events for one message.

        Args:
            message: The question to ask.

        Yields:
            Stream events, ending with a `message` or an `error` event.
        """
        url = f"{self.base_url}/api/finance/chat"
        logger.info(f"Making POST request to: {url} with message: {message[:50]}...")
        async with aconnect_sse(self.client, "POST", url, json={"message": message}) as event_source:
            async for sse in event_source.aiter_sse():
                if not sse.data:
                    continue
                event = StreamEvent.model_validate_json(sse.data)
                yield event
                if event.is_terminal:
                    break

    async def close(self) -> None:
        """Close the client."""
        logger.info("Closing API client")
        await self.client.aclose()

    async def __aenter__(self) -> FinanceAgentClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
