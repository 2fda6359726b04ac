from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import click

from finagent.client import FinanceAgentClient
from finagent.config import get_config
from finagent.llms.models import get_default_model
from finagent.router.controller.chat import ChatController
from finagent.router.params import StreamEvent


@click.group()
def cli():
    """Financial research agent."""


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.option("--reload", is_flag=True, help="Reload on code changes")
def serve(host: str, port: int, reload: bool):
    """Run the HTTP server."""
    import uvicorn

    uvicorn.run("finagent.app:app", host=host, port=port, reload=reload)


async def stream_events(message: str, url: str | None) -> AsyncIterator[StreamEvent]:
    if url:
        async with FinanceAgentClient(url) as client:
            async for event in client.chat_stream(message):
                yield event
        return

    config = get_config()
    controller = ChatController(config, get_default_model(config))
    async for event in controller.chat({"message": message}):
        yield event


async def _ask(message: str, url: str | None) -> bool:
    ok = True
    async for event in stream_events(message, url):
        if event.type == "thought":
            click.secho(event.content, dim=True, err=True)
        elif event.type == "error":
            click.secho(event.content, fg="red", err=True)
            ok = False
        else:
            click.echo(event.content)
    return ok


@cli.command()
@click.argument("message")
@click.option("--url", default=None, help="Ask a running server instead of running the agent in-process")
@click.pass_context
def ask(ctx: click.Context, message: str, url: str | None):
    """Ask the agent a question and print its answer."""
    if not asyncio.run(_ask(message, url)):
        ctx.exit(1)


if __name__ == "__main__":
    cli()
