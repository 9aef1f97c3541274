"""Main Slack bot logic and entry point."""

import asyncio
from typing import Optional

import structlog
from slack_sdk.socket_mode.aiohttp import SocketModeClient
from slack_sdk.socket_mode.async_client import AsyncBaseSocketModeClient
from slack_sdk.socket_mode.request import SocketModeRequest
from slack_sdk.socket_mode.response import SocketModeResponse
from slack_sdk.web.async_client import AsyncWebClient

from spoticus.commands import build_registry
from spoticus.config import Config
from spoticus.dispatcher import Dispatcher
from spoticus.fetchers.kubernetes import MaptClusterFetcher

from .events import to_inbound_message
from .transport import SlackTransport

logger = structlog.get_logger(__name__)


class SlackBot:
    """Socket Mode bot feeding a single sequential command consumer.

    The Socket Mode listener only acknowledges envelopes and enqueues message
    events; one consumer task drains the queue so commands never run
    concurrently.
    """

    def __init__(self, socket_client: AsyncBaseSocketModeClient, dispatcher: Dispatcher):
        self.socket_client = socket_client
        self.dispatcher = dispatcher
        self.queue: asyncio.Queue = asyncio.Queue()
        self._consumer: Optional[asyncio.Task] = None
        socket_client.socket_mode_request_listeners.append(self.handle_request)

    async def handle_request(self, client: AsyncBaseSocketModeClient, req: SocketModeRequest) -> None:
        """Acknowledge an envelope and enqueue its message event."""
        if req.type != "events_api":
            return

        await client.send_socket_mode_response(SocketModeResponse(envelope_id=req.envelope_id))

        event = (req.payload or {}).get("event") or {}
        message = to_inbound_message(event)
        if message is not None:
            self.queue.put_nowait(message)

    async def consume(self) -> None:
        """Dispatch queued messages one at a time, forever."""
        while True:
            message = await self.queue.get()
            try:
                await self.dispatcher.dispatch(message)
            except Exception:
                logger.exception("Unexpected error while dispatching message", channel=message.channel)
            finally:
                self.queue.task_done()

    async def start(self) -> None:
        self._consumer = asyncio.create_task(self.consume())
        await self.socket_client.connect()

    async def stop(self) -> None:
        if self._consumer is not None:
            self._consumer.cancel()
            try:
                await self._consumer
            except asyncio.CancelledError:
                pass
            self._consumer = None
        await self.socket_client.close()


async def run_slack_bot(bot_token: str, app_token: str, config: Config) -> None:
    """Main entry point for the Slack bot.

    Connects over Socket Mode and processes commands until cancelled.

    Args:
        bot_token: Bot-level OAuth token used to post replies
        app_token: App-level token used to open the Socket Mode connection
        config: Spoticus configuration
    """
    web_client = AsyncWebClient(token=bot_token)
    socket_client = SocketModeClient(app_token=app_token, web_client=web_client)
    registry = build_registry(lambda: MaptClusterFetcher.from_config(config))
    dispatcher = Dispatcher(registry, SlackTransport(web_client))
    bot = SlackBot(socket_client, dispatcher)

    logger.info("Bot is starting...")
    await bot.start()
    logger.info("Bot is running. Press Ctrl+C to stop.")

    try:
        await asyncio.Event().wait()
    finally:
        logger.info("Shutting down bot...")
        await bot.stop()
        logger.info("Bot stopped.")
