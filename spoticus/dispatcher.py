"""Routes inbound chat messages to command handlers and posts the reply."""

import asyncio
from typing import Optional, Protocol

import structlog

from spoticus.commands import CommandRegistry
from spoticus.models import CommandContext, InboundMessage, ParsedCommand

logger = structlog.get_logger(__name__)

HANDLER_FAILED = "❌ Something went wrong while running that command."


class ChatTransport(Protocol):
    """Outbound side of the chat transport."""

    async def post_message(self, channel: str, text: str) -> bool:
        """Post ``text`` to ``channel``; return False if the post failed."""
        ...


def parse_command(text: str) -> Optional[ParsedCommand]:
    """Split raw text into a lowercased keyword and case-preserved args.

    Returns None when the text holds no tokens.
    """
    fields = text.split()
    if not fields:
        return None
    return ParsedCommand(keyword=fields[0].lower(), args=tuple(fields[1:]))


class Dispatcher:
    """Dispatches one message at a time against a fixed command registry."""

    def __init__(self, registry: CommandRegistry, transport: Optional[ChatTransport] = None):
        self.registry = registry
        self.transport = transport

    def route(self, message: InboundMessage) -> Optional[str]:
        """Run the matching handler and return its reply.

        Bot-originated and blank messages produce no reply (None). Unknown
        keywords are answered with the help listing.
        """
        if message.is_bot:
            logger.debug("Ignoring bot message", channel=message.channel)
            return None

        parsed = parse_command(message.text)
        if parsed is None:
            return None

        spec = self.registry.lookup(parsed.keyword)
        if spec is None:
            logger.info(
                f"Unknown command '{parsed.keyword}', showing help",
                user=message.user,
                channel=message.channel,
            )
            spec = self.registry.help
        else:
            logger.info(
                f"Received '{parsed.keyword}' command",
                user=message.user,
                channel=message.channel,
            )

        ctx = CommandContext(args=parsed.args, channel=message.channel, user=message.user)
        try:
            return spec.handler(ctx)
        except Exception:
            logger.exception(f"Command '{spec.keyword}' failed", user=message.user)
            return HANDLER_FAILED

    async def dispatch(self, message: InboundMessage) -> Optional[str]:
        """Route the message and post the reply (if any) to its channel.

        The handler runs in a worker thread so the event loop keeps serving
        the transport while the control plane is queried. A failed post is
        logged by the transport and not retried.
        """
        reply = await asyncio.to_thread(self.route, message)
        if reply is not None and self.transport is not None:
            await self.transport.post_message(message.channel, reply)
        return reply
