"""Outbound Slack transport: posts replies through the Web API."""

import aiohttp
import structlog
from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

logger = structlog.get_logger(__name__)


class SlackTransport:
    """Posts plain-text (mrkdwn) messages to Slack channels.

    Posting is best effort: failures are logged and reported through the
    return value, never raised and never retried.
    """

    def __init__(self, web_client: AsyncWebClient):
        self.web_client = web_client

    async def post_message(self, channel: str, text: str) -> bool:
        """Post ``text`` to ``channel``.

        Args:
            channel: Slack channel ID
            text: Message body

        Returns:
            True if Slack accepted the message
        """
        try:
            await self.web_client.chat_postMessage(channel=channel, text=text)
        except SlackApiError as e:
            logger.error(f"Slack post failed: {e.response.get('error')}", channel=channel)
            return False
        except aiohttp.ClientError as e:
            logger.error(f"Slack post failed: {e}", channel=channel)
            return False
        return True
