"""Slack bot module for Spoticus.

Receives commands over Socket Mode and posts replies through the Web API.
"""

from .bot import SlackBot, run_slack_bot

__all__ = ["SlackBot", "run_slack_bot"]
