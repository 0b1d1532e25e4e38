"""
Where command results become visible.

Failures go to the log and to the bot's presence line; success clears the
presence. Only ``who`` writes to the channel.
"""

from __future__ import annotations

import logging
from typing import Any

import discord

from cardinal.config import tags
from cardinal.errors import CardinalError, PlatformError

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "command failed"


def status_for(error: BaseException | None) -> str | None:
    if error is None:
        return None
    if isinstance(error, CardinalError):
        return str(error)
    return GENERIC_FAILURE


async def report_outcome(client: Any, error: BaseException | None = None) -> None:
    """Set (or clear, when ``error`` is ``None``) the presence text."""

    if not tags.REPORT_STATUS:
        return

    status = status_for(error)
    activity = discord.Game(name=status) if status else None
    try:
        await client.change_presence(activity=activity)
    except Exception:
        logger.exception("Failed to update presence to %r", status)


async def send_reply(channel: Any, text: str) -> None:
    try:
        await channel.send(text)
    except discord.HTTPException as exc:
        raise PlatformError("channel message send", str(exc)) from exc


__all__ = ["GENERIC_FAILURE", "status_for", "report_outcome", "send_reply"]
