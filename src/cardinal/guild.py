"""Per-command view of the guild a message came from."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import discord

from cardinal.errors import PlatformError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuildSnapshot:
    """
    Roles and members captured once per command.

    The live guild keeps changing while a command runs (a role created a moment
    ago, a member just revoked), so every scan in a command reads this copy.
    """

    guild: Any
    roles: tuple[Any, ...]
    members: tuple[Any, ...]

    @classmethod
    def capture(cls, guild: Any) -> "GuildSnapshot":
        return cls(guild=guild, roles=tuple(guild.roles), members=tuple(guild.members))


async def get_guild(client: Any, message: Any) -> Any:
    """Guild of ``message``, falling back to a channel lookup by id."""

    guild = getattr(message, "guild", None)
    if guild is not None:
        return guild

    channel_id = message.channel.id
    channel = client.get_channel(channel_id)
    if channel is None:
        try:
            channel = await client.fetch_channel(channel_id)
        except discord.HTTPException as exc:
            raise PlatformError("guild lookup", "unable to fetch guild") from exc

    guild = getattr(channel, "guild", None)
    if guild is None:
        logger.debug("Channel %s has no guild context", channel_id)
        raise PlatformError("guild lookup", "unable to fetch guild")
    return guild


__all__ = ["GuildSnapshot", "get_guild"]
