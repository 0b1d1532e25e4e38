"""
Message -> command -> role change pipeline.

Each call is self-contained: no state survives between messages, so the
gateway can run any number of these concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from cardinal.commands import (
    Command,
    VerbFamily,
    ensure_role_exists,
    parse_message,
    validate,
)
from cardinal.config import tags
from cardinal.errors import RoleNotFoundError
from cardinal.guild import GuildSnapshot, get_guild
from cardinal.reporting import send_reply
from cardinal.roles.color import resolve_color
from cardinal.roles.listing import list_members
from cardinal.roles.membership import grant, resolve_member, revoke
from cardinal.roles.registry import fetch_existing_role, fetch_or_create_role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    command: Command
    reply: str | None = None
    created: bool = False
    deleted: bool = False


async def _list(message: Any, command: Command, snapshot: GuildSnapshot) -> Outcome:
    try:
        role = ensure_role_exists(command, snapshot.roles)
    except RoleNotFoundError as exc:
        await send_reply(message.channel, exc.notice)
        raise

    reply = list_members(role, snapshot.members)
    await send_reply(message.channel, reply)
    return Outcome(command, reply=reply)


async def _mutate(command: Command, snapshot: GuildSnapshot) -> Outcome:
    color = resolve_color(command.color, max_color=tags.MAX_COLOR)

    if command.is_revoke:
        role = fetch_existing_role(snapshot.roles, command.role_name)
        member = await resolve_member(snapshot.guild, command.target)
        deleted = await revoke(member, role, snapshot.members)
        return Outcome(command, deleted=deleted)

    # No role is created for a target that cannot be resolved.
    member = await resolve_member(snapshot.guild, command.target)
    role, created = await fetch_or_create_role(
        snapshot.guild, snapshot.roles, command.role_name, color
    )
    await grant(member, role)
    return Outcome(command, created=created)


async def execute(client: Any, message: Any) -> Outcome | None:
    """
    Run the tag command carried by ``message``.

    Returns ``None`` for messages that are not commands and raises a
    :class:`~cardinal.errors.CardinalError` subclass on failure.
    """

    parsed = parse_message(
        message.content,
        author_is_bot=bool(getattr(message.author, "bot", False)),
        prefix=tags.COMMAND_PREFIX,
    )
    if parsed is None:
        return None

    logger.debug("Parsed %s/%s with args %s", parsed.family.value, parsed.polarity.value, parsed.args)
    command = validate(parsed, message.author, message.mentions)
    snapshot = GuildSnapshot.capture(await get_guild(client, message))

    if command.family is VerbFamily.WHO:
        return await _list(message, command, snapshot)
    return await _mutate(command, snapshot)


__all__ = ["Outcome", "execute"]
