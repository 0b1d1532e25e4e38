from __future__ import annotations

import logging
from typing import Any, Iterable

import discord

from cardinal.errors import PlatformError
from cardinal.roles.registry import AUDIT_REASON, delete_if_empty

logger = logging.getLogger(__name__)


async def resolve_member(guild: Any, user: Any) -> Any:
    """Return the guild member behind ``user`` (mentions may arrive as plain users)."""

    if getattr(user, "roles", None) is not None:
        return user

    member = guild.get_member(user.id)
    if member is not None:
        return member

    try:
        return await guild.fetch_member(user.id)
    except discord.HTTPException as exc:
        raise PlatformError("member lookup", str(exc)) from exc


async def grant(member: Any, role: Any) -> None:
    """Add ``role`` to ``member``. Granting a role already held is a no-op on Discord's side."""

    try:
        await member.add_roles(role, reason=AUDIT_REASON)
    except discord.HTTPException as exc:
        raise PlatformError("member role add", str(exc)) from exc
    logger.info("Added %s to role %s", member.name, role.name)


async def revoke(member: Any, role: Any, members: Iterable[Any]) -> bool:
    """
    Remove ``role`` from ``member`` and delete the role if that emptied it.

    The revoke is not undone when the cleanup delete fails; the error is raised
    with the membership already changed. Returns whether the role was deleted.
    """

    try:
        await member.remove_roles(role, reason=AUDIT_REASON)
    except discord.HTTPException as exc:
        raise PlatformError("member role remove", str(exc)) from exc
    logger.info("Removed %s from role %s", member.name, role.name)

    return await delete_if_empty(role, members, revoked=member)


__all__ = ["resolve_member", "grant", "revoke"]
