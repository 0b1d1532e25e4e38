"""
Look up, lazily create and clean up tag roles.

A tag role is a plain label: no permission bits and mentionable. Any role
matching a requested name but failing that check (a moderator role that
happens to be called ``artist``, say) is reported and left alone.

Creating a role takes two API calls, create then edit. They are not atomic: if
the edit fails the bare role stays behind and the failure is reported as is.
Two commands racing on the same new name can also both miss the lookup and
create duplicates; the Discord API offers nothing to guard against that.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

import discord

from cardinal.errors import InvariantError, PlatformError, RoleNotFoundError

logger = logging.getLogger(__name__)

AUDIT_REASON = "tag role command"


def find_role(roles: Iterable[Any], name: str) -> Any | None:
    """Exact, case-sensitive name match."""

    for role in roles:
        if role.name == name:
            return role
    return None


def check_tag_role(role: Any) -> Any:
    if role.permissions.value != 0:
        raise InvariantError(f"{role.name} has invalid permissions")
    if not role.mentionable:
        raise InvariantError(f"{role.name} is not mentionable")
    return role


async def create_tag_role(guild: Any, name: str, color: int) -> Any:
    try:
        role = await guild.create_role(reason=AUDIT_REASON)
    except discord.HTTPException as exc:
        raise PlatformError("role create", str(exc)) from exc

    try:
        edited = await role.edit(
            name=name,
            colour=discord.Colour(color),
            permissions=discord.Permissions.none(),
            mentionable=True,
            reason=AUDIT_REASON,
        )
    except discord.HTTPException as exc:
        logger.warning("Role %s was created but could not be configured as %s", role.id, name)
        raise PlatformError("role edit", str(exc)) from exc

    logger.info("Created tag role %s (color #%06x) in guild %s", name, color, guild.id)
    return edited or role


async def fetch_or_create_role(
    guild: Any, roles: Iterable[Any], name: str, color: int
) -> tuple[Any, bool]:
    """
    Return ``(role, created)`` for ``name``.

    ``roles`` is the snapshot taken at the start of the command; ``color`` is
    only applied to a newly created role.
    """

    role = find_role(roles, name)
    if role is not None:
        return check_tag_role(role), False
    return await create_tag_role(guild, name, color), True


def fetch_existing_role(roles: Iterable[Any], name: str) -> Any:
    """Checked tag role for ``name``; revokes never create roles."""

    role = find_role(roles, name)
    if role is None:
        raise RoleNotFoundError(name)
    return check_tag_role(role)


def holds_role(member: Any, role: Any) -> bool:
    return any(r.id == role.id for r in member.roles)


def role_has_members(members: Iterable[Any], role: Any, *, exclude: Any = None) -> bool:
    excluded_id = getattr(exclude, "id", None)
    for member in members:
        if excluded_id is not None and member.id == excluded_id:
            continue
        if holds_role(member, role):
            return True
    return False


async def delete_if_empty(role: Any, members: Iterable[Any], *, revoked: Any = None) -> bool:
    """
    Delete ``role`` when nobody besides ``revoked`` still holds it.

    ``members`` predates the revoke, hence the exclusion. Returns whether the
    role was deleted.
    """

    if role_has_members(members, role, exclude=revoked):
        return False

    try:
        await role.delete(reason=AUDIT_REASON)
    except discord.HTTPException as exc:
        raise PlatformError("role delete", str(exc)) from exc

    logger.info("Deleted empty tag role %s", role.name)
    return True


__all__ = [
    "AUDIT_REASON",
    "find_role",
    "check_tag_role",
    "create_tag_role",
    "fetch_or_create_role",
    "fetch_existing_role",
    "holds_role",
    "role_has_members",
    "delete_if_empty",
]
