from __future__ import annotations

from typing import Any, Iterable, List

from cardinal.errors import InvariantError
from cardinal.roles.registry import holds_role


def role_holders(members: Iterable[Any], role: Any) -> List[str]:
    """Usernames holding ``role``, in guild member order."""

    return [member.name for member in members if holds_role(member, role)]


def format_role_members(role_name: str, usernames: Iterable[str]) -> str:
    lines = [f"User(s) in role {role_name}:"]
    lines.extend(usernames)
    return "\n".join(lines) + "\n"


def list_members(role: Any, members: Iterable[Any]) -> str:
    if not role.mentionable:
        raise InvariantError(f"{role.name} is not mentionable")
    return format_role_members(role.name, role_holders(members, role))


__all__ = ["role_holders", "format_role_members", "list_members"]
