"""
Argument and mention contracts for each verb family.

| verb | mentions | args                          |
|------|----------|-------------------------------|
| me   | 0        | role [color]                  |
| em   | 1        | <unused> role [color]         |
| who  | 0        | role (exactly one)            |

Validation happens before anything touches the guild, so a rejected command
never has side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from cardinal.commands.parser import ParsedCommand, Polarity, VerbFamily
from cardinal.errors import RoleNotFoundError, ValidationError
from cardinal.roles.registry import find_role


@dataclass(frozen=True)
class Command:
    family: VerbFamily
    polarity: Polarity
    role_name: str
    color: str | None = None
    target: Any = None

    @property
    def is_revoke(self) -> bool:
        return self.polarity is Polarity.REVOKE


def _validate_me(parsed: ParsedCommand, author: Any, mentions: Sequence[Any]) -> Command:
    if mentions:
        raise ValidationError("unexpected mentions")
    if len(parsed.args) < 1:
        raise ValidationError("not enough args")

    color = parsed.args[1] if len(parsed.args) >= 2 else None
    return Command(parsed.family, parsed.polarity, parsed.args[0], color, author)


def _validate_em(parsed: ParsedCommand, author: Any, mentions: Sequence[Any]) -> Command:
    if len(mentions) != 1:
        raise ValidationError("invalid number of mentions")
    if len(parsed.args) < 2:
        raise ValidationError("not enough args")

    # args[0] is the mention token itself; it is resolved through ``mentions``.
    color = parsed.args[2] if len(parsed.args) >= 3 else None
    return Command(parsed.family, parsed.polarity, parsed.args[1], color, mentions[0])


def _validate_who(parsed: ParsedCommand, author: Any, mentions: Sequence[Any]) -> Command:
    if parsed.polarity is Polarity.REVOKE:
        raise ValidationError("who cannot be revoked")
    if mentions:
        raise ValidationError("invalid number of mentions")
    if len(parsed.args) < 1:
        raise ValidationError("not enough args")
    if len(parsed.args) > 1:
        raise ValidationError("too many args")

    return Command(parsed.family, parsed.polarity, parsed.args[0], None, author)


_VALIDATORS = {
    VerbFamily.ME: _validate_me,
    VerbFamily.EM: _validate_em,
    VerbFamily.WHO: _validate_who,
}


def validate(parsed: ParsedCommand, author: Any, mentions: Sequence[Any]) -> Command:
    """Check ``parsed`` against its verb's contract and build a :class:`Command`."""

    return _VALIDATORS[parsed.family](parsed, author, list(mentions))


def ensure_role_exists(command: Command, roles: Iterable[Any]) -> Any:
    """Return the role ``who`` refers to; ``who`` never creates one."""

    role = find_role(roles, command.role_name)
    if role is None:
        raise RoleNotFoundError(command.role_name)
    return role


__all__ = ["Command", "validate", "ensure_role_exists"]
