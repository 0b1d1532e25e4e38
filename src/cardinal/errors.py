"""
Failure types raised while interpreting a tag command.

Every error carries a short human-readable reason as its message; that text is
what ends up in the log and in the bot's presence line. Unrecognized messages
are not errors at all: the parser simply yields ``None`` for them.
"""

from __future__ import annotations


class CardinalError(Exception):
    """Base class for reportable command failures."""


class ValidationError(CardinalError):
    """Wrong mention count, missing or extra arguments."""


class RoleNotFoundError(ValidationError):
    """``who`` referenced a role that does not exist in the guild."""

    def __init__(self, role_name: str) -> None:
        super().__init__(f"{role_name} is not an existing role")
        self.role_name = role_name

    @property
    def notice(self) -> str:
        """Text posted back to the channel for this failure."""
        return f"{self.role_name} is not an existing role. `!who` is caps sensitive."


class InvariantError(CardinalError):
    """A matched role is not a plain tag role (permissions or mentionability)."""


class ColorError(CardinalError):
    """Explicit color argument is not a base-16 integer."""


class PlatformError(CardinalError):
    """A Discord API call failed; the original exception is chained as ``__cause__``."""

    def __init__(self, step: str, reason: str) -> None:
        super().__init__(f"{step} failed: {reason}")
        self.step = step


__all__ = [
    "CardinalError",
    "ValidationError",
    "RoleNotFoundError",
    "InvariantError",
    "ColorError",
    "PlatformError",
]
