from __future__ import annotations

import random
import re

from cardinal.errors import ColorError

MAX_COLOR = 0xFFFFFF

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def parse_hex_color(token: str, max_color: int = MAX_COLOR) -> int:
    """Parse a bare hex string such as ``ff00aa``; ``0x`` prefixes and signs are rejected."""

    if not _HEX_RE.match(token):
        raise ColorError("invalid hex color")
    value = int(token, 16)
    if value > max_color:
        raise ColorError("invalid hex color")
    return value


def random_color(max_color: int = MAX_COLOR, rng: random.Random | None = None) -> int:
    return (rng or random).randint(0, max_color)


def resolve_color(
    token: str | None,
    *,
    max_color: int = MAX_COLOR,
    rng: random.Random | None = None,
) -> int:
    """
    Explicit color when one was given, otherwise a random 24-bit value.

    The result only matters when the role gets created; existing roles keep
    their color.
    """

    if token:
        return parse_hex_color(token, max_color)
    return random_color(max_color, rng)


__all__ = ["MAX_COLOR", "parse_hex_color", "random_color", "resolve_color"]
