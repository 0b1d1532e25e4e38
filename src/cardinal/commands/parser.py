"""
Turn raw chat text into a recognized tag command.

A command is a prefixed verb followed by positional arguments::

    !me artist ff00aa
    !!me artist

The prefix is used twice: once to mark the message as a command and once more,
inside the verb token, to flip a grant into a revoke. Both axes are decoded
here so nothing downstream has to look at the raw verb string again.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "!"

_WHITESPACE_RE = re.compile(r"\s+")


class VerbFamily(str, Enum):
    ME = "me"
    EM = "em"
    WHO = "who"


class Polarity(str, Enum):
    GRANT = "grant"
    REVOKE = "revoke"


@dataclass(frozen=True)
class ParsedCommand:
    """Recognized verb plus the unparsed argument tokens."""

    family: VerbFamily
    polarity: Polarity
    args: tuple[str, ...]


def normalize_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text)


def tokenize(text: str) -> list[str]:
    return [token for token in normalize_whitespace(text).split(" ") if token]


def decode_verb(raw_verb: str, prefix: str = DEFAULT_PREFIX) -> tuple[VerbFamily, Polarity] | None:
    """
    Map a verb token (already stripped of the command prefix) to its family and
    polarity. Matching is case-sensitive; unknown verbs return ``None``.
    """

    polarity = Polarity.GRANT
    if raw_verb.startswith(prefix):
        polarity = Polarity.REVOKE
        raw_verb = raw_verb[len(prefix):]

    try:
        family = VerbFamily(raw_verb)
    except ValueError:
        return None
    return family, polarity


def parse_message(
    content: str,
    *,
    author_is_bot: bool = False,
    prefix: str = DEFAULT_PREFIX,
) -> ParsedCommand | None:
    """
    Parse ``content`` into a :class:`ParsedCommand`.

    Unprefixed messages from humans are ignored without logging. Bot-authored
    messages are always inspected; they only become commands when their first
    token decodes to a known verb.
    """

    if not content.startswith(prefix) and not author_is_bot:
        return None

    tokens = tokenize(content)
    if not tokens:
        return None

    head, args = tokens[0], tokens[1:]
    raw_verb = head[len(prefix):].strip()
    if not raw_verb:
        return None

    decoded = decode_verb(raw_verb, prefix)
    if decoded is None:
        logger.info("Valid command not detected in message: %s", content)
        return None

    family, polarity = decoded
    return ParsedCommand(family=family, polarity=polarity, args=tuple(args))


__all__ = [
    "DEFAULT_PREFIX",
    "VerbFamily",
    "Polarity",
    "ParsedCommand",
    "normalize_whitespace",
    "tokenize",
    "decode_verb",
    "parse_message",
]
