"""Tag command parsing and validation."""

from .parser import ParsedCommand, Polarity, VerbFamily, parse_message
from .validator import Command, ensure_role_exists, validate

__all__ = [
    "ParsedCommand",
    "Polarity",
    "VerbFamily",
    "parse_message",
    "Command",
    "ensure_role_exists",
    "validate",
]
