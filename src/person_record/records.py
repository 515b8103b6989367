"""Comma-delimited person record parsing.

A "record" is a single string with a tiny schema:
    <name>,<age>

Example:
    John,32

Design notes:
- Strict: exactly one separator, a non-empty name, an age made of ASCII
  digits only.
- Nothing is trimmed. " John,32" keeps the leading space in the name and
  "John, 32" is rejected.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from .errors import ParseError


logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","

_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Record:
    name: str
    age: int

    @classmethod
    def parse(cls, text: str) -> Record:
        """Build a Record from its string form. See parse_record."""
        return parse_record(text)


def _reject(reason: str, text: str) -> ParseError:
    logger.debug("rejected %r: %s", text, reason)
    return ParseError()


def _parse_age(raw: str) -> int | None:
    # int() alone would accept whitespace, signs, underscores and non-ASCII digits
    if not raw or not _DIGITS.issuperset(raw):
        return None
    return int(raw)


def parse_record(text: str) -> Record:
    """Parse one string into a Record.

    Raises:
        ParseError: if the string is malformed.
    """
    if not text:
        raise _reject("empty input", text)

    parts = text.split(FIELD_SEPARATOR)
    if len(parts) != 2:
        raise _reject(f"expected 2 fields separated by {FIELD_SEPARATOR!r}, got {len(parts)}", text)

    name, raw_age = parts
    if not name:
        raise _reject("empty name", text)

    age = _parse_age(raw_age)
    if age is None:
        raise _reject(f"invalid age {raw_age!r}", text)

    return Record(name=name, age=age)


def render_record(r: Record) -> str:
    """Render a Record back to its string form."""
    return f"{r.name}{FIELD_SEPARATOR}{r.age}"
