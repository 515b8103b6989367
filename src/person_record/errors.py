"""Errors raised by the record parser."""

from __future__ import annotations
from enum import Enum


PARSE_ERROR_DETAIL = "parse error"


class PersonRecordError(Exception):
    """Base error for this package."""


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    MALFORMED_INPUT = "malformed_input"


class ParseError(PersonRecordError):
    """Raised when an input string cannot be parsed into a record.

    Every rejection carries the same kind and detail, so callers can only
    tell success from failure.
    """

    def __init__(self, kind: ErrorKind = ErrorKind.MALFORMED_INPUT, detail: str = PARSE_ERROR_DETAIL) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"There is an error: {detail}")
