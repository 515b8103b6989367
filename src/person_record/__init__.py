"""Parse "name,age" strings into person records."""

from .errors import ErrorKind, ParseError, PersonRecordError
from .records import FIELD_SEPARATOR, Record, parse_record, render_record

__all__ = [
    "FIELD_SEPARATOR",
    "ErrorKind",
    "ParseError",
    "PersonRecordError",
    "Record",
    "parse_record",
    "render_record",
]
