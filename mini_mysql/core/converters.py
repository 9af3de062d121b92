"""Conversions for the textual column values returned by `Client.select`."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from .errors import ParseError

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"
UINT32_MAX = 2**32 - 1

_DATETIME_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{3}")
_UINT_RE = re.compile(r"\+?[0-9]+")


def parse_datetime(value: Any) -> datetime:
    """Parse a `YYYY-MM-DD HH:MM:SS.mmm` string into a naive `datetime`.

    Raises:
        ParseError: If the value is not text in exactly that format.

    Example:
        >>> parse_datetime("2024-03-01 12:30:05.250")
        datetime.datetime(2024, 3, 1, 12, 30, 5, 250000)
    """

    text = _as_text(value)
    if not _DATETIME_RE.fullmatch(text):
        raise ParseError(f"Invalid datetime {text!r}; expected YYYY-MM-DD HH:MM:SS.mmm.")
    try:
        return datetime.strptime(text, DATETIME_FORMAT)
    except ValueError as exc:
        raise ParseError(f"Invalid datetime {text!r}: {exc}.") from exc


def parse_uint32(value: Any) -> int:
    """Parse decimal text into an unsigned 32-bit integer.

    Raises:
        ParseError: If the value is not decimal text or is out of range.
    """

    text = _as_text(value)
    if not _UINT_RE.fullmatch(text):
        raise ParseError(f"Invalid unsigned integer {text!r}.")
    number = int(text)
    if number > UINT32_MAX:
        raise ParseError(f"Integer {text!r} is out of range for uint32.")
    return number


def _as_text(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("ascii", errors="replace")
    if isinstance(value, str):
        return value
    raise ParseError(f"Expected text value, got {type(value).__name__}.")
