"""Tagged SQL value variants for condition and data maps.

Raw Python values are classified once, at the boundary, into one of four
variants. Fragment compilation then dispatches on the variant instead of
inspecting arbitrary runtime types.
"""

from __future__ import annotations

import json
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union


@dataclass(frozen=True)
class Null:
    """SQL `NULL`. Compiles to `IS NULL` / `= NULL` without a placeholder."""


@dataclass(frozen=True)
class Scalar:
    """A value bound verbatim to one placeholder."""

    value: Any


@dataclass(frozen=True)
class InList:
    """An ordered sequence of scalars used for `IN(...)` membership."""

    items: Tuple[Any, ...]


@dataclass(frozen=True)
class Structured:
    """A nested mapping stored as its compact JSON text."""

    value: Mapping[str, Any]

    def encode(self) -> str:
        """Return the canonical JSON encoding (sorted keys, no whitespace)."""

        return encode_json(self.value)


SqlValue = Union[Null, Scalar, InList, Structured]

NULL = Null()


def sql_value(raw: Any) -> SqlValue:
    """Classify one raw Python value into its `SqlValue` variant.

    Already-tagged values are returned unchanged. `list` and `tuple` become
    `InList`, any `Mapping` becomes `Structured`, and everything else
    (including `str` and `bytes`) is a `Scalar`.
    """

    if isinstance(raw, (Null, Scalar, InList, Structured)):
        return raw
    if raw is None:
        return NULL
    if isinstance(raw, (list, tuple)):
        return InList(tuple(raw))
    if isinstance(raw, MappingABC):
        return Structured(raw)
    return Scalar(raw)


def bind_value(value: SqlValue) -> Any:
    """Return the parameter bound for a single-placeholder assignment."""

    if isinstance(value, Scalar):
        return value.value
    if isinstance(value, Structured):
        return value.encode()
    if isinstance(value, InList):
        return encode_json(list(value.items))
    raise TypeError("NULL values do not bind a parameter.")


def encode_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, default=str)
