"""Select/update/delete options: column selection, ordering, and paging."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class QueryOptions:
    """Options accepted by `select`, `update`, and `delete`.

    Attributes:
        column: Single output column. Takes precedence over `columns`.
        columns: Ordered output columns.
        order: Raw `ORDER BY` expression. Trusted input, not escaped.
        limit: Maximum number of rows.
        offset: Rows to skip. Ignored unless `limit` is set.
    """

    column: Optional[str] = None
    columns: Optional[Tuple[str, ...]] = None
    order: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None

    def __post_init__(self) -> None:
        if self.columns is not None and not isinstance(self.columns, tuple):
            if isinstance(self.columns, str):
                raise TypeError("`columns` must be a sequence of names, not a string.")
            object.__setattr__(self, "columns", tuple(self.columns))
        _check_count("limit", self.limit)
        _check_count("offset", self.offset)

    def with_limit_one(self) -> QueryOptions:
        """Return a copy with `limit` forced to 1."""

        return replace(self, limit=1)


OptionsInput = Union[QueryOptions, Mapping[str, Any], None]

_FIELD_NAMES = frozenset(f.name for f in fields(QueryOptions))


def coerce_options(options: OptionsInput) -> QueryOptions:
    """Normalize `None`, a mapping, or `QueryOptions` into `QueryOptions`.

    Raises:
        ValueError: If a mapping contains unknown keys.
    """

    if options is None:
        return QueryOptions()
    if isinstance(options, QueryOptions):
        return options

    unknown = set(options) - _FIELD_NAMES
    if unknown:
        raise ValueError(f"Unknown query options: {sorted(unknown)}")
    return QueryOptions(
        column=options.get("column"),
        columns=options.get("columns"),
        order=options.get("order"),
        limit=options.get("limit"),
        offset=options.get("offset"),
    )


def _check_count(name: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"`{name}` must be an integer, got {type(value).__name__}.")
    if value < 0:
        raise ValueError(f"`{name}` must be >= 0, got {value}.")
