"""Shared core type aliases used across contracts, client, and ports."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

PositionalParams = List[Any]
QueryParams = Union[Sequence[Any], None]

ValueMap = Mapping[str, Any]

RowMapping = Dict[str, Optional[str]]
Rows = List[RowMapping]
MaybeRow = Optional[RowMapping]
