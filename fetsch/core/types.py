"""Shared core type aliases used across helpers and ports."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Sequence, Tuple, Union

Source = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]
StatementValues = List[Any]
PrimaryKey = Union[str, Sequence[str]]

FieldDefaults = Mapping[str, Any]
RowMapping = Mapping[str, Any]
