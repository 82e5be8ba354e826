"""JSON column codec helpers for DB reads and writes."""

from __future__ import annotations

import copy
import json
from typing import Any, Collection, Dict

import structlog

from .types import FieldDefaults, RowMapping

logger = structlog.get_logger(__name__)


def parse_json_fields(field_defaults: FieldDefaults, data: RowMapping) -> Dict[str, Any]:
    """Decode JSON-encoded columns of one row.

    Args:
        field_defaults: Mapping of JSON column name to the value used when the
            column is empty, `None`, or not valid JSON.
        data: Row as read from the database.

    Returns:
        A new dict with every key of `data`. Listed keys holding text or bytes
        are decoded; values of other types are assumed to be decoded already
        and are copied as they are. Keys of `field_defaults` missing from
        `data` are not added.
    """

    result: Dict[str, Any] = {}
    for key, value in data.items():
        if key in field_defaults:
            value = _deserialize_json(value, default=field_defaults[key], field_name=key)
        result[key] = value
    return result


def dump_json_fields(fields: Collection[str], data: RowMapping) -> Dict[str, Any]:
    """Encode the listed columns of one row as JSON text for DB writes.

    Values that are already text or bytes, and `None`, are left untouched so
    that re-encoding a prepared row is a no-op.
    """

    result: Dict[str, Any] = {}
    for key, value in data.items():
        if key in fields:
            value = _serialize_json(value)
        result[key] = value
    return result


def _deserialize_json(value: Any, *, default: Any, field_name: str) -> Any:
    if value is not None and not isinstance(value, (str, bytes, bytearray, memoryview)):
        return value
    if not value:
        return copy.deepcopy(default)

    try:
        text = value if isinstance(value, str) else bytes(value).decode("utf-8")
        return json.loads(text, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("json_field_parse_failed", field=field_name, error=str(exc))
        return copy.deepcopy(default)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant {name!r}")


def _serialize_json(value: Any) -> Any:
    if value is None or isinstance(value, (str, bytes, bytearray, memoryview)):
        return value
    return json.dumps(value)
