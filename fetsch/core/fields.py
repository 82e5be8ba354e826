"""Field projection helpers."""

from __future__ import annotations

from typing import Any, Collection, Dict

from .types import RowMapping


def only(fields: Collection[str], source: RowMapping) -> Dict[str, Any]:
    """Return a new dict with the items of `source` whose key is in `fields`.

    Keys listed in `fields` but missing from `source` are skipped. The result
    keeps the key order of `source`.
    """

    return {key: value for key, value in source.items() if key in fields}
