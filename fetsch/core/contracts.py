"""Core port contracts used by statement builders."""

from __future__ import annotations

from typing import Protocol


class DialectPort(Protocol):
    """Dialect behavior required by statement assembly."""

    paramstyle: str

    def q(self, ident: str) -> str: ...

    def placeholder(self, key: str) -> str: ...
