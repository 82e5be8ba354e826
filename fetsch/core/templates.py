"""`%token%` placeholder substitution."""

from __future__ import annotations

import re
from typing import Any, Mapping

TOKEN_PATTERN = re.compile(r"%\w+%", re.ASCII)


def str_format(template: str, items: Mapping[str, Any], fallback: Any = None) -> str:
    """Replace `%token%` placeholders with values from `items`.

    Keys in `items` include the delimiters, e.g. `{"%name%": "Me"}`. Each
    token is replaced once; substituted text is not scanned again.

    A token whose value is missing or falsy (`0`, `""`, `False`, `None`) is
    resolved by `fallback`:

    - `None`: replaced with an empty string.
    - `True`: left as the original token.
    - anything else: replaced with the rendered fallback.

    Values are rendered as text; booleans render as `true` / `false`.

    >>> str_format("I am %name% and I'm %age%.", {"%name%": "Me", "%age%": 12})
    "I am Me and I'm 12."
    >>> str_format("Hi %who%!", {}, True)
    'Hi %who%!'
    """

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        value = items.get(token)
        if value:
            return _render(value)
        if fallback is None:
            return ""
        if fallback is True:
            return token
        return _render(fallback)

    return TOKEN_PATTERN.sub(_replace, template)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
