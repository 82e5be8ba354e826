"""URL slug normalization."""

from __future__ import annotations

import re
from typing import Any

_ACCENTED = "àáâäæãåāăąçćčđďèéêëēėęěğǵḧîïíīįìłḿñńǹňôöòóœøōõőṕŕřßśšşșťțûüùúūǘůűųẃẍÿýžźż·/_,:;"
_PLAIN = "aaaaaaaaaacccddeeeeeeeegghiiiiiilmnnnnoooooooooprrsssssttuuuuuuuuuwxyyzzz------"

SLUG_TRANSLITERATION = str.maketrans(_ACCENTED, _PLAIN)

_WHITESPACE = re.compile(r"\s+")
_NON_WORD = re.compile(r"[^\w\-]+", re.ASCII)
_HYPHEN_RUN = re.compile(r"-{2,}")


def slugify(text: Any) -> str:
    """Normalize arbitrary text into a lowercase, hyphenated, URL-safe slug.

    The steps run in a fixed order: lowercase, whitespace runs to `-`,
    transliteration through `SLUG_TRANSLITERATION`, `&` to `-and-`, removal
    of anything that is not an ASCII word character or `-`, then collapsing
    and trimming of hyphens.

    >>> slugify("Héllo World!")
    'hello-world'
    >>> slugify("Tom & Jerry")
    'tom-and-jerry'
    """

    if text is None:
        return ""

    slug = str(text).lower()
    slug = _WHITESPACE.sub("-", slug)
    slug = slug.translate(SLUG_TRANSLITERATION)
    slug = slug.replace("&", "-and-")
    slug = _NON_WORD.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.lstrip("-").rstrip("-")
