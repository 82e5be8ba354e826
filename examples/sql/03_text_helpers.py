"""Slugs and `%token%` templates."""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "fetsch").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fetsch import slugify, str_format


def main() -> None:
    for title in ("Héllo World!", "Crème Brûlée & Café", "  multiple   spaces  "):
        print(f"{title!r} -> {slugify(title)!r}")

    template = "I am %name% and I'm %age% years old. Ask %contact%."
    items = {"%name%": "Me", "%age%": 12}
    print(str_format(template, items))
    print(str_format(template, items, True))
    print(str_format(template, items, "n/a"))


if __name__ == "__main__":
    main()
