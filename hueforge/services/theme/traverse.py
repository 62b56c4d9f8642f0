"""
Walk a generated theme document and pull out its color values.

Used for QA of serializer output: every string that starts with '#' must be a
well-formed `#RRGGBB` or `#RRGGBBAA` value.
"""

import re
from typing import Any, Dict, Iterator, List, Tuple

THEME_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


def _walk_strings(node: Any, path: str = "") -> Iterator[Tuple[str, str]]:
    if isinstance(node, dict):
        for key, value in node.items():
            child = f"{path}.{key}" if path else str(key)
            yield from _walk_strings(value, child)
    elif isinstance(node, (list, tuple)):
        for i, value in enumerate(node):
            yield from _walk_strings(value, f"{path}[{i}]")
    elif isinstance(node, str):
        yield path, node


def iter_theme_colors(document: Any) -> Iterator[Tuple[str, str]]:
    """
    Yield (path, value) for every color string in a theme document.

    Paths use dots for mapping keys and `key[i]` for list items, e.g.
    `themes[0].style.players[3].cursor`.
    """
    for path, value in _walk_strings(document):
        if THEME_COLOR_RE.match(value):
            yield path, value


def collect_theme_colors(document: Any) -> List[str]:
    """Distinct color values in first-seen order."""
    return list(dict.fromkeys(value for _, value in iter_theme_colors(document)))


def find_invalid_colors(document: Any) -> Dict[str, str]:
    """Return {path: value} for '#'-prefixed strings that are not valid hex colors."""
    return {
        path: value
        for path, value in _walk_strings(document)
        if value.startswith("#") and not THEME_COLOR_RE.match(value)
    }
