"""Accessor-path fragments for inspected members.

Joining the fragment of a node to the fragments of its ancestors gives a
readable path expression, e.g. ``$page->items[0]['display name']``.
"""

import re
from typing import Any

from .schemas import ParentKind

_INDEX_TEXT = re.compile(r"[0-9]+")


class InvalidAccessorKind(ValueError):
    """Raised when an accessor is requested for an unsupported parent kind."""


def is_index_key(key: Any) -> bool:
    """Non-negative ints and integer-looking strings such as JSON keys."""
    if isinstance(key, str):
        return _INDEX_TEXT.fullmatch(key) is not None
    return isinstance(key, int) and not isinstance(key, bool) and key >= 0


def build_accessor(parent_kind: ParentKind, key: Any, depth: int) -> str:
    """Build the accessor fragment of a member.

    Args:
        parent_kind: Kind of the container holding the member
        key: Member name, mapping key or position
        depth: Nesting depth of the member (0 = top-level variable)

    Returns:
        Plain-text fragment; callers escape it for HTML

    Raises:
        InvalidAccessorKind: If parent_kind is not composite or collection
    """
    if depth == 0:
        return f"${key}"

    if parent_kind == ParentKind.COMPOSITE:
        return f"->{key}"

    if parent_kind == ParentKind.COLLECTION:
        if is_index_key(key):
            return f"[{key}]"
        text = str(key)
        if any(ch.isspace() for ch in text):
            return f"['{text}']"
        return f".{text}"

    raise InvalidAccessorKind(f"Invalid accessor type: {parent_kind!r}")
