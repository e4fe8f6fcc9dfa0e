"""Recursive HTML renderer for inspected values.

Each node becomes one line: indentation, accessor path, type annotation and
value. Composites and collections open a block, render their children one
level deeper and close it. Recursion is bounded by depth only; shared or
cyclic structures are re-rendered until the depth guard stops them.
"""

from typing import Any, Optional

from markupsafe import Markup, escape

from tplvars import config

from .accessor import build_accessor
from .classify import (
    callable_kind,
    classify_value,
    collection_elements,
    composite_members,
    leaf_text,
    qualified_name,
    type_label,
)
from .schemas import LINE_BREAK, ParentKind, RenderContext, ValueKind


def write_node(
    out: list[str],
    key: Any,
    value: Any,
    parent_kind: Optional[ParentKind],
    depth: int,
    context: RenderContext,
) -> None:
    """Append the fragments of one node (and its children) to out.

    Args:
        out: Output buffer owned by the current walk
        key: Name, attribute or key under which the value was reached
        value: Value to render
        parent_kind: Kind of the containing value (None for top-level)
        depth: Nesting depth of this node
        context: Walk configuration
    """
    indent = context.indent(depth)

    if depth > context.max_depth:
        out.append(f"{indent}{escape(str(key))} <em>(max depth reached)</em>{LINE_BREAK}")
        return

    kind = classify_value(value)
    accessor = escape(build_accessor(parent_kind or ParentKind.COLLECTION, key, depth))

    if kind is ValueKind.COMPOSITE:
        class_name = escape(qualified_name(type(value)))
        out.append(f"{indent}{accessor} <em>(object: {class_name})</em> = {{")
        members = composite_members(value)
        if not members:
            out.append(f"}}{LINE_BREAK}")
            return
        out.append(LINE_BREAK)
        for member_key, member_value in members:
            write_node(out, member_key, member_value, ParentKind.COMPOSITE, depth + 1, context)
        out.append(f"{indent}}}{LINE_BREAK}")

    elif kind is ValueKind.COLLECTION:
        out.append(f"{indent}{accessor} <em>({escape(type_label(value))})</em> = [")
        elements = collection_elements(value)
        if not elements:
            out.append(f"]{LINE_BREAK}")
            return
        out.append(LINE_BREAK)
        for element_key, element_value in elements:
            write_node(out, element_key, element_value, ParentKind.COLLECTION, depth + 1, context)
        out.append(f"{indent}]{LINE_BREAK}")

    elif kind is ValueKind.CALLABLE:
        out.append(f"{indent}{accessor} <em>(callable: {callable_kind(value)})</em>{LINE_BREAK}")

    else:
        text = escape(leaf_text(value))
        out.append(f"{indent}{accessor} <em>({escape(type_label(value))})</em> = {text}{LINE_BREAK}")


def render_value(
    key: Any,
    value: Any,
    parent_kind: Optional[ParentKind] = None,
    depth: int = 0,
    max_depth: int = config.MAX_DEPTH_LIMIT,
) -> Markup:
    """Render a single value as an HTML fragment.

    Returns:
        Markup safe to embed in an HTML page

    Raises:
        ValueError: If depth is negative
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")

    context = RenderContext(max_depth=max_depth)
    out: list[str] = []
    write_node(out, key, value, parent_kind, depth, context)
    return Markup("".join(out))
