"""Top-level inspector invocation.

Renders a mapping of named values as depth-0 nodes inside a styled
<pre> container, then either returns the markup or hands it to an
assignment callback supplied by the host.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from markupsafe import Markup, escape

from .renderer import write_node
from .schemas import InspectorOptions, RenderContext

logger = logging.getLogger(__name__)

NO_VARIABLES = "<em>No template variables found.</em>"

Assigner = Callable[[str, Markup], None]


def inspect_variables(
    variables: Mapping[str, Any],
    options: Optional[InspectorOptions] = None,
    assign: Optional[Assigner] = None,
) -> Optional[Markup]:
    """Dump named values as an HTML tree.

    Args:
        variables: Name -> value mapping supplied by the host
        options: Depth, style and assignment options (default: InspectorOptions())
        assign: Callback storing a named variable, used when options.assign is set

    Returns:
        The dump, or None when it was assigned to options.assign

    Raises:
        TypeError: If variables is not a mapping
        ValueError: If options.assign is set but no assign callback was given
    """
    if not isinstance(variables, Mapping):
        raise TypeError(f"Expected a mapping of variables, got {type(variables).__name__}")

    options = options or InspectorOptions()
    context = RenderContext(max_depth=options.max_depth)

    out: list[str] = [f'<pre style="{escape(options.style)}">']
    if not variables:
        out.append(NO_VARIABLES)
    else:
        for name, value in list(variables.items()):
            write_node(out, name, value, None, 0, context)
    out.append("</pre>")
    result = Markup("".join(out))

    logger.debug(f"Rendered {len(variables)} variables (max_depth={options.max_depth}, {len(result)} chars)")

    if options.assign:
        if assign is None:
            raise ValueError(f"Cannot assign dump to '{options.assign}': no assign callback given")
        assign(options.assign, result)
        return None

    return result
