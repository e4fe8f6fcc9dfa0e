"""Jinja2 binding for the template variable inspector.

Usage:
    env = Environment()
    register_template_functions(env)
    env.from_string("{{ get_template_vars(maxdepth=5) }}").render(page=page)
"""

import logging
from typing import Any

from jinja2 import Environment, TemplateRuntimeError, pass_context
from jinja2.runtime import Context
from jinja2.utils import Namespace
from markupsafe import Markup

from tplvars.inspector.invocation import Assigner, inspect_variables
from tplvars.inspector.schemas import InspectorOptions

from .about import render_about

logger = logging.getLogger(__name__)

PLUGIN_KEY = "get_template_vars"


def collect_template_vars(context: Context) -> dict[str, Any]:
    """Variables visible to the template, minus the environment's own globals."""
    env_globals = context.environment.globals
    return {
        name: value
        for name, value in context.get_all().items()
        if not (name in env_globals and env_globals[name] is value)
    }


def _context_assigner(context: Context) -> Assigner:
    """Store the dump for the calling template.

    "ns.attr" writes into a namespace() declared at the template top level,
    readable later in the same template. A plain name is exported the way a
    top-level {% set %} does, visible to importing templates and make_module().
    """
    def assign(name: str, value: Markup) -> None:
        if "." in name:
            ns_name, _, attr = name.partition(".")
            target = context.get(ns_name)
            if not isinstance(target, Namespace) or not attr:
                raise TemplateRuntimeError(f"Cannot assign to '{name}': '{ns_name}' is not a namespace")
            target[attr] = value
            return
        context.vars[name] = value
        if not name.startswith("_"):
            context.exported_vars.add(name)
    return assign


@pass_context
def get_template_vars(context: Context, **params: Any) -> Markup:
    """Dump the calling template's variables.

    Accepted params: assign, maxdepth, style. When assign is given nothing
    is printed; use assign="ns.dump" with a namespace() to read the dump in
    the same template, or {% set dump = get_template_vars() %}.
    """
    options = InspectorOptions.from_params(params)
    variables = collect_template_vars(context)
    result = inspect_variables(variables, options, assign=_context_assigner(context))
    if result is None:
        logger.debug(f"Assigned template variable dump to '{options.assign}'")
        return Markup("")
    return result


def get_template_vars_about() -> Markup:
    """About page of get_template_vars."""
    return render_about(PLUGIN_KEY)


def register_template_functions(env: Environment) -> Environment:
    """Install the inspector functions as globals of a Jinja2 environment."""
    env.globals[PLUGIN_KEY] = get_template_vars
    env.globals[f"{PLUGIN_KEY}_about"] = get_template_vars_about
    return env
