"""Tests for the Jinja2 binding."""

from __future__ import annotations

import pytest
from jinja2 import Environment, TemplateRuntimeError, pass_context

from tplvars.plugins.jinja_functions import collect_template_vars, register_template_functions


@pytest.fixture
def env() -> Environment:
    return register_template_functions(Environment())


def test_register_installs_globals(env: Environment) -> None:
    assert "get_template_vars" in env.globals
    assert "get_template_vars_about" in env.globals


def test_dumps_render_variables(env: Environment) -> None:
    out = env.from_string("{{ get_template_vars() }}").render(x=5, y=[1, "a b"])
    assert "$x <em>(int)</em> = 5<br/>" in out
    assert "$y <em>(array)</em> = [<br/>" in out
    assert "$range" not in out
    assert "$get_template_vars" not in out


def test_no_variables_placeholder(env: Environment) -> None:
    out = env.from_string("{{ get_template_vars() }}").render()
    assert "No template variables found." in out


def test_template_set_variables_are_visible(env: Environment) -> None:
    out = env.from_string("{% set title = 'Home' %}{{ get_template_vars() }}").render()
    assert "$title <em>(string)</em> = Home<br/>" in out


def test_overridden_global_is_dumped(env: Environment) -> None:
    out = env.from_string("{{ get_template_vars() }}").render(range="shadowed")
    assert "$range <em>(string)</em> = shadowed" in out


def test_autoescape_does_not_double_escape() -> None:
    env = register_template_functions(Environment(autoescape=True))
    out = env.from_string("{{ get_template_vars() }}").render(payload="<script>")
    assert "&lt;script&gt;" in out
    assert "&amp;lt;" not in out


def test_maxdepth_param(env: Environment) -> None:
    out = env.from_string("{{ get_template_vars(maxdepth=1) }}").render(v=[[1]])
    assert "(max depth reached)" in out


def test_style_param(env: Environment) -> None:
    out = env.from_string('{{ get_template_vars(style="color:red;") }}').render(x=1)
    assert out.startswith('<pre style="color:red;">')


def test_assign_exports_dump_and_prints_nothing(env: Environment) -> None:
    template = env.from_string("{{ get_template_vars(assign='dump') }}")
    module = template.make_module({"x": 5})
    assert str(module) == ""
    assert "$x <em>(int)</em> = 5" in module.dump


def test_collect_template_vars_skips_globals(env: Environment) -> None:
    captured: dict = {}

    @pass_context
    def grab(context):
        captured.update(collect_template_vars(context))
        return ""

    env.globals["grab"] = grab
    env.from_string("{{ grab() }}").render(a=1)
    assert captured == {"a": 1}


def test_about_page(env: Environment) -> None:
    out = env.from_string("{{ get_template_vars_about() }}").render()
    assert "<strong>Version:</strong> 3.0" in out
    assert "{{ get_template_vars(maxdepth=5) }}" in out


def test_assign_to_namespace_is_readable_in_same_template(env: Environment) -> None:
    template = env.from_string(
        "{% set ns = namespace() %}{{ get_template_vars(assign='ns.dump') }}[{{ ns.dump }}]"
    )
    out = template.render(x=5)
    assert out.startswith("[<pre ")
    assert "$x <em>(int)</em> = 5<br/>" in out
    assert out.endswith("</pre>]")


def test_set_block_captures_dump_in_same_template(env: Environment) -> None:
    out = env.from_string("{% set dbg = get_template_vars() %}[{{ dbg }}]").render(x=5)
    assert "$x <em>(int)</em> = 5<br/>" in out
    assert out.startswith("[<pre ")


def test_assign_to_missing_namespace_raises(env: Environment) -> None:
    with pytest.raises(TemplateRuntimeError):
        env.from_string("{{ get_template_vars(assign='nope.dump') }}").render(x=5)
