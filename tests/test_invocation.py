"""Tests for tplvars.inspector.invocation and InspectorOptions."""

from __future__ import annotations

import pytest
from markupsafe import escape

from tplvars import config
from tplvars.inspector.invocation import NO_VARIABLES, inspect_variables
from tplvars.inspector.schemas import InspectorOptions


def test_end_to_end_sample(plain_lines) -> None:
    out = inspect_variables({"x": 5, "y": [1, "a b"]}, InspectorOptions(max_depth=10))
    assert plain_lines(out) == [
        "$x (int) = 5",
        "$y (array) = [",
        "   [0] (int) = 1",
        "   [1] (string) = a b",
        "]",
    ]


def test_output_is_wrapped_in_styled_pre() -> None:
    out = inspect_variables({"x": 1})
    assert out.startswith(f'<pre style="{escape(config.DEFAULT_STYLE)}">$x ')
    assert out.endswith("<br/></pre>")


def test_empty_mapping_placeholder() -> None:
    out = inspect_variables({}, InspectorOptions(style="color:red;"))
    assert out == f'<pre style="color:red;">{NO_VARIABLES}</pre>'


def test_style_is_escaped() -> None:
    out = inspect_variables({}, InspectorOptions(style='"><script>alert(1)</script>'))
    assert "<script>" not in out
    assert out.startswith('<pre style="&#34;&gt;&lt;script&gt;')


def test_max_depth_option_is_applied() -> None:
    out = inspect_variables({"v": [[1]]}, InspectorOptions(max_depth=1))
    assert "(max depth reached)" in out


def test_assign_hands_result_to_callback() -> None:
    assigned: dict = {}
    result = inspect_variables(
        {"x": 5},
        InspectorOptions(assign="debug_info"),
        assign=lambda name, value: assigned.__setitem__(name, value),
    )
    assert result is None
    assert list(assigned) == ["debug_info"]
    assert "$x <em>(int)</em> = 5" in assigned["debug_info"]


def test_assign_without_callback_raises() -> None:
    with pytest.raises(ValueError):
        inspect_variables({"x": 5}, InspectorOptions(assign="dump"))


def test_non_mapping_rejected() -> None:
    with pytest.raises(TypeError):
        inspect_variables([("x", 1)])


def test_rendering_twice_is_identical() -> None:
    variables = {"x": 5, "y": {"nested": [1, 2, {"z": None}]}}
    options = InspectorOptions(max_depth=3)
    assert inspect_variables(variables, options) == inspect_variables(variables, options)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(0, 1), (-4, 1), (99, 50), (5, 5), ("7", 7), ("12px", 12), ("abc", 1), (3.9, 3), (True, 1)],
)
def test_max_depth_is_clamped(raw, expected: int) -> None:
    assert InspectorOptions(max_depth=raw).max_depth == expected


def test_defaults() -> None:
    options = InspectorOptions()
    assert options.max_depth == config.DEFAULT_MAX_DEPTH
    assert options.style == config.DEFAULT_STYLE
    assert options.assign is None


def test_from_params() -> None:
    options = InspectorOptions.from_params({"maxdepth": "5", "assign": "  dump  ", "style": "x"})
    assert options.max_depth == 5
    assert options.assign == "dump"
    assert options.style == "x"


def test_blank_assign_means_output() -> None:
    options = InspectorOptions.from_params({"assign": "   "})
    assert options.assign is None
    assert options.max_depth == config.DEFAULT_MAX_DEPTH
    assert inspect_variables({"x": 1}, options) is not None
