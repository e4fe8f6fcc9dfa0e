"""Shared fixtures for the inspector tests."""

from __future__ import annotations

import html
import re

import pytest

_TAGS = re.compile(r"</?(?:em|pre)[^>]*>")


def _plain_lines(markup) -> list[str]:
    """Split a rendered dump into readable text lines."""
    text = _TAGS.sub("", str(markup)).replace("&nbsp;", " ")
    return [html.unescape(line) for line in text.split("<br/>") if line]


@pytest.fixture
def plain_lines():
    return _plain_lines
