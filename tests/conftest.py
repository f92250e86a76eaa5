"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from styledtext import AttributedText, TextBuffer


@pytest.fixture
def hello_world() -> AttributedText:
    return AttributedText(TextBuffer("Hello World"))
