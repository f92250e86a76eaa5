"""Tests for attribute edit policies."""

from __future__ import annotations

import pytest

from styledtext.edit_behavior import EditBehavior, SpanEditAction, edit_action_for
from tests.helpers import Diagnostic, Plain, Style


def test_exactly_two_actions() -> None:
    assert {action.name for action in SpanEditAction} == {"KEEP", "REMOVE"}


def test_base_behavior_keeps() -> None:
    assert EditBehavior().on_edit() is SpanEditAction.KEEP


def test_edit_action_for_uses_declared_policy() -> None:
    assert edit_action_for(Style("bold")) is SpanEditAction.KEEP
    assert edit_action_for(Diagnostic("typo")) is SpanEditAction.REMOVE


def test_attributes_without_policy_are_kept() -> None:
    assert edit_action_for(Plain("note")) is SpanEditAction.KEEP
    assert edit_action_for("bold") is SpanEditAction.KEEP
    assert edit_action_for(Plain("note"), default=SpanEditAction.REMOVE) is SpanEditAction.REMOVE


def test_invalid_policy_result_is_rejected() -> None:
    class Broken:
        def on_edit(self) -> str:
            return "keep"

    with pytest.raises(TypeError):
        edit_action_for(Broken())
