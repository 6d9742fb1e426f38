# -*- coding: utf-8 -*-
"""
Tests for the navigable wizard location and its history.
"""
import pytest

from services.wizard.step_router import StepRouter


@pytest.mark.parametrize("url, step", [
    ("hami://app/fa/signup", None),
    ("hami://app/fa/signup?step=3", 3),
    ("hami://app/fa/signup?step=abc", None),
    ("hami://app/fa/signup?step=", None),
    ("hami://app/fa/signup?step=-1", -1),
])
def test_current_step(qapp, url, step):
    assert StepRouter(initial_url=url).current_step() == step


def test_default_location_uses_language(qapp):
    assert StepRouter(lang="en").current_url().toString() == "hami://app/en/signup"


def test_replace_rewrites_current_entry(qapp):
    router = StepRouter(initial_url="hami://app/en/signup?step=99")

    router.replace_step(6)

    assert router.current_step() == 6
    assert not router.can_go_back()


def test_replace_keeps_other_query_items(qapp):
    router = StepRouter(initial_url="hami://app/en/signup?ref=mail&step=2")

    router.replace_step(3)

    assert "ref=mail" in router.current_url().toString()
    assert router.current_step() == 3


def test_back_and_forward_emit_location(qtbot):
    router = StepRouter(initial_url="hami://app/en/signup?step=1")
    router.push_step(2)
    router.push_step(3)

    with qtbot.waitSignal(router.location_changed) as blocker:
        assert router.back()
    assert blocker.args == [2]

    with qtbot.waitSignal(router.location_changed) as blocker:
        assert router.forward()
    assert blocker.args == [3]

    assert not router.forward()


def test_push_drops_forward_entries(qapp):
    router = StepRouter(initial_url="hami://app/en/signup?step=1")
    router.push_step(2)
    router.push_step(3)
    router.back()

    router.push_step(4)

    assert not router.can_go_forward()
    router.back()
    assert router.current_step() == 2
