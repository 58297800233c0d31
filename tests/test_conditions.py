from enum import Enum

from actionweave.action_state import ActionState
from actionweave.actionlike import Actionlike
from actionweave.conditions import (
    action_just_pressed,
    action_just_released,
    action_pressed,
    action_toggle_active,
)


class Action(Actionlike, Enum):
    JUMP = "Jump"
    RUN = "Run"


def test_action_pressed_follows_state():
    state = ActionState()
    condition = action_pressed(Action.JUMP)
    assert condition(state) is False
    state.press(Action.JUMP)
    assert condition(state) is True
    state.tick(1.0, 0.0)
    assert condition(state) is True
    state.release(Action.JUMP)
    assert condition(state) is False


def test_action_just_pressed_only_until_tick():
    state = ActionState()
    condition = action_just_pressed(Action.JUMP)
    state.press(Action.JUMP)
    assert condition(state) is True
    state.tick(1.0, 0.0)
    assert condition(state) is False


def test_action_just_released_only_until_tick():
    state = ActionState()
    condition = action_just_released(Action.JUMP)
    state.press(Action.JUMP)
    assert condition(state) is False
    state.release(Action.JUMP)
    assert condition(state) is True
    state.tick(1.0, 0.0)
    assert condition(state) is False


def test_conditions_ignore_other_actions():
    state = ActionState()
    state.press(Action.RUN)
    assert action_pressed(Action.JUMP)(state) is False
    assert action_just_pressed(Action.RUN)(state) is True


def test_toggle_flips_on_each_new_press():
    state = ActionState()
    condition = action_toggle_active(False, Action.JUMP)
    assert condition(state) is False

    state.press(Action.JUMP)
    assert condition(state) is True
    state.tick(1.0, 0.0)
    assert condition(state) is True

    state.release(Action.JUMP)
    state.tick(2.0, 1.0)
    assert condition(state) is True

    state.press(Action.JUMP)
    assert condition(state) is False


def test_toggle_respects_default():
    state = ActionState()
    condition = action_toggle_active(True, Action.JUMP)
    assert condition(state) is True
    state.press(Action.JUMP)
    assert condition(state) is False


def test_toggle_ignores_disabled_action():
    state = ActionState()
    condition = action_toggle_active(False, Action.JUMP)
    state.disable_action(Action.JUMP)
    state.press(Action.JUMP)
    assert condition(state) is False