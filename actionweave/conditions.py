"""Run conditions driven by the state of an action."""

from __future__ import annotations

from typing import Callable, Hashable

from actionweave.action_state import ActionState

Condition = Callable[[ActionState], bool]


def action_toggle_active(default: bool, action: Hashable) -> Condition:
    """A stateful condition that flips each time `action` is just pressed."""
    active = bool(default)

    def condition(action_state: ActionState) -> bool:
        nonlocal active
        active ^= action_state.just_pressed(action)
        return active

    return condition


def action_pressed(action: Hashable) -> Condition:
    """A condition that holds while `action` is pressed."""

    def condition(action_state: ActionState) -> bool:
        return action_state.pressed(action)

    return condition


def action_just_pressed(action: Hashable) -> Condition:
    """A condition that holds when `action` was just pressed."""

    def condition(action_state: ActionState) -> bool:
        return action_state.just_pressed(action)

    return condition


def action_just_released(action: Hashable) -> Condition:
    """A condition that holds when `action` was just released."""

    def condition(action_state: ActionState) -> bool:
        return action_state.just_released(action)

    return condition