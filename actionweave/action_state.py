"""The complete, input-agnostic state of a set of actions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Hashable, TypeVar, Union

from actionweave.action_diff import (
    ActionDiff,
    AxisChanged,
    DualAxisChanged,
    Pressed,
    Released,
    TripleAxisChanged,
)
from actionweave.action_values import ActionValues
from actionweave.actionlike import InputControlKind
from actionweave.vectors import Vec2, Vec3

A = TypeVar("A", bound=Hashable)

UpdatedValue = Union[bool, float, Vec2, Vec3]


class ActionState(ActionValues[A]):
    """Stores the state of every action, however its inputs were produced.

    Actions can be disabled one by one or all together. Disabled actions
    report as released (never just released) and their values read as zero,
    while their underlying data keeps being updated.
    """

    def update(self, updated_actions: Union[Mapping[A, Any], Iterable[tuple[A, Any]]]) -> None:
        """Apply freshly computed values to the actions.

        `updated_actions` maps actions to a bool (button pressed or not),
        a number (axis value), a Vec2 (dual-axis pair) or a Vec3 (triple).
        """
        items = (
            updated_actions.items()
            if isinstance(updated_actions, Mapping)
            else updated_actions
        )
        for action, value in items:
            if isinstance(value, bool):
                if value:
                    self.press(action)
                else:
                    self.release(action)
            elif isinstance(value, Vec2):
                self.set_axis_pair(action, value)
            elif isinstance(value, Vec3):
                self.set_axis_triple(action, value)
            elif isinstance(value, (int, float)):
                self.set_value(action, float(value))
            else:
                raise TypeError(
                    f"unsupported updated value for {action!r}: {value!r}"
                )

    def reset(self, action: A) -> None:
        """Return `action` to its default: released, or zero for axes."""
        kind = action.input_control_kind()
        if kind is InputControlKind.BUTTON:
            self.release(action)
        elif kind is InputControlKind.AXIS:
            self.set_value(action, 0.0)
        elif kind is InputControlKind.DUAL_AXIS:
            self.set_axis_pair(action, Vec2.ZERO)
        elif kind is InputControlKind.TRIPLE_AXIS:
            self.set_axis_triple(action, Vec3.ZERO)
        else:
            raise TypeError(f"unknown control kind for {action!r}: {kind!r}")

    def reset_all(self) -> None:
        """Reset every action that has data."""
        for action in self.keys():
            self.reset(action)

    def disable(self) -> None:
        """Disable the whole state and reset every action."""
        self._disabled = True
        self.reset_all()

    def disable_action(self, action: A) -> None:
        """Disable `action` and reset it."""
        self.action_data_or_default(action).disabled = True
        self.reset(action)

    def disable_all_actions(self) -> None:
        """Disable every action that has data."""
        for action in self.keys():
            self.disable_action(action)

    def enable(self) -> None:
        """Enable the whole state."""
        self._disabled = False

    def enable_action(self, action: A) -> None:
        """Enable `action`."""
        self.action_data_or_default(action).disabled = False

    def enable_all_actions(self) -> None:
        """Enable every action that has data."""
        for action in self.keys():
            self.enable_action(action)

    def _buttons(self) -> list[A]:
        return [
            action
            for action in self.keys()
            if action.input_control_kind() is InputControlKind.BUTTON
        ]

    def get_pressed(self) -> list[A]:
        """The button actions currently pressed."""
        return [action for action in self._buttons() if self.pressed(action)]

    def get_just_pressed(self) -> list[A]:
        """The button actions pressed since the last tick."""
        return [action for action in self._buttons() if self.just_pressed(action)]

    def get_released(self) -> list[A]:
        """The button actions currently released."""
        return [action for action in self._buttons() if self.released(action)]

    def get_just_released(self) -> list[A]:
        """The button actions released since the last tick."""
        return [action for action in self._buttons() if self.just_released(action)]

    def apply_diff(self, diff: ActionDiff) -> None:
        """Apply one diff, e.g. received over the network."""
        if isinstance(diff, Pressed):
            self.press(diff.action)
        elif isinstance(diff, Released):
            self.release(diff.action)
        elif isinstance(diff, AxisChanged):
            self.set_value(diff.action, diff.value)
        elif isinstance(diff, DualAxisChanged):
            self.set_axis_pair(diff.action, diff.axis_pair)
        elif isinstance(diff, TripleAxisChanged):
            self.set_axis_triple(diff.action, diff.axis_triple)
        else:
            raise TypeError(f"not an action diff: {diff!r}")