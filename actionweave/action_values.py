"""Reading and writing the values of individual actions."""

from __future__ import annotations

from dataclasses import replace
from typing import Hashable, TypeVar

from actionweave.action_data import ButtonData
from actionweave.action_store import ActionStore
from actionweave.vectors import Vec2, Vec3

A = TypeVar("A", bound=Hashable)


class ActionValues(ActionStore[A]):
    """An action store with typed accessors for buttons and axes.

    Disabled actions report as released (never just released) and their
    values read as zero, while the stored data keeps being updated.
    """

    def disabled(self) -> bool:
        """Is the whole set of actions disabled?"""
        return self._disabled

    def action_disabled(self, action: A) -> bool:
        """Is `action` disabled, either on its own or with everything else?"""
        if self._disabled:
            return True
        datum = self.action_data(action)
        return datum is not None and datum.disabled

    def value(self, action: A) -> float:
        """The axis value of `action`; 0.0 if disabled or never set."""
        if self.action_disabled(action):
            return 0.0
        data = self.axis_data(action)
        return data.value if data is not None else 0.0

    def set_value(self, action: A, value: float) -> None:
        """Set the axis value of `action`."""
        self.axis_data_or_default(action).value = value

    def clamped_value(self, action: A) -> float:
        """The axis value of `action` clamped to [-1.0, 1.0]."""
        return min(max(self.value(action), -1.0), 1.0)

    def axis_pair(self, action: A) -> Vec2:
        """The dual-axis pair of `action`; zero if disabled or never set."""
        if self.action_disabled(action):
            return Vec2.ZERO
        data = self.dual_axis_data(action)
        return data.pair if data is not None else Vec2.ZERO

    def set_axis_pair(self, action: A, pair: Vec2) -> None:
        """Set the dual-axis pair of `action`."""
        self.dual_axis_data_or_default(action).pair = pair

    def clamped_axis_pair(self, action: A) -> Vec2:
        """The dual-axis pair of `action` with each component clamped to [-1, 1]."""
        return self.axis_pair(action).clamp(Vec2.NEG_ONE, Vec2.ONE)

    def axis_triple(self, action: A) -> Vec3:
        """The triple-axis value of `action`; zero if disabled or never set."""
        if self.action_disabled(action):
            return Vec3.ZERO
        data = self.triple_axis_data(action)
        return data.triple if data is not None else Vec3.ZERO

    def set_axis_triple(self, action: A, triple: Vec3) -> None:
        """Set the triple-axis value of `action`."""
        self.triple_axis_data_or_default(action).triple = triple

    def clamped_axis_triple(self, action: A) -> Vec3:
        """The triple-axis value of `action` with each component clamped to [-1, 1]."""
        return self.axis_triple(action).clamp(Vec3.NEG_ONE, Vec3.ONE)

    def set_button_data(self, action: A, data: ButtonData) -> None:
        """Replace the button data of `action` with a copy of `data`."""
        self.button_data_or_default(action)
        self.action_data_or_default(action).kind_data = replace(data)

    def press(self, action: A) -> None:
        """Press `action`: just pressed unless it was already held."""
        data = self.button_data_or_default(action)
        data.state = data.state.press()

    def release(self, action: A) -> None:
        """Release `action`: just released unless it was already released."""
        data = self.button_data_or_default(action)
        data.state = data.state.release()

    def pressed(self, action: A) -> bool:
        """Is `action` currently pressed?"""
        if self.action_disabled(action):
            return False
        data = self.button_data(action)
        return data is not None and data.pressed()

    def just_pressed(self, action: A) -> bool:
        """Was `action` pressed since the last tick?"""
        if self.action_disabled(action):
            return False
        data = self.button_data(action)
        return data is not None and data.just_pressed()

    def released(self, action: A) -> bool:
        """Is `action` currently released? True by default."""
        if self.action_disabled(action):
            return True
        data = self.button_data(action)
        return data is None or data.released()

    def just_released(self, action: A) -> bool:
        """Was `action` released since the last tick?"""
        if self.action_disabled(action):
            return False
        data = self.button_data(action)
        return data is not None and data.just_released()