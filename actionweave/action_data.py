"""Per-action state held by an action state store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from actionweave.actionlike import InputControlKind
from actionweave.buttonlike import ButtonState
from actionweave.vectors import Vec2, Vec3


@dataclass
class ButtonData:
    """State of a button-like action, including its per-schedule copies."""

    state: ButtonState = ButtonState.RELEASED
    update_state: ButtonState = ButtonState.RELEASED
    fixed_update_state: ButtonState = ButtonState.RELEASED

    @classmethod
    def with_state(cls, state: ButtonState) -> ButtonData:
        """Button data holding `state` in every schedule."""
        return cls(state, state, state)

    def pressed(self) -> bool:
        """Is the action currently pressed?"""
        return self.state.pressed()

    def just_pressed(self) -> bool:
        """Was the action pressed since the last tick?"""
        return self.state.just_pressed()

    def released(self) -> bool:
        """Is the action currently released?"""
        return self.state.released()

    def just_released(self) -> bool:
        """Was the action released since the last tick?"""
        return self.state.just_released()

    def swap_to_update_state(self) -> None:
        """Save the current state for the fixed schedule and load the main one."""
        self.fixed_update_state = self.state
        self.state = self.update_state

    def swap_to_fixed_update_state(self) -> None:
        """Save the current state for the main schedule and load the fixed one."""
        self.update_state = self.state
        self.state = self.fixed_update_state


@dataclass
class AxisData:
    """State of a single-axis action."""

    value: float = 0.0
    update_value: float = 0.0
    fixed_update_value: float = 0.0

    def swap_to_update_state(self) -> None:
        """Save the current value for the fixed schedule and load the main one."""
        self.fixed_update_value = self.value
        self.value = self.update_value

    def swap_to_fixed_update_state(self) -> None:
        """Save the current value for the main schedule and load the fixed one."""
        self.update_value = self.value
        self.value = self.fixed_update_value


@dataclass
class DualAxisData:
    """State of a dual-axis action."""

    pair: Vec2 = Vec2.ZERO
    update_pair: Vec2 = Vec2.ZERO
    fixed_update_pair: Vec2 = Vec2.ZERO

    def swap_to_update_state(self) -> None:
        """Save the current pair for the fixed schedule and load the main one."""
        self.fixed_update_pair = self.pair
        self.pair = self.update_pair

    def swap_to_fixed_update_state(self) -> None:
        """Save the current pair for the main schedule and load the fixed one."""
        self.update_pair = self.pair
        self.pair = self.fixed_update_pair


@dataclass
class TripleAxisData:
    """State of a triple-axis action."""

    triple: Vec3 = Vec3.ZERO
    update_triple: Vec3 = Vec3.ZERO
    fixed_update_triple: Vec3 = Vec3.ZERO

    def swap_to_update_state(self) -> None:
        """Save the current triple for the fixed schedule and load the main one."""
        self.fixed_update_triple = self.triple
        self.triple = self.update_triple

    def swap_to_fixed_update_state(self) -> None:
        """Save the current triple for the main schedule and load the fixed one."""
        self.update_triple = self.triple
        self.triple = self.fixed_update_triple


KindData = Union[ButtonData, AxisData, DualAxisData, TripleAxisData]

_DATA_FOR_KIND = {
    InputControlKind.BUTTON: ButtonData,
    InputControlKind.AXIS: AxisData,
    InputControlKind.DUAL_AXIS: DualAxisData,
    InputControlKind.TRIPLE_AXIS: TripleAxisData,
}


@dataclass
class ActionData:
    """The state of one action: whether it is disabled, and its kind-specific data."""

    kind_data: KindData = field(default_factory=ButtonData)
    disabled: bool = False

    @classmethod
    def from_kind(cls, kind: InputControlKind) -> ActionData:
        """Default data for an action of the given control kind."""
        try:
            data_type = _DATA_FOR_KIND[kind]
        except (KeyError, TypeError):
            raise TypeError(f"expected an InputControlKind, got {kind!r}") from None
        return cls(kind_data=data_type())

    def tick(self, current_instant, previous_instant) -> None:
        """Advance the action by one tick; button "just" states settle."""
        if isinstance(self.kind_data, ButtonData):
            self.kind_data.state = self.kind_data.state.tick()