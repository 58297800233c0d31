"""Storage of per-action data keyed by action."""

from __future__ import annotations

from types import MappingProxyType
from typing import Generic, Hashable, Mapping, Optional, TypeVar

from actionweave.action_data import (
    ActionData,
    AxisData,
    ButtonData,
    DualAxisData,
    TripleAxisData,
)

A = TypeVar("A", bound=Hashable)
_D = TypeVar("_D")


class ActionStore(Generic[A]):
    """Holds the ActionData of every action that has been touched so far."""

    def __init__(self) -> None:
        self._disabled: bool = False
        self._action_data: dict[A, ActionData] = {}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ActionStore):
            return NotImplemented
        return (
            self._disabled == other._disabled
            and self._action_data == other._action_data
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(disabled={self._disabled!r}, "
            f"action_data={self._action_data!r})"
        )

    def all_action_data(self) -> Mapping[A, ActionData]:
        """A read-only view of the data for all actions."""
        return MappingProxyType(self._action_data)

    def swap_to_update_state(self) -> None:
        """Save the fixed-schedule state of every action and load the main one."""
        for datum in self._action_data.values():
            datum.kind_data.swap_to_update_state()

    def swap_to_fixed_update_state(self) -> None:
        """Save the main-schedule state of every action and load the fixed one."""
        for datum in self._action_data.values():
            datum.kind_data.swap_to_fixed_update_state()

    def tick(self, current_instant, previous_instant) -> None:
        """Advance every action by one tick, settling "just" button states."""
        for datum in self._action_data.values():
            datum.tick(current_instant, previous_instant)

    def action_data(self, action: A) -> Optional[ActionData]:
        """The data for `action`, or None if it has never been touched."""
        return self._action_data.get(action)

    def action_data_or_default(self, action: A) -> ActionData:
        """The data for `action`, created from its control kind if missing."""
        datum = self._action_data.get(action)
        if datum is None:
            datum = ActionData.from_kind(action.input_control_kind())
            self._action_data[action] = datum
        return datum

    def _kind_data(self, action: A, data_type: type[_D]) -> Optional[_D]:
        datum = self._action_data.get(action)
        if datum is None or not isinstance(datum.kind_data, data_type):
            return None
        return datum.kind_data

    def _kind_data_or_default(self, action: A, data_type: type[_D], label: str) -> _D:
        kind_data = self.action_data_or_default(action).kind_data
        if not isinstance(kind_data, data_type):
            raise TypeError(f"{action!r} is not {label}")
        return kind_data

    def button_data(self, action: A) -> Optional[ButtonData]:
        """The button data for `action`, or None if absent or not a button."""
        return self._kind_data(action, ButtonData)

    def button_data_or_default(self, action: A) -> ButtonData:
        """The button data for `action`, created if missing."""
        return self._kind_data_or_default(action, ButtonData, "a Button")

    def axis_data(self, action: A) -> Optional[AxisData]:
        """The axis data for `action`, or None if absent or not an axis."""
        return self._kind_data(action, AxisData)

    def axis_data_or_default(self, action: A) -> AxisData:
        """The axis data for `action`, created if missing."""
        return self._kind_data_or_default(action, AxisData, "an Axis")

    def dual_axis_data(self, action: A) -> Optional[DualAxisData]:
        """The dual-axis data for `action`, or None if absent or not a dual axis."""
        return self._kind_data(action, DualAxisData)

    def dual_axis_data_or_default(self, action: A) -> DualAxisData:
        """The dual-axis data for `action`, created if missing."""
        return self._kind_data_or_default(action, DualAxisData, "a DualAxis")

    def triple_axis_data(self, action: A) -> Optional[TripleAxisData]:
        """The triple-axis data for `action`, or None if absent or not a triple axis."""
        return self._kind_data(action, TripleAxisData)

    def triple_axis_data_or_default(self, action: A) -> TripleAxisData:
        """The triple-axis data for `action`, created if missing."""
        return self._kind_data_or_default(action, TripleAxisData, "a TripleAxis")

    def keys(self) -> list[A]:
        """The actions that have data in this store."""
        return list(self._action_data)