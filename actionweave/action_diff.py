"""Compact, serialisation-friendly descriptions of changes to action state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Hashable, Iterable, Mapping, Optional, Union

from actionweave.action_data import AxisData, ButtonData, DualAxisData, TripleAxisData
from actionweave.action_store import ActionStore
from actionweave.vectors import Vec2, Vec3


@dataclass(frozen=True, order=True)
class Entity:
    """An opaque identifier for the owner of an action state."""

    index: int

    PLACEHOLDER: ClassVar[Entity]


Entity.PLACEHOLDER = Entity(0xFFFFFFFF)


@dataclass(frozen=True)
class Pressed:
    """The action was pressed."""

    action: Any


@dataclass(frozen=True)
class Released:
    """The action was released."""

    action: Any


@dataclass(frozen=True)
class AxisChanged:
    """The axis value of the action changed."""

    action: Any
    value: float


@dataclass(frozen=True)
class DualAxisChanged:
    """The axis pair of the action changed."""

    action: Any
    axis_pair: Vec2


@dataclass(frozen=True)
class TripleAxisChanged:
    """The axis triple of the action changed."""

    action: Any
    axis_triple: Vec3


ActionDiff = Union[Pressed, Released, AxisChanged, DualAxisChanged, TripleAxisChanged]


@dataclass
class ActionDiffEvent:
    """A batch of diffs and the entity that produced them (None for a global state)."""

    owner: Optional[Entity]
    action_diffs: list = field(default_factory=list)

    def map_entities(self, mapper: Callable[[Entity], Entity]) -> None:
        """Remap the owner entity, e.g. when moving events between worlds."""
        if self.owner is not None:
            self.owner = mapper(self.owner)


def _summarize_store(store: ActionStore):
    buttons: dict = {}
    axes: dict = {}
    dual_axes: dict = {}
    triple_axes: dict = {}
    for action, datum in store.all_action_data().items():
        kind_data = datum.kind_data
        if isinstance(kind_data, ButtonData):
            buttons[action] = kind_data.pressed()
        elif isinstance(kind_data, AxisData):
            axes[action] = kind_data.value
        elif isinstance(kind_data, DualAxisData):
            dual_axes[action] = kind_data.pair
        elif isinstance(kind_data, TripleAxisData):
            triple_axes[action] = kind_data.triple
    return buttons, axes, dual_axes, triple_axes


@dataclass
class SummarizedActionState:
    """Raw values of every action for every owner in one frame.

    The global state is stored under ``Entity.PLACEHOLDER``.
    """

    button_state_map: dict = field(default_factory=dict)
    axis_state_map: dict = field(default_factory=dict)
    dual_axis_state_map: dict = field(default_factory=dict)
    triple_axis_state_map: dict = field(default_factory=dict)

    def _ordered_entities(self) -> list:
        ordered: dict = {}
        for state_map in (
            self.button_state_map,
            self.axis_state_map,
            self.dual_axis_state_map,
            self.triple_axis_state_map,
        ):
            ordered.update(dict.fromkeys(state_map))
        return list(ordered)

    def all_entities(self) -> set:
        """Every entity present, including the placeholder for the global state."""
        return set(self._ordered_entities())

    @classmethod
    def summarize(
        cls,
        global_state: Optional[ActionStore],
        entity_states: Union[Mapping, Iterable] = (),
    ) -> SummarizedActionState:
        """Capture the current values of a global state and of per-entity states.

        `entity_states` is a mapping or an iterable of ``(entity, state)`` pairs.
        """
        summary = cls()
        pairs: list = []
        if global_state is not None:
            pairs.append((Entity.PLACEHOLDER, global_state))
        items = entity_states.items() if isinstance(entity_states, Mapping) else entity_states
        pairs.extend(items)
        for entity, store in pairs:
            buttons, axes, dual_axes, triple_axes = _summarize_store(store)
            summary.button_state_map[entity] = buttons
            summary.axis_state_map[entity] = axes
            summary.dual_axis_state_map[entity] = dual_axes
            summary.triple_axis_state_map[entity] = triple_axes
        return summary

    @staticmethod
    def button_diff(
        action: Hashable, previous: Optional[bool], current: Optional[bool]
    ) -> Optional[ActionDiff]:
        """A press or release diff if the button changed; a missing previous counts as released."""
        if current is None:
            return None
        previous = bool(previous) if previous is not None else False
        if previous == current:
            return None
        return Pressed(action) if current else Released(action)

    @staticmethod
    def axis_diff(
        action: Hashable, previous: Optional[float], current: Optional[float]
    ) -> Optional[ActionDiff]:
        """An axis diff if the value changed; a missing previous counts as 0.0."""
        if current is None:
            return None
        previous = 0.0 if previous is None else previous
        if previous == current:
            return None
        return AxisChanged(action, current)

    @staticmethod
    def dual_axis_diff(
        action: Hashable, previous: Optional[Vec2], current: Optional[Vec2]
    ) -> Optional[ActionDiff]:
        """A dual-axis diff if the pair changed; a missing previous counts as zero."""
        if current is None:
            return None
        previous = Vec2.ZERO if previous is None else previous
        if previous == current:
            return None
        return DualAxisChanged(action, current)

    @staticmethod
    def triple_axis_diff(
        action: Hashable, previous: Optional[Vec3], current: Optional[Vec3]
    ) -> Optional[ActionDiff]:
        """A triple-axis diff if the triple changed; a missing previous counts as zero."""
        if current is None:
            return None
        previous = Vec3.ZERO if previous is None else previous
        if previous == current:
            return None
        return TripleAxisChanged(action, current)

    def entity_diffs(self, entity: Entity, previous: SummarizedActionState) -> list:
        """All diffs for one entity between `previous` and this summary."""
        diffs: list = []
        sections = (
            (self.button_state_map, previous.button_state_map, self.button_diff),
            (self.axis_state_map, previous.axis_state_map, self.axis_diff),
            (self.dual_axis_state_map, previous.dual_axis_state_map, self.dual_axis_diff),
            (
                self.triple_axis_state_map,
                previous.triple_axis_state_map,
                self.triple_axis_diff,
            ),
        )
        for current_map, previous_map, make_diff in sections:
            current_values = current_map.get(entity)
            if current_values is None:
                continue
            previous_values = previous_map.get(entity, {})
            for action, current in current_values.items():
                diff = make_diff(action, previous_values.get(action), current)
                if diff is not None:
                    diffs.append(diff)
        return diffs

    def diff_events(self, previous: SummarizedActionState) -> list:
        """One batched event per entity whose actions changed since `previous`."""
        events = []
        for entity in self._ordered_entities():
            diffs = self.entity_diffs(entity, previous)
            if diffs:
                owner = None if entity == Entity.PLACEHOLDER else entity
                events.append(ActionDiffEvent(owner=owner, action_diffs=diffs))
        return events