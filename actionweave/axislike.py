"""Directions and axes for axis-like inputs such as sticks and D-pads."""

from __future__ import annotations

from enum import Enum

from actionweave.vectors import Vec2


class AxisDirection(Enum):
    """The directions along a single axis."""

    NEGATIVE = "Negative"
    POSITIVE = "Positive"

    def full_active_value(self) -> float:
        """The full active value along the axis in this direction."""
        return -1.0 if self is AxisDirection.NEGATIVE else 1.0

    def is_active(self, value: float) -> bool:
        """Whether `value` is an active input in this direction."""
        if self is AxisDirection.NEGATIVE:
            return value < 0.0
        return value > 0.0


class DualAxisType(Enum):
    """One of the two axes of a dual-axis input."""

    X = "X"
    Y = "Y"

    @classmethod
    def axes(cls) -> tuple[DualAxisType, DualAxisType]:
        """Both axes, X first."""
        return (cls.X, cls.Y)

    def directions(self) -> tuple[DualAxisDirection, DualAxisDirection]:
        """The negative and positive directions along this axis."""
        return (self.negative(), self.positive())

    def negative(self) -> DualAxisDirection:
        """The negative direction along this axis."""
        return DualAxisDirection.LEFT if self is DualAxisType.X else DualAxisDirection.DOWN

    def positive(self) -> DualAxisDirection:
        """The positive direction along this axis."""
        return DualAxisDirection.RIGHT if self is DualAxisType.X else DualAxisDirection.UP

    def get_value(self, value: Vec2) -> float:
        """The component of `value` along this axis."""
        return value.x if self is DualAxisType.X else value.y

    def dual_axis_value(self, value: float) -> Vec2:
        """A vector holding `value` on this axis and zero on the other."""
        if self is DualAxisType.X:
            return Vec2(value, 0.0)
        return Vec2(0.0, value)


class DualAxisDirection(Enum):
    """The four directions of a dual-axis input."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    def axis(self) -> DualAxisType:
        """The axis this direction lies on."""
        if self in (DualAxisDirection.UP, DualAxisDirection.DOWN):
            return DualAxisType.Y
        return DualAxisType.X

    def axis_direction(self) -> AxisDirection:
        """Whether this direction is positive or negative on its axis."""
        if self in (DualAxisDirection.UP, DualAxisDirection.RIGHT):
            return AxisDirection.POSITIVE
        return AxisDirection.NEGATIVE

    def full_active_value(self) -> Vec2:
        """The full active value along both axes."""
        return {
            DualAxisDirection.UP: Vec2.Y,
            DualAxisDirection.DOWN: Vec2.NEG_Y,
            DualAxisDirection.LEFT: Vec2.NEG_X,
            DualAxisDirection.RIGHT: Vec2.X,
        }[self]

    def is_active(self, value: Vec2) -> bool:
        """Whether `value` is an active input in this direction."""
        return self.axis_direction().is_active(self.axis().get_value(value))