import pytest

from actionweave.axislike import AxisDirection, DualAxisDirection, DualAxisType
from actionweave.vectors import Vec2


def test_axis_direction_full_active_value():
    assert AxisDirection.NEGATIVE.full_active_value() == -1.0
    assert AxisDirection.POSITIVE.full_active_value() == 1.0


@pytest.mark.parametrize(
    "direction, value, expected",
    [
        (AxisDirection.POSITIVE, 0.5, True),
        (AxisDirection.POSITIVE, 0.0, False),
        (AxisDirection.POSITIVE, -0.5, False),
        (AxisDirection.NEGATIVE, -0.5, True),
        (AxisDirection.NEGATIVE, 0.0, False),
        (AxisDirection.NEGATIVE, 0.5, False),
    ],
)
def test_axis_direction_is_active(direction, value, expected):
    assert direction.is_active(value) is expected


def test_axis_direction_is_active_at_full_value():
    assert AxisDirection.NEGATIVE.is_active(AxisDirection.NEGATIVE.full_active_value())
    assert AxisDirection.POSITIVE.is_active(AxisDirection.POSITIVE.full_active_value())
    assert not AxisDirection.NEGATIVE.is_active(AxisDirection.POSITIVE.full_active_value())
    assert not AxisDirection.POSITIVE.is_active(AxisDirection.NEGATIVE.full_active_value())


def test_axes_are_x_then_y():
    assert DualAxisType.axes() == (DualAxisType.X, DualAxisType.Y)


def test_axis_directions():
    assert DualAxisType.X.directions() == (DualAxisDirection.LEFT, DualAxisDirection.RIGHT)
    assert DualAxisType.Y.directions() == (DualAxisDirection.DOWN, DualAxisDirection.UP)


def test_get_value_and_dual_axis_value_round_trip():
    for axis in DualAxisType.axes():
        vector = axis.dual_axis_value(0.3)
        assert axis.get_value(vector) == 0.3
        other = DualAxisType.Y if axis is DualAxisType.X else DualAxisType.X
        assert other.get_value(vector) == 0.0


def test_get_value_reads_components():
    value = Vec2(0.5, 0.7)
    assert DualAxisType.X.get_value(value) == 0.5
    assert DualAxisType.Y.get_value(value) == 0.7


def test_full_active_values_match_unit_vectors():
    assert DualAxisDirection.UP.full_active_value() == Vec2.Y
    assert DualAxisDirection.DOWN.full_active_value() == Vec2.NEG_Y
    assert DualAxisDirection.LEFT.full_active_value() == Vec2.NEG_X
    assert DualAxisDirection.RIGHT.full_active_value() == Vec2.X


def test_direction_axis_and_sign():
    assert DualAxisDirection.UP.axis() is DualAxisType.Y
    assert DualAxisDirection.LEFT.axis() is DualAxisType.X
    assert DualAxisDirection.DOWN.axis_direction() is AxisDirection.NEGATIVE
    assert DualAxisDirection.RIGHT.axis_direction() is AxisDirection.POSITIVE


def test_direction_belongs_to_its_axis():
    assert DualAxisDirection.UP in DualAxisDirection.UP.axis().directions()
    assert DualAxisDirection.DOWN in DualAxisDirection.DOWN.axis().directions()
    assert DualAxisDirection.LEFT in DualAxisDirection.LEFT.axis().directions()
    assert DualAxisDirection.RIGHT in DualAxisDirection.RIGHT.axis().directions()


def test_direction_is_active_only_at_its_own_full_value():
    up = DualAxisDirection.UP.full_active_value()
    down = DualAxisDirection.DOWN.full_active_value()
    left = DualAxisDirection.LEFT.full_active_value()
    right = DualAxisDirection.RIGHT.full_active_value()

    assert DualAxisDirection.UP.is_active(up)
    assert not DualAxisDirection.UP.is_active(down)
    assert not DualAxisDirection.UP.is_active(left)
    assert not DualAxisDirection.UP.is_active(right)

    assert DualAxisDirection.DOWN.is_active(down)
    assert not DualAxisDirection.DOWN.is_active(up)

    assert DualAxisDirection.LEFT.is_active(left)
    assert not DualAxisDirection.LEFT.is_active(right)
    assert not DualAxisDirection.LEFT.is_active(up)

    assert DualAxisDirection.RIGHT.is_active(right)
    assert not DualAxisDirection.RIGHT.is_active(left)
    assert not DualAxisDirection.RIGHT.is_active(down)