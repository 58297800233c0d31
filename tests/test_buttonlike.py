import pytest

from actionweave.buttonlike import ButtonState


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.PRESSED),
        (ButtonState.PRESSED, ButtonState.PRESSED),
        (ButtonState.JUST_RELEASED, ButtonState.RELEASED),
        (ButtonState.RELEASED, ButtonState.RELEASED),
    ],
)
def test_tick(state, expected):
    assert state.tick() is expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.JUST_PRESSED),
        (ButtonState.PRESSED, ButtonState.PRESSED),
        (ButtonState.JUST_RELEASED, ButtonState.JUST_PRESSED),
        (ButtonState.RELEASED, ButtonState.JUST_PRESSED),
    ],
)
def test_press(state, expected):
    assert state.press() is expected


@pytest.mark.parametrize(
    "state, expected",
    [
        (ButtonState.JUST_PRESSED, ButtonState.JUST_RELEASED),
        (ButtonState.PRESSED, ButtonState.JUST_RELEASED),
        (ButtonState.JUST_RELEASED, ButtonState.JUST_RELEASED),
        (ButtonState.RELEASED, ButtonState.RELEASED),
    ],
)
def test_release(state, expected):
    assert state.release() is expected


def test_pressed_and_released_are_complementary():
    assert ButtonState.JUST_PRESSED.pressed() and not ButtonState.JUST_PRESSED.released()
    assert ButtonState.PRESSED.pressed() and not ButtonState.PRESSED.released()
    assert ButtonState.JUST_RELEASED.released() and not ButtonState.JUST_RELEASED.pressed()
    assert ButtonState.RELEASED.released() and not ButtonState.RELEASED.pressed()


def test_just_states():
    assert ButtonState.JUST_PRESSED.just_pressed()
    assert not ButtonState.PRESSED.just_pressed()
    assert ButtonState.JUST_RELEASED.just_released()
    assert not ButtonState.RELEASED.just_released()


def test_full_lifecycle():
    state = ButtonState.RELEASED.press()
    assert state.pressed() and state.just_pressed()
    state = state.tick()
    assert state.pressed() and not state.just_pressed()
    state = state.release()
    assert state.released() and state.just_released()
    state = state.tick()
    assert state is ButtonState.RELEASED