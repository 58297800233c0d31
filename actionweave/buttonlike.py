"""State of button-like inputs."""

from __future__ import annotations

from enum import Enum


class ButtonState(Enum):
    """The current state of a button; buttons start out RELEASED."""

    JUST_PRESSED = "JustPressed"
    PRESSED = "Pressed"
    JUST_RELEASED = "JustReleased"
    RELEASED = "Released"

    def tick(self) -> ButtonState:
        """The state after one tick: the "just" states settle."""
        if self is ButtonState.JUST_PRESSED:
            return ButtonState.PRESSED
        if self is ButtonState.JUST_RELEASED:
            return ButtonState.RELEASED
        return self

    def press(self) -> ButtonState:
        """The state after pressing: JUST_PRESSED unless already PRESSED."""
        if self is ButtonState.PRESSED:
            return self
        return ButtonState.JUST_PRESSED

    def release(self) -> ButtonState:
        """The state after releasing: JUST_RELEASED unless already RELEASED."""
        if self is ButtonState.RELEASED:
            return self
        return ButtonState.JUST_RELEASED

    def pressed(self) -> bool:
        """Is the button currently pressed?"""
        return self in (ButtonState.PRESSED, ButtonState.JUST_PRESSED)

    def released(self) -> bool:
        """Is the button currently released?"""
        return self in (ButtonState.RELEASED, ButtonState.JUST_RELEASED)

    def just_pressed(self) -> bool:
        """Was the button pressed since the last tick?"""
        return self is ButtonState.JUST_PRESSED

    def just_released(self) -> bool:
        """Was the button released since the last tick?"""
        return self is ButtonState.JUST_RELEASED