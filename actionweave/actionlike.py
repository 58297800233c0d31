"""Action types and the kind of input control each action expects."""

from __future__ import annotations

from enum import Enum
from typing import Callable, TypeVar


class InputControlKind(Enum):
    """The kind of input that drives an action."""

    BUTTON = "Button"
    AXIS = "Axis"
    DUAL_AXIS = "DualAxis"
    TRIPLE_AXIS = "TripleAxis"


class Actionlike:
    """Mixin for action enums; every action is a button unless declared otherwise."""

    _actionweave_default: InputControlKind = InputControlKind.BUTTON
    _actionweave_overrides: dict = {}

    def input_control_kind(self) -> InputControlKind:
        """The kind of input control this action expects."""
        cls = type(self)
        return cls._actionweave_overrides.get(self, cls._actionweave_default)


_A = TypeVar("_A", bound=type)


def _coerce_kind(kind) -> InputControlKind:
    if isinstance(kind, InputControlKind):
        return kind
    if isinstance(kind, str):
        try:
            return InputControlKind(kind)
        except ValueError:
            pass
        try:
            return InputControlKind[kind.upper()]
        except KeyError:
            pass
        raise ValueError(f"expected a control kind such as 'Button', got {kind!r}")
    raise TypeError(f"expected an InputControlKind, got {type(kind).__name__}")


def actionlike(default=InputControlKind.BUTTON, **kwargs) -> Callable[[_A], _A]:
    """Class decorator declaring the default control kind and per-member overrides.

    Keyword arguments map member names to control kinds.
    """
    default_kind = _coerce_kind(default)
    override_kinds = {name: _coerce_kind(kind) for name, kind in kwargs.items()}

    def decorate(cls: _A) -> _A:
        if not (isinstance(cls, type) and issubclass(cls, Actionlike)):
            raise TypeError(f"{cls!r} is not an Actionlike class")
        overrides = {}
        if override_kinds and not issubclass(cls, Enum):
            raise TypeError("per-member control kinds need an Enum class")
        for name, kind in override_kinds.items():
            try:
                member = cls[name]
            except KeyError:
                raise ValueError(f"{cls.__name__} has no member {name!r}") from None
            if kind is not default_kind:
                overrides[member] = kind
        setattr(cls, "_actionweave_default", default_kind)
        setattr(cls, "_actionweave_overrides", overrides)
        return cls

    return decorate