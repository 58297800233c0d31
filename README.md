# actionweave

Track what a player *wants to do*, not which keys they pressed.
`actionweave` keeps an input-method-agnostic record of actions (buttons,
single axes, dual axes and triple axes) and lets you query, reset, disable
and synchronise that record.

## Installing

```
pip install actionweave
```

## Declaring actions

Actions are enum members that mix in `Actionlike`. Each action has an
`InputControlKind`: `BUTTON` (the default), `AXIS`, `DUAL_AXIS` or
`TRIPLE_AXIS`. The `actionlike` decorator sets a default kind for the whole
enum, and keyword arguments named after members override it for single
members. Kinds can also be given as strings such as `"DualAxis"`.

```python
import enum
from actionweave.actionlike import Actionlike, InputControlKind, actionlike

@actionlike(InputControlKind.BUTTON, MOVE=InputControlKind.DUAL_AXIS)
class PlayerAction(Actionlike, enum.Enum):
    MOVE = "Move"
    JUMP = "Jump"

PlayerAction.MOVE.input_control_kind()  # InputControlKind.DUAL_AXIS
PlayerAction.JUMP.input_control_kind()  # InputControlKind.BUTTON
```

Naming a member the enum does not have raises `ValueError`.

## Tracking state

`ActionState` (in `actionweave.action_state`) holds one `ActionData` per
action that has been touched. Data is created on first use from the
action's control kind.

```python
import time
from actionweave.action_state import ActionState
from actionweave.vectors import Vec2

state = ActionState()
state.press(PlayerAction.JUMP)
state.set_axis_pair(PlayerAction.MOVE, Vec2(0.5, 2.0))

state.pressed(PlayerAction.JUMP)            # True
state.just_pressed(PlayerAction.JUMP)       # True
state.clamped_axis_pair(PlayerAction.MOVE)  # Vec2(x=0.5, y=1.0)

state.tick(time.monotonic(), time.monotonic())
state.just_pressed(PlayerAction.JUMP)       # False
```

Useful methods:

- Buttons: `press`, `release`, `pressed`, `just_pressed`, `released`,
  `just_released`, `set_button_data`, and the lists `get_pressed`,
  `get_just_pressed`, `get_released`, `get_just_released`.
- Axes: `value` / `set_value` / `clamped_value`, `axis_pair` /
  `set_axis_pair` / `clamped_axis_pair`, `axis_triple` / `set_axis_triple` /
  `clamped_axis_triple`. Clamping limits each component to `[-1, 1]`.
- Bulk updates: `update` takes a mapping (or pairs) of action to a `bool`
  (button), a number (axis), a `Vec2` or a `Vec3`.
- Resetting: `reset` and `reset_all` release buttons and zero axes.
- Disabling: `disable`, `enable`, `disable_action`, `enable_action`,
  `disable_all_actions`, `enable_all_actions`, `disabled`,
  `action_disabled`. Disabled actions report as released (never just
  released) and read as zero, while their stored data keeps updating.
- Raw data: `action_data`, `button_data`, `axis_data`, `dual_axis_data`,
  `triple_axis_data`, their `*_or_default` variants, `all_action_data` and
  `keys`.
- Two schedules: `swap_to_update_state` and `swap_to_fixed_update_state`
  keep separate copies of each action's value for a main and a fixed-step
  loop.

Asking for data of the wrong kind with an `*_or_default` method (for
example pressing an axis action) raises `TypeError`.

`ActionState` builds on `ActionValues` (`actionweave.action_values`), which
builds on the plain store `ActionStore` (`actionweave.action_store`).

### Button life cycle

`ButtonState` (in `actionweave.buttonlike`) moves through `JUST_PRESSED` →
`PRESSED` → `JUST_RELEASED` → `RELEASED`. Its `tick`, `press` and `release`
return the next state; `tick` settles the "just" states.

## Vectors and directions

`actionweave.vectors` provides immutable `Vec2` and `Vec3` with addition,
subtraction, scaling, `length` and component-wise `clamp`; `Vec2` also has
`normalize` (which raises `ValueError` for a zero vector).

`actionweave.axislike` provides `AxisDirection`, `DualAxisType` and
`DualAxisDirection` for reasoning about which way a stick or D-pad points.

## Sending changes over the wire

In `actionweave.action_diff`, `SummarizedActionState.summarize(global_state,
entity_states)` captures the values of a global state (stored under
`Entity.PLACEHOLDER`) and of per-entity states. Comparing two summaries with
`diff_events(previous)` yields one `ActionDiffEvent` per changed entity,
holding compact diffs: `Pressed`, `Released`, `AxisChanged`,
`DualAxisChanged` and `TripleAxisChanged`. The owner of an event from the
global state is `None`; `map_entities` remaps owners between worlds.

```python
from actionweave.action_diff import SummarizedActionState

before = SummarizedActionState()
after = SummarizedActionState.summarize(state)
for event in after.diff_events(before):
    for diff in event.action_diffs:
        remote_state.apply_diff(diff)
```

## Run conditions

`actionweave.conditions` offers callables that take an `ActionState` and
return a boolean: `action_pressed`, `action_just_pressed`,
`action_just_released`, and the stateful `action_toggle_active`, which
flips each time its action is just pressed.

## What it does not do

`actionweave` only records and compares action state. It does not read
keyboards, mice or gamepads, has no maps from physical inputs to actions,
does not resolve clashes between overlapping bindings, and does not track
how long a button has been held; `tick` accepts instants but only uses the
call itself to settle button states. Feeding actions from real devices is
up to your program, through `press`, `release`, the setters or `update`.

## Running the tests

```
pip install actionweave[test]
pytest
```