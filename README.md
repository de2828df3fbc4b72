# towertumbler

The groundwork of a block stacking game in which gravity follows the tilt of
your device. When no tilt sensor is available, the keyboard stands in for it.

## Installing

```
pip install .
```

## Running

```
towertumbler
towertumbler --width 1024 --height 768
```

A window opens on the main menu. Click **Play** to start, and press `Escape`
to go back to the menu. `--width` and `--height` set the window size in
pixels. Both default to 800 × 600 and must be positive.

### Controls while playing

| Key            | Action                                                         |
|----------------|----------------------------------------------------------------|
| `A` / `D`, ←/→ | Hold for a fixed left / right tilt                             |
| Arrow keys     | Tilt gradually, 30° per second up to ±45°, when the keyboard is the input source |
| `C`            | Take the current orientation as the zero point                 |
| `1`–`4`        | Sensitivity 0.5x, 1.0x, 1.5x, 2.0x                             |
| `D`            | Cycle input source: device → keyboard → virtual                |
| `=` / `-`      | Widen / narrow the dead zone by 0.5° (kept between 0 and 10)   |
| `I`            | Log the current tilt state                                     |

The current tilt sets the gravity vector, which is refreshed at most once
every 16 ms.

## What the game does not do yet

The window shows the menu and the score line. Nothing places blocks or ground
while you play. `PhysicsWorld` holds bodies and the current gravity, but it
does not move them or detect collisions. The score stays at 0, and the
`GameOver` state is never reached.

## Using the pieces

The game logic works without a window.

```python
from towertumbler.tilt import TiltInput
from towertumbler.core import ScoreSystem

tilt = TiltInput()
tilt.enabled = True
tilt.update_orientation(0.0, 10.0, 20.0, 0.0)
print(tilt.normalized_tilt())
print(tilt.gravity_direction())
print(tilt.debug_info())

print(ScoreSystem().calculate_score(1.5))  # 3: within 3 pixels earns the bonus
print(ScoreSystem().calculate_score(5.0))  # 1
```

### The modules

- `towertumbler.vec`: `Vec2`, an immutable 2D vector with `length()` and
  `normalize_or_zero()`.
- `towertumbler.tilt`: `TiltInput` applies calibration, the dead zone,
  sensitivity and exponential smoothing. `InputSource` names where tilt comes
  from.
- `towertumbler.bridge`: sensor readings come in through a bounded event queue
  (`EventBridge`, 120 events, oldest dropped first). Use
  `push_device_orientation`, `set_permission_status` and `request_game_state`
  to queue events. `BridgeState.process_events` drains the queue, and
  `process_bridge_events` applies it to a `TiltInput`.
- `towertumbler.controls`: `KeyboardState` and the input handlers
  `handle_calibration_input`, `handle_keyboard_tilt_input`,
  `handle_virtual_tilt_input` and `handle_keyboard_input`.
- `towertumbler.physics`: `PhysicsWorld` with `create_ground`, `create_block`
  and `update_gravity`. `GravityManager` throttles gravity updates.
- `towertumbler.core`: `Block`, `Ground`, `Tower` and `ScoreSystem`.
- `towertumbler.ui`: `Hud`, `MainMenu` and `score_text`.
- `towertumbler.app`: `TowerTumbler`, whose `step(elapsed, delta)` runs one
  frame, plus `GameState`, `GameScore` and the `main` entry point.

## Running the tests

```
pip install .[test]
pytest
```