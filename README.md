# towercomb

Rules and state for a side-view tower defence game. Enemies walk a maze
built from arrow characters, waves of troopers arrive in timed groups, and
the camera, animations, HUD text and menus each keep their own small piece
of state. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `towercomb.timer`: `Timer`, which counts elapsed seconds up to a duration
  in `TimerMode.ONCE` or `TimerMode.REPEATING`, with `tick`, `reset`,
  `set_duration`, `set_elapsed`, `fraction` and `fraction_remaining`.
  `Lifetime` wraps a one-shot timer and reports when it has run out.
- `towercomb.camera`: `Camera` holds a translation and scale. `apply_mouse_drag`
  pans, or zooms when shift is held; `apply_scroll` zooms for
  `ScrollUnit.LINE` events and pans for `ScrollUnit.PIXEL` events unless shift
  is held. `zoom` keeps the scale between 0.5 and 2.5. `SystemPhase` orders
  the phases of an update step.
- `towercomb.animation`: `AnimationFrameQueue` steps through atlas frame
  indices every 0.15 seconds. `set_override` plays a sequence once before
  returning to the looping frames; `tick` returns the frame to show when it
  changes.
- `towercomb.level`: `CellDirection` (with `vector`, `clockwise`,
  `counter_clockwise`, `flip` and `sprite_offset`), `parse_direction` and
  `parse_level`. `parse_level` reads a grid of `>`, `<`, `^`, `v`, `x` and `X`
  characters (bottom line is row 0), follows the path from the bottom-left
  cell until it leaves the grid, and returns a `Level` with the path and the
  walls and floors left standing. Unknown characters, empty maps, short rows
  and looping paths raise `ValueError`.
- `towercomb.layout`: `build_layout` turns a `Level` into a `LevelLayout` of
  background `FloorTile`s, wall, floor and ceiling `Piece`s (each tagged with
  an `Adjacent` edge identifier) and `PathNode`s with a marked start and end.
- `towercomb.enemies`: `basic_trooper`, `chonkus_trooper` and `turbo_trooper`
  return `EnemySpec`s; `PhysicsLayer` gives collision layer bits; `ShowDelay`
  keeps a new enemy hidden briefly.
- `towercomb.waves`: `Group`, `Wave`, `make_wave`, and `WaveManager`, which
  releases groups on a timer (`tick`), starts waves from the next-wave button
  (`start_next_wave`) and picks the button's atlas frame (`button_frame`).
  `test_waves` gives four default waves; `waves_for_level` falls back to them.
- `towercomb.progression`: `Progress` tracks the selected, loaded and unlocked
  levels and returns the `Screen` to move to; `enemy_reached_goal` checks
  whether an enemy is within 7 units of the goal.
- `towercomb.effects`: `DamageNumber` and `spawn_damage_number` for floating,
  fading damage values; `FlashMessage` for a banner that fades over a second.
- `towercomb.hud`: `lives_text`, `money_text`, `wave_text`, `bounty_text` and
  `BountyText`, a money notice that drifts and expires after three seconds.
- `towercomb.settings`: `Menu`, `VolumeSetting` (steps of 0.1 between 0.0 and
  3.0, with a percentage `label`), `back_menu` and `credit_rows`.

## Example

```python
import random

from towercomb.layout import build_layout
from towercomb.level import parse_level
from towercomb.waves import WaveManager, test_waves

level = parse_level("x\n^")
print(level.width, level.height, len(level.path))  # 1 2 4

layout = build_layout(level, random.Random(0))
print(layout.start.x, layout.start.y)

manager = WaveManager()
manager.load(test_waves())
manager.start_next_wave()
print(manager.remaining_waves())  # 3

group = None
while group is None:
    group = manager.tick(0.25)
print([enemy.name for enemy in group])  # ['Minor Trooper']
```

## What it does not do

The package holds game state and rules only. It draws nothing, plays no
sound, reads no keyboard or mouse input, and runs no physics: callers pass
in time deltas, pointer states and enemy counts, and act on what comes
back. There are no towers, attacks or status effects, no player money or
health store, and no command or game loop to start a game.