# aotgame

An engine for a base attack and defence game. Attackers walk routes across a
40 × 40 map and plant EMPs. Defenders leave their huts to chase attackers, and
mines go off when an attacker comes within range. The package steps the battle
one frame at a time and returns render data for each frame. It also computes
player statistics from game records and checks usernames.

The package has no dependencies outside the standard library. It does no
database or network work. You build every input yourself from plain Python
objects: building types, map spaces, stored shortest paths, attacker types and
EMP types.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `aotgame.constants`: game-wide values. Examples are `MAP_SIZE` (40),
  `NO_OF_FRAMES` (240), `ATTACKER_RESTRICTED_FRAMES` (30),
  `GAME_MINUTES_PER_FRAME`, `WIN_THRESHOLD`, `INITIAL_RATING` and
  `MIN_USERNAME_LENGTH`.
- `aotgame.models`: dataclasses for the records the game works with.
  - General records: `User`, `Game`, `LevelsFixture`, `MapLayout`,
    `MapSpace`, `ShortestPath`.
  - Type records: `BuildingType`, `BlockType`, `BlockCategory`,
    `AttackerType`, `AttackType`, `DefenderType`, `MineType`.
  - Submitted data: `NewAttacker` and `NewAttackerPath`. Both have a
    `from_dict` that reads decoded JSON.
  - `UpdateUser`, a partial profile change. Its `apply` method returns an
    updated copy of a `User`.
- `aotgame.players`:
  - `new_user` creates an account with the starting rating.
  - `check_registration` raises `UsernameTooShortError` if the username is
    shorter than 6 UTF-8 bytes. It raises `UsernameConflictError` if the
    username is taken.
  - `check_username_update` raises `UsernameConflictError` if another user
    already holds the name.
  - `make_response` builds a `StatsResponse` from a player's attack games,
    defence games and the leaderboard. The response has a `to_dict` method.
  - `can_show_replay` decides who may watch a replay.
  - `current_levels_fixture` picks the fixture running at a given moment. It
    raises `NoActiveLevelError` if no fixture is running.
- `aotgame.errors`: the package's exceptions, all derived from `GameError`.
  Errors raised during a battle derive from `SimulationError`. These include
  `ShortestPathNotFoundError`, `EmpDetailsError`, `LookupKeyError`,
  `EmptyAttackerPathError` and `EmptyDefenderPathError`.
- `aotgame.simulation`:
  - `blocks`: `BuildingsManager`, `build_building_grid`,
    `build_shortest_paths` and `parse_pathlist`. `parse_pathlist` reads
    stored paths written as `(x,y)(x,y)...`.
  - `attacker`, `emp` and `attack`: `Attacker`, EMP blasts (`Emp`, `Emps`)
    and `AttackManager`.
  - `defender`, `mine` and `defense`: `Defender`, `Defenders`,
    `generate_movement_sequence`, `Mine`, `Mines` and `DefenseManager`.
  - `frames`: the render records. These are `RenderAttacker`,
    `RenderDefender`, `RenderMine`, `BuildingStats` and `RenderSimulation`.
    The module also has the timing helpers `attacker_allowed` and
    `get_minute`.
  - `simulator`: `Simulator`, which runs the frames.

## Running a battle

```python
from aotgame.constants import NO_OF_FRAMES
from aotgame.models import (
    AttackerType, AttackType, MapSpace, MineType, NewAttacker, NewAttackerPath,
)
from aotgame.simulation.attack import AttackManager
from aotgame.simulation.blocks import BuildingsManager
from aotgame.simulation.defense import DefenseManager
from aotgame.simulation.mine import Mines
from aotgame.simulation.simulator import Simulator

attacker_types = {
    1: AttackerType(id=1, max_health=100, speed=2, amt_of_emps=1,
                    level=1, cost=10, name="scout"),
}
emp_types = {1: AttackType(id=1, att_type="emp", attack_radius=2, attack_damage=30)}
route = [NewAttackerPath(y_coord=0, x_coord=x, is_emp=False) for x in range(10)]

attack = AttackManager.create(
    [NewAttacker(attacker_type=1, attacker_path=route)], attacker_types, emp_types
)
mine_site = MapSpace(id=1, map_id=1, x_coordinate=5, y_coordinate=0, block_type_id=3)
defense = DefenseManager(
    mines=Mines.from_map([(mine_site, MineType(id=1, radius=1, damage=40, level=1, cost=5))])
)
buildings = BuildingsManager.build([], {}, [])

simulator = Simulator(buildings, attack, defense, rating_factor=1.0)
for _ in range(NO_OF_FRAMES):
    frame = simulator.simulate()

print(simulator.attack_defence_metrics(), simulator.scores())
```

Each call to `Simulator.simulate()` advances the battle by one frame and
returns a `RenderSimulation` for that frame. It holds:

- each attacker's positions, keyed by attacker id;
- each defender's positions, keyed by defender id;
- each mine's state, keyed by mine id;
- each building's population.

Attackers stay still for the first `ATTACKER_RESTRICTED_FRAMES` frames, and
mines and defenders do not act during that time. `Simulator.defender_positions()`
and `Simulator.mines()` return the starting state.

`Simulator.attack_defence_metrics()` returns three counts: live attackers,
defenders that dealt damage, and mines that went off.

`Simulator.scores()` returns the attack score and the defence score.

When a defender chases an attacker, it looks up precomputed paths in
`BuildingsManager.shortest_paths`. If a path it needs is missing, the battle
raises `ShortestPathNotFoundError`.

## Limits

- `Simulator.damage_done()` always returns 60, so `Simulator.scores()` is
  always `(60, -60)`.
- Building populations start at 0 and nothing changes them.
- EMPs damage attackers and defenders inside the blast. `Emps.simulate`
  returns the buildings that were hit, but the buildings themselves are left
  unchanged.
- There is no storage, HTTP server, session handling or command-line
  program. Records are loaded and saved by whatever code uses the package.
- Bad input data does not always raise a `GameError`:
  - `parse_pathlist` and the `from_dict` constructors raise `ValueError` on
    malformed input.
  - `build_building_grid` raises `IndexError` when a building reaches outside
    the map.