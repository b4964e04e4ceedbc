"""Defenders that leave their huts to chase attackers and return afterwards."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from ..errors import EmptyDefenderPathError, LookupKeyError, ShortestPathNotFoundError
from ..models import DefenderType, MapSpace
from .attacker import Attacker
from .blocks import SourceDest
from .frames import RenderDefender

Point = tuple[int, int]
ShortestPaths = Mapping[SourceDest, list[Point]]


@dataclass
class DefenderPathStats:
    """A defender's state at one step of the current frame."""

    x_coord: int
    y_coord: int
    is_alive: bool


@dataclass
class Defender:
    """A defender and the path it is following.

    ``path`` is stored with the defender's current position last.
    ``path_in_current_frame`` lists this frame's steps, latest first.
    """

    id: int
    defender_type: int
    radius: int
    speed: int
    damage: int
    hut_x: int
    hut_y: int
    path: list[Point]
    is_alive: bool = True
    damage_dealt: bool = False
    target_id: int | None = None
    path_in_current_frame: list[DefenderPathStats] = field(default_factory=list)

    def _position(self) -> Point:
        if not self.path:
            raise EmptyDefenderPathError()
        return self.path[-1]

    def _stats(self, point: Point) -> DefenderPathStats:
        return DefenderPathStats(x_coord=point[0], y_coord=point[1], is_alive=self.is_alive)

    def move_to_hut(self) -> None:
        """Take up to ``speed`` steps along the current path."""
        self._position()
        split_at = len(self.path) - self.speed if len(self.path) > self.speed else 1
        frame = [self._stats(point) for point in self.path[split_at:]]
        del self.path[split_at:]
        frame.insert(0, self._stats(self._position()))
        frame.pop()
        self.path_in_current_frame = frame

    def _render(self, stats: DefenderPathStats) -> RenderDefender:
        return RenderDefender(
            defender_id=self.id,
            x_position=stats.x_coord,
            y_position=stats.y_coord,
            is_alive=stats.is_alive,
            defender_type=self.defender_type,
        )


class MovementType(enum.Enum):
    """Who moves at one sub-step of a chase."""

    ATTACKER = "attacker"
    DEFENDER = "defender"
    ATTACKER_AND_DEFENDER = "attacker_and_defender"


def generate_movement_sequence(attacker_speed: int, defender_speed: int) -> list[MovementType]:
    """Interleave the steps of an attacker and a defender moving at their speeds."""
    defender_times = deque(step * attacker_speed for step in range(1, defender_speed + 1))
    attacker_times = deque(step * defender_speed for step in range(1, attacker_speed + 1))
    sequence: list[MovementType] = []
    while attacker_times or defender_times:
        if not attacker_times or not defender_times:
            raise ValueError(
                f"cannot interleave speeds {attacker_speed} and {defender_speed}"
            )
        if attacker_times[0] == defender_times[0]:
            attacker_times.popleft()
            defender_times.popleft()
            sequence.append(MovementType.ATTACKER_AND_DEFENDER)
        elif attacker_times[0] > defender_times[0]:
            defender_times.popleft()
            sequence.append(MovementType.DEFENDER)
        else:
            attacker_times.popleft()
            sequence.append(MovementType.ATTACKER)
    return sequence


def _shortest_path(shortest_paths: ShortestPaths, source_dest: SourceDest) -> list[Point]:
    try:
        return list(shortest_paths[source_dest])
    except KeyError:
        raise ShortestPathNotFoundError(source_dest) from None


def reassign_defender(defender: Defender, shortest_paths: ShortestPaths) -> None:
    """Send the defender back along the shortest path to its hut."""
    x, y = defender._position()
    source_dest = SourceDest(source_x=x, source_y=y, dest_x=defender.hut_x, dest_y=defender.hut_y)
    path = _shortest_path(shortest_paths, source_dest)
    path.reverse()
    defender.path = path


def assign_defender(
    defender: Defender, attackers: Mapping[int, Attacker], shortest_paths: ShortestPaths
) -> None:
    """Target the nearest live attacker that came within the defender's radius."""
    defender_x, defender_y = defender._position()
    defender.path_in_current_frame.append(defender._stats((defender_x, defender_y)))
    target_id: int | None = None
    optimal_path: list[Point] = []
    optimal_distance: int | None = None
    for attacker in attackers.values():
        frame = attacker.path_in_current_frame
        if not frame[0].is_alive:
            continue
        for stats in reversed(frame):
            step = stats.attacker_path
            distance = (step.x_coord - defender_x) ** 2 + (step.y_coord - defender_y) ** 2
            if distance > defender.radius**2:
                continue
            if optimal_distance is None or distance < optimal_distance:
                destination = frame[0].attacker_path
                source_dest = SourceDest(
                    source_x=destination.x_coord,
                    source_y=destination.y_coord,
                    dest_x=defender_x,
                    dest_y=defender_y,
                )
                optimal_distance = distance
                target_id = attacker.id
                optimal_path = _shortest_path(shortest_paths, source_dest)
            break
    defender.target_id = target_id
    if target_id is not None:
        defender.path = optimal_path


def _attacker_position(attacker: Attacker, position: int) -> Point:
    step = attacker.path_in_current_frame[position].attacker_path
    return step.x_coord, step.y_coord


def _damage_attacker(attacker: Attacker, defender: Defender, position: int) -> None:
    defender.damage_dealt = True
    attacker.take_damage(defender.damage, position)
    defender.is_alive = False


def _move_defender(attacker: Attacker, defender: Defender, position: int) -> None:
    if defender.is_alive and len(defender.path) > 1:
        defender.path.pop()
        if _attacker_position(attacker, position) == defender._position():
            _damage_attacker(attacker, defender, position)
        defender.path_in_current_frame.insert(0, defender._stats(defender.path[-1]))


def _move_attacker(attacker: Attacker, position: int, defender: Defender) -> int:
    if position > 0 and attacker.path_in_current_frame[position].is_alive:
        position -= 1
        attacker_pos = _attacker_position(attacker, position)
        if len(defender.path) > 1 and defender.is_alive:
            if defender.path[1] == attacker_pos:
                del defender.path[0]
            else:
                defender.path.insert(0, attacker_pos)
            if attacker_pos == defender._position():
                _damage_attacker(attacker, defender, position)
    return position


def _chase(defender: Defender, attacker: Attacker) -> None:
    position = len(attacker.path_in_current_frame) - 1
    for movement in generate_movement_sequence(attacker.speed, defender.speed):
        if not defender.is_alive:
            break
        if movement is not MovementType.DEFENDER:
            position = _move_attacker(attacker, position, defender)
        if movement is not MovementType.ATTACKER:
            _move_defender(attacker, defender, position)


@dataclass
class Defenders:
    """All defenders of a map, strongest first."""

    defenders: list[Defender] = field(default_factory=list)

    def __iter__(self) -> Iterator[Defender]:
        return iter(self.defenders)

    def __len__(self) -> int:
        return len(self.defenders)

    @classmethod
    def from_map(cls, placements: Iterable[tuple[MapSpace, DefenderType]]) -> Defenders:
        """Place a defender at each hut; ids follow the order of ``placements``."""
        defenders = [
            Defender(
                id=number,
                defender_type=defender_type.id,
                radius=defender_type.radius,
                speed=defender_type.speed,
                damage=defender_type.damage,
                hut_x=space.x_coordinate,
                hut_y=space.y_coordinate,
                path=[(space.x_coordinate, space.y_coordinate)],
            )
            for number, (space, defender_type) in enumerate(placements, start=1)
        ]
        # Strongest first, so they strike first when several reach one attacker.
        defenders.sort(key=lambda defender: defender.damage, reverse=True)
        return cls(defenders)

    def simulate(self, attackers: Mapping[int, Attacker], shortest_paths: ShortestPaths) -> None:
        """Advance every defender by one frame."""
        without_target: set[int] = set()
        for defender in self.defenders:
            defender.path_in_current_frame.clear()
            if not defender.is_alive:
                continue
            if defender.target_id is not None:
                try:
                    attacker = attackers[defender.target_id]
                except KeyError:
                    raise LookupKeyError(defender.target_id, "attackers") from None
                if not attacker.path_in_current_frame[0].is_alive:
                    reassign_defender(defender, shortest_paths)
                    defender.move_to_hut()
                    defender.target_id = None
                    defender.move_to_hut()
                    continue
                _chase(defender, attacker)
            elif len(defender.path) > 1:
                defender.move_to_hut()
            else:
                without_target.add(defender.id)
        for defender in self.defenders:
            if defender.is_alive and defender.id in without_target:
                assign_defender(defender, attackers, shortest_paths)

    def post_simulate(self) -> dict[int, list[RenderDefender]]:
        """Render each defender's steps of this frame, padded to its speed."""
        rendered: dict[int, list[RenderDefender]] = {}
        for defender in self.defenders:
            frame = defender.path_in_current_frame
            if not frame:
                frame.append(defender._stats(defender._position()))
            positions = [defender._render(stats) for stats in reversed(frame)]
            while len(positions) < defender.speed:
                positions.append(defender._render(frame[0]))
            rendered[defender.id] = positions
        return rendered

    def initial_positions(self) -> list[RenderDefender]:
        """Where every defender stands before the simulation starts."""
        return [
            RenderDefender(
                defender_id=defender.id,
                x_position=defender._position()[0],
                y_position=defender._position()[1],
                is_alive=True,
                defender_type=defender.defender_type,
            )
            for defender in self.defenders
        ]

    def take_damage(self, x_position: int, y_position: int) -> None:
        """Kill every defender standing on the given cell."""
        for defender in self.defenders:
            if defender._position() == (x_position, y_position):
                defender.is_alive = False