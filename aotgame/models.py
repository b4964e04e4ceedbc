"""Records describing users, games, maps and game entity types."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping


def _require(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing field {key!r}") from None


class BlockCategory(enum.Enum):
    """Kind of block placed on a map."""

    BUILDING = "building"
    DEFENDER = "defender"
    MINE = "mine"


@dataclass
class AttackType:
    id: int
    att_type: str
    attack_radius: int
    attack_damage: int


@dataclass(frozen=True)
class AttackerPath:
    """One numbered step of an attacker's route."""

    id: int
    y_coord: int
    x_coord: int
    is_emp: bool
    emp_type: int | None = None
    emp_time: int | None = None


@dataclass(frozen=True)
class NewAttackerPath:
    """A route step as submitted by a player."""

    y_coord: int
    x_coord: int
    is_emp: bool
    emp_type: int | None = None
    emp_time: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NewAttackerPath:
        """Build a step from decoded JSON."""
        return cls(
            y_coord=int(_require(data, "y_coord")),
            x_coord=int(_require(data, "x_coord")),
            is_emp=bool(_require(data, "is_emp")),
            emp_type=data.get("emp_type"),
            emp_time=data.get("emp_time"),
        )


@dataclass
class NewAttacker:
    """An attacker as submitted by a player: its type and its route."""

    attacker_type: int
    attacker_path: list[NewAttackerPath] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> NewAttacker:
        """Build an attacker from decoded JSON."""
        return cls(
            attacker_type=int(_require(data, "attacker_type")),
            attacker_path=[
                NewAttackerPath.from_dict(step) for step in _require(data, "attacker_path")
            ],
        )


@dataclass
class BuildingType:
    id: int
    name: str
    width: int
    height: int
    capacity: int
    level: int
    cost: int
    hp: int


@dataclass
class Artifact:
    map_space_id: int
    count: int


@dataclass
class Game:
    id: int
    attack_id: int
    defend_id: int
    map_layout_id: int
    attack_score: int
    defend_score: int
    artifacts_collected: int
    emps_used: int
    is_attacker_alive: bool
    damage_done: int


@dataclass
class LevelsFixture:
    id: int
    start_date: datetime
    end_date: datetime
    no_of_bombs: int
    rating_factor: float
    no_of_attackers: int


@dataclass
class LevelConstraints:
    level_id: int
    no_of_buildings: int
    building_id: int


@dataclass
class MapLayout:
    id: int
    player: int
    level_id: int
    is_valid: bool = False


@dataclass
class MapSpace:
    id: int
    map_id: int
    x_coordinate: int
    y_coordinate: int
    block_type_id: int


@dataclass
class ShortestPath:
    base_id: int
    source_x: int
    source_y: int
    dest_x: int
    dest_y: int
    pathlist: str


@dataclass
class User:
    id: int
    name: str
    email: str
    username: str
    is_pragyan: bool
    attacks_won: int
    defenses_won: int
    trophies: int
    avatar_id: int
    artifacts: int


@dataclass
class UpdateUser:
    """A partial change to a user's profile; unset fields are left alone."""

    name: str | None = None
    username: str | None = None
    avatar_id: int | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UpdateUser:
        """Build an update from decoded JSON, ignoring unknown keys."""
        return cls(
            name=data.get("name"),
            username=data.get("username"),
            avatar_id=data.get("avatar_id"),
        )

    def apply(self, user: User) -> User:
        """Return a copy of ``user`` with the set fields replaced."""
        changes = {
            name: value
            for name, value in dataclasses.asdict(self).items()
            if value is not None
        }
        return dataclasses.replace(user, **changes)


@dataclass
class SimulationLog:
    game_id: int
    log_text: str


@dataclass
class MineType:
    id: int
    radius: int
    damage: int
    level: int
    cost: int


@dataclass
class DefenderType:
    id: int
    speed: int
    damage: int
    radius: int
    level: int
    cost: int


@dataclass
class BlockType:
    id: int
    defender_type: int | None
    mine_type: int | None
    category: BlockCategory
    building_type: int


@dataclass
class AttackerType:
    id: int
    max_health: int
    speed: int
    amt_of_emps: int
    level: int
    cost: int
    name: str