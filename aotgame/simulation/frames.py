"""Per-frame render records and frame timing rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import ATTACKER_RESTRICTED_FRAMES, GAME_MINUTES_PER_FRAME


@dataclass(frozen=True)
class RenderAttacker:
    """An attacker's state at one sub-step of a frame."""

    attacker_id: int
    health: int
    x_position: int
    y_position: int
    is_alive: bool
    emp_id: int
    attacker_type: int


@dataclass(frozen=True)
class RenderDefender:
    """A defender's state at one sub-step of a frame."""

    defender_id: int
    x_position: int
    y_position: int
    is_alive: bool
    defender_type: int


@dataclass(frozen=True)
class RenderMine:
    """A mine's state at the end of a frame."""

    mine_id: int
    x_position: int
    y_position: int
    mine_type: int
    is_activated: bool


@dataclass(frozen=True)
class BuildingStats:
    """The population of one building."""

    map_space_id: int
    population: int


@dataclass
class RenderSimulation:
    """Everything needed to draw one simulated frame."""

    attackers: dict[int, list[RenderAttacker]] = field(default_factory=dict)
    defenders: dict[int, list[RenderDefender]] = field(default_factory=dict)
    mines: dict[int, RenderMine] = field(default_factory=dict)
    buildings: list[BuildingStats] = field(default_factory=list)


def attacker_allowed(frames_passed: int) -> bool:
    """Whether attackers may act once ``frames_passed`` frames have run."""
    return frames_passed > ATTACKER_RESTRICTED_FRAMES


def get_minute(frames_passed: int) -> int:
    """The game minute reached after ``frames_passed`` frames."""
    return frames_passed * GAME_MINUTES_PER_FRAME