"""Mines that explode once when an attacker comes within range."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from ..models import MapSpace, MineType
from .attacker import Attacker
from .frames import RenderMine


@dataclass
class Mine:
    """A mine placed on the map; it stays armed until it goes off."""

    id: int
    mine_type: int
    damage: int
    radius: int
    x_position: int
    y_position: int
    is_activated: bool = True

    def render(self) -> RenderMine:
        return RenderMine(
            mine_id=self.id,
            x_position=self.x_position,
            y_position=self.y_position,
            mine_type=self.mine_type,
            is_activated=self.is_activated,
        )


@dataclass
class Mines:
    """All mines of a map."""

    mines: list[Mine] = field(default_factory=list)

    def __iter__(self) -> Iterator[Mine]:
        return iter(self.mines)

    def __len__(self) -> int:
        return len(self.mines)

    @classmethod
    def from_map(cls, placements: Iterable[tuple[MapSpace, MineType]]) -> Mines:
        """Arm a mine at each placement, numbering them from 1."""
        return cls(
            [
                Mine(
                    id=number,
                    mine_type=mine_type.id,
                    damage=mine_type.damage,
                    radius=mine_type.radius,
                    x_position=space.x_coordinate,
                    y_position=space.y_coordinate,
                )
                for number, (space, mine_type) in enumerate(placements, start=1)
            ]
        )

    def simulate(self, attackers: Mapping[int, Attacker]) -> None:
        """Set off armed mines near any attacker's steps this frame.

        An attacker is damaged from the first step, counted from its
        starting point, that comes within range.
        """
        for mine in self.mines:
            if not mine.is_activated:
                continue
            for attacker in attackers.values():
                steps = list(enumerate(attacker.path_in_current_frame))
                for index, stats in reversed(steps):
                    step = stats.attacker_path
                    distance = (mine.x_position - step.x_coord) ** 2 + (
                        mine.y_position - step.y_coord
                    ) ** 2
                    if distance <= mine.radius**2:
                        attacker.take_damage(mine.damage, index)
                        mine.is_activated = False
                        break

    def post_simulate(self) -> dict[int, RenderMine]:
        """The state of every mine after this frame, by mine id."""
        return {mine.id: mine.render() for mine in self.mines}

    def initial_mines(self) -> list[RenderMine]:
        """The state of every mine before the simulation starts."""
        return [mine.render() for mine in self.mines]