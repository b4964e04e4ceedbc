"""EMP blasts planted by attackers along their routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from ..constants import MAP_SIZE
from ..errors import EmpDetailsError, LookupKeyError
from ..models import AttackType
from .attacker import Attacker
from .blocks import BuildingsManager
from .defender import Defenders


@dataclass(frozen=True)
class Emp:
    """An EMP planted at one step of an attacker's route."""

    path_id: int
    x_coord: int
    y_coord: int
    radius: int
    damage: int
    attacker_id: int

    def cells(self) -> Iterator[tuple[int, int]]:
        """The map cells inside the blast radius."""
        radius = self.radius
        for x in range(self.x_coord - radius, self.x_coord + radius + 1):
            for y in range(self.y_coord - radius, self.y_coord + radius + 1):
                if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
                    continue
                if (x - self.x_coord) ** 2 + (y - self.y_coord) ** 2 > radius**2:
                    continue
                yield x, y


def _hit_attacker(attacker: Attacker, x: int, y: int, damage: int) -> None:
    steps = list(enumerate(attacker.path_in_current_frame))
    for index, stats in reversed(steps):
        step = stats.attacker_path
        if step.x_coord == x and step.y_coord == y:
            attacker.take_damage(damage, index)
            break


@dataclass
class Emps:
    """Every EMP of an attack, keyed by the game minute it goes off."""

    emps: dict[int, list[Emp]] = field(default_factory=dict)

    @classmethod
    def create(
        cls, attackers: Mapping[int, Attacker], emp_types: Mapping[int, AttackType]
    ) -> Emps:
        """Collect the EMPs on the attackers' routes.

        ``emp_types`` maps EMP type ids to their radius and damage.
        """
        emps: dict[int, list[Emp]] = {}
        for attacker_id, attacker in attackers.items():
            for step in attacker.path:
                if not step.is_emp:
                    continue
                if step.emp_type is None or step.emp_time is None:
                    raise EmpDetailsError(step.id)
                try:
                    emp_type = emp_types[step.emp_type]
                except KeyError:
                    raise LookupKeyError(step.emp_type, "emp_types") from None
                emps.setdefault(step.emp_time, []).append(
                    Emp(
                        path_id=step.id,
                        x_coord=step.x_coord,
                        y_coord=step.y_coord,
                        radius=emp_type.attack_radius,
                        damage=emp_type.attack_damage,
                        attacker_id=attacker_id,
                    )
                )
        return cls(emps)

    def simulate(
        self,
        minute: int,
        buildings_manager: BuildingsManager,
        defenders: Defenders,
        attackers: Mapping[int, Attacker],
    ) -> set[int]:
        """Set off the EMPs due at ``minute`` whose attacker has planted them.

        Defenders and attackers inside a blast are damaged. Returns the map
        space ids of the buildings hit.
        """
        affected: set[int] = set()
        for emp in self.emps.get(minute, ()):
            try:
                owner = attackers[emp.attacker_id]
            except KeyError:
                raise LookupKeyError(emp.attacker_id, "attackers") from None
            if not owner.is_planted(emp.path_id):
                continue
            for x, y in emp.cells():
                defenders.take_damage(x, y)
                for attacker in attackers.values():
                    _hit_attacker(attacker, x, y, emp.damage)
                building_id = buildings_manager.buildings_grid[x][y]
                if building_id != 0:
                    affected.add(building_id)
        return affected