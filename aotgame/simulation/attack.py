"""The attacking side of a simulation: attackers and their EMPs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Mapping, Sequence

from ..errors import LookupKeyError
from ..models import AttackerType, AttackType, NewAttacker
from .attacker import Attacker
from .blocks import BuildingsManager
from .emp import Emps
from .frames import RenderAttacker, get_minute

if TYPE_CHECKING:
    from .defense import DefenseManager


@dataclass
class AttackManager:
    """All attackers of one attack, keyed by id, and their EMPs."""

    attackers: dict[int, Attacker] = field(default_factory=dict)
    no_of_attackers: int = 0
    emps: Emps = field(default_factory=Emps)

    @classmethod
    def create(
        cls,
        new_attackers: Sequence[NewAttacker],
        attacker_types: Mapping[int, AttackerType],
        emp_types: Mapping[int, AttackType],
    ) -> AttackManager:
        """Set up the submitted attackers, numbering them from 1."""
        attackers: dict[int, Attacker] = {}
        for number, new_attacker in enumerate(new_attackers, start=1):
            try:
                attacker_type = attacker_types[new_attacker.attacker_type]
            except KeyError:
                raise LookupKeyError(new_attacker.attacker_type, "attacker_types") from None
            attackers[number] = Attacker.create(new_attacker.attacker_path, attacker_type, number)
        return cls(
            attackers=attackers,
            no_of_attackers=len(new_attackers),
            emps=Emps.create(attackers, emp_types),
        )

    def update_positions(self, frames_passed: int) -> None:
        """Move every attacker for this frame."""
        for attacker in self.attackers.values():
            attacker.move(frames_passed)

    def simulate_attack(
        self,
        frames_passed: int,
        buildings_manager: BuildingsManager,
        defense_manager: DefenseManager,
    ) -> None:
        """Move the attackers and set off the EMPs due this frame."""
        self.update_positions(frames_passed)
        self.emps.simulate(
            get_minute(frames_passed),
            buildings_manager,
            defense_manager.defenders,
            self.attackers,
        )

    def attacker_positions(self) -> dict[int, list[RenderAttacker]]:
        """Render and commit every attacker's frame, by attacker id."""
        return {attacker.id: attacker.post_simulate() for attacker in self.attackers.values()}