"""The defending side of a simulation: defenders and mines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .blocks import BuildingsManager
from .defender import Defenders
from .frames import attacker_allowed
from .mine import Mines

if TYPE_CHECKING:
    from .attack import AttackManager


@dataclass
class DefenseManager:
    """The defenders and mines of one map."""

    defenders: Defenders = field(default_factory=Defenders)
    mines: Mines = field(default_factory=Mines)

    def simulate(
        self,
        attack_manager: AttackManager,
        buildings_manager: BuildingsManager,
        frames_passed: int,
    ) -> None:
        """Let mines and defenders act, once attackers are allowed to move."""
        if not attacker_allowed(frames_passed):
            return
        self.mines.simulate(attack_manager.attackers)
        self.defenders.simulate(attack_manager.attackers, buildings_manager.shortest_paths)