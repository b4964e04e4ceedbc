"""Frame-by-frame simulation of an attack on a base."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import WIN_THRESHOLD
from .attack import AttackManager
from .blocks import BuildingsManager
from .defense import DefenseManager
from .frames import RenderDefender, RenderMine, RenderSimulation

_FIXED_DAMAGE = 60


@dataclass
class Simulator:
    """Runs an attack against a base one frame at a time."""

    buildings_manager: BuildingsManager
    attack_manager: AttackManager
    defense_manager: DefenseManager
    rating_factor: float
    frames_passed: int = 0

    def damage_done(self) -> int:
        """The damage done to the base, as a percentage."""
        return _FIXED_DAMAGE

    def attack_defence_metrics(self) -> tuple[int, int, int]:
        """Live attackers, defenders that dealt damage, and mines set off."""
        live_attackers = sum(1 for a in self.attack_manager.attackers.values() if a.is_alive)
        used_defenders = sum(1 for d in self.defense_manager.defenders if d.damage_dealt)
        used_mines = sum(1 for m in self.defense_manager.mines if not m.is_activated)
        return live_attackers, used_defenders, used_mines

    def scores(self) -> tuple[int, int]:
        """The attack score and the defence score."""
        damage = self.damage_done()
        if damage < WIN_THRESHOLD:
            return damage - 100, 100 - damage
        return damage, -damage

    def defender_positions(self) -> list[RenderDefender]:
        """Where every defender stands before the simulation starts."""
        return self.defense_manager.defenders.initial_positions()

    def mines(self) -> list[RenderMine]:
        """Every mine before the simulation starts."""
        return self.defense_manager.mines.initial_mines()

    def simulate(self) -> RenderSimulation:
        """Run the next frame and render its outcome."""
        self.frames_passed += 1
        frames_passed = self.frames_passed
        self.attack_manager.simulate_attack(
            frames_passed, self.buildings_manager, self.defense_manager
        )
        self.defense_manager.simulate(
            self.attack_manager, self.buildings_manager, frames_passed
        )
        return RenderSimulation(
            attackers=self.attack_manager.attacker_positions(),
            defenders=self.defense_manager.defenders.post_simulate(),
            mines=self.defense_manager.mines.post_simulate(),
            buildings=self.buildings_manager.building_stats(),
        )