"""Attackers walking their routes frame by frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..errors import EmptyAttackerPathError
from ..models import AttackerPath, AttackerType, NewAttackerPath
from .frames import RenderAttacker, attacker_allowed


@dataclass
class AttackPathStats:
    """An attacker's state at one step of the current frame."""

    attacker_path: AttackerPath
    health: int
    is_alive: bool


@dataclass
class Attacker:
    """An attacker and the route it has still to walk.

    ``path`` is stored last step first, so its final element is the
    attacker's current position. ``path_in_current_frame`` lists the steps
    taken this frame, destination first and starting point last.
    """

    id: int
    path: list[AttackerPath]
    emps_used: int
    health: int
    speed: int
    attacker_type: int
    is_alive: bool = True
    path_in_current_frame: list[AttackPathStats] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        path: Sequence[NewAttackerPath],
        attacker_type: AttackerType,
        attacker_id: int,
    ) -> Attacker:
        """An attacker at the start of its route, with steps numbered from 1."""
        steps = [
            AttackerPath(
                id=number,
                y_coord=step.y_coord,
                x_coord=step.x_coord,
                is_emp=step.is_emp,
                emp_type=step.emp_type,
                emp_time=step.emp_time,
            )
            for number, step in enumerate(path, start=1)
        ]
        steps.reverse()
        return cls(
            id=attacker_id,
            path=steps,
            emps_used=sum(1 for step in path if step.is_emp),
            health=attacker_type.max_health,
            speed=attacker_type.speed,
            attacker_type=attacker_type.id,
        )

    def _current(self) -> AttackerPath:
        if not self.path:
            raise EmptyAttackerPathError()
        return self.path[-1]

    def _stats(self, step: AttackerPath) -> AttackPathStats:
        return AttackPathStats(attacker_path=step, health=self.health, is_alive=self.is_alive)

    def move(self, frames_passed: int) -> None:
        """Take up to ``speed`` steps along the route for this frame."""
        self.path_in_current_frame.clear()
        if not attacker_allowed(frames_passed):
            self.path_in_current_frame.append(self._stats(self._current()))
            return
        if self.is_alive and len(self.path) > 1:
            split_at = len(self.path) - self.speed if len(self.path) > self.speed else 1
            self.path_in_current_frame = [self._stats(step) for step in self.path[split_at:]]
            del self.path[split_at:]
        self.path_in_current_frame.insert(0, self._stats(self._current()))

    def is_planted(self, path_id: int) -> bool:
        """Whether the attacker has reached the step numbered ``path_id``."""
        return self._current().id >= path_id

    def take_damage(self, damage: int, current_attacker_pos: int) -> None:
        """Damage every step of this frame from the destination up to
        ``current_attacker_pos``."""
        for stats in self.path_in_current_frame[: current_attacker_pos + 1]:
            stats.health -= damage
            if stats.health <= 0:
                stats.is_alive = False
                stats.health = 0

    def _render(self, stats: AttackPathStats) -> RenderAttacker:
        step = stats.attacker_path
        return RenderAttacker(
            attacker_id=self.id,
            health=stats.health,
            x_position=step.x_coord,
            y_position=step.y_coord,
            is_alive=stats.is_alive,
            emp_id=step.id if step.is_emp else 0,
            attacker_type=self.attacker_type,
        )

    def post_simulate(self) -> list[RenderAttacker]:
        """Render this frame's steps and commit where the attacker ended up.

        Movement stops at the first step where the attacker is dead; steps
        not taken are returned to the route.
        """
        frame = self.path_in_current_frame
        rendered: list[RenderAttacker] = []
        if not frame:
            frame.append(self._stats(self._current()))
        while len(frame) > 1 and frame[-1].is_alive:
            frame.pop()
            rendered.append(self._render(frame[-1]))
        while len(rendered) < self.speed:
            rendered.append(self._render(frame[-1]))

        destination = frame[-1]
        self.health = destination.health
        self.is_alive = destination.is_alive

        del frame[0]
        self.path.extend(stats.attacker_path for stats in frame)
        frame.clear()
        return rendered