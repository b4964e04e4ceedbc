import pytest

from aotgame.errors import LookupKeyError
from aotgame.models import AttackerType, AttackType, NewAttacker, NewAttackerPath
from aotgame.simulation.attack import AttackManager
from aotgame.simulation.blocks import BuildingsManager
from aotgame.simulation.defender import Defenders
from aotgame.simulation.defense import DefenseManager
from aotgame.simulation.frames import RenderAttacker
from aotgame.simulation.mine import Mines

HEALTH = 100
EMP_DAMAGE = 30
ATTACKER_TYPES = {
    1: AttackerType(id=1, max_health=HEALTH, speed=1, amt_of_emps=1, level=1, cost=0, name="scout"),
    2: AttackerType(id=2, max_health=50, speed=3, amt_of_emps=1, level=1, cost=0, name="runner"),
}
EMP_TYPES = {1: AttackType(id=1, att_type="blast", attack_radius=1, attack_damage=EMP_DAMAGE)}


def step(x, y, *, emp_time=None):
    return NewAttackerPath(
        y_coord=y,
        x_coord=x,
        is_emp=emp_time is not None,
        emp_type=1 if emp_time is not None else None,
        emp_time=emp_time,
    )


def empty_defense():
    return DefenseManager(defenders=Defenders(), mines=Mines())


def test_create_numbers_attackers_from_one():
    manager = AttackManager.create(
        [NewAttacker(1, [step(1, 1)]), NewAttacker(2, [step(2, 2)])],
        ATTACKER_TYPES,
        EMP_TYPES,
    )
    assert sorted(manager.attackers) == [1, 2]
    assert manager.no_of_attackers == 2
    assert manager.attackers[2].attacker_type == 2
    assert manager.attackers[1].health == HEALTH


def test_create_rejects_unknown_attacker_type():
    with pytest.raises(LookupKeyError) as info:
        AttackManager.create([NewAttacker(5, [step(1, 1)])], ATTACKER_TYPES, EMP_TYPES)
    assert info.value.key == 5
    assert info.value.hashmap == "attacker_types"


def test_create_collects_emps():
    manager = AttackManager.create(
        [NewAttacker(1, [step(1, 1), step(2, 2, emp_time=62)])], ATTACKER_TYPES, EMP_TYPES
    )
    assert list(manager.emps.emps) == [62]
    assert manager.emps.emps[62][0].attacker_id == 1


def test_attackers_wait_during_restricted_frames():
    manager = AttackManager.create(
        [NewAttacker(1, [step(1, 1), step(2, 2), step(3, 3)])], ATTACKER_TYPES, EMP_TYPES
    )
    manager.update_positions(30)
    frame = manager.attackers[1].path_in_current_frame
    assert [(s.attacker_path.x_coord, s.attacker_path.y_coord) for s in frame] == [(1, 1)]


def test_simulate_attack_moves_by_speed():
    manager = AttackManager.create(
        [NewAttacker(1, [step(1, 1), step(2, 2), step(3, 3)])], ATTACKER_TYPES, EMP_TYPES
    )
    manager.simulate_attack(31, BuildingsManager(), empty_defense())
    positions = manager.attacker_positions()
    assert positions == {
        1: [
            RenderAttacker(
                attacker_id=1,
                health=HEALTH,
                x_position=2,
                y_position=2,
                is_alive=True,
                emp_id=0,
                attacker_type=1,
            )
        ]
    }
    assert manager.attackers[1].path[-1].id == 2


def test_emp_goes_off_at_its_minute():
    manager = AttackManager.create(
        [NewAttacker(1, [step(3, 3, emp_time=62)])], ATTACKER_TYPES, EMP_TYPES
    )
    manager.simulate_attack(30, BuildingsManager(), empty_defense())
    manager.attacker_positions()
    assert manager.attackers[1].health == HEALTH
    manager.simulate_attack(31, BuildingsManager(), empty_defense())
    rendered = manager.attacker_positions()[1]
    assert rendered[0].health == HEALTH - EMP_DAMAGE
    assert rendered[0].emp_id == 1
    assert manager.attackers[1].health == HEALTH - EMP_DAMAGE


def test_positions_are_padded_to_speed():
    manager = AttackManager.create([NewAttacker(2, [step(4, 7)])], ATTACKER_TYPES, EMP_TYPES)
    manager.update_positions(5)
    rendered = manager.attacker_positions()[1]
    assert len(rendered) == ATTACKER_TYPES[2].speed
    assert {(r.x_position, r.y_position) for r in rendered} == {(4, 7)}