import pytest

from aotgame.errors import EmpDetailsError, LookupKeyError
from aotgame.models import (
    AttackerType,
    AttackType,
    BuildingType,
    DefenderType,
    MapSpace,
    NewAttackerPath,
)
from aotgame.simulation.attacker import Attacker
from aotgame.simulation.blocks import BuildingsManager
from aotgame.simulation.defender import Defenders
from aotgame.simulation.emp import Emp, Emps

HEALTH = 100
EMP_DAMAGE = 30
ATTACKER_TYPE = AttackerType(
    id=1, max_health=HEALTH, speed=2, amt_of_emps=2, level=1, cost=0, name="tank"
)
EMP_TYPES = {
    1: AttackType(id=1, att_type="blast", attack_radius=1, attack_damage=EMP_DAMAGE),
    2: AttackType(id=2, att_type="wide", attack_radius=3, attack_damage=EMP_DAMAGE),
}


def step(x, y, *, is_emp=False, emp_type=None, emp_time=None):
    return NewAttackerPath(
        y_coord=y, x_coord=x, is_emp=is_emp, emp_type=emp_type, emp_time=emp_time
    )


def attacker_with(steps, attacker_id=1):
    return Attacker.create(steps, ATTACKER_TYPE, attacker_id)


def test_create_groups_emps_by_time():
    attacker = attacker_with(
        [
            step(1, 1),
            step(2, 2, is_emp=True, emp_type=1, emp_time=10),
            step(3, 3, is_emp=True, emp_type=1, emp_time=20),
        ]
    )
    emps = Emps.create({1: attacker}, EMP_TYPES)
    assert sorted(emps.emps) == [10, 20]
    assert emps.emps[10] == [
        Emp(path_id=2, x_coord=2, y_coord=2, radius=1, damage=EMP_DAMAGE, attacker_id=1)
    ]


def test_create_rejects_emp_without_time():
    attacker = attacker_with([step(1, 1, is_emp=True, emp_type=1)])
    with pytest.raises(EmpDetailsError) as info:
        Emps.create({1: attacker}, EMP_TYPES)
    assert info.value.path_id == 1


def test_create_rejects_unknown_emp_type():
    attacker = attacker_with([step(1, 1, is_emp=True, emp_type=9, emp_time=4)])
    with pytest.raises(LookupKeyError) as info:
        Emps.create({1: attacker}, EMP_TYPES)
    assert info.value.key == 9
    assert info.value.hashmap == "emp_types"


def test_blast_damages_attacker_standing_in_it():
    attacker = attacker_with([step(5, 5, is_emp=True, emp_type=1, emp_time=10)])
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    attacker.move(31)
    emps.simulate(10, BuildingsManager(), Defenders(), attackers)
    stats = attacker.path_in_current_frame[0]
    assert stats.health == HEALTH - EMP_DAMAGE
    assert stats.is_alive


def test_nothing_happens_at_other_minutes():
    attacker = attacker_with([step(5, 5, is_emp=True, emp_type=1, emp_time=10)])
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    attacker.move(31)
    assert emps.simulate(12, BuildingsManager(), Defenders(), attackers) == set()
    assert attacker.path_in_current_frame[0].health == HEALTH


def test_unplanted_emp_does_not_go_off():
    attacker = attacker_with(
        [step(5, 5), step(5, 6, is_emp=True, emp_type=1, emp_time=10)]
    )
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    attacker.move(30)
    emps.simulate(10, BuildingsManager(), Defenders(), attackers)
    assert attacker.path_in_current_frame[0].health == HEALTH


def test_blast_reports_buildings_hit():
    buildings = BuildingsManager.build(
        [MapSpace(id=7, map_id=1, x_coordinate=5, y_coordinate=6, block_type_id=3)],
        {3: BuildingType(id=2, name="hall", width=2, height=1, capacity=1, level=1, cost=0, hp=10)},
        [],
    )
    attacker = attacker_with([step(5, 5, is_emp=True, emp_type=1, emp_time=10)])
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    attacker.move(31)
    assert emps.simulate(10, buildings, Defenders(), attackers) == {7}


def test_blast_kills_defenders_inside_only():
    defender_type = DefenderType(id=3, speed=1, damage=10, radius=3, level=1, cost=0)
    defenders = Defenders.from_map(
        [
            (MapSpace(id=2, map_id=1, x_coordinate=4, y_coordinate=5, block_type_id=4), defender_type),
            (MapSpace(id=3, map_id=1, x_coordinate=20, y_coordinate=20, block_type_id=4), defender_type),
        ]
    )
    attacker = attacker_with([step(5, 5, is_emp=True, emp_type=1, emp_time=10)])
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    attacker.move(31)
    emps.simulate(10, BuildingsManager(), defenders, attackers)
    alive = {(d.hut_x, d.hut_y): d.is_alive for d in defenders}
    assert alive == {(4, 5): False, (20, 20): True}


def test_blast_at_map_corner_stays_on_the_map():
    attacker = attacker_with([step(0, 0, is_emp=True, emp_type=2, emp_time=8)])
    attackers = {1: attacker}
    emps = Emps.create(attackers, EMP_TYPES)
    cells = list(emps.emps[8][0].cells())
    assert all(x >= 0 and y >= 0 for x, y in cells)
    assert (0, 0) in cells
    attacker.move(31)
    emps.simulate(8, BuildingsManager(), Defenders(), attackers)
    assert attacker.path_in_current_frame[0].health == HEALTH - EMP_DAMAGE