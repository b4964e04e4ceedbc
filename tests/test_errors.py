from datetime import datetime

import pytest

from aotgame.errors import (
    EmpDetailsError,
    EmptyAttackerPathError,
    EmptyDefenderPathError,
    GameError,
    LookupKeyError,
    MapSpaceRotationError,
    NoActiveLevelError,
    ShortestPathNotFoundError,
    SimulationError,
    UsernameConflictError,
    UsernameTooShortError,
    UserNotFoundError,
)


def _handler_that_catches(error):
    try:
        raise error
    except SimulationError as caught:
        return "simulation", caught
    except GameError as caught:
        return "game", caught
    except Exception as caught:  # pragma: no cover - reached only on a wrong hierarchy
        return "other", caught


@pytest.mark.parametrize(
    "error",
    [
        EmpDetailsError(3),
        EmptyAttackerPathError(),
        EmptyDefenderPathError(),
        LookupKeyError(7, "emp_types"),
        MapSpaceRotationError(9),
        ShortestPathNotFoundError((1, 2, 3, 4)),
    ],
)
def test_simulation_errors_share_base(error):
    handler, caught = _handler_that_catches(error)
    assert handler == "simulation"
    assert caught is error
    with pytest.raises(GameError) as info:
        raise error
    assert info.value is error


def test_emp_details_error_keeps_path_id():
    error = EmpDetailsError(12)
    assert error.path_id == 12
    assert "12" in str(error)


def test_lookup_key_error_fields_and_message():
    error = LookupKeyError(5, "attacker_types")
    assert error.key == 5
    assert error.hashmap == "attacker_types"
    assert "attacker_types" in str(error)
    with pytest.raises(KeyError):
        raise error


def test_shortest_path_error_keeps_endpoints():
    endpoints = (0, 1, 2, 3)
    error = ShortestPathNotFoundError(endpoints)
    assert error.source_dest == endpoints


def test_map_space_rotation_error_id():
    assert MapSpaceRotationError(44).map_space_id == 44


def test_user_errors_messages():
    assert str(UsernameTooShortError("abc")) == "Username should contain atleast 6 characters"
    assert str(UsernameConflictError("player")) == "Username already exists"
    assert str(UserNotFoundError(4)) == "User not found"


@pytest.mark.parametrize(
    "error",
    [UsernameTooShortError("a"), UsernameConflictError("b"), UserNotFoundError(1)],
)
def test_user_errors_are_not_simulation_errors(error):
    handler, caught = _handler_that_catches(error)
    assert handler == "game"
    assert caught is error


def test_no_active_level_error_keeps_moment():
    moment = datetime(2024, 1, 1)
    error = NoActiveLevelError(moment)
    assert error.moment == moment
    with pytest.raises(LookupError):
        raise error