"""Exceptions raised by the game logic and the simulation."""

from __future__ import annotations

from typing import Any


class GameError(Exception):
    """Base class for every error raised by this package."""


class SimulationError(GameError):
    """Base class for errors raised while running a simulation."""


class EmpDetailsError(SimulationError):
    """An EMP path step lacks its type or its activation time."""

    def __init__(self, path_id: int) -> None:
        self.path_id = path_id
        super().__init__(f"EmpDetailsError {{ path_id: {path_id} }}")


class EmptyAttackerPathError(SimulationError):
    """An attacker has no path left."""

    def __init__(self) -> None:
        super().__init__("EmptyAttackerPathError")


class EmptyDefenderPathError(SimulationError):
    """A defender has no path left."""

    def __init__(self) -> None:
        super().__init__("EmptyDefenderPathError")


class LookupKeyError(SimulationError, KeyError):
    """A key was missing from one of the simulation's lookup tables."""

    def __init__(self, key: Any, hashmap: str) -> None:
        self.key = key
        self.hashmap = hashmap
        super().__init__(f"KeyError {{ key: {key!r}, hashmap: {hashmap!r} }}")

    def __str__(self) -> str:
        return self.args[0]


class MapSpaceRotationError(SimulationError):
    """A map space carries a rotation that is not a multiple of 90 degrees."""

    def __init__(self, map_space_id: int) -> None:
        self.map_space_id = map_space_id
        super().__init__(f"MapSpaceRotationError {{ map_space_id: {map_space_id} }}")


class ShortestPathNotFoundError(SimulationError):
    """No precomputed shortest path exists between two points."""

    def __init__(self, source_dest: Any) -> None:
        self.source_dest = source_dest
        super().__init__(f"ShortestPathNotFoundError({source_dest!r})")


class UsernameTooShortError(GameError, ValueError):
    """A username is shorter than the allowed minimum."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username should contain atleast 6 characters")


class UsernameConflictError(GameError):
    """A username is already taken by another user."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__("Username already exists")


class UserNotFoundError(GameError, LookupError):
    """The requested user does not exist."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__("User not found")


class NoActiveLevelError(GameError, LookupError):
    """No level fixture is running at the given moment."""

    def __init__(self, moment: Any) -> None:
        self.moment = moment
        super().__init__(f"no level fixture is active at {moment}")