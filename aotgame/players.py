"""Player accounts, profile statistics and level fixture rules."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Iterable, Sequence

from .constants import INITIAL_RATING, MIN_USERNAME_LENGTH
from .errors import NoActiveLevelError, UsernameConflictError, UsernameTooShortError
from .models import Game, LevelsFixture, User


@dataclass
class StatsResponse:
    """A player's profile statistics."""

    highest_attack_score: int = 0
    highest_defense_score: int = 0
    trophies: int = 0
    position_in_leaderboard: int = 0
    no_of_emps_used: int = 0
    total_damage_defense: int = 0
    total_damage_attack: int = 0
    no_of_attackers_suicided: int = 0
    no_of_attacks: int = 0
    no_of_defenses: int = 0

    def to_dict(self) -> dict[str, int]:
        return asdict(self)


def make_response(
    user: User,
    attack_games: Sequence[Game],
    defense_games: Sequence[Game],
    users: Sequence[User],
) -> StatsResponse:
    """Summarise a player's games.

    ``attack_games`` must be ordered by attack score and ``defense_games`` by
    defence score, best first; ``users`` must be ordered by trophies, most first.
    """
    stats = StatsResponse(
        trophies=user.trophies,
        no_of_attacks=len(attack_games),
        no_of_defenses=len(defense_games),
    )
    if attack_games:
        stats.highest_attack_score = attack_games[0].attack_score
        stats.total_damage_attack = sum(game.damage_done for game in attack_games)
        stats.no_of_emps_used = sum(game.emps_used for game in attack_games)
        stats.no_of_attackers_suicided = sum(
            1 for game in attack_games if not game.is_attacker_alive
        )
    if defense_games:
        stats.highest_defense_score = defense_games[0].defend_score
        stats.total_damage_defense = sum(game.damage_done for game in defense_games)
    if users:
        rank = next((index for index, other in enumerate(users) if other.id == user.id), 0)
        stats.position_in_leaderboard = rank + 1
    return stats


def new_user(name: str, username: str, user_id: int) -> User:
    """A freshly registered user with the starting rating."""
    return User(
        id=user_id,
        name=name,
        email="",
        username=username,
        is_pragyan=False,
        attacks_won=0,
        defenses_won=0,
        trophies=INITIAL_RATING,
        avatar_id=0,
        artifacts=0,
    )


def check_registration(username: str, existing_users: Iterable[User]) -> str:
    """Validate a username for registration and return it.

    The length is counted in UTF-8 bytes.
    """
    if len(username.encode("utf-8")) < MIN_USERNAME_LENGTH:
        raise UsernameTooShortError(username)
    if any(user.username == username for user in existing_users):
        raise UsernameConflictError(username)
    return username


def check_username_update(user_id: int, duplicate: User | None) -> None:
    """Refuse a username change if another user already holds the name."""
    if duplicate is not None and duplicate.id != user_id:
        raise UsernameConflictError(duplicate.username)


def can_show_replay(
    requested_user: int,
    game: Game,
    levels_fixture: LevelsFixture,
    now: datetime | None = None,
) -> bool:
    """Whether ``requested_user`` may watch the replay of ``game``."""
    current = datetime.now() if now is None else now
    return (
        requested_user == game.attack_id
        or requested_user == game.defend_id
        or current > levels_fixture.start_date
    )


def current_levels_fixture(
    fixtures: Iterable[LevelsFixture], now: datetime | None = None
) -> LevelsFixture:
    """The first fixture running at ``now``: started, and not yet ended."""
    current = datetime.now() if now is None else now
    for fixture in fixtures:
        if fixture.start_date <= current < fixture.end_date:
            return fixture
    raise NoActiveLevelError(current)