"""Per-record business rules for teams, players and games."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from src.models.game import (
    Game,
    GAME_STATUS_FINAL,
    GAME_STATUS_SCHEDULED,
    VALID_GAME_STATUSES,
)
from src.models.player import Player
from src.models.team import Team

EARLIEST_FOUNDED_DATE = date(1850, 1, 1)
EARLIEST_GAME_DATE = datetime(1900, 1, 1)

MAX_TEAM_NAME_LENGTH = 100
MAX_CITY_NAME_LENGTH = 50

MIN_PLAYER_AGE = 16
MAX_PLAYER_AGE = 50

MAX_REASONABLE_SCORE = 200

VALID_POSITIONS = frozenset({
    'Point Guard', 'PG',
    'Shooting Guard', 'SG',
    'Small Forward', 'SF',
    'Power Forward', 'PF',
    'Center', 'C',
    'Forward', 'Guard',
})


@dataclass
class ValidationVerdict:
    """Errors and warnings found on a single record."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'valid': self.is_valid,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
        }


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _as_naive_utc(value: datetime) -> datetime:
    """Aware timestamps are compared in UTC against the naive thresholds."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class ValidationRules:
    """Stateless rule set producing a verdict per record.

    Rules never raise; every problem becomes an error (record rejected) or a
    warning (record kept).
    """

    def validate_team(self, team: Optional[Team]) -> ValidationVerdict:
        verdict = ValidationVerdict()
        if team is None:
            verdict.add_error("Team object is null")
            return verdict

        if _is_blank(team.team_id):
            verdict.add_error("Team ID is required")
        if _is_blank(team.name):
            verdict.add_error("Team name is required")
        if _is_blank(team.city):
            verdict.add_error("Team city is required")
        if _is_blank(team.league):
            verdict.add_error("Team league is required")

        if team.founded is not None:
            if team.founded > date.today():
                verdict.add_error("Team founded date cannot be in the future")
            elif team.founded < EARLIEST_FOUNDED_DATE:
                verdict.add_warning(f"Team founded date seems unusually early: {team.founded}")

        if team.name and len(team.name) > MAX_TEAM_NAME_LENGTH:
            verdict.add_warning("Team name is unusually long")
        if team.city and len(team.city) > MAX_CITY_NAME_LENGTH:
            verdict.add_warning("City name is unusually long")

        return verdict

    def validate_player(self, player: Optional[Player]) -> ValidationVerdict:
        verdict = ValidationVerdict()
        if player is None:
            verdict.add_error("Player object is null")
            return verdict

        if _is_blank(player.player_id):
            verdict.add_error("Player ID is required")
        if _is_blank(player.name):
            verdict.add_error("Player name is required")
        if _is_blank(player.team_id):
            verdict.add_error("Player team ID is required")

        if _is_blank(player.position):
            verdict.add_error("Player position is required")
        elif player.position.strip() not in VALID_POSITIONS:
            verdict.add_warning(f"Unknown player position: {player.position}")

        if player.age is None:
            verdict.add_error("Player age is required")
        elif player.age < MIN_PLAYER_AGE:
            verdict.add_error(f"Player age is too young: {player.age}")
        elif player.age > MAX_PLAYER_AGE:
            verdict.add_warning(f"Player age seems unusually high: {player.age}")

        stats = player.statistics
        if stats is not None:
            if stats.games_played < 0:
                verdict.add_error("Games played cannot be negative")
            if stats.points < 0:
                verdict.add_error("Points cannot be negative")
            if stats.assists < 0:
                verdict.add_error("Assists cannot be negative")
            if stats.games_played == 0 and (stats.points > 0 or stats.assists > 0):
                verdict.add_warning("Player has statistics but no games played")

        return verdict

    def validate_game(self, game: Optional[Game]) -> ValidationVerdict:
        verdict = ValidationVerdict()
        if game is None:
            verdict.add_error("Game object is null")
            return verdict

        if _is_blank(game.game_id):
            verdict.add_error("Game ID is required")
        if _is_blank(game.home_team_id):
            verdict.add_error("Home team ID is required")
        if _is_blank(game.away_team_id):
            verdict.add_error("Away team ID is required")

        if game.date is None:
            verdict.add_error("Game date is required")
        elif _as_naive_utc(game.date) < EARLIEST_GAME_DATE:
            verdict.add_warning(f"Game date seems unusually early: {game.date}")

        if _is_blank(game.status):
            verdict.add_error("Game status is required")
        elif game.status.strip() not in VALID_GAME_STATUSES:
            verdict.add_warning(f"Unknown game status: {game.status}")

        if game.home_team_id and game.home_team_id == game.away_team_id:
            verdict.add_error("Home team and away team cannot be the same")

        self._check_score(verdict, game.home_score, 'Home')
        self._check_score(verdict, game.away_score, 'Away')

        if game.status == GAME_STATUS_FINAL and (game.home_score is None or game.away_score is None):
            verdict.add_warning("Final game should have both scores recorded")
        if game.status == GAME_STATUS_SCHEDULED and (game.home_score is not None or game.away_score is not None):
            verdict.add_warning("Scheduled game should not have scores")

        return verdict

    @staticmethod
    def _check_score(verdict: ValidationVerdict, score: Optional[int], side: str) -> None:
        if score is None:
            return
        if score < 0:
            verdict.add_error(f"{side} score cannot be negative")
        elif score > MAX_REASONABLE_SCORE:
            verdict.add_warning(f"{side} score seems unusually high: {score}")
