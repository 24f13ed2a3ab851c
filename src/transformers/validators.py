"""Batch validation of extracted records."""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from src.models.game import Game
from src.models.player import Player
from src.models.team import Team
from .validation_rules import ValidationRules, ValidationVerdict

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass
class BatchValidationResult(Generic[T]):
    """Outcome of validating one batch of records."""
    valid_records: List[T] = field(default_factory=list)
    total_records: int = 0
    error_count: int = 0
    warning_count: int = 0
    rejected_count: int = 0
    issues: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def valid_count(self) -> int:
        return len(self.valid_records)

    @property
    def validation_rate(self) -> float:
        """Percentage of records that passed validation."""
        if self.total_records == 0:
            return 0.0
        return (self.valid_count / self.total_records) * 100

    def to_summary(self) -> Dict[str, Any]:
        return {
            'total_records': self.total_records,
            'valid_records': self.valid_count,
            'rejected_records': self.rejected_count,
            'validation_rate': round(self.validation_rate, 2),
            'error_issues': self.error_count,
            'warning_issues': self.warning_count,
        }


class DataValidator:
    """Applies ``ValidationRules`` to whole batches, keeping only valid records."""

    def __init__(self, rules: Optional[ValidationRules] = None):
        self.rules = rules or ValidationRules()

    def validate_teams(self, teams: Optional[List[Team]]) -> BatchValidationResult[Team]:
        return self._validate_batch(
            teams, 'Team', self.rules.validate_team,
            lambda team: team.team_id if team is not None else None,
        )

    def validate_players(self, players: Optional[List[Player]]) -> BatchValidationResult[Player]:
        return self._validate_batch(
            players, 'Player', self.rules.validate_player,
            lambda player: player.player_id if player is not None else None,
        )

    def validate_games(self, games: Optional[List[Game]]) -> BatchValidationResult[Game]:
        return self._validate_batch(
            games, 'Game', self.rules.validate_game,
            lambda game: game.game_id if game is not None else None,
        )

    def _validate_batch(self, records: Optional[List[T]], kind: str,
                        rule: Callable[[Optional[T]], ValidationVerdict],
                        id_of: Callable[[Optional[T]], Optional[str]]) -> BatchValidationResult[T]:
        result: BatchValidationResult[T] = BatchValidationResult()
        if not records:
            return result

        for index, record in enumerate(records, start=1):
            result.total_records += 1
            verdict = rule(record)
            record_id = id_of(record) or f"#{index}"

            if verdict.has_warnings:
                result.warning_count += verdict.warning_count
                logger.warning(f"{kind} {record_id} validation warnings: {', '.join(verdict.warnings)}")

            if verdict.is_valid:
                result.valid_records.append(record)
            else:
                result.rejected_count += 1
                result.error_count += verdict.error_count
                logger.error(f"{kind} {record_id} validation failed: {', '.join(verdict.errors)}")

            messages = verdict.errors + verdict.warnings
            if messages:
                result.issues.setdefault(record_id, []).extend(messages)

        logger.info(f"{kind} validation completed: {result.valid_count} valid, "
                    f"{result.error_count} errors, {result.warning_count} warnings")
        return result
