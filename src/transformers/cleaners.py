"""Deduplication and string cleanup for extracted records."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, Set, TypeVar

from src.models.game import Game
from src.models.player import Player
from src.models.team import Team

logger = logging.getLogger(__name__)

T = TypeVar('T')

WHITESPACE_RUN = re.compile(r'\s+')


@dataclass
class CleaningResult(Generic[T]):
    """Cleaned records plus a log of what was changed."""
    records: List[T] = field(default_factory=list)
    duplicates_removed: int = 0
    actions: List[str] = field(default_factory=list)

    def to_summary(self) -> Dict[str, Any]:
        return {
            'cleaned_records': len(self.records),
            'duplicates_removed': self.duplicates_removed,
            'actions': len(self.actions),
        }


def clean_string(value: Optional[str]) -> Optional[str]:
    """Trim, collapse internal whitespace, and map blank strings to None."""
    if value is None:
        return None
    cleaned = WHITESPACE_RUN.sub(' ', value).strip()
    return cleaned or None


class DataCleaner:
    """Removes duplicate ids (first occurrence wins) and normalizes text fields."""

    def __init__(self):
        self.cleaning_log: List[str] = []

    def log_cleaning_action(self, action: str) -> None:
        self.cleaning_log.append(action)
        logger.debug(f"Cleaning action: {action}")

    def clear_log(self) -> None:
        self.cleaning_log.clear()

    def clean_teams(self, teams: Optional[List[Team]]) -> CleaningResult[Team]:
        return self._clean_batch(teams, 'Team', lambda team: team.team_id, self._clean_team)

    def clean_players(self, players: Optional[List[Player]]) -> CleaningResult[Player]:
        return self._clean_batch(players, 'Player', lambda player: player.player_id, self._clean_player)

    def clean_games(self, games: Optional[List[Game]]) -> CleaningResult[Game]:
        return self._clean_batch(games, 'Game', lambda game: game.game_id, self._clean_game)

    def _clean_batch(self, records: Optional[List[T]], kind: str,
                     id_of: Callable[[T], str], clean_one: Callable[[T], T]) -> CleaningResult[T]:
        result: CleaningResult[T] = CleaningResult()
        if not records:
            logger.info(f"No {kind.lower()}s to clean")
            return result

        seen_ids: Set[str] = set()
        for record in records:
            if record is None:
                continue

            record_id = id_of(record)
            if record_id in seen_ids:
                result.duplicates_removed += 1
                action = f"Removed duplicate {kind.lower()} {record_id}"
                result.actions.append(action)
                self.log_cleaning_action(action)
                continue

            seen_ids.add(record_id)
            cleaned = clean_one(record)
            if cleaned != record:
                result.actions.append(f"Cleaned text fields of {kind.lower()} {record_id}")
            result.records.append(cleaned)

        logger.info(f"{kind} cleaning completed: {len(result.records)} cleaned, "
                    f"{result.duplicates_removed} duplicates removed")
        return result

    @staticmethod
    def _clean_team(team: Team) -> Team:
        return team.model_copy(update={
            'name': clean_string(team.name),
            'city': clean_string(team.city),
            'league': clean_string(team.league),
            'venue': clean_string(team.venue),
        })

    @staticmethod
    def _clean_player(player: Player) -> Player:
        return player.model_copy(update={
            'name': clean_string(player.name),
            'position': clean_string(player.position),
        })

    @staticmethod
    def _clean_game(game: Game) -> Game:
        return game.model_copy(update={'status': clean_string(game.status)})
