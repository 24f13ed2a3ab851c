"""Canonical labels and name casing for cleaned records."""

import logging
from types import MappingProxyType
from typing import List, Mapping, Optional

from src.models.game import Game
from src.models.player import Player
from src.models.team import Team

logger = logging.getLogger(__name__)

POSITION_MAPPINGS: Mapping[str, str] = MappingProxyType({
    'PG': 'Point Guard',
    'Point Guard': 'Point Guard',
    'SG': 'Shooting Guard',
    'Shooting Guard': 'Shooting Guard',
    'G': 'Guard',
    'Guard': 'Guard',
    'SF': 'Small Forward',
    'Small Forward': 'Small Forward',
    'PF': 'Power Forward',
    'Power Forward': 'Power Forward',
    'F': 'Forward',
    'Forward': 'Forward',
    'C': 'Center',
    'Center': 'Center',
})

LEAGUE_MAPPINGS: Mapping[str, str] = MappingProxyType({
    'NBA': 'NBA',
    'National Basketball Association': 'NBA',
    'WNBA': 'WNBA',
    "Women's National Basketball Association": 'WNBA',
    'NCAA': 'NCAA',
    'College Basketball': 'NCAA',
})

STATUS_MAPPINGS: Mapping[str, str] = MappingProxyType({
    'Scheduled': 'Scheduled',
    'SCHEDULED': 'Scheduled',
    'upcoming': 'Scheduled',
    'Live': 'Live',
    'LIVE': 'Live',
    'in-progress': 'Live',
    'Final': 'Final',
    'FINAL': 'Final',
    'completed': 'Final',
    'finished': 'Final',
    'Postponed': 'Postponed',
    'POSTPONED': 'Postponed',
    'delayed': 'Postponed',
    'Cancelled': 'Cancelled',
    'CANCELLED': 'Cancelled',
    'canceled': 'Cancelled',
})


def title_case(value: Optional[str]) -> Optional[str]:
    """Lower-case a name, then capitalize the first letter of each word."""
    if value is None or not value.strip():
        return value
    words = value.strip().lower().split()
    return ' '.join(_capitalize_first(word) for word in words)


def _capitalize_first(word: str) -> str:
    first = word[0].upper()
    # Letters such as 'ß' upper-case to two characters; keep them as they are
    if len(first) != 1:
        first = word[0]
    return first + word[1:]


def map_label(value: Optional[str], mappings: Mapping[str, str], label: str) -> Optional[str]:
    """Look up a canonical label: exact match first, then case-insensitive."""
    if value is None or not value.strip():
        return value

    trimmed = value.strip()
    if trimmed in mappings:
        return mappings[trimmed]

    lowered = trimmed.lower()
    for key, canonical in mappings.items():
        if key.lower() == lowered:
            return canonical

    logger.debug(f"Unknown {label}, leaving as is: {trimmed}")
    return trimmed


class DataStandardizer:
    """Rewrites positions, leagues and statuses to canonical labels.

    Never drops a record; ``None`` entries in the input are skipped.
    """

    def standardize_teams(self, teams: Optional[List[Team]]) -> List[Team]:
        if not teams:
            logger.info("No teams to standardize")
            return []

        standardized = [self.standardize_team(team) for team in teams if team is not None]
        logger.info(f"Team standardization completed: {len(standardized)} teams processed")
        return standardized

    def standardize_players(self, players: Optional[List[Player]]) -> List[Player]:
        if not players:
            logger.info("No players to standardize")
            return []

        standardized = [self.standardize_player(player) for player in players if player is not None]
        logger.info(f"Player standardization completed: {len(standardized)} players processed")
        return standardized

    def standardize_games(self, games: Optional[List[Game]]) -> List[Game]:
        if not games:
            logger.info("No games to standardize")
            return []

        standardized = [self.standardize_game(game) for game in games if game is not None]
        logger.info(f"Game standardization completed: {len(standardized)} games processed")
        return standardized

    def standardize_team(self, team: Team) -> Team:
        return team.model_copy(update={
            'name': title_case(team.name),
            'city': title_case(team.city),
            'league': map_label(team.league, LEAGUE_MAPPINGS, 'league'),
            'venue': title_case(team.venue),
        })

    def standardize_player(self, player: Player) -> Player:
        return player.model_copy(update={
            'name': title_case(player.name),
            'position': map_label(player.position, POSITION_MAPPINGS, 'position'),
        })

    def standardize_game(self, game: Game) -> Game:
        return game.model_copy(update={
            'status': map_label(game.status, STATUS_MAPPINGS, 'game status'),
        })
