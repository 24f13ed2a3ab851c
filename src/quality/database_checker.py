"""Quality assessment of the relational sink."""

import logging
from typing import Optional, Sequence, Type

import pandas as pd
from sqlalchemy import select

from src.database.manager import DatabaseManager
from src.models.game import GameModel
from src.models.player import PlayerModel
from src.models.team import TeamModel
from .base import QualityChecker
from .report import QualityReport, ScoreBand, score_in_band

logger = logging.getLogger(__name__)

PLAYERS_PER_TEAM_BAND = ScoreBand(reasonable=(5, 15), low=(1, 5), high=(15, 25))
GAMES_PER_TEAM_BAND = ScoreBand(reasonable=(10, 100), low=(1, 10), high=(100, 200))


class DatabaseQualityChecker(QualityChecker):
    """Scores completeness, referential integrity and distribution of stored rows."""

    def __init__(self, db_manager: Optional[DatabaseManager] = None):
        self.db_manager = db_manager or DatabaseManager()

    def generate_quality_report(self) -> QualityReport:
        logger.info("Generating data quality report")
        try:
            frames = {
                'teams': self._read_table(TeamModel, ('team_id',) + TeamModel.DESCRIPTIVE_COLUMNS),
                'players': self._read_table(PlayerModel, ('player_id',) + PlayerModel.DESCRIPTIVE_COLUMNS),
                'games': self._read_table(GameModel, ('game_id',) + GameModel.DESCRIPTIVE_COLUMNS),
            }
        except Exception as e:
            logger.error(f"Error generating quality report: {e}")
            return QualityReport.error(str(e))

        teams, players, games = frames['teams'], frames['players'], frames['games']
        if teams.empty and players.empty and games.empty:
            logger.warning("No data found in database")
            return QualityReport.empty()

        metrics = {
            'team_completeness': self._completeness(teams, TeamModel.DESCRIPTIVE_COLUMNS),
            'player_completeness': self._completeness(players, PlayerModel.DESCRIPTIVE_COLUMNS),
            'game_completeness': self._completeness(games, GameModel.DESCRIPTIVE_COLUMNS),
            'referential_integrity': self._referential_integrity(teams, players, games),
            'players_per_team': self._per_team_score(len(players), len(teams), PLAYERS_PER_TEAM_BAND),
            # Every game involves two teams
            'games_per_team': self._per_team_score(len(games) * 2, len(teams), GAMES_PER_TEAM_BAND),
        }

        report = QualityReport.from_metrics(len(teams), len(players), len(games), metrics)
        logger.info(f"Data quality report generated: {report.team_count} teams, {report.player_count} players, "
                    f"{report.game_count} games, Overall Score: {report.overall_quality_score:.2f} "
                    f"({report.quality_status})")
        return report

    def _read_table(self, model_class: Type, columns: Sequence[str]) -> pd.DataFrame:
        statement = select(*(getattr(model_class, column) for column in columns))
        with self.db_manager.engine.connect() as conn:
            return pd.read_sql(statement, conn)

    @staticmethod
    def _completeness(frame: pd.DataFrame, columns: Sequence[str]) -> float:
        """Share of non-null, non-blank cells across ``columns``."""
        if frame.empty:
            return 1.0
        cells = frame[list(columns)]
        populated = cells.notna() & cells.astype(str).apply(lambda col: col.str.strip() != '')
        return float(populated.to_numpy().mean())

    @staticmethod
    def _referential_integrity(teams: pd.DataFrame, players: pd.DataFrame, games: pd.DataFrame) -> float:
        """Share of players and games whose team references all resolve."""
        references = len(players) + len(games)
        if references == 0:
            return 1.0

        team_ids = set(teams['team_id'])
        valid_players = int(players['team_id'].isin(team_ids).sum())
        valid_games = int((games['home_team_id'].isin(team_ids) & games['away_team_id'].isin(team_ids)).sum())
        return (valid_players + valid_games) / references

    @staticmethod
    def _per_team_score(total: int, team_count: int, band: ScoreBand) -> float:
        if team_count == 0:
            return 0.0
        return score_in_band(total / team_count, band)

    def check_connection(self) -> bool:
        return self.db_manager.test_connection()['connected']
