"""Relational sink: upserts a run's records in one transaction."""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Type

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from src.database.manager import DatabaseManager
from src.models.game import Game, GameModel
from src.models.player import Player, PlayerModel
from src.models.team import Team, TeamModel
from .base import DataLoader, LoadResult

if TYPE_CHECKING:
    from src.pipeline.results import TransformedData

logger = logging.getLogger(__name__)


class DatabaseLoader(DataLoader):
    """Writes teams, players and games through SQLAlchemy.

    The whole batch shares one session and one commit, so a failure on any
    record leaves the database unchanged. Existing rows are updated in place.
    """

    def __init__(self, db_manager: Optional[DatabaseManager] = None):
        self.db_manager = db_manager or DatabaseManager()
        logger.info("Initialized DatabaseLoader")

    def load_all_data(self, transformed: "TransformedData") -> LoadResult:
        result = LoadResult()
        logger.info("Starting database loading process")

        session = self.db_manager.get_session()
        try:
            result.teams_loaded = self._upsert(session, TeamModel, transformed.teams or [],
                                               lambda team: team.team_id)
            result.players_loaded = self._upsert(session, PlayerModel, transformed.players or [],
                                                 lambda player: player.player_id)
            result.games_loaded = self._upsert(session, GameModel, transformed.games or [],
                                               lambda game: game.game_id)
            session.commit()
            result.success = True
            logger.info(f"Database loading completed successfully: {result.teams_loaded} teams, "
                        f"{result.players_loaded} players, {result.games_loaded} games")
        except Exception as e:
            session.rollback()
            raise self._fail(result, e, 'database') from e
        finally:
            session.close()

        return result

    @staticmethod
    def _upsert(session: Session, model_class: Type, entities: List, id_of) -> int:
        """Insert new rows or update existing ones; returns the number written."""
        for entity in entities:
            existing = session.get(model_class, id_of(entity))
            if existing is not None:
                existing.update_from_entity(entity)
            else:
                session.add(model_class.from_entity(entity))
        # Surface constraint violations for this kind before moving on
        session.flush()
        logger.info(f"Saved {len(entities)} rows to {model_class.__tablename__}")
        return len(entities)

    def load_teams_only(self, teams: List[Team]) -> int:
        return self._load_only(TeamModel, teams, lambda team: team.team_id)

    def load_players_only(self, players: List[Player]) -> int:
        return self._load_only(PlayerModel, players, lambda player: player.player_id)

    def load_games_only(self, games: List[Game]) -> int:
        return self._load_only(GameModel, games, lambda game: game.game_id)

    def _load_only(self, model_class: Type, entities: List, id_of) -> int:
        session = self.db_manager.get_session()
        try:
            count = self._upsert(session, model_class, entities or [], id_of)
            session.commit()
            return count
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_team_count(self) -> int:
        return self._count(TeamModel)

    def get_player_count(self) -> int:
        return self._count(PlayerModel)

    def get_game_count(self) -> int:
        return self._count(GameModel)

    def get_counts(self) -> Dict[str, int]:
        return {
            'teams': self.get_team_count(),
            'players': self.get_player_count(),
            'games': self.get_game_count(),
        }

    def _count(self, model_class: Type) -> int:
        session = self.db_manager.get_session()
        try:
            return session.scalar(select(func.count()).select_from(model_class)) or 0
        finally:
            session.close()

    def clear_all_data(self) -> None:
        """Delete every row, games first, then players, then teams."""
        logger.warning("Clearing all data from database")
        session = self.db_manager.get_session()
        try:
            for model_class in (GameModel, PlayerModel, TeamModel):
                session.query(model_class).delete()
            session.commit()
            logger.info("All data cleared from database")
        except Exception as e:
            session.rollback()
            logger.error(f"Failed to clear data: {e}")
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        return self.db_manager.test_connection()['connected']
