"""Schema and connectivity helpers for the relational sink."""

import logging
from typing import Optional, List, Dict, Any

from sqlalchemy import Engine, text, inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models.base import Base
from .config import get_engine, get_session

# Importing the models registers the teams, players and games tables
import src.models  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the sink engine and the session factory built on it."""

    def __init__(self, engine: Optional[Engine] = None):
        self.engine = engine or get_engine()
        self.SessionLocal = get_session(self.engine)

    @property
    def model_tables(self) -> List[str]:
        return sorted(Base.metadata.tables)

    def create_all_tables(self) -> None:
        """Create any sink table that does not exist yet."""
        logger.info(f"Ensuring sink tables {', '.join(self.model_tables)}")
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not create sink tables: {e}")
            raise

    def drop_all_tables(self) -> None:
        """Drop every sink table together with its rows."""
        logger.warning(f"Dropping sink tables {', '.join(self.model_tables)}")
        try:
            Base.metadata.drop_all(bind=self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Could not drop sink tables: {e}")
            raise

    def get_table_names(self) -> List[str]:
        return inspect(self.engine).get_table_names()

    def table_exists(self, table_name: str) -> bool:
        return table_name in self.get_table_names()

    def validate_schema(self) -> Dict[str, Any]:
        """Compare the live tables against the mapped ones.

        The schema is valid when no mapped table is missing; unrelated
        tables in the same database are reported but tolerated.
        """
        try:
            existing = set(self.get_table_names())
        except SQLAlchemyError as e:
            logger.error(f"Could not inspect sink schema: {e}")
            return {'valid': False, 'missing_tables': [], 'extra_tables': [], 'error': str(e)}

        expected = set(self.model_tables)
        missing = sorted(expected - existing)
        return {
            'valid': not missing,
            'missing_tables': missing,
            'extra_tables': sorted(existing - expected),
        }

    def test_connection(self) -> Dict[str, Any]:
        """Open a connection and run ``SELECT 1``."""
        status: Dict[str, Any] = {'connected': False, 'readable': False, 'error': None}
        try:
            with self.engine.connect() as conn:
                status['connected'] = True
                conn.execute(text("SELECT 1"))
                status['readable'] = True
        except SQLAlchemyError as e:
            logger.error(f"Sink database unreachable: {e}")
            status['error'] = str(e)
        return status

    def get_session(self) -> Session:
        return self.SessionLocal()
