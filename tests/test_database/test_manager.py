"""Tests for database manager module."""

from unittest.mock import patch, MagicMock

from sqlalchemy.exc import OperationalError

from src.database.manager import DatabaseManager


class TestDatabaseManager:
    """Test DatabaseManager class."""

    @patch('src.database.manager.get_engine')
    def test_database_manager_init_default(self, mock_get_engine):
        """Without an engine the configured one is used."""
        mock_engine = MagicMock()
        mock_get_engine.return_value = mock_engine

        manager = DatabaseManager()
        assert manager.engine == mock_engine

    def test_create_all_tables(self, db_manager):
        assert {'teams', 'players', 'games'}.issubset(set(db_manager.get_table_names()))
        assert db_manager.table_exists('teams')

    def test_validate_schema(self, db_manager):
        result = db_manager.validate_schema()
        assert result['valid'] is True
        assert result['missing_tables'] == []

    def test_validate_schema_after_drop(self, db_manager):
        db_manager.drop_all_tables()
        result = db_manager.validate_schema()
        assert result['valid'] is False
        assert 'teams' in result['missing_tables']

    def test_test_connection_success(self, db_manager):
        result = db_manager.test_connection()
        assert result['connected'] is True
        assert result['readable'] is True
        assert result['error'] is None

    def test_test_connection_failure(self):
        engine = MagicMock()
        engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        manager = DatabaseManager(engine)

        result = manager.test_connection()
        assert result['connected'] is False
        assert result['error'] is not None

    def test_get_session(self, db_manager):
        session = db_manager.get_session()
        try:
            assert session.bind is db_manager.engine
        finally:
            session.close()
