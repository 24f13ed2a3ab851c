"""Shared pytest fixtures."""

from datetime import date, datetime

import pytest

from src.database.config import get_engine
from src.database.manager import DatabaseManager
from src.models.game import Game
from src.models.player import Player, PlayerStatistics
from src.models.team import Team


@pytest.fixture
def db_manager():
    """Database manager bound to a fresh in-memory SQLite database."""
    engine = get_engine("sqlite://")
    manager = DatabaseManager(engine)
    manager.create_all_tables()
    yield manager
    engine.dispose()


@pytest.fixture
def sample_team():
    return Team(
        team_id="LAL",
        name="Los Angeles Lakers",
        city="Los Angeles",
        league="NBA",
        founded=date(1947, 1, 1),
        venue="Crypto.com Arena",
    )


@pytest.fixture
def sample_player():
    return Player(
        player_id="P001",
        name="LeBron James",
        team_id="LAL",
        position="Small Forward",
        age=39,
        statistics=PlayerStatistics(games_played=71, points=1822, assists=589),
    )


@pytest.fixture
def sample_game():
    return Game(
        game_id="G001",
        home_team_id="LAL",
        away_team_id="GSW",
        date=datetime(2024, 1, 15, 19, 30),
        home_score=118,
        away_score=124,
        status="Final",
    )


@pytest.fixture
def sample_teams(sample_team):
    return [
        sample_team,
        Team(team_id="GSW", name="Golden State Warriors", city="San Francisco", league="NBA",
             founded=date(1946, 1, 1), venue="Chase Center"),
    ]


@pytest.fixture
def sample_data_dir(tmp_path):
    """Directory holding one small input file per format."""
    (tmp_path / "teams.csv").write_text(
        "teamId,name,city,league,founded,venue\n"
        "LAL,Los Angeles Lakers,Los Angeles,NBA,1947-01-01,Crypto.com Arena\n"
        "GSW,Golden State Warriors,San Francisco,NBA,1946-01-01,Chase Center\n",
        encoding="utf-8",
    )
    (tmp_path / "players.json").write_text(
        '[{"playerId": "P001", "name": "LeBron James", "teamId": "LAL", "position": "SF", "age": 39,'
        ' "statistics": {"gamesPlayed": 71, "points": 1822, "assists": 589}}]',
        encoding="utf-8",
    )
    (tmp_path / "games.xml").write_text(
        "<games><game><gameId>G001</gameId><homeTeamId>LAL</homeTeamId><awayTeamId>GSW</awayTeamId>"
        "<date>2024-01-15 19:30:00</date><homeScore>118</homeScore><awayScore>124</awayScore>"
        "<status>Final</status></game></games>",
        encoding="utf-8",
    )
    return tmp_path
