"""Game entity and persistence model."""

from datetime import datetime
from typing import Optional
from sqlalchemy import Column, String, Integer, DateTime
from pydantic import Field, field_serializer
from src.models.base import BaseModel as SQLBaseModel, BasePydanticModel, MAX_TEXT_LENGTH

# Timestamp layout used by the XML feed and by JSON output
GAME_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

GAME_STATUS_SCHEDULED = 'Scheduled'
GAME_STATUS_LIVE = 'Live'
GAME_STATUS_FINAL = 'Final'
GAME_STATUS_POSTPONED = 'Postponed'
GAME_STATUS_CANCELLED = 'Cancelled'

VALID_GAME_STATUSES = frozenset({
    GAME_STATUS_SCHEDULED,
    GAME_STATUS_LIVE,
    GAME_STATUS_FINAL,
    GAME_STATUS_POSTPONED,
    GAME_STATUS_CANCELLED,
})


class Game(BasePydanticModel):
    """A game as extracted from the XML game feed.

    Scores are present only once a game has been played; ``status`` may hold
    a value outside ``VALID_GAME_STATUSES``, which validation tolerates with
    a warning.
    """
    game_id: str = Field(..., description="Game identifier, unique within a batch")
    home_team_id: Optional[str] = Field(None, description="Home team id")
    away_team_id: Optional[str] = Field(None, description="Away team id")
    date: Optional[datetime] = Field(None, description="Tip-off timestamp")
    home_score: Optional[int] = Field(None, description="Home team score")
    away_score: Optional[int] = Field(None, description="Away team score")
    status: Optional[str] = Field(None, description="Game status")

    @field_serializer('date')
    def serialize_date(self, value: Optional[datetime]) -> Optional[str]:
        return value.strftime(GAME_DATE_FORMAT) if value else None


class GameModel(SQLBaseModel):
    """SQLAlchemy model for games."""
    __tablename__ = "games"

    game_id = Column(String(MAX_TEXT_LENGTH), primary_key=True, index=True)
    home_team_id = Column(String(MAX_TEXT_LENGTH), nullable=False, index=True)
    away_team_id = Column(String(MAX_TEXT_LENGTH), nullable=False, index=True)
    date = Column(DateTime, nullable=False, index=True)
    home_score = Column(Integer)
    away_score = Column(Integer)
    status = Column(String(MAX_TEXT_LENGTH), nullable=False)

    # Scores are legitimately empty for unplayed games, so they are not scored
    DESCRIPTIVE_COLUMNS = ('home_team_id', 'away_team_id', 'date', 'status')

    @classmethod
    def from_entity(cls, game: Game) -> "GameModel":
        model = cls(game_id=game.game_id)
        model.update_from_entity(game)
        return model

    def update_from_entity(self, game: Game) -> None:
        """Overwrite mutable columns with values from an entity."""
        self.home_team_id = game.home_team_id
        self.away_team_id = game.away_team_id
        self.date = game.date
        self.home_score = game.home_score
        self.away_score = game.away_score
        self.status = game.status

    def to_entity(self) -> Game:
        return Game(
            game_id=self.game_id,
            home_team_id=self.home_team_id,
            away_team_id=self.away_team_id,
            date=self.date,
            home_score=self.home_score,
            away_score=self.away_score,
            status=self.status,
        )

    def __repr__(self):
        return f"<Game {self.game_id}: {self.away_team_id} @ {self.home_team_id} ({self.status})>"
