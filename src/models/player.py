"""Player entity and persistence model."""

from typing import Optional
from sqlalchemy import Column, String, Integer
from pydantic import Field
from src.models.base import BaseModel as SQLBaseModel, BasePydanticModel, MAX_TEXT_LENGTH


class PlayerStatistics(BasePydanticModel):
    """Season counters embedded in a player record."""
    games_played: int = Field(0, description="Games played")
    points: int = Field(0, description="Total points")
    assists: int = Field(0, description="Total assists")


class Player(BasePydanticModel):
    """A player as extracted from the JSON player feed."""
    player_id: str = Field(..., description="Player identifier, unique within a batch")
    name: Optional[str] = Field(None, description="Player full name")
    team_id: Optional[str] = Field(None, description="Referenced team id (not enforced)")
    position: Optional[str] = Field(None, description="Playing position")
    age: Optional[int] = Field(None, description="Age in years")
    statistics: PlayerStatistics = Field(default_factory=PlayerStatistics)


class PlayerModel(SQLBaseModel):
    """SQLAlchemy model for players.

    Statistics are stored as embedded columns on the player row. There is
    deliberately no foreign key to ``teams``: team references are not
    enforced at write time.
    """
    __tablename__ = "players"

    player_id = Column(String(MAX_TEXT_LENGTH), primary_key=True, index=True)
    name = Column(String(MAX_TEXT_LENGTH), nullable=False, index=True)
    team_id = Column(String(MAX_TEXT_LENGTH), nullable=False, index=True)
    position = Column(String(MAX_TEXT_LENGTH), nullable=False)
    age = Column(Integer, nullable=False)

    # Embedded statistics
    games_played = Column(Integer, default=0, nullable=False)
    points = Column(Integer, default=0, nullable=False)
    assists = Column(Integer, default=0, nullable=False)

    DESCRIPTIVE_COLUMNS = ('name', 'team_id', 'position', 'age')

    @classmethod
    def from_entity(cls, player: Player) -> "PlayerModel":
        model = cls(player_id=player.player_id)
        model.update_from_entity(player)
        return model

    def update_from_entity(self, player: Player) -> None:
        """Overwrite mutable columns with values from an entity."""
        self.name = player.name
        self.team_id = player.team_id
        self.position = player.position
        self.age = player.age
        self.games_played = player.statistics.games_played
        self.points = player.statistics.points
        self.assists = player.statistics.assists

    def to_entity(self) -> Player:
        return Player(
            player_id=self.player_id,
            name=self.name,
            team_id=self.team_id,
            position=self.position,
            age=self.age,
            statistics=PlayerStatistics(
                games_played=self.games_played or 0,
                points=self.points or 0,
                assists=self.assists or 0,
            ),
        )

    def __repr__(self):
        return f"<Player {self.player_id}: {self.name} ({self.position})>"
