"""Team entity and persistence model."""

from datetime import date
from typing import Optional
from sqlalchemy import Column, String, Date
from pydantic import Field
from src.models.base import BaseModel as SQLBaseModel, BasePydanticModel, MAX_TEXT_LENGTH


class Team(BasePydanticModel):
    """A team as extracted from the delimited team feed."""
    team_id: str = Field(..., description="Team identifier, unique within a batch")
    name: Optional[str] = Field(None, description="Team name")
    city: Optional[str] = Field(None, description="Home city")
    league: Optional[str] = Field(None, description="League code or name")
    founded: Optional[date] = Field(None, description="Founding date")
    venue: Optional[str] = Field(None, description="Home venue")


class TeamModel(SQLBaseModel):
    """SQLAlchemy model for teams."""
    __tablename__ = "teams"

    team_id = Column(String(MAX_TEXT_LENGTH), primary_key=True, index=True)
    name = Column(String(MAX_TEXT_LENGTH), nullable=False)
    city = Column(String(MAX_TEXT_LENGTH), nullable=False)
    league = Column(String(MAX_TEXT_LENGTH), nullable=False, index=True)
    founded = Column(Date)
    venue = Column(String(MAX_TEXT_LENGTH))

    # Columns scored by the completeness metric
    DESCRIPTIVE_COLUMNS = ('name', 'city', 'league', 'founded', 'venue')

    @classmethod
    def from_entity(cls, team: Team) -> "TeamModel":
        return cls(
            team_id=team.team_id,
            name=team.name,
            city=team.city,
            league=team.league,
            founded=team.founded,
            venue=team.venue,
        )

    def update_from_entity(self, team: Team) -> None:
        """Overwrite mutable columns with values from an entity."""
        self.name = team.name
        self.city = team.city
        self.league = team.league
        self.founded = team.founded
        self.venue = team.venue

    def to_entity(self) -> Team:
        return Team(
            team_id=self.team_id,
            name=self.name,
            city=self.city,
            league=self.league,
            founded=self.founded,
            venue=self.venue,
        )

    def __repr__(self):
        return f"<Team {self.team_id}: {self.name} ({self.league})>"
