"""Sports data entity and persistence models."""

from .base import Base, BaseModel, BasePydanticModel
from .team import Team, TeamModel
from .player import Player, PlayerStatistics, PlayerModel
from .game import Game, GameModel, VALID_GAME_STATUSES

__all__ = [
    'Base', 'BaseModel', 'BasePydanticModel',
    'Team', 'TeamModel',
    'Player', 'PlayerStatistics', 'PlayerModel',
    'Game', 'GameModel', 'VALID_GAME_STATUSES',
]
