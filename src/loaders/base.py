"""Common interface and result types for sink loaders."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from src.pipeline.results import TransformedData

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Per-kind counts written to a sink during one run."""
    teams_loaded: int = 0
    players_loaded: int = 0
    games_loaded: int = 0
    success: bool = False
    error_message: Optional[str] = None

    @property
    def total_loaded(self) -> int:
        return self.teams_loaded + self.players_loaded + self.games_loaded

    def to_dict(self) -> Dict[str, Any]:
        return {
            'teamsLoaded': self.teams_loaded,
            'playersLoaded': self.players_loaded,
            'gamesLoaded': self.games_loaded,
            'success': self.success,
            'errorMessage': self.error_message,
        }


class LoadError(Exception):
    """Loading aborted; ``result`` holds the counts reached before the failure."""

    def __init__(self, message: str, result: LoadResult):
        super().__init__(message)
        self.result = result


class DataLoader(ABC):
    """A sink that persists one run's transformed records.

    Kinds are written in the order teams, players, games. The first failure
    aborts the rest and raises ``LoadError``.
    """

    @abstractmethod
    def load_all_data(self, transformed: "TransformedData") -> LoadResult:
        """Persist every kind in ``transformed`` and report the counts."""

    @abstractmethod
    def check_connection(self) -> bool:
        """Return True when the sink is reachable."""

    def _fail(self, result: LoadResult, error: Exception, sink: str) -> LoadError:
        """Mark ``result`` failed and wrap ``error`` for the caller to raise."""
        result.success = False
        result.error_message = str(error)
        logger.error(f"{sink} data loading failed: {error}")
        return LoadError(f"Failed to load data to {sink}: {error}", result)
