"""Configuration and per-phase result types of a pipeline run."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from src.loaders.base import LoadResult
from src.models.game import Game
from src.models.player import Player
from src.models.team import Team
from src.quality.report import QualityReport

DEFAULT_TEAMS_CSV = 'sample-data/teams.csv'
DEFAULT_PLAYERS_JSON = 'sample-data/players.json'
DEFAULT_GAMES_XML = 'sample-data/games.xml'


@dataclass
class PipelineConfig:
    """Input files for one run. An unset path skips that kind entirely."""
    teams_csv_path: Optional[str] = None
    players_json_path: Optional[str] = None
    games_xml_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "PipelineConfig":
        """Paths from ``ETL_TEAMS_CSV``/``ETL_PLAYERS_JSON``/``ETL_GAMES_XML`` or the sample data."""
        return cls(
            teams_csv_path=os.getenv('ETL_TEAMS_CSV', DEFAULT_TEAMS_CSV),
            players_json_path=os.getenv('ETL_PLAYERS_JSON', DEFAULT_PLAYERS_JSON),
            games_xml_path=os.getenv('ETL_GAMES_XML', DEFAULT_GAMES_XML),
        )


@dataclass
class ExtractedData:
    """Raw records per kind; ``None`` means the kind was not extracted."""
    teams: Optional[List[Team]] = None
    players: Optional[List[Player]] = None
    games: Optional[List[Game]] = None

    def counts(self) -> Dict[str, int]:
        return {
            'teams': len(self.teams or []),
            'players': len(self.players or []),
            'games': len(self.games or []),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {f"{kind}Extracted": count for kind, count in self.counts().items()}


@dataclass
class TransformedData:
    """Validated, cleaned and standardized records per kind."""
    teams: Optional[List[Team]] = None
    players: Optional[List[Player]] = None
    games: Optional[List[Game]] = None
    validation_errors: int = 0
    validation_warnings: int = 0
    duplicates_removed: int = 0

    def counts(self) -> Dict[str, int]:
        return {
            'teams': len(self.teams or []),
            'players': len(self.players or []),
            'games': len(self.games or []),
        }

    def to_dict(self) -> Dict[str, Any]:
        summary: Dict[str, Any] = {f"{kind}Transformed": count for kind, count in self.counts().items()}
        summary.update({
            'validationErrors': self.validation_errors,
            'validationWarnings': self.validation_warnings,
            'duplicatesRemoved': self.duplicates_removed,
        })
        return summary


@dataclass
class PipelineResult:
    """Outcome of one run. Always produced, even when a phase fails."""
    run_id: str
    start_time: datetime = field(default_factory=datetime.now)
    end_time: Optional[datetime] = None
    success: bool = False
    error_message: Optional[str] = None
    extracted_data: Optional[ExtractedData] = None
    transformed_data: Optional[TransformedData] = None
    load_result: Optional[LoadResult] = None
    quality_report: Optional[QualityReport] = None

    @property
    def duration_ms(self) -> int:
        if self.end_time is None:
            return 0
        return int((self.end_time - self.start_time).total_seconds() * 1000)

    def complete(self, success: bool, error_message: Optional[str] = None) -> None:
        self.end_time = datetime.now()
        self.success = success
        self.error_message = error_message

    def to_dict(self) -> Dict[str, Any]:
        return {
            'runId': self.run_id,
            'success': self.success,
            'errorMessage': self.error_message,
            'startTime': self.start_time.isoformat(),
            'endTime': self.end_time.isoformat() if self.end_time else None,
            'durationMs': self.duration_ms,
            'extractedData': self.extracted_data.to_dict() if self.extracted_data else None,
            'transformedData': self.transformed_data.to_dict() if self.transformed_data else None,
            'loadResult': self.load_result.to_dict() if self.load_result else None,
            'qualityReport': self.quality_report.to_dict() if self.quality_report else None,
        }

    def to_summary(self) -> str:
        status = 'SUCCESS' if self.success else 'FAILED'
        loaded = self.load_result.total_loaded if self.load_result else 0
        quality = self.quality_report.quality_status if self.quality_report else 'n/a'
        summary = f"Run {self.run_id}: {status} - {loaded} records loaded in {self.duration_ms} ms (quality: {quality})"
        if self.error_message:
            summary += f" - {self.error_message}"
        return summary
