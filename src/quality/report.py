"""Quality report type and scoring helpers."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Tuple

QUALITY_EXCELLENT = 'EXCELLENT'
QUALITY_GOOD = 'GOOD'
QUALITY_FAIR = 'FAIR'
QUALITY_POOR = 'POOR'
QUALITY_NO_DATA = 'NO_DATA'
QUALITY_ERROR_PREFIX = 'ERROR: '

# (lower bound, status), checked from the top
STATUS_THRESHOLDS = (
    (0.9, QUALITY_EXCELLENT),
    (0.8, QUALITY_GOOD),
    (0.7, QUALITY_FAIR),
)


@dataclass(frozen=True)
class ScoreBand:
    """A reasonable range with low and high adjacent ranges scored lower."""
    reasonable: Tuple[float, float]
    low: Tuple[float, float]
    high: Tuple[float, float]


def score_in_band(value: float, band: ScoreBand) -> float:
    """Score ``value``: 1.0 in the reasonable range, 0.7 low, 0.8 high, else 0.5."""
    if band.reasonable[0] <= value <= band.reasonable[1]:
        return 1.0
    if band.low[0] <= value < band.low[1]:
        return 0.7
    if band.high[0] < value <= band.high[1]:
        return 0.8
    return 0.5


def determine_quality_status(score: float) -> str:
    for threshold, status in STATUS_THRESHOLDS:
        if score >= threshold:
            return status
    return QUALITY_POOR


@dataclass
class QualityReport:
    """Counts, per-metric scores and an overall verdict for the data in a sink."""
    generated_at: datetime = field(default_factory=datetime.now)
    team_count: int = 0
    player_count: int = 0
    game_count: int = 0
    quality_metrics: Dict[str, float] = field(default_factory=dict)
    overall_quality_score: float = 0.0
    quality_status: str = QUALITY_NO_DATA

    @property
    def total_records(self) -> int:
        return self.team_count + self.player_count + self.game_count

    @classmethod
    def from_metrics(cls, team_count: int, player_count: int, game_count: int,
                     metrics: Dict[str, float]) -> "QualityReport":
        """Build a report whose score is the unweighted mean of ``metrics``."""
        overall = sum(metrics.values()) / len(metrics) if metrics else 0.0
        return cls(
            team_count=team_count,
            player_count=player_count,
            game_count=game_count,
            quality_metrics=dict(metrics),
            overall_quality_score=overall,
            quality_status=determine_quality_status(overall),
        )

    @classmethod
    def empty(cls) -> "QualityReport":
        return cls(quality_status=QUALITY_NO_DATA)

    @classmethod
    def error(cls, message: str) -> "QualityReport":
        return cls(quality_status=f"{QUALITY_ERROR_PREFIX}{message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generatedAt': self.generated_at.isoformat(),
            'teamCount': self.team_count,
            'playerCount': self.player_count,
            'gameCount': self.game_count,
            'totalRecords': self.total_records,
            'qualityMetrics': dict(self.quality_metrics),
            'overallQualityScore': round(self.overall_quality_score, 4),
            'qualityStatus': self.quality_status,
        }
