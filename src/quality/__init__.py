"""Quality assessment of loaded data."""

from .report import (
    QualityReport,
    ScoreBand,
    score_in_band,
    determine_quality_status,
)
from .base import QualityChecker
from .database_checker import DatabaseQualityChecker
from .s3_checker import S3QualityChecker

__all__ = [
    'QualityReport',
    'ScoreBand',
    'score_in_band',
    'determine_quality_status',
    'QualityChecker',
    'DatabaseQualityChecker',
    'S3QualityChecker',
]
