"""Quality assessment of the latest run written to the object store."""

import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError

from src.loaders.s3_client import DEFAULT_PREFIX
from src.loaders.s3_loader import METADATA_FILE, LoadMetadata
from .base import QualityChecker
from .report import QualityReport

logger = logging.getLogger(__name__)

TARGET_PLAYERS_PER_TEAM = 15.0
TARGET_GAMES_PER_TEAM = 50.0

# (maximum age in days, score), checked in order
FRESHNESS_STEPS = (
    (1, 1.0),
    (7, 0.8),
)
STALE_SCORE = 0.5


def freshness_score(loaded_at: Optional[datetime], now: datetime) -> float:
    """Score how recently a run was uploaded; unknown upload times count as stale."""
    if loaded_at is None:
        return STALE_SCORE
    age_days = (now - loaded_at).total_seconds() / 86400
    for max_days, score in FRESHNESS_STEPS:
        if age_days <= max_days:
            return score
    return STALE_SCORE


class S3QualityChecker(QualityChecker):
    """Reads the newest ``<prefix>/<timestamp>/`` directory and scores it.

    Counts come from the run's ``metadata.json``; when that file is missing
    or unreadable the data objects under each kind's sub-prefix are counted
    instead.
    """

    def __init__(self, s3_client: Any, bucket_name: str, key_prefix: str = DEFAULT_PREFIX,
                 clock: Callable[[], datetime] = datetime.now):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.key_prefix = key_prefix.rstrip('/')
        self.clock = clock

    def generate_quality_report(self) -> QualityReport:
        logger.info("Generating S3-based data quality report")
        try:
            run_path = self.find_latest_run_path()
            if run_path is None:
                logger.warning(f"No data found in S3 bucket: {self.bucket_name}")
                return QualityReport.empty()

            metadata = self._read_metadata(run_path)
            if metadata is not None:
                counts = {
                    'teams': metadata.teams_count,
                    'players': metadata.players_count,
                    'games': metadata.games_count,
                }
                loaded_at = metadata.loaded_at
            else:
                logger.warning("Could not read metadata, using object count fallback")
                counts = {kind: self._count_objects(f"{run_path}/{kind}/")
                          for kind in ('teams', 'players', 'games')}
                loaded_at = None

            metrics = self._calculate_metrics(counts, loaded_at)
            report = QualityReport.from_metrics(counts['teams'], counts['players'], counts['games'], metrics)
        except Exception as e:
            logger.error(f"Error generating S3 quality report: {e}")
            return QualityReport.error(str(e))

        logger.info(f"S3 data quality report generated: {report.team_count} teams, {report.player_count} players, "
                    f"{report.game_count} games, Overall Score: {report.overall_quality_score:.2f} "
                    f"({report.quality_status})")
        return report

    def find_latest_run_path(self) -> Optional[str]:
        """Return the greatest run directory under the prefix, without its trailing slash."""
        paginator = self.s3_client.get_paginator('list_objects_v2')
        latest: Optional[str] = None
        for page in paginator.paginate(Bucket=self.bucket_name, Prefix=f"{self.key_prefix}/", Delimiter='/'):
            for common_prefix in page.get('CommonPrefixes', []):
                candidate = common_prefix['Prefix']
                if latest is None or candidate > latest:
                    latest = candidate
        return latest.rstrip('/') if latest is not None else None

    def _read_metadata(self, run_path: str) -> Optional[LoadMetadata]:
        key = f"{run_path}/{METADATA_FILE}"
        try:
            response = self.s3_client.get_object(Bucket=self.bucket_name, Key=key)
            return LoadMetadata.model_validate_json(response['Body'].read())
        except (BotoCoreError, ClientError, ValidationError) as e:
            logger.warning(f"Could not read metadata from S3 key {key}: {e}")
            return None

    def _count_objects(self, prefix: str) -> int:
        paginator = self.s3_client.get_paginator('list_objects_v2')
        return sum(page.get('KeyCount', len(page.get('Contents', [])))
                   for page in paginator.paginate(Bucket=self.bucket_name, Prefix=prefix))

    def _calculate_metrics(self, counts: Dict[str, int], loaded_at: Optional[datetime]) -> Dict[str, float]:
        teams, players, games = counts['teams'], counts['players'], counts['games']
        metrics = {
            'data_availability': 1.0 if teams > 0 and players > 0 and games > 0 else 0.0,
        }
        if teams > 0:
            metrics['players_per_team_ratio'] = min(players / teams / TARGET_PLAYERS_PER_TEAM, 1.0)
            metrics['games_per_team_ratio'] = min(games / teams / TARGET_GAMES_PER_TEAM, 1.0)
        else:
            metrics['players_per_team_ratio'] = 0.0
            metrics['games_per_team_ratio'] = 0.0
        metrics['data_freshness'] = freshness_score(loaded_at, self.clock())
        return metrics

    def check_connection(self) -> bool:
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 connection check failed for bucket {self.bucket_name}: {e}")
            return False
