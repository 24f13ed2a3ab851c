"""Object-store sink: one timestamped directory of JSON files per run."""

import json
import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, List, Optional

from botocore.exceptions import BotoCoreError, ClientError
from pydantic import Field

from src.models.base import BasePydanticModel
from src.models.game import Game
from src.models.player import Player
from src.models.team import Team
from .base import DataLoader, LoadResult
from .s3_client import DEFAULT_PREFIX

if TYPE_CHECKING:
    from src.pipeline.results import TransformedData

logger = logging.getLogger(__name__)

RUN_TIMESTAMP_FORMAT = '%Y-%m-%d-%H-%M-%S'
METADATA_FILE = 'metadata.json'
JSON_CONTENT_TYPE = 'application/json'


class LoadMetadata(BasePydanticModel):
    """Summary object written next to a run's data files."""
    timestamp: str
    teams_count: int = 0
    players_count: int = 0
    games_count: int = 0
    total_records: int = 0
    loaded_at: Optional[datetime] = Field(None, description="Wall-clock time of the upload")


def run_key(prefix: str, timestamp: str, kind: str) -> str:
    """Key of one kind's data file, e.g. ``sports-data/<ts>/teams/teams-<ts>.json``."""
    return f"{prefix}/{timestamp}/{kind}/{kind}-{timestamp}.json"


def metadata_key(prefix: str, timestamp: str) -> str:
    return f"{prefix}/{timestamp}/{METADATA_FILE}"


class S3DataLoader(DataLoader):
    """Uploads each kind as a JSON array under ``<prefix>/<timestamp>/``.

    Uploads are not atomic as a group: files written before a failure stay
    in the bucket.
    """

    def __init__(self, s3_client: Any, bucket_name: str, key_prefix: str = DEFAULT_PREFIX,
                 clock: Callable[[], datetime] = datetime.now):
        self.s3_client = s3_client
        self.bucket_name = bucket_name
        self.key_prefix = key_prefix.rstrip('/')
        self.clock = clock

    def load_all_data(self, transformed: "TransformedData") -> LoadResult:
        result = LoadResult()
        timestamp = self.clock().strftime(RUN_TIMESTAMP_FORMAT)

        try:
            logger.info(f"Starting S3 data loading process to bucket: {self.bucket_name}")
            result.teams_loaded = self._upload_kind('teams', transformed.teams, timestamp)
            result.players_loaded = self._upload_kind('players', transformed.players, timestamp)
            result.games_loaded = self._upload_kind('games', transformed.games, timestamp)
        except Exception as e:
            raise self._fail(result, e, 'S3') from e

        self._write_metadata(result, timestamp)
        result.success = True
        logger.info(f"S3 data loading completed successfully: {result.teams_loaded} teams, "
                    f"{result.players_loaded} players, {result.games_loaded} games")
        return result

    def load_teams_only(self, teams: List[Team]) -> int:
        return self._upload_kind('teams', teams, self.clock().strftime(RUN_TIMESTAMP_FORMAT))

    def load_players_only(self, players: List[Player]) -> int:
        return self._upload_kind('players', players, self.clock().strftime(RUN_TIMESTAMP_FORMAT))

    def load_games_only(self, games: List[Game]) -> int:
        return self._upload_kind('games', games, self.clock().strftime(RUN_TIMESTAMP_FORMAT))

    def _upload_kind(self, kind: str, entities: Optional[List[BasePydanticModel]], timestamp: str) -> int:
        if not entities:
            logger.info(f"No {kind} to upload to S3")
            return 0

        key = run_key(self.key_prefix, timestamp, kind)
        body = json.dumps([entity.to_json_dict() for entity in entities])
        self._put_json(key, body)
        logger.info(f"Successfully uploaded {len(entities)} {kind} to S3 key: {key}")
        return len(entities)

    def _write_metadata(self, result: LoadResult, timestamp: str) -> None:
        metadata = LoadMetadata(
            timestamp=timestamp,
            teams_count=result.teams_loaded,
            players_count=result.players_loaded,
            games_count=result.games_loaded,
            total_records=result.total_loaded,
            loaded_at=self.clock(),
        )
        key = metadata_key(self.key_prefix, timestamp)
        try:
            self._put_json(key, metadata.model_dump_json(by_alias=True))
            logger.info(f"Successfully uploaded metadata to S3 key: {key}")
        except (BotoCoreError, ClientError) as e:
            # The data files are already in place; a missing summary is tolerated
            logger.warning(f"Failed to upload metadata to S3 key {key}: {e}")

    def _put_json(self, key: str, body: str) -> None:
        self.s3_client.put_object(
            Bucket=self.bucket_name,
            Key=key,
            Body=body.encode('utf-8'),
            ContentType=JSON_CONTENT_TYPE,
        )

    def check_connection(self) -> bool:
        try:
            self.s3_client.head_bucket(Bucket=self.bucket_name)
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 connection check failed for bucket {self.bucket_name}: {e}")
            return False
