"""Wires a pipeline to the sink chosen by configuration."""

import logging
import os
from typing import Optional, Tuple

from src.database.manager import DatabaseManager
from src.loaders import DataLoader, DatabaseLoader, S3Config, S3DataLoader, create_s3_client
from src.quality import DatabaseQualityChecker, QualityChecker, S3QualityChecker
from .etl_pipeline import EtlPipeline
from .metrics import MetricsCollector

logger = logging.getLogger(__name__)

SINK_DATABASE = 'database'
SINK_S3 = 's3'
SUPPORTED_SINKS = (SINK_DATABASE, SINK_S3)


def get_sink() -> str:
    return os.getenv('ETL_SINK', SINK_DATABASE).strip().lower()


def create_components(sink: Optional[str] = None,
                      db_manager: Optional[DatabaseManager] = None,
                      s3_config: Optional[S3Config] = None) -> Tuple[DataLoader, QualityChecker]:
    """Build the loader and quality checker for ``sink``.

    Raises:
        ValueError: If the sink name is not supported
    """
    sink = (sink or get_sink()).lower()

    if sink == SINK_DATABASE:
        db_manager = db_manager or DatabaseManager()
        db_manager.create_all_tables()
        logger.info("Using database sink")
        return DatabaseLoader(db_manager), DatabaseQualityChecker(db_manager)

    if sink == SINK_S3:
        s3_config = s3_config or S3Config.from_env()
        client = create_s3_client(s3_config)
        logger.info(f"Using S3 sink: s3://{s3_config.bucket_name}/{s3_config.key_prefix}")
        return (S3DataLoader(client, s3_config.bucket_name, s3_config.key_prefix),
                S3QualityChecker(client, s3_config.bucket_name, s3_config.key_prefix))

    raise ValueError(f"Unsupported sink: {sink}. Supported sinks: {', '.join(SUPPORTED_SINKS)}")


def create_pipeline(sink: Optional[str] = None,
                    metrics: Optional[MetricsCollector] = None,
                    db_manager: Optional[DatabaseManager] = None,
                    s3_config: Optional[S3Config] = None) -> EtlPipeline:
    loader, quality_checker = create_components(sink, db_manager=db_manager, s3_config=s3_config)
    return EtlPipeline(loader, quality_checker, metrics=metrics)
