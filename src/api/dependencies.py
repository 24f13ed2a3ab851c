"""FastAPI dependencies for dependency injection."""

import logging
from typing import Optional

from src.database.manager import DatabaseManager
from src.loaders import DatabaseLoader
from src.pipeline import EtlPipeline, MetricsCollector, create_pipeline

logger = logging.getLogger(__name__)

# Process-wide instances, created on first use
_db_manager: Optional[DatabaseManager] = None
_pipeline: Optional[EtlPipeline] = None
_metrics = MetricsCollector()


def get_database_manager() -> DatabaseManager:
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
        _db_manager.create_all_tables()
    return _db_manager


def get_pipeline() -> EtlPipeline:
    """Get or create the pipeline wired to the configured sink."""
    global _pipeline
    if _pipeline is None:
        _pipeline = create_pipeline(metrics=_metrics)
        logger.info("Initialized ETL pipeline")
    return _pipeline


def get_database_loader() -> DatabaseLoader:
    return DatabaseLoader(get_database_manager())


def get_metrics_collector() -> MetricsCollector:
    return _metrics
