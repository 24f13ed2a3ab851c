"""Pytest configuration for API tests."""

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_database_loader, get_metrics_collector, get_pipeline
from src.api.main import create_app
from src.loaders.database_loader import DatabaseLoader
from src.pipeline.etl_pipeline import EtlPipeline
from src.pipeline.metrics import MetricsCollector
from src.quality.database_checker import DatabaseQualityChecker


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def database_loader(db_manager):
    return DatabaseLoader(db_manager)


@pytest.fixture
def pipeline(db_manager, database_loader, metrics):
    return EtlPipeline(database_loader, DatabaseQualityChecker(db_manager), metrics=metrics)


@pytest.fixture
def app(pipeline, database_loader, metrics):
    """Application with every sink dependency bound to in-memory SQLite."""
    app = create_app()
    app.dependency_overrides[get_pipeline] = lambda: pipeline
    app.dependency_overrides[get_database_loader] = lambda: database_loader
    app.dependency_overrides[get_metrics_collector] = lambda: metrics
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def execute_body(sample_data_dir):
    """Request body pointing the pipeline at the sample input files."""
    return {
        "teamsCsvPath": str(sample_data_dir / "teams.csv"),
        "playersJsonPath": str(sample_data_dir / "players.json"),
        "gamesXmlPath": str(sample_data_dir / "games.xml"),
    }
