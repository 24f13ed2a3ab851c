"""Tests for the recurring pipeline scheduler."""

import os
from unittest.mock import Mock, patch

import pytest

from src.pipeline.etl_pipeline import EtlPipeline
from src.pipeline.results import PipelineConfig, PipelineResult
from src.services.scheduler import PipelineScheduler


@pytest.fixture
def pipeline():
    pipeline = Mock(spec=EtlPipeline)
    result = PipelineResult(run_id="run-1")
    result.complete(success=True)
    pipeline.execute_full_pipeline.return_value = result
    return pipeline


@pytest.fixture
def config():
    return PipelineConfig(teams_csv_path="teams.csv")


@pytest.fixture
def scheduler(pipeline, config):
    scheduler = PipelineScheduler(pipeline, config=config, run_time="06:30", poll_interval=0.01)
    yield scheduler
    scheduler.stop()


class TestPipelineScheduler:
    """Test PipelineScheduler."""

    def test_initial_status(self, scheduler):
        assert scheduler.get_status() == {
            "running": False,
            "run_time": "06:30",
            "last_run": None,
            "last_run_success": None,
            "next_jobs": [],
        }

    def test_run_once(self, scheduler, pipeline, config):
        result = scheduler.run_once()

        pipeline.execute_full_pipeline.assert_called_once_with(config)
        assert scheduler.last_result is result
        assert scheduler.last_run is not None
        assert scheduler.get_status()["last_run_success"] is True

    def test_failed_run_is_recorded(self, scheduler, pipeline):
        failed = PipelineResult(run_id="run-2")
        failed.complete(success=False, error_message="disk full")
        pipeline.execute_full_pipeline.return_value = failed

        scheduler.run_once()
        assert scheduler.get_status()["last_run_success"] is False

    def test_schedule_daily_run(self, scheduler):
        scheduler.schedule_daily_run()

        jobs = scheduler.scheduler.jobs
        assert len(jobs) == 1
        assert jobs[0].unit == "days"
        assert jobs[0].at_time.strftime("%H:%M") == "06:30"
        assert scheduler.get_status()["next_jobs"][0]["job"] == "run_once"

    def test_scheduled_jobs_are_isolated(self, pipeline, config):
        first = PipelineScheduler(pipeline, config=config)
        second = PipelineScheduler(pipeline, config=config)
        first.schedule_daily_run()
        assert second.scheduler.jobs == []

    def test_start_and_stop(self, scheduler):
        scheduler.start()
        assert scheduler.running is True

        scheduler.stop()
        assert scheduler.running is False
        assert scheduler.scheduler.jobs == []

    def test_from_env(self, pipeline):
        with patch.dict(os.environ, {"ETL_SCHEDULE_TIME": "02:15"}):
            scheduler = PipelineScheduler.from_env(pipeline)
        assert scheduler.run_time == "02:15"
