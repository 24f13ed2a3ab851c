"""Tests for pipeline metrics collection."""

import pytest

from src.loaders.base import LoadResult
from src.pipeline.metrics import MetricsCollector
from src.pipeline.results import ExtractedData, TransformedData


@pytest.fixture
def collector():
    return MetricsCollector()


class TestMetricsCollector:
    """Test MetricsCollector accumulation."""

    def test_initial_snapshot(self, collector):
        snapshot = collector.get_metrics()
        assert snapshot['extracted'] == {'teams': 0, 'players': 0, 'games': 0}
        assert snapshot['total_runs'] == 0
        assert snapshot['stage_durations'] == {}

    def test_counts_accumulate_across_runs(self, collector, sample_teams, sample_player):
        for _ in range(2):
            collector.record_extraction_metrics(ExtractedData(teams=sample_teams, players=[sample_player]))
            collector.record_transformation_metrics(
                TransformedData(teams=sample_teams, validation_errors=1, validation_warnings=2,
                                duplicates_removed=3))
            collector.record_load_metrics(LoadResult(teams_loaded=2, success=True))

        snapshot = collector.get_metrics()
        assert snapshot['extracted'] == {'teams': 4, 'players': 2, 'games': 0}
        assert snapshot['transformed'] == {'teams': 4, 'players': 0, 'games': 0}
        assert snapshot['loaded'] == {'teams': 4, 'players': 0, 'games': 0}
        assert snapshot['validation_errors'] == 2
        assert snapshot['validation_warnings'] == 4
        assert snapshot['duplicates_removed'] == 6

    def test_none_is_ignored(self, collector):
        collector.record_extraction_metrics(None)
        collector.record_transformation_metrics(None)
        collector.record_load_metrics(None)
        assert collector.get_metrics()['extracted'] == {'teams': 0, 'players': 0, 'games': 0}

    def test_run_outcomes(self, collector):
        collector.record_run(True)
        collector.record_run(False)
        collector.record_run(True)

        snapshot = collector.get_metrics()
        assert snapshot['runs_succeeded'] == 2
        assert snapshot['runs_failed'] == 1
        assert snapshot['total_runs'] == 3

    def test_time_stage_records_on_error(self, collector):
        with pytest.raises(ValueError):
            with collector.time_stage('load'):
                raise ValueError("boom")

        assert collector.get_metrics()['stage_durations']['load'] >= 0.0

    def test_reset(self, collector):
        collector.record_run(True)
        with collector.time_stage('extract'):
            pass
        collector.reset()

        snapshot = collector.get_metrics()
        assert snapshot['total_runs'] == 0
        assert snapshot['stage_durations'] == {}
