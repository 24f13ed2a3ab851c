"""In-process counters and timers for pipeline runs."""

import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterator, Optional

from src.loaders.base import LoadResult
from .results import ExtractedData, TransformedData

logger = logging.getLogger(__name__)

KINDS = ('teams', 'players', 'games')


def _zero_counts() -> Dict[str, int]:
    return {kind: 0 for kind in KINDS}


@dataclass
class EtlMetrics:
    """Totals accumulated across every run of this process."""
    extracted: Dict[str, int] = field(default_factory=_zero_counts)
    transformed: Dict[str, int] = field(default_factory=_zero_counts)
    loaded: Dict[str, int] = field(default_factory=_zero_counts)
    validation_errors: int = 0
    validation_warnings: int = 0
    duplicates_removed: int = 0
    runs_succeeded: int = 0
    runs_failed: int = 0
    # Stage name -> cumulative seconds
    stage_durations: Dict[str, float] = field(default_factory=dict)

    @property
    def total_runs(self) -> int:
        return self.runs_succeeded + self.runs_failed


class MetricsCollector:
    """Accumulates record counts and stage timings for the pipeline."""

    def __init__(self):
        self.metrics = EtlMetrics()

    def record_extraction_metrics(self, extracted: Optional[ExtractedData]) -> None:
        if extracted is None:
            return
        for kind, count in extracted.counts().items():
            self.metrics.extracted[kind] += count
        logger.debug(f"Recorded extraction metrics: {extracted.counts()}")

    def record_transformation_metrics(self, transformed: Optional[TransformedData]) -> None:
        if transformed is None:
            return
        for kind, count in transformed.counts().items():
            self.metrics.transformed[kind] += count
        self.metrics.validation_errors += transformed.validation_errors
        self.metrics.validation_warnings += transformed.validation_warnings
        self.metrics.duplicates_removed += transformed.duplicates_removed
        logger.debug(f"Recorded transformation metrics: {transformed.counts()}")

    def record_load_metrics(self, load_result: Optional[LoadResult]) -> None:
        if load_result is None:
            return
        self.metrics.loaded['teams'] += load_result.teams_loaded
        self.metrics.loaded['players'] += load_result.players_loaded
        self.metrics.loaded['games'] += load_result.games_loaded
        logger.debug(f"Recorded load metrics: {load_result.total_loaded} records")

    def record_run(self, success: bool) -> None:
        if success:
            self.metrics.runs_succeeded += 1
        else:
            self.metrics.runs_failed += 1

    @contextmanager
    def time_stage(self, name: str) -> Iterator[None]:
        """Add the wall time of the ``with`` body to stage ``name``."""
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - started
            self.metrics.stage_durations[name] = self.metrics.stage_durations.get(name, 0.0) + elapsed
            logger.debug(f"Stage {name} took {elapsed:.3f}s")

    def get_metrics(self) -> Dict[str, Any]:
        snapshot = asdict(self.metrics)
        snapshot['total_runs'] = self.metrics.total_runs
        return snapshot

    def reset(self) -> None:
        self.metrics = EtlMetrics()
