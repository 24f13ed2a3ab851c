"""Recurring pipeline runs driven by the ``schedule`` library."""

import logging
import os
from datetime import datetime
from threading import Event, Thread
from typing import Any, Dict, Optional

import schedule

from src.pipeline import EtlPipeline, PipelineConfig, PipelineResult

logger = logging.getLogger(__name__)

DEFAULT_SCHEDULE_TIME = "06:00"
POLL_INTERVAL_SECONDS = 60


class PipelineScheduler:
    """Runs the ETL pipeline once a day at a fixed time."""

    def __init__(self,
                 pipeline: EtlPipeline,
                 config: Optional[PipelineConfig] = None,
                 run_time: str = DEFAULT_SCHEDULE_TIME,
                 poll_interval: float = POLL_INTERVAL_SECONDS):
        """Initialize the scheduler.

        Args:
            pipeline: Pipeline wired to the configured sink
            config: Input paths for every scheduled run
            run_time: Time of day to run (HH:MM format)
            poll_interval: Seconds between checks for due jobs
        """
        self.pipeline = pipeline
        self.config = config or PipelineConfig.from_env()
        self.run_time = run_time
        self.poll_interval = poll_interval
        self.scheduler = schedule.Scheduler()
        self.last_run: Optional[datetime] = None
        self.last_result: Optional[PipelineResult] = None
        self._stop_event = Event()
        self._thread: Optional[Thread] = None

        logger.info(f"PipelineScheduler initialized - Time: {run_time}")

    @classmethod
    def from_env(cls, pipeline: EtlPipeline) -> "PipelineScheduler":
        return cls(pipeline, run_time=os.getenv('ETL_SCHEDULE_TIME', DEFAULT_SCHEDULE_TIME))

    def schedule_daily_run(self) -> None:
        self.scheduler.every().day.at(self.run_time).do(self.run_once)
        logger.info(f"Scheduled daily ETL run at {self.run_time}")

    def run_once(self) -> PipelineResult:
        """Execute one pipeline run and remember its outcome."""
        logger.info("Starting scheduled ETL run...")
        result = self.pipeline.execute_full_pipeline(self.config)
        self.last_run = datetime.now()
        self.last_result = result
        if result.success:
            logger.info(f"Scheduled ETL run completed: {result.to_summary()}")
        else:
            logger.error(f"Scheduled ETL run failed: {result.to_summary()}")
        return result

    def run_pending(self) -> None:
        self.scheduler.run_pending()

    def run_forever(self) -> None:
        """Block, running due jobs until ``stop`` is called."""
        if not self.scheduler.jobs:
            self.schedule_daily_run()
        self._stop_event.clear()
        while not self._stop_event.is_set():
            self.run_pending()
            self._stop_event.wait(self.poll_interval)

    def start(self) -> None:
        """Start the scheduler loop in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            logger.warning("Scheduler already running")
            return
        self._thread = Thread(target=self.run_forever, daemon=True)
        self._thread.start()
        logger.info("ETL scheduler started")

    def stop(self) -> None:
        self._stop_event.set()
        self.scheduler.clear()
        if self._thread is not None:
            self._thread.join(timeout=self.poll_interval)
            self._thread = None
        logger.info("ETL scheduler stopped")

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def get_status(self) -> Dict[str, Any]:
        next_jobs = [
            {
                "job": getattr(job.job_func, '__name__', str(job.job_func)),
                "next_run": job.next_run.isoformat() if job.next_run else None,
                "interval": str(job.interval),
            }
            for job in self.scheduler.jobs
        ]

        return {
            "running": self.running,
            "run_time": self.run_time,
            "last_run": self.last_run.isoformat() if self.last_run else None,
            "last_run_success": self.last_result.success if self.last_result else None,
            "next_jobs": next_jobs,
        }
