"""Process entry point: one scheduled run, a daily schedule, or the HTTP server.

Usage:
    ETL_MODE=SCHEDULED python -m src.main   # run once and exit 0/1
    ETL_MODE=RECURRING python -m src.main   # run every day at ETL_SCHEDULE_TIME
    python -m src.main                      # serve the API with uvicorn
"""

import logging
import os
import sys

import uvicorn

from src.pipeline import PipelineConfig, create_pipeline
from src.services.scheduler import PipelineScheduler

logger = logging.getLogger(__name__)

MODE_SCHEDULED = 'SCHEDULED'
MODE_RECURRING = 'RECURRING'


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_once() -> int:
    """Run the pipeline over the configured input files; returns the exit code."""
    logger.info("Starting ETL pipeline in SCHEDULED mode")
    try:
        pipeline = create_pipeline()
    except Exception as e:
        logger.exception(f"Error setting up ETL pipeline: {e}")
        return 1

    result = pipeline.execute_full_pipeline(PipelineConfig.from_env())
    if not result.success:
        logger.error(f"ETL pipeline failed: {result.error_message}")
        return 1

    logger.info("ETL pipeline completed successfully")
    logger.info(f"Pipeline ID: {result.run_id}")
    logger.info(f"Execution time: {result.duration_ms} ms")
    if result.load_result is not None:
        logger.info(f"Data loaded - Teams: {result.load_result.teams_loaded}, "
                    f"Players: {result.load_result.players_loaded}, "
                    f"Games: {result.load_result.games_loaded}")
    return 0


def run_recurring() -> None:
    scheduler = PipelineScheduler.from_env(create_pipeline())
    logger.info(f"Starting ETL pipeline in RECURRING mode, daily at {scheduler.run_time}")
    try:
        scheduler.run_forever()
    except KeyboardInterrupt:
        scheduler.stop()


def run_server() -> None:
    host = os.getenv('API_HOST', '0.0.0.0')
    port = int(os.getenv('API_PORT', '8000'))
    logger.info("Starting ETL pipeline in NORMAL mode (web server)")
    logger.info(f"REST API available at: http://{host}:{port}/api/v1/etl/")
    uvicorn.run("src.api.main:app", host=host, port=port)


def main() -> int:
    configure_logging()
    mode = os.getenv('ETL_MODE', 'NORMAL').upper()

    if mode == MODE_SCHEDULED:
        return run_once()
    if mode == MODE_RECURRING:
        run_recurring()
        return 0

    run_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())
