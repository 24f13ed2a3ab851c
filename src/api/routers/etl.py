"""ETL pipeline API endpoints."""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import SQLAlchemyError

from src.loaders import DatabaseLoader
from src.pipeline import EtlPipeline, MetricsCollector, PipelineConfig
from ..dependencies import get_database_loader, get_metrics_collector, get_pipeline

logger = logging.getLogger(__name__)

router = APIRouter()


class ExecuteRequest(BaseModel):
    """Input paths for a run; an omitted path skips that source."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    teams_csv_path: Optional[str] = Field(None, description="Teams CSV file")
    players_json_path: Optional[str] = Field(None, description="Players JSON file")
    games_xml_path: Optional[str] = Field(None, description="Games XML file")

    def to_config(self) -> PipelineConfig:
        return PipelineConfig(
            teams_csv_path=self.teams_csv_path,
            players_json_path=self.players_json_path,
            games_xml_path=self.games_xml_path,
        )


@router.post("/execute")
def execute_pipeline(
    request: Optional[ExecuteRequest] = None,
    pipeline: EtlPipeline = Depends(get_pipeline),
):
    """Run the full pipeline; responds 500 with the run result if it failed."""
    logger.info("ETL pipeline execution requested via REST API")
    config = request.to_config() if request is not None else PipelineConfig.from_env()

    result = pipeline.execute_full_pipeline(config)
    if result.success:
        logger.info(f"ETL pipeline completed successfully via REST API: {result.run_id}")
        return result.to_dict()

    logger.error(f"ETL pipeline failed via REST API: {result.error_message}")
    return JSONResponse(status_code=500, content=result.to_dict())


@router.get("/quality-report")
def get_quality_report(pipeline: EtlPipeline = Depends(get_pipeline)) -> Dict[str, Any]:
    logger.info("Data quality report requested via REST API")
    return pipeline.generate_quality_report().to_dict()


@router.get("/status")
def get_pipeline_status(loader: DatabaseLoader = Depends(get_database_loader)) -> Dict[str, Any]:
    """Per-kind row counts in the database."""
    try:
        counts = loader.get_counts()
    except SQLAlchemyError as e:
        logger.error(f"Database error in get_pipeline_status: {e}")
        raise HTTPException(status_code=500, detail="Database error")

    return {
        "status": "READY",
        "database": {**counts, "total": sum(counts.values())},
    }


@router.delete("/data")
def clear_all_data(loader: DatabaseLoader = Depends(get_database_loader)):
    logger.warning("Data clearing requested via REST API")
    try:
        loader.clear_all_data()
    except SQLAlchemyError as e:
        return JSONResponse(status_code=500, content={"status": "ERROR", "message": str(e)})
    return {"status": "SUCCESS", "message": "All data cleared from database"}


@router.get("/metrics")
def get_metrics(metrics: MetricsCollector = Depends(get_metrics_collector)) -> Dict[str, Any]:
    """Counters accumulated by this process since start-up."""
    return metrics.get_metrics()


@router.get("/health")
def health_check() -> Dict[str, str]:
    return {
        "status": "UP",
        "application": "Sports Data ETL Pipeline",
        "timestamp": datetime.now().isoformat(),
    }
