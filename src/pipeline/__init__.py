"""ETL orchestration."""

from .results import PipelineConfig, ExtractedData, TransformedData, PipelineResult
from .metrics import MetricsCollector
from .etl_pipeline import EtlPipeline
from .factory import create_components, create_pipeline

__all__ = [
    'PipelineConfig',
    'ExtractedData',
    'TransformedData',
    'PipelineResult',
    'MetricsCollector',
    'EtlPipeline',
    'create_components',
    'create_pipeline',
]
