"""Background services."""

from .scheduler import PipelineScheduler

__all__ = [
    'PipelineScheduler',
]
