"""Sink loaders for transformed records."""

from .base import DataLoader, LoadResult, LoadError
from .database_loader import DatabaseLoader
from .s3_client import S3Config, create_s3_client
from .s3_loader import S3DataLoader, LoadMetadata

__all__ = [
    'DataLoader',
    'LoadResult',
    'LoadError',
    'DatabaseLoader',
    'S3Config',
    'create_s3_client',
    'S3DataLoader',
    'LoadMetadata',
]
