"""S3 sink configuration and boto3 client creation."""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import boto3

DEFAULT_BUCKET = 'sports-data-etl'
DEFAULT_PREFIX = 'sports-data'
DEFAULT_REGION = 'us-east-1'


@dataclass
class S3Config:
    """Where the S3 sink writes and how the client authenticates."""
    bucket_name: str = DEFAULT_BUCKET
    key_prefix: str = DEFAULT_PREFIX
    region: Optional[str] = DEFAULT_REGION
    profile: Optional[str] = None
    endpoint_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "S3Config":
        return cls(
            bucket_name=os.getenv('ETL_S3_BUCKET', DEFAULT_BUCKET),
            key_prefix=os.getenv('ETL_S3_PREFIX', DEFAULT_PREFIX),
            region=os.getenv('ETL_S3_REGION') or os.getenv('AWS_REGION') or DEFAULT_REGION,
            profile=os.getenv('ETL_S3_PROFILE') or None,
            endpoint_url=os.getenv('ETL_S3_ENDPOINT_URL') or None,
        )


def create_s3_client(config: Optional[S3Config] = None) -> Any:
    """Create a boto3 S3 client from the sink configuration.

    Args:
        config: S3 settings; read from the environment when omitted

    Returns:
        Boto3 S3 client
    """
    config = config or S3Config.from_env()

    session_kwargs: Dict[str, str] = {}
    if config.profile:
        session_kwargs['profile_name'] = config.profile
    if config.region:
        session_kwargs['region_name'] = config.region
    session = boto3.session.Session(**session_kwargs)

    client_kwargs: Dict[str, str] = {}
    if config.endpoint_url:
        client_kwargs['endpoint_url'] = config.endpoint_url
    return session.client('s3', **client_kwargs)
