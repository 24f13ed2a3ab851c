"""Tests for S3 sink configuration."""

import os
from unittest.mock import patch

from src.loaders.s3_client import S3Config, create_s3_client


class TestS3Config:
    """Test S3Config.from_env."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = S3Config.from_env()
        assert config == S3Config(bucket_name="sports-data-etl", key_prefix="sports-data",
                                  region="us-east-1", profile=None, endpoint_url=None)

    def test_environment_overrides(self):
        env = {
            'ETL_S3_BUCKET': 'my-bucket',
            'ETL_S3_PREFIX': 'nightly',
            'AWS_REGION': 'eu-west-1',
            'ETL_S3_PROFILE': 'etl',
            'ETL_S3_ENDPOINT_URL': 'http://localhost:9000',
        }
        with patch.dict(os.environ, env, clear=True):
            config = S3Config.from_env()

        assert config.bucket_name == 'my-bucket'
        assert config.key_prefix == 'nightly'
        assert config.region == 'eu-west-1'
        assert config.profile == 'etl'
        assert config.endpoint_url == 'http://localhost:9000'


class TestCreateS3Client:
    """Test create_s3_client."""

    @patch('src.loaders.s3_client.boto3')
    def test_session_and_client_arguments(self, mock_boto3):
        config = S3Config(region='us-west-2', profile='etl', endpoint_url='http://localhost:9000')
        client = create_s3_client(config)

        mock_boto3.session.Session.assert_called_once_with(profile_name='etl', region_name='us-west-2')
        session = mock_boto3.session.Session.return_value
        session.client.assert_called_once_with('s3', endpoint_url='http://localhost:9000')
        assert client is session.client.return_value

    @patch('src.loaders.s3_client.boto3')
    def test_minimal_config(self, mock_boto3):
        create_s3_client(S3Config(region=None))

        mock_boto3.session.Session.assert_called_once_with()
        mock_boto3.session.Session.return_value.client.assert_called_once_with('s3')
