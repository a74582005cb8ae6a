import os
from datetime import timedelta
from unittest.mock import patch

import pytest
from pydantic import ValidationError as PydanticValidationError

from fake_cloudwatch_logs.config import FakeCloudWatchLogsConfig


class TestFakeCloudWatchLogsConfig:
    """Test cases for FakeCloudWatchLogsConfig."""

    def test_default_config(self):
        """Test default configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = FakeCloudWatchLogsConfig()

            assert config.ingestion_delay == timedelta(hours=1)
            assert config.ingestion_delay_ms == 3600000
            assert config.default_account == "default"
            assert config.default_region == "us-east-1"
            assert config.cache_path is None
            assert config.group_page_limit == 50
            assert config.stream_page_limit == 50
            assert config.event_page_limit == 10000
            assert config.enable_debug_logging is False

    def test_config_from_env_vars(self):
        """Test configuration from environment variables."""
        env_vars = {
            "FAKE_CWL_INGESTION_DELAY_SECONDS": "5",
            "FAKE_CWL_DEFAULT_ACCOUNT": "999",
            "AWS_REGION": "eu-west-1",
            "FAKE_CWL_CACHE_PATH": "/tmp/fixtures",
            "FAKE_CWL_DEBUG_LOGGING": "true"
        }

        with patch.dict(os.environ, env_vars):
            config = FakeCloudWatchLogsConfig.from_env()

            assert config.ingestion_delay_ms == 5000
            assert config.default_account == "999"
            assert config.default_region == "eu-west-1"
            assert config.cache_path == "/tmp/fixtures"
            assert config.enable_debug_logging is True

    def test_for_testing(self):
        """Test isolated test configuration."""
        with patch.dict(os.environ, {"FAKE_CWL_CACHE_PATH": "/tmp/fixtures"}):
            config = FakeCloudWatchLogsConfig.for_testing()

        assert config.default_account == "123"
        assert config.default_region == "us-east-1"
        assert config.cache_path is None
        assert config.enable_debug_logging is True

    def test_for_testing_overrides(self):
        """Test overrides passed to for_testing win."""
        config = FakeCloudWatchLogsConfig.for_testing(ingestion_delay=timedelta(0), event_page_limit=5)

        assert config.ingestion_delay_ms == 0
        assert config.event_page_limit == 5

    def test_negative_ingestion_delay(self):
        """Test negative ingestion delays are rejected."""
        with pytest.raises(PydanticValidationError):
            FakeCloudWatchLogsConfig(ingestion_delay=timedelta(seconds=-1))

    def test_empty_region(self):
        """Test an empty region is rejected."""
        with pytest.raises(PydanticValidationError):
            FakeCloudWatchLogsConfig(default_region="")

    def test_assignment_is_validated(self):
        """Test page limits are validated on assignment."""
        config = FakeCloudWatchLogsConfig.for_testing()

        with pytest.raises(PydanticValidationError):
            config.event_page_limit = 0
