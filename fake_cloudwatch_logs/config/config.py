import os
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

DEFAULT_INGESTION_DELAY_SECONDS = 60 * 60


class FakeCloudWatchLogsConfig(BaseModel):
    """Configuration for the in-memory CloudWatch Logs emulation."""

    # Delayed visibility of lastEventTimestamp
    ingestion_delay: timedelta = Field(
        default_factory=lambda: timedelta(
            seconds=float(os.getenv("FAKE_CWL_INGESTION_DELAY_SECONDS", DEFAULT_INGESTION_DELAY_SECONDS))
        ),
        description="Lag before an ingested event is reflected in lastEventTimestamp"
    )

    # Tenant scope defaults used when no credentials can be resolved
    default_account: str = Field(
        default_factory=lambda: os.getenv("FAKE_CWL_DEFAULT_ACCOUNT", "default"),
        description="Account (access key id) used when a request carries no credentials"
    )

    default_region: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region used when a request carries no credentials"
    )

    # Fixture cache
    cache_path: Optional[str] = Field(
        default_factory=lambda: os.getenv("FAKE_CWL_CACHE_PATH"),
        description="Directory holding groups/, streams/ and events/ fixture files"
    )

    # Page sizes applied when a request gives no limit
    group_page_limit: int = Field(default=50, ge=1, description="Default DescribeLogGroups page size")
    stream_page_limit: int = Field(default=50, ge=1, description="Default DescribeLogStreams page size")
    event_page_limit: int = Field(default=10000, ge=1, description="Default GetLogEvents page size")

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("FAKE_CWL_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for store operations"
    )

    @field_validator('ingestion_delay')
    @classmethod
    def validate_ingestion_delay(cls, v):
        """Validate ingestion delay."""
        if v < timedelta(0):
            raise ValueError("Ingestion delay must not be negative")
        return v

    @field_validator('default_region')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @property
    def ingestion_delay_ms(self) -> int:
        """Ingestion delay in epoch-millisecond units."""
        return int(self.ingestion_delay.total_seconds() * 1000)

    @classmethod
    def from_env(cls) -> 'FakeCloudWatchLogsConfig':
        """Create configuration from environment variables.

        Returns:
            FakeCloudWatchLogsConfig instance
        """
        return cls()

    @classmethod
    def for_testing(cls, **kwargs) -> 'FakeCloudWatchLogsConfig':
        """Create configuration for isolated test runs.

        Args:
            **kwargs: Overrides for any configuration field

        Returns:
            FakeCloudWatchLogsConfig instance that never touches a cache directory
        """
        settings = {
            'default_account': "123",
            'default_region': "us-east-1",
            'cache_path': None,
            'enable_debug_logging': True,
        }
        settings.update(kwargs)
        return cls(**settings)

    model_config = ConfigDict(
        validate_assignment=True
    )
