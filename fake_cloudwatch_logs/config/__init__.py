from .config import FakeCloudWatchLogsConfig

__all__ = ["FakeCloudWatchLogsConfig"]
