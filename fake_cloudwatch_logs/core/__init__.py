"""
Core infrastructure components for the in-memory log store.

This module contains the foundational components used across all handlers:
- LogBackend: Shared nested-mapping storage and its lock
- PaginationCursorManager: Single-use pagination tokens
- IngestionDelaySimulator: Delayed visibility of stream metadata
- Botocore adapter: Serves a real boto3 ``logs`` client in-process
"""

from .botocore_adapter import BotocoreAttachment, build_error_response, build_success_response
from .cursors import PaginationCursorManager
from .ingestion_delay import EventSummary, IngestionDelaySimulator
from .log_backend import LogBackend

__all__ = [
    "BotocoreAttachment",
    "EventSummary",
    "IngestionDelaySimulator",
    "LogBackend",
    "PaginationCursorManager",
    "build_error_response",
    "build_success_response",
]
