"""
Log Groups CQRS APIs

Read API:
- Forward-only pagination in append order

Write API:
- Append without uniqueness checks
"""

from .queries import LogGroupsReadApi
from .commands import LogGroupsWriteApi

__all__ = [
    "LogGroupsReadApi",
    "LogGroupsWriteApi",
]
