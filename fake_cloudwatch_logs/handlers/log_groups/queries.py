"""
Log Groups Read API

Forward-only paginated listing of a scope's groups in append order.
"""

import logging
from typing import Optional

from ...config import FakeCloudWatchLogsConfig
from ...core import LogBackend, PaginationCursorManager
from ...models import DescribeLogGroupsResponse, TenantScope

logger = logging.getLogger(__name__)


class LogGroupsReadApi:
    """Read-only API for log groups."""

    def __init__(self, backend: LogBackend, cursors: PaginationCursorManager, config: FakeCloudWatchLogsConfig):
        """Initialize read API with shared backend, cursors and configuration."""
        self.backend = backend
        self.cursors = cursors
        self.config = config

    def list(
        self,
        scope: TenantScope,
        next_token: Optional[str] = None,
        limit: Optional[int] = None
    ) -> DescribeLogGroupsResponse:
        """
        List one page of log groups.

        Args:
            scope: Tenant scope to list
            next_token: Token from the previous page
            limit: Page size (config.group_page_limit if None)

        Returns:
            DescribeLogGroupsResponse; an unknown scope yields an empty page

        Raises:
            InvalidTokenError: next_token unknown or already used
        """
        with self.backend.lock:
            groups = self.backend.groups.get(scope)
            if not groups:
                return DescribeLogGroupsResponse(log_groups=[])

            page, token = self.cursors.paginate(
                groups, next_token, limit or self.config.group_page_limit
            )
            return DescribeLogGroupsResponse(
                log_groups=[group.model_copy() for group in page],
                next_token=token
            )
