"""
Log Groups Write API

Appends log groups to a tenant scope. Groups are never updated or deleted.
"""

import logging
from typing import Any, Dict, List, Union

from ...config import FakeCloudWatchLogsConfig
from ...core import LogBackend
from ...models import LogGroup, TenantScope

logger = logging.getLogger(__name__)


class LogGroupsWriteApi:
    """Write-only API for log groups."""

    def __init__(self, backend: LogBackend, config: FakeCloudWatchLogsConfig):
        """Initialize write API with shared backend and configuration."""
        self.backend = backend
        self.config = config

    def append(self, scope: TenantScope, groups: List[Union[LogGroup, Dict[str, Any]]]) -> List[LogGroup]:
        """
        Append groups to the scope's ordered group list.

        No uniqueness check is made. Each named group also becomes a known
        (possibly empty) group for DescribeLogStreams.

        Args:
            scope: Tenant scope owning the groups
            groups: LogGroup models or camelCase service dicts

        Returns:
            The stored LogGroup models

        Raises:
            ValidationError: A dict could not be converted to a LogGroup
        """
        new_groups = [
            group if isinstance(group, LogGroup) else LogGroup.from_service_dict(group)
            for group in groups
        ]

        with self.backend.lock:
            self.backend.groups.setdefault(scope, []).extend(new_groups)
            for group in new_groups:
                if group.log_group_name:
                    self.backend.ensure_stream_bucket(scope, group.log_group_name)

        logger.info(f"Appended {len(new_groups)} log groups to {scope}")
        return new_groups
