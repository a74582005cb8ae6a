"""
Fake CloudWatch Logs Utilities

Key Features:
- Epoch-millisecond clock and datetime conversion
- Tenant scope resolution from SigV4 Authorization headers
"""

import logging
import re
import time
from datetime import datetime, timezone
from typing import Optional, Union

from .exceptions import ValidationError
from .models import TenantScope

logger = logging.getLogger(__name__)

_CREDENTIAL_PATTERN = re.compile(r"Credential=([\w\-/]+),")


# =============================================================================
# Time Utilities
# =============================================================================

def now_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def to_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Convert datetime to UTC.

    Naive datetimes are assumed to already be in UTC.

    Args:
        dt: Datetime to convert to UTC

    Returns:
        Datetime in UTC timezone, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def to_epoch_millis(value: Optional[Union[int, datetime]]) -> Optional[int]:
    """Normalize a timestamp argument to epoch milliseconds.

    Args:
        value: Epoch millis, a datetime (naive means UTC) or None

    Returns:
        Epoch milliseconds, or None if input is None

    Raises:
        ValidationError: If the value is neither an int nor a datetime

    Examples:
        >>> to_epoch_millis(datetime(2024, 1, 1, tzinfo=timezone.utc))
        1704067200000
        >>> to_epoch_millis(1704067200000)
        1704067200000
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return int(to_utc(value).timestamp() * 1000)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ValidationError(f"Invalid timestamp type: {type(value).__name__}. Expected epoch millis or datetime.")


# =============================================================================
# Tenant Scope Resolution
# =============================================================================

def resolve_tenant_scope(
    authorization: Optional[str],
    default_account: str = "default",
    default_region: str = "us-east-1"
) -> TenantScope:
    """Resolve the tenant scope of a request from its Authorization header.

    Only the credential scope of a SigV4 header is read
    (``Credential=<accessKeyId>/<date>/<region>/<service>/aws4_request``);
    signatures are not verified.

    Args:
        authorization: Raw Authorization header value, if any
        default_account: Account used when no credential can be extracted
        default_region: Region used when no credential can be extracted

    Returns:
        TenantScope for the request

    Example:
        >>> header = "AWS4-HMAC-SHA256 Credential=123/20240101/us-west-2/logs/aws4_request, ..."
        >>> resolve_tenant_scope(header)
        TenantScope(account='123', region='us-west-2')
    """
    match = _CREDENTIAL_PATTERN.search(authorization) if authorization else None
    if not match:
        return TenantScope(account=default_account, region=default_region)

    parts = match.group(1).split('/')
    if len(parts) < 3 or not parts[0] or not parts[2]:
        logger.warning(f"Malformed credential scope '{match.group(1)}', using defaults")
        return TenantScope(account=default_account, region=default_region)

    return TenantScope(account=parts[0], region=parts[2])
