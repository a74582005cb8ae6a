"""
Single-Use Pagination Cursors

Every list operation of the emulation hands out opaque tokens that map to an
offset into the sequence being paged. A token is valid exactly once: the read
that presents it consumes and deletes it, and a second read with the same
token fails with InvalidTokenError. Tokens never expire otherwise.

One PaginationCursorManager is shared by the group, stream and event stores.
"""

import logging
import threading
import uuid
from typing import Dict, List, Optional, Sequence, Tuple, TypeVar

from ..exceptions import InvalidTokenError

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PaginationCursorManager:
    """
    Registry of outstanding pagination tokens.

    Issue and consume are serialized by a lock, so when two callers race on
    the same token exactly one receives the offset.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._offsets: Dict[str, int] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._offsets)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._offsets

    def issue(self, offset: int, prefix: str = "") -> str:
        """
        Register an offset under a fresh opaque token.

        Args:
            offset: Offset the token resolves to (may be negative for
                tail-anchored event pages)
            prefix: Optional marker prepended to the token, e.g. ``f/``

        Returns:
            The new token
        """
        token = f"{prefix}{uuid.uuid4()}"
        with self._lock:
            self._offsets[token] = offset
        return token

    def consume(self, token: str) -> int:
        """
        Remove a token and return its offset.

        Raises:
            InvalidTokenError: Token unknown or already consumed
        """
        with self._lock:
            offset = self._offsets.pop(token, None)
        if offset is None:
            raise InvalidTokenError(token)
        return offset

    def resolve(self, token: Optional[str]) -> int:
        """Return the offset for ``token``, or 0 when no token was given."""
        if not token:
            return 0
        return self.consume(token)

    def paginate(
        self,
        items: Sequence[T],
        token: Optional[str],
        limit: int
    ) -> Tuple[List[T], Optional[str]]:
        """
        Forward-only page over ``items``.

        Args:
            items: Fully ordered and filtered sequence
            token: Token from the previous page, if any
            limit: Page size

        Returns:
            Tuple of (page_items, next_token). ``next_token`` is only minted
            when items remain past this page.
        """
        # Event tokens can carry negative offsets
        offset = max(self.resolve(token), 0)
        end = offset + limit
        page = list(items[offset:end])

        next_token = None
        if len(items) > end:
            next_token = self.issue(end)

        logger.debug(f"Paged {len(page)} of {len(items)} items from offset {offset}")
        return page, next_token
