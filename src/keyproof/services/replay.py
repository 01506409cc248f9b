"""Replay protection for consumed challenge nonces."""

from __future__ import annotations

import logging
from threading import Lock

logger = logging.getLogger(__name__)


class ReplayGuard:
    """Concurrency-safe record of nonces consumed by successful verifications.

    The set is only ever mutated through ``try_consume`` (and the
    administrative ``clear``); there is no separate membership check a caller
    could race against.
    """

    def __init__(self) -> None:
        self._consumed: set[str] = set()
        self._lock = Lock()

    def try_consume(self, nonce: str) -> bool:
        """Mark ``nonce`` as used.

        Args:
            nonce: Nonce value extracted from a verified proof.

        Returns:
            True if the nonce was unused and is now consumed; False if it had
            already been consumed, in which case nothing changes.
        """
        with self._lock:
            consumed = nonce not in self._consumed
            if consumed:
                self._consumed.add(nonce)
        if consumed:
            logger.info("Marked nonce as used: %s", nonce)
        else:
            logger.info("Nonce has already been used: %s", nonce)
        return consumed

    def count(self) -> int:
        """Return the number of consumed nonces."""
        with self._lock:
            return len(self._consumed)

    def snapshot(self) -> list[str]:
        """Return the consumed nonces in sorted order."""
        with self._lock:
            return sorted(self._consumed)

    def clear(self) -> int:
        """Forget every consumed nonce and return how many were removed."""
        with self._lock:
            removed = len(self._consumed)
            self._consumed.clear()
        logger.info("Cleared %d used nonces", removed)
        return removed
