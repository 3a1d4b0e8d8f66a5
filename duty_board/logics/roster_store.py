"""
In-memory store of built rosters.
Thread-safe, entries expire after a TTL and the oldest upload is evicted first
when the store is full. Nothing is written to disk.
"""

import time
import uuid
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional, Any

from duty_board.logics.roster_builder import RosterResult

logger = logging.getLogger(__name__)


@dataclass
class StoredRoster:
    roster_id: str
    filename: str
    sheet_name: str
    result: RosterResult
    uploaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    stored_at: float = field(default_factory=time.time)

    def metadata(self) -> Dict[str, Any]:
        return {
            "roster_id": self.roster_id,
            "filename": self.filename,
            "sheet_name": self.sheet_name,
            "uploaded_at": self.uploaded_at,
        }


class RosterStore:
    """Thread-safe in-memory roster store with TTL expiry and oldest-first eviction."""

    def __init__(self, max_size: int, ttl_seconds: int):
        """
        Initialize roster store.

        Args:
            max_size: Maximum number of rosters kept at once
            ttl_seconds: Seconds a roster stays retrievable after upload
        """
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self.rosters: Dict[str, StoredRoster] = {}
        self.lock = Lock()

    def _expired(self, stored: StoredRoster, now: float) -> bool:
        return now - stored.stored_at > self.ttl_seconds

    def add(self, filename: str, sheet_name: str, result: RosterResult) -> StoredRoster:
        """
        Store a built roster under a new roster id.

        Args:
            filename: Uploaded filename
            sheet_name: Sheet the roster was read from
            result: Built roster

        Returns:
            The StoredRoster record (carries the generated roster_id)
        """
        with self.lock:
            now = time.time()
            expired_ids = [
                roster_id for roster_id, stored in self.rosters.items()
                if self._expired(stored, now)
            ]
            for roster_id in expired_ids:
                del self.rosters[roster_id]
                logger.debug(f"[Store] Evicted expired roster: {roster_id}")

            if self.rosters and len(self.rosters) >= self.max_size:
                oldest_id = min(self.rosters, key=lambda r: self.rosters[r].stored_at)
                del self.rosters[oldest_id]
                logger.debug(f"[Store] Evicted oldest roster: {oldest_id}")

            stored = StoredRoster(
                roster_id=uuid.uuid4().hex,
                filename=filename,
                sheet_name=sheet_name,
                result=result,
                stored_at=now,
            )
            self.rosters[stored.roster_id] = stored
            logger.debug(f"[Store] Stored roster {stored.roster_id} ({filename})")
            return stored

    def get(self, roster_id: str) -> Optional[StoredRoster]:
        """
        Get a stored roster if it has not expired.

        Returns:
            StoredRoster or None if not found/expired
        """
        with self.lock:
            stored = self.rosters.get(roster_id)
            if stored is None:
                return None

            if self._expired(stored, time.time()):
                del self.rosters[roster_id]
                logger.debug(f"[Store] Roster expired: {roster_id}")
                return None

            return stored

    def delete(self, roster_id: str) -> bool:
        """
        Delete a stored roster.

        Returns:
            True if the roster was deleted, False if not found
        """
        with self.lock:
            if roster_id in self.rosters:
                del self.rosters[roster_id]
                logger.debug(f"[Store] Deleted roster: {roster_id}")
                return True
            return False

    def clear(self) -> None:
        """Drop every stored roster."""
        with self.lock:
            self.rosters.clear()
            logger.info("[Store] Cleared all rosters")

    def size(self) -> int:
        with self.lock:
            return len(self.rosters)

    def stats(self) -> Dict[str, Any]:
        """Get store statistics."""
        with self.lock:
            now = time.time()
            active = sum(1 for stored in self.rosters.values() if not self._expired(stored, now))
            return {
                "size": len(self.rosters),
                "max_size": self.max_size,
                "ttl_seconds": self.ttl_seconds,
                "active_entries": active
            }
