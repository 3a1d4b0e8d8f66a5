"""
Shared roster store for all API routers.

Centralizes the in-memory store of uploaded rosters and provides a single
point for invalidation.

Store Instances:
    - roster_store: TTL from [cache] roster_ttl_seconds, max entries from
      [cache] roster_max_entries

Usage:
    from duty_board.cache import roster_store, clear_all_caches

    stored = roster_store.add("duty_june.xlsx", "June", result)
    stored = roster_store.get(stored.roster_id)

    clear_all_caches()
"""

import logging
from datetime import datetime

from duty_board.logics.roster_store import RosterStore
from duty_board.settings import ROSTER_MAX_ENTRIES, ROSTER_TTL_SECONDS

logger = logging.getLogger(__name__)

roster_store = RosterStore(max_size=ROSTER_MAX_ENTRIES, ttl_seconds=ROSTER_TTL_SECONDS)


def invalidate_roster(roster_id: str) -> bool:
    """
    Drop one stored roster.

    Args:
        roster_id: Id returned by the upload endpoint

    Returns:
        True if the roster was deleted, False if it was unknown or expired
    """
    deleted = roster_store.delete(roster_id)
    if deleted:
        logger.info(f"[Cache] Invalidated roster {roster_id}")
    return deleted


def clear_all_caches() -> dict:
    """
    Clear every stored roster.

    Returns:
        {
            "roster_store": {"size": 0, "max_size": 32, "ttl_seconds": 1800, "active_entries": 0},
            "cleared_at": "2025-01-15T10:30:00.123456"
        }
    """
    roster_store.clear()
    cleared_at = datetime.now().isoformat()
    stats = roster_store.stats()
    logger.info(f"[Cache] Cleared all caches at {cleared_at} - roster_store: {stats}")
    return {
        "roster_store": stats,
        "cleared_at": cleared_at
    }


__all__ = [
    'roster_store',
    'invalidate_roster',
    'clear_all_caches'
]
