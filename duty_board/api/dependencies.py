"""
Shared dependencies for API routers.

Provides access to commonly used services like the roster store and loggers.
"""

import logging

from duty_board.cache import roster_store
from duty_board.logics.exceptions import RosterNotFoundException
from duty_board.logics.roster_store import RosterStore, StoredRoster


def get_logger(name: str = "api") -> logging.Logger:
    """
    Get a logger instance for API routers.

    Usage in routers:
        from duty_board.api.dependencies import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


def get_roster_store() -> RosterStore:
    """
    Get the shared roster store.

    Usage in routers:
        from duty_board.api.dependencies import get_roster_store
        store = get_roster_store()
    """
    return roster_store


def get_stored_roster(roster_id: str) -> StoredRoster:
    """
    Look up a stored roster by id.

    Raises:
        RosterNotFoundException: If the roster is unknown or expired
    """
    stored = get_roster_store().get(roster_id)
    if stored is None:
        raise RosterNotFoundException(roster_id)
    return stored
