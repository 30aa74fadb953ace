"""Mutual exclusion per game: at most one move/quit in flight for any game ID."""

import logging
from contextlib import contextmanager
from threading import Lock
from typing import Iterator
from uuid import UUID
from weakref import WeakValueDictionary

logger = logging.getLogger(__name__)


class GameLockRegistry:
    """
    Hands out one lock per game ID. Games never wait on each other.

    A lock only lives as long as someone holds (or waits for) it, so finished or abandoned games leave nothing behind.
    """

    def __init__(self) -> None:
        self._locks: WeakValueDictionary[UUID, Lock] = WeakValueDictionary()
        self._registry_lock = Lock()

    def _lock_for(self, game_id: UUID) -> Lock:
        with self._registry_lock:
            lock = self._locks.get(game_id)
            if lock is None:
                lock = Lock()
                self._locks[game_id] = lock
            return lock

    def __len__(self) -> int:
        """Amount of games with a lock currently in use."""
        return len(self._locks)

    @contextmanager
    def game_lock(self, game_id: UUID) -> Iterator[None]:
        lock = self._lock_for(game_id)
        lock.acquire()
        logger.debug("Acquired lock for game %s", game_id)
        try:
            yield
        finally:
            lock.release()
            logger.debug("Released lock for game %s", game_id)


# Shared by all requests handled by this process
game_locks = GameLockRegistry()
