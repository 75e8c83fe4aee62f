# SPDX-License-Identifier: MIT

import logging
import threading
from typing import Callable, Optional

import pendulum

from questlog.model.entity_id import EntityId
from questlog.time import now_utc

logger = logging.getLogger(__name__)

DEFAULT_IDEMPOTENCY_WINDOW = pendulum.duration(minutes=5)


class IdempotencyGuard:
    """
    Remembers recently submitted log ids for a bounded window.

    Expiry is lazy: every call to ``seen`` first evicts ids whose window has
    elapsed, so no timer or background thread is involved. The guard is
    memory resident and per process; durable deduplication is the log
    sink's job.
    """

    def __init__(
        self,
        window: pendulum.Duration = DEFAULT_IDEMPOTENCY_WINDOW,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self.window = window
        self._clock = clock
        self._tracked: dict[EntityId, pendulum.DateTime] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self.__evict_expired(self._clock())
            return len(self._tracked)

    def __evict_expired(self, now: pendulum.DateTime) -> None:
        expired = [
            log_id
            for log_id, first_seen in self._tracked.items()
            if now - first_seen >= self.window
        ]
        for log_id in expired:
            del self._tracked[log_id]
        if expired:
            logger.debug("Forgot %d expired log id(s)", len(expired))

    def seen(self, log_id: EntityId) -> bool:
        """
        Return True if ``log_id`` was already submitted within the window.

        An unseen id is remembered from now on, until the window elapses.
        A repeat does not extend the window.
        """
        with self._lock:
            now = self._clock()
            self.__evict_expired(now)
            if log_id in self._tracked:
                logger.debug("Duplicate submission of log %s", log_id)
                return True
            self._tracked[log_id] = now
            return False

    def forget(self, log_id: EntityId) -> None:
        with self._lock:
            self._tracked.pop(log_id, None)


def window_from_minutes(minutes: Optional[float]) -> pendulum.Duration:
    if minutes is None or minutes <= 0:
        return DEFAULT_IDEMPOTENCY_WINDOW
    return pendulum.duration(seconds=minutes * 60)
