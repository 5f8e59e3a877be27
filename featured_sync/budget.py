"""Attempt budget shared by every day of a fetch run."""

import logging

log = logging.getLogger("featured_sync.budget")


class RetryBudget:
    """Counts feed requests across the whole day window.

    The budget is never refilled: once spent, the loop stops trying the
    current day and every day after it.
    """

    def __init__(self, max_attempts: int = 1000):
        self.max_attempts = max_attempts
        self._used = 0
        self._exhausted_logged = False

    def take(self) -> bool:
        """Consume one attempt. Returns False when nothing is left."""
        if self._used >= self.max_attempts:
            if not self._exhausted_logged:
                self._exhausted_logged = True
                log.warning("Retry budget exhausted after %d attempts.", self._used)
            return False
        self._used += 1
        return True

    @property
    def used(self) -> int:
        return self._used

    @property
    def remaining(self) -> int:
        return max(0, self.max_attempts - self._used)

    @property
    def exhausted(self) -> bool:
        return self._used >= self.max_attempts
