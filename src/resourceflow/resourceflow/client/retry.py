from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable, TypeVar

from .errors import should_retry

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class RetryPolicy:
    """Exponential backoff with up to 10% jitter, capped at max_delay seconds."""

    attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 10.0
    sleep: Callable[[float], None] = time.sleep
    jitter: Callable[[], float] = field(default=random.random)

    def delay_for(self, attempt: int) -> float:
        exponential = self.base_delay * (2 ** (attempt - 1))
        return min(exponential + self.jitter() * 0.1 * exponential, self.max_delay)

    def run(self, operation: Callable[[], T]) -> T:
        attempt = 1
        while True:
            try:
                return operation()
            except Exception as e:
                if attempt >= self.attempts or not should_retry(e):
                    raise
                delay = self.delay_for(attempt)
                logger.warning("Request failed (attempt %s/%s), retrying in %.2fs: %s", attempt, self.attempts, delay, e)
                self.sleep(delay)
                attempt += 1
