"""Unique identifier generation for governed entities."""

import itertools
import threading
import time
from typing import Optional

from governance.config import get_settings


class UniqueIdGenerator:
    """Mints ``<prefix>-<n>`` identifiers from a process-wide monotonic counter.

    The counter starts at the current epoch milliseconds unless a seed is
    given, and is advanced under a lock so concurrent callers never share a value.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = get_settings().ID_COUNTER_SEED
        if seed is None:
            seed = int(time.time() * 1000)
        self._counter = itertools.count(seed)
        self._lock = threading.Lock()

    def generate_id(self, prefix: str) -> str:
        """Generate a unique ID such as ``CUST-1718000000000``."""
        with self._lock:
            value = next(self._counter)
        return f"{prefix}-{value}"


# Module-level singleton
id_generator = UniqueIdGenerator()
