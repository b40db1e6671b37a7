"""In-process locks keyed by an arbitrary hashable value."""

import threading
from collections import defaultdict
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator


class KeyedLock:
    """Serialize work per key; unrelated keys never wait on each other.

    Entries are dropped once no thread holds or waits for them.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.Lock] = {}
        self._waiters: Dict[Hashable, int] = defaultdict(int)

    @contextmanager
    def hold(self, key: Hashable) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._waiters[key] += 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._waiters[key] -= 1
                if self._waiters[key] == 0:
                    del self._waiters[key]
                    del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)
