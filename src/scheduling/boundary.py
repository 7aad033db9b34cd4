import threading
from contextlib import contextmanager
from typing import Hashable


class SlotLocks:
    """
    In-process lock table keyed by booking slot.

    Schedule calls lock on the requested timestamp, so two requests for the
    same time run their free-physician check and insert one after the other.
    An entry lives only while some caller holds or waits on it; the last one
    out removes it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # key -> [lock, holders]
        self._locks: dict[Hashable, list] = {}

    def _acquire_entry(self, key: Hashable) -> threading.Lock:
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
            return entry[0]

    def _release_entry(self, key: Hashable) -> None:
        with self._guard:
            entry = self._locks[key]
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[key]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def __call__(self, key: Hashable):
        lock = self._acquire_entry(key)
        try:
            with lock:
                yield
        finally:
            self._release_entry(key)


@contextmanager
def no_boundary(key: Hashable):
    yield
