"""Per-resource locks for the checkout critical section.

Locks are acquired in sorted id order so two checkouts touching overlapping
products and customers cannot deadlock. The registry only keeps a lock while
something still references it; a lock nobody holds is dropped and recreated
on the next request.
"""

import threading
import weakref
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager


class LockRegistry:
    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks = weakref.WeakValueDictionary()

    def lock_for(self, resource_id) -> threading.RLock:
        key = str(resource_id)
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    def __len__(self) -> int:
        return len(self._locks)

    @contextmanager
    def holding(self, resource_ids: Iterable) -> Iterator[list[str]]:
        """Hold the locks of every resource in ``resource_ids`` for the block."""
        ordered = sorted({str(resource_id) for resource_id in resource_ids})
        with ExitStack() as stack:
            for key in ordered:
                stack.enter_context(self.lock_for(key))
            yield ordered
