"""
Lazily loaded process-wide dictionaries.

The packaged dictionaries are read once, on first use, and then shared by
every caller. Loading happens under a lock; readers after that never lock.
"""

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class Cache(Generic[T]):
    """
    A value built by `loader` on first use.

    The value is published only after `loader` has returned, so no caller
    sees a half-built dictionary. If `loader` raises, nothing is stored and
    the next call tries again.
    """

    def __init__(self, name: str, loader: Callable[[], T]):
        self.name = name
        self.loader = loader
        self._value: Optional[T] = None
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        state = "loaded" if self._value is not None else "empty"
        return f"<Cache {self.name!r} {state}>"

    def ensure(self) -> T:
        """Return the value, loading it if this is the first call."""
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is None:
                self._value = self.loader()
            return self._value

    def invalidate(self):
        """Drop the value; the next ensure() loads it again."""
        with self._lock:
            self._value = None


def defcache(name: str):
    """
    Turn a loader function into a Cache.

        @defcache("adjectives")
        def _adjectives_cache():
            return Adjectives.load()

        adjectives = _adjectives_cache.ensure()
    """
    def decorator(func: Callable[[], T]) -> Cache[T]:
        return Cache(name, func)
    return decorator
