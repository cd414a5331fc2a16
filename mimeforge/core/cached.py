"""Caching data handles.

A CachedData wraps a loader so the conversion behind it runs at most once,
no matter how many consumers load it or how often the expansion engine
re-wraps it. Each handle owns its own result slot; there is no shared cache.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from types import TracebackType
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET: Any = object()


class CachedData(Generic[T]):
    """Lazy, memoizing handle to a converted value.

    The loader is only called on the first load(). Later and concurrent
    callers block until it finishes and then observe the same result. If the
    loader raises, the exception is cached and re-raised to every caller.

    A CachedData is itself callable, so it can serve as the loader of a
    downstream conversion:

        >>> text = CachedData(lambda: "a,b\\n1,2\\n")
        >>> rows = CachedData(lambda: text().splitlines())
        >>> rows.load()
        ['a,b', '1,2']
    """

    __slots__ = ("_loader", "_lock", "_value", "_error", "_traceback")

    def __init__(self, loader: Callable[[], T]):
        if not callable(loader):
            raise TypeError(f"CachedData loader must be callable, got {type(loader).__name__}")
        self._loader = loader
        self._lock = threading.Lock()
        self._value: Any = _UNSET
        self._error: BaseException | None = None
        self._traceback: TracebackType | None = None

    @classmethod
    def wrap(cls, source: Callable[[], T] | CachedData[T]) -> CachedData[T]:
        """Return ``source`` if it already caches, else a new wrapper around it."""
        if isinstance(source, CachedData):
            return source
        return cls(source)

    @classmethod
    def of(cls, value: T) -> CachedData[T]:
        """Build a handle whose value is already known."""
        handle: CachedData[T] = cls(lambda: value)
        handle._value = value
        return handle

    def load(self) -> T:
        """Return the value, computing it on first use."""
        if not self.is_loaded:
            with self._lock:
                if not self.is_loaded:
                    try:
                        self._value = self._loader()
                    except Exception as e:
                        self._error = e
                        self._traceback = e.__traceback__
        if self._error is not None:
            raise self._error.with_traceback(self._traceback)
        return self._value

    __call__ = load

    @property
    def is_loaded(self) -> bool:
        """Check if the loader has finished, successfully or not."""
        return self._value is not _UNSET or self._error is not None

    def __repr__(self) -> str:
        if self._error is not None:
            state = f"failed: {self._error!r}"
        elif self._value is not _UNSET:
            state = "loaded"
        else:
            state = "pending"
        return f"CachedData({state})"
