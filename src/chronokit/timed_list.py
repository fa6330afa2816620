from collections.abc import Iterator
from datetime import timedelta
from typing import Generic, TypeVar

from .clock import Clock, default_clock
from .config import get_config, get_logger
from .durations import Duration, to_seconds

T = TypeVar("T")


class TimedList(Generic[T]):
    """
    An ordered list where each element has its own time-to-live.

    Expired elements are never returned. They are physically removed on
    the next read (``iter``, ``items``, ``len``) or by calling ``clean``,
    so every read may shrink the list. Wrappers that add locking must
    treat reads as writes.
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = default_clock(clock)
        # (expires_at, value) in insertion order
        self._entries: list[tuple[float, T]] = []

    def insert(self, value: T, ttl: Duration) -> None:
        """
        Append an element that expires ``ttl`` after now.

        Args:
            value: Element to store
            ttl: Seconds or timedelta. Zero means the element is expired
                before it can ever be read.
        """
        seconds = to_seconds(ttl, what="ttl")
        # negative ttls were already reported by to_seconds
        requested_zero = ttl == timedelta(0) if isinstance(ttl, timedelta) else ttl == 0
        if requested_zero and get_config().warn_zero_ttl:
            get_logger().warning(
                f"TimedList.insert({value!r}) with zero ttl; the element will never be visible."
            )
        self._entries.append((self._clock.now() + seconds, value))

    def clean(self) -> None:
        """
        Remove all elements whose ttl has elapsed.

        Every read calls this, so it never needs to be called manually.
        """
        now = self._clock.now()
        self._entries = [entry for entry in self._entries if entry[0] > now]

    def clear(self) -> None:
        """Remove all elements"""
        self._entries.clear()

    def iter(self) -> Iterator[T]:
        """
        Purge expired elements, then iterate over the rest in insertion order.

        If iteration takes long enough, elements that were live when it
        began are skipped once they expire.
        """
        self.clean()
        return self._live(tuple(self._entries))

    def _live(self, entries: tuple[tuple[float, T], ...]) -> Iterator[T]:
        for expires_at, value in entries:
            if expires_at > self._clock.now():
                yield value

    def items(self) -> list[T]:
        """Live elements as a new list"""
        return list(self.iter())

    def len(self) -> int:
        """Number of live elements, after purging"""
        self.clean()
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __len__(self) -> int:
        return self.len()

    def __repr__(self) -> str:
        return f"TimedList(stored={len(self._entries)})"
