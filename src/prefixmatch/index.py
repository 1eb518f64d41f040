"""
Prefix index for symbol / name completion.

Keys are kept in one flat list sorted in plain lexicographic order, so every
key that extends a given prefix sits in one contiguous block. Lookup binary
searches with a coarser comparator (one string being a prefix of the other
counts as "equal") to land somewhere on or next to that block, then walks out
to the block's edges with a literal ``startswith`` check.

Typical use::

    idx = PrefixIndex()
    idx.insert("file", 0)
    idx.insert("file::name", 2)
    idx.reorder()
    for key, meta in idx.find("file::"):
        ...
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Generic, Iterator, List, Tuple, TypeVar

M = TypeVar("M")


def sort_cmp(a: str, b: str) -> int:
    """Total order used to arrange entries: lexicographic, shorter key first on a tie."""
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    return (len(a) > len(b)) - (len(a) < len(b))


def find_cmp(a: str, b: str) -> int:
    """
    Probe relation used only by the binary search in find().

    Same scan as sort_cmp(), but when the shorter string runs out without a
    difference the two are reported equal, whatever their lengths.
    """
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


class PrefixIndex(Generic[M]):
    """
    Sorted (key, metadata) store answering "every key starting with X".

    Build-time: insert() appends without ordering; call reorder() once the
    batch is in. Query-time: find() requires the entries to be sorted, i.e.
    no insert() since the last reorder(). That precondition is not checked.
    """

    def __init__(self) -> None:
        self._items: List[Tuple[str, M]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._items)})"

    # -------- Build-time API --------
    def insert(self, key: str, meta: M) -> None:
        """Append an entry. Doesn't keep the entries sorted."""
        self._items.append((key, meta))

    def reorder(self) -> None:
        """Sort entries so find() can be used."""
        self._items.sort(key=cmp_to_key(lambda a, b: sort_cmp(a[0], b[0])))

    # -------- Query --------
    def find(self, prefix: str) -> "Match[M]":
        """
        Return the span of entries whose key starts with `prefix`.

        Must call reorder() before calling this. The probe position is always
        part of the span; if it landed on a shorter key that `prefix` itself
        extends, the walk outwards can stop there and the span holds only that
        key.
        """
        items = self._items
        mid = self._probe(prefix)
        if mid < 0:
            return Match(self, 0, 0)

        # Look left for more matching prefixes
        start = mid
        while start > 0 and items[start - 1][0].startswith(prefix):
            start -= 1

        # Look right for more matching prefixes
        end = mid
        while end + 1 < len(items) and items[end + 1][0].startswith(prefix):
            end += 1

        return Match(self, start, end + 1)

    def _probe(self, prefix: str) -> int:
        """Midpoint bisection with find_cmp(); index of the first 'equal' probe or -1."""
        lo, hi = 0, len(self._items)
        while lo < hi:
            mid = (lo + hi) // 2
            c = find_cmp(self._items[mid][0], prefix)
            if c == 0:
                return mid
            if c < 0:
                lo = mid + 1
            else:
                hi = mid
        return -1


class Match(Generic[M]):
    """
    Lazy view over the entries selected by PrefixIndex.find().

    Holds only the span and a reference to its index; entries are read when
    iterated, so the view can be iterated any number of times. It is invalid
    once the index is mutated (insert/reorder).
    """

    __slots__ = ("_index", "range")

    def __init__(self, index: PrefixIndex[M], start: int, stop: int) -> None:
        self._index = index
        self.range = range(start, stop)

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def stop(self) -> int:
        return self.range.stop

    def __len__(self) -> int:
        return len(self.range)

    def __bool__(self) -> bool:
        return len(self.range) > 0

    def __iter__(self) -> Iterator[Tuple[str, M]]:
        items = self._index._items
        for i in self.range:
            yield items[i]

    def keys(self) -> Iterator[str]:
        for key, _ in self:
            yield key

    def __repr__(self) -> str:
        return f"Match(start={self.start}, stop={self.stop})"
