"""
Prefix Match

In-memory prefix index for symbol and name completion. Keys are inserted with
arbitrary metadata, sorted once, and then queried for every key starting with
a given prefix in O(log n + k).

Main entry points:
    PrefixIndex: the index itself (insert / reorder / find)
    Engine: loads key files into an index and serves completions

Example Usage:
    from prefixmatch import PrefixIndex

    idx = PrefixIndex()
    idx.insert("file::name", 2)
    idx.insert("file::no", 3)
    idx.reorder()

    for key, meta in idx.find("file::"):
        print(key, meta)
"""

# src/prefixmatch/__init__.py
from .index import PrefixIndex, Match, sort_cmp, find_cmp
from .engine import Engine
from .models import Completion, Location

__version__ = "1.0.0"
__all__ = [
    "PrefixIndex", "Match", "sort_cmp", "find_cmp",
    "Engine", "Completion", "Location",
]
