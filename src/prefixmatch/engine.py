# prefixmatch/engine.py
from __future__ import annotations

import logging
from itertools import islice
from typing import Iterable, List, Optional, Union

from . import config as CFG
from .index import PrefixIndex
from .loader import load_index
from .models import Completion, Location

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer on top of PrefixIndex.

    Public API (used by CLI/Flask):
      * build(roots):        scan key files -> sorted index
      * add(key, ...):       append one key; reordered lazily before the next query
      * complete(prefix, k): return up to k completions in key order
      * shutdown():          drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[PrefixIndex[Location]] = None
        self._dirty = False  # inserts since the last reorder()

    def build(self, roots: Union[str, Iterable[str]], *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)

        roots = [roots] if isinstance(roots, str) else list(roots)
        if not roots:
            raise ValueError("build(): at least one root is required")

        log.info("Loading keys from %s", roots)
        self.index = load_index(roots)
        self._dirty = False
        log.info("Engine build() complete: keys=%d", len(self.index))

    def add(self, key: str, path: str = "<memory>", line_no: int = 0) -> None:
        if self.index is None:
            self.index = PrefixIndex()
        self.index.insert(key, Location(path=path, line_no=int(line_no)))
        self._dirty = True

    @property
    def size(self) -> int:
        return len(self.index) if self.index is not None else 0

    def __len__(self) -> int:
        return self.size

    # ------------- query -------------

    def complete(self, prefix: str, *, top_k: int = CFG.TOP_K) -> List[Completion]:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() or add() first.")
        if top_k <= 0:
            raise ValueError(f"top_k must be positive, got {top_k}")
        if not prefix:
            return []

        if self._dirty:
            log.info("Reordering %d keys before query", len(self.index))
            self.index.reorder()
            self._dirty = False

        hits = self.index.find(prefix)
        return [
            Completion(key=key, path=loc.path, line_no=loc.line_no)
            for key, loc in islice(hits, top_k)
        ]

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self._dirty = False
        log.info("Engine shutdown complete")
