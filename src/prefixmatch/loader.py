from __future__ import annotations
import logging
import os
from typing import Iterable, List, Tuple, Union
from .config import COMMENT_PREFIX, EXCLUDE_DIRS, KEY_EXTS, PROGRESS_EVERY_FILES
from .index import PrefixIndex
from .models import Location

log = logging.getLogger(__name__)


def _has_key_ext(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in KEY_EXTS


def iter_key_files(roots: Iterable[str]) -> Iterable[Tuple[str, str]]:
    """Yield (root, path) for key files under each root, in sorted order."""
    for root in roots:
        root = os.path.abspath(root)
        if os.path.isfile(root):
            yield os.path.dirname(root), root
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in EXCLUDE_DIRS)
            for fn in sorted(filenames):
                if _has_key_ext(fn):
                    yield root, os.path.join(dirpath, fn)


def iter_keys(roots: Iterable[str]) -> Iterable[Tuple[str, Location]]:
    """
    Yield (key, Location) for every key line under the given roots.

    A key line is any line that is neither blank nor a comment; surrounding
    whitespace is stripped. Unreadable files are logged and skipped.
    """
    file_count = 0
    for root, path in iter_key_files(roots):
        rel = os.path.relpath(path, root).replace("\\", "/")
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                raw_lines = [ln.rstrip("\r\n") for ln in f]
        except OSError as exc:
            log.warning("Skipping unreadable key file %s: %s", path, exc)
            continue

        for line_no, raw in enumerate(raw_lines):
            key = raw.strip()
            if not key or key.startswith(COMMENT_PREFIX):
                continue
            yield key, Location(path=rel, line_no=line_no)

        file_count += 1
        if file_count % PROGRESS_EVERY_FILES == 0:
            log.info("Scanned %d key files", file_count)


def load_index(roots: Union[str, List[str]]) -> PrefixIndex[Location]:
    """
    Scan roots for key files and return a sorted, query-ready PrefixIndex.
    Roots may be directories or individual files; a single path string is
    treated as one root.
    """
    roots = [roots] if isinstance(roots, str) else list(roots)
    if not roots:
        raise ValueError("load_index(): at least one root is required")
    for r in roots:
        if not os.path.exists(r):
            raise FileNotFoundError(r)

    idx: PrefixIndex[Location] = PrefixIndex()
    for key, loc in iter_keys(roots):
        idx.insert(key, loc)
    idx.reorder()
    log.info("Loaded %d keys from %s", len(idx), roots)
    return idx
