# src/prefixmatch/models.py
"""
Data models shared by the loader, engine and frontends.

- Location: where a key was read from; stored as the index metadata.
- Completion: the result row returned to callers (CLI, HTTP API).

Both are plain frozen containers with no behaviour of their own.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Location:
    """
    Origin of one key.

    Attributes
    ----------
    path : str
        Source file path, relative to the root it was found under.
        Keys added programmatically use "<memory>".
    line_no : int
        0-based line number within the source file.
    """
    path: str
    line_no: int


@dataclass(frozen=True, slots=True)
class Completion:
    """
    One completion returned by Engine.complete().

    Field names are part of the JSON contract of /api/complete and the
    CLI's --json output.
    """
    key: str
    path: str
    line_no: int
