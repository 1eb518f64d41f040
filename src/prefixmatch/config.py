from __future__ import annotations
import os

# search config
TOP_K: int = 10            # default number of completions per query

# key files: one key per line
KEY_EXTS = [".txt", ".sym"]
COMMENT_PREFIX: str = "#"  # lines starting with this are ignored

# folders to skip while walking roots
EXCLUDE_DIRS = {".git", ".hg", ".svn", ".idea", ".vscode", "node_modules", "__pycache__"}

# Progress logging (set PREFIXMATCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("PREFIXMATCH_VERBOSE") == "1"
PROGRESS_EVERY_FILES: int = 500
