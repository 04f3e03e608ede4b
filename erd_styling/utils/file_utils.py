"""File utilities."""
from __future__ import annotations

from pathlib import Path


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file.

    Raises FileNotFoundError for a missing file; undecodable bytes are dropped
    after a strict read fails.
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Missing file: {path}")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return p.read_text(encoding="utf-8", errors="ignore")


def relative_to_root(path: str, root: str) -> str:
    """Strip ``root/`` from the front of ``path``; other paths are returned as-is."""
    prefix = root.rstrip("/") + "/"
    if root and path.startswith(prefix):
        return path[len(prefix):]
    return path
