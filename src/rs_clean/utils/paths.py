"""Path and filesystem helper functions."""

from __future__ import annotations

import stat
from pathlib import Path


def strip_suffix(name: str, suffix: str) -> str | None:
    """Remove one trailing occurrence of suffix, or return None when name does not end with it."""

    if not name.endswith(suffix):
        return None
    return name[: len(name) - len(suffix)]


def is_regular_file(path: Path) -> bool:
    """Return True only for regular files; symlinks are not followed."""

    try:
        mode = path.lstat().st_mode
    except FileNotFoundError:
        return False
    return stat.S_ISREG(mode)
