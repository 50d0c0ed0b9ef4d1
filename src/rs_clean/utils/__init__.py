"""Shared utility helpers."""

from rs_clean.utils.paths import is_regular_file, strip_suffix

__all__ = [
    "is_regular_file",
    "strip_suffix",
]
