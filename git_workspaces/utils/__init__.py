"""Utility functions for git-workspaces."""

from .paths import is_path_within, is_plain_segment, join_under, normalize_path

__all__ = [
    "is_path_within",
    "is_plain_segment",
    "join_under",
    "normalize_path",
]
