"""Lexical path helpers.

Nothing here touches the filesystem: paths are joined and normalized as
strings so that callers stay pure given their inputs.
"""

import os
from typing import Optional


def normalize_path(path: str, base: Optional[str] = None) -> str:
    """Return ``path`` as an absolute, normalized string.

    Relative paths are joined onto ``base`` when one is given, otherwise onto
    the process working directory.
    """
    if not os.path.isabs(path):
        path = os.path.join(base, path) if base else os.path.abspath(path)
    return os.path.normpath(path)


def is_path_within(path: str, root: str) -> bool:
    """Check that ``path`` equals ``root`` or lies beneath it.

    The prefix must end on a separator boundary, so ``/work/app2`` is not
    within ``/work/app``. Both arguments are expected to be normalized.
    """
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def join_under(root: str, *parts: str) -> str:
    """Join ``parts`` beneath ``root``.

    Leading separators are stripped from each part, so an absolute part is
    nested under ``root`` instead of replacing it.
    """
    separators = os.sep + (os.altsep or "")
    relative = [part.lstrip(separators) for part in parts]
    return os.path.normpath(os.path.join(root, *relative))


def is_plain_segment(value: str) -> bool:
    """Check that ``value`` is a relative path that cannot climb out of its parent."""
    if not value or os.path.isabs(value) or os.path.normpath(value) == ".":
        return False
    parts = value.replace(os.altsep or os.sep, os.sep).split(os.sep)
    return ".." not in parts
