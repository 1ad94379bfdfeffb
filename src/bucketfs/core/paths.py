"""Root-prefix composition for provider keys.

Only the join between root and path is touched: ``..``, repeated separators
inside either part and case are left exactly as given.
"""

from __future__ import annotations

SEPARATOR = "/"


def resolve_path(root: str, path: str) -> str:
    """Return the storage key for ``path`` under ``root``.

    >>> resolve_path("data", "a/b.txt")
    'data/a/b.txt'
    >>> resolve_path("data/", "/a/b.txt")
    'data/a/b.txt'
    >>> resolve_path("", "/a/b.txt")
    '/a/b.txt'
    """
    if not root:
        return path
    return root.rstrip(SEPARATOR) + SEPARATOR + path.lstrip(SEPARATOR)


def join_root(root: str, sub_path: str) -> str:
    """Return the root of a view scoped to ``sub_path`` below ``root``."""
    return resolve_path(root, sub_path)
