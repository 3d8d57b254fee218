"""Listing and stepping through directories in sorted order."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable, Optional

SortKey = Callable[[Path], Any]


class NoDirectoryLeftError(Exception):
    """Raised when there is no further directory to move to."""

    def __init__(self, message: str = "No directory is left") -> None:
        super().__init__(message)


def _key(sort_key: Optional[SortKey]) -> SortKey:
    return sort_key if sort_key is not None else (lambda p: p)


def get_children(
    parent: str | os.PathLike,
    predicate: Callable[[Path], bool],
    sort_key: Optional[SortKey] = None,
) -> list[Path]:
    """Entries of `parent` matching `predicate`, sorted by `sort_key`.

    Raises OSError if the directory cannot be read.
    """
    entries = [p for p in Path(parent).iterdir() if predicate(p)]
    return sorted(entries, key=_key(sort_key))


def get_child_files(
    parent: str | os.PathLike, sort_key: Optional[SortKey] = None
) -> list[Path]:
    """Regular files directly inside `parent`, sorted."""
    return get_children(parent, Path.is_file, sort_key)


def get_child_directories(
    parent: str | os.PathLike, sort_key: Optional[SortKey] = None
) -> list[Path]:
    """Directories directly inside `parent`, sorted."""
    return get_children(parent, Path.is_dir, sort_key)


def next_directory(
    path: str | os.PathLike, sort_key: Optional[SortKey] = None
) -> Path:
    """The directory after `path` in a depth-first walk of the tree."""
    key = _key(sort_key)
    path = Path(path)

    try:
        children = get_child_directories(path, key)
    except OSError:
        children = []
    if children:
        return children[0]

    current = path
    while (parent := current.parent) != current:
        current_key = key(current)
        following = next((d for d in get_child_directories(parent, key) if key(d) > current_key), None)
        if following is not None:
            return following
        current = parent

    raise NoDirectoryLeftError()


def prev_directory(
    path: str | os.PathLike, sort_key: Optional[SortKey] = None
) -> Path:
    """The directory before `path` in a depth-first walk of the tree."""
    key = _key(sort_key)
    path = Path(path)
    parent = path.parent
    if parent == path:
        raise NoDirectoryLeftError()

    try:
        siblings = get_child_directories(parent, key)
    except OSError:
        return parent

    path_key = key(path)
    earlier = [d for d in siblings if key(d) < path_key]
    if not earlier:
        return parent

    current = earlier[-1]
    while True:
        try:
            children = get_child_directories(current, key)
        except OSError:
            break
        if not children:
            break
        current = children[-1]
    return current