"""Back-end commands that list images by directory, and the program entry point."""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Callable, Optional, Sequence

from imagestepper.messages import FilePathPayload, TauriEvent
from imagestepper.paths import (
    NoDirectoryLeftError,
    get_child_files,
    next_directory,
    prev_directory,
)


class CommandError(Exception):
    """A command could not produce a result."""


def get_target_directory(path: str | os.PathLike) -> Path:
    """The directory itself, or the directory holding the file at `path`."""
    target = Path(path)
    if not target.exists():
        raise CommandError(f"Path `{target}` does not exist")
    if target.is_dir():
        return target
    parent = target.parent
    if parent == target:
        raise CommandError(f"Cannot get parent directory of `{target}`")
    return parent


def _payload(paths: list[Path]) -> FilePathPayload:
    return FilePathPayload(paths=[str(p) for p in paths])


def _files_in(directory: Path) -> FilePathPayload:
    try:
        return _payload(get_child_files(directory))
    except OSError as exc:
        raise CommandError(str(exc)) from exc


def _move(path: str | os.PathLike, step: Callable[[Path], Path]) -> FilePathPayload:
    directory = get_target_directory(path)
    try:
        target = step(directory)
    except (OSError, NoDirectoryLeftError) as exc:
        raise CommandError(str(exc)) from exc
    return _files_in(target)


def get_files(path: str | os.PathLike) -> FilePathPayload:
    """Files in the directory of `path`, sorted."""
    return _files_in(get_target_directory(path))


def get_next_directory(path: str | os.PathLike) -> FilePathPayload:
    """Files in the directory that follows the one holding `path`."""
    return _move(path, next_directory)


def get_prev_directory(path: str | os.PathLike) -> FilePathPayload:
    """Files in the directory that precedes the one holding `path`."""
    return _move(path, prev_directory)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Emit the initialize event for the given file as a JSON line on stdout."""
    parser = argparse.ArgumentParser(prog="imagestepper")
    parser.add_argument("filename", help="image file or directory to open")
    args = parser.parse_args(argv)

    try:
        payload: object = asdict(get_files(args.filename))
        status = 0
    except CommandError as exc:
        payload = str(exc)
        status = 1

    print(json.dumps({"event": TauriEvent.INITIALIZE.value, "payload": payload}))
    sys.stdout.flush()
    return status


if __name__ == "__main__":
    sys.exit(main())