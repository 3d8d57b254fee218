# imagestepper

The file-navigation core of a simple image viewer. Given a path, it lists
the files of the directory that holds it, and walks a directory tree
forwards and backwards in sorted, depth-first order so that a viewer can
move from one folder of images to the next.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
imagestepper PATH
```

`PATH` may be a file or a directory. The command prints one JSON line to
standard output: an `initialize` event whose payload lists the sorted files
of the directory containing `PATH` (or of `PATH` itself when it is a
directory):

```
{"event": "initialize", "payload": {"paths": ["photos/a.jpg", "photos/b.jpg"]}}
```

If `PATH` does not exist, the payload is the error message as a string and
the command exits with status 1.

## Library use

### Listing files and stepping through directories

```python
from imagestepper.commands import (
    CommandError,
    get_files,
    get_next_directory,
    get_prev_directory,
    get_target_directory,
)

payload = get_files("photos/holiday/img001.jpg")
print(payload.paths)                 # sorted files beside img001.jpg

following = get_next_directory("photos/holiday")
preceding = get_prev_directory("photos/holiday")
```

`get_target_directory(path)` returns `path` itself when it is a directory,
or the directory that holds it when it is a file. Every command raises
`CommandError` when the path does not exist, when a directory cannot be
read, or when there is no directory left to move to.

The commands return a `FilePathPayload`, which converts to and from JSON
with `to_json()` and `FilePathPayload.from_json(text)`. `ImagePayload`
carries a single image URI in the same way. Malformed JSON or missing
fields raise `ValueError`.

### Lower-level traversal

`imagestepper.paths` works on directories directly. Each function takes an
optional sort key (the default sorts by path):

```python
from pathlib import Path
from imagestepper.paths import (
    NoDirectoryLeftError,
    get_child_directories,
    get_child_files,
    get_children,
    next_directory,
    prev_directory,
)

root = Path("photos")
get_child_files(root)
get_child_directories(root, sort_key=lambda p: p.name.lower())
get_children(root, lambda p: p.suffix == ".jpg")

next_directory(root / "holiday")
prev_directory(root / "holiday")
```

`next_directory` descends into the first child directory when there is
one; otherwise it moves to the next sibling, climbing upwards as needed.
`prev_directory` moves to the deepest last descendant of the previous
sibling, or to the parent when there is no earlier sibling.
`NoDirectoryLeftError` is raised when the walk runs out of directories.
The listing functions raise `OSError` when a directory cannot be read.

### Messages and key bindings

`imagestepper.messages` defines the event names `TauriEvent`
(`initialize`, `request_image`, `receive_image`, `move_next`, `move_prev`)
and `KeyboardEvent` (`next_image`, `prev_image`), and the `Event` envelope.
`Event.from_json(text, payload_type)` reads an envelope with the keys
`event`, `id`, `payload` and an optional `windowLabel`, decoding the
payload as the given type.

`imagestepper.keyboard` maps key codes to navigation. `default_keymap()`
binds `ArrowRight` to the next image and `ArrowLeft` to the previous one.
`handle_keyboard_event(keymap, code, emit)` calls `emit(name, None)` with
`move_next` or `move_prev` for a bound key and returns that event, or
returns `None` for an unbound key.

## What this package does not do

It does not open a window or display images. It supplies the file lists,
directory stepping, message formats and key handling that a viewer's
interface would use; drawing the images is left to that interface.