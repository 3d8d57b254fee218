"""Mapping key presses to navigation events."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from imagestepper.messages import KeyboardEvent, TauriEvent

Emitter = Callable[[str, Any], Any]

_ACTIONS = {
    KeyboardEvent.NEXT_IMAGE: TauriEvent.MOVE_NEXT,
    KeyboardEvent.PREV_IMAGE: TauriEvent.MOVE_PREV,
}


def default_keymap() -> dict[str, KeyboardEvent]:
    """The standard bindings: right arrow for next, left arrow for previous."""
    return {
        "ArrowRight": KeyboardEvent.NEXT_IMAGE,
        "ArrowLeft": KeyboardEvent.PREV_IMAGE,
    }


def handle_keyboard_event(
    keymap: Mapping[str, KeyboardEvent], code: str, emit: Emitter
) -> Optional[TauriEvent]:
    """Emit the navigation event bound to `code`, if any, and return it."""
    action = keymap.get(code)
    event = _ACTIONS.get(action) if action is not None else None
    if event is not None:
        emit(event.value, None)
    return event