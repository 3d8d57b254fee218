"""Event names and JSON payloads exchanged between the viewer front end and back end."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar


class TauriEvent(str, Enum):
    """Names of the events sent between the window and the back end."""

    INITIALIZE = "initialize"
    REQUEST_IMAGE = "request_image"
    RECEIVE_IMAGE = "receive_image"
    MOVE_NEXT = "move_next"
    MOVE_PREV = "move_prev"


class KeyboardEvent(str, Enum):
    """Actions that keys can be bound to."""

    NEXT_IMAGE = "next_image"
    PREV_IMAGE = "prev_image"


def _load_object(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _require(data: dict[str, Any], field: str) -> Any:
    if field not in data:
        raise ValueError(f"missing field `{field}`")
    return data[field]


def _dump(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"))


@dataclass(frozen=True)
class ImagePayload:
    """The location of one image to show."""

    uri: str

    @classmethod
    def _from_mapping(cls, data: Any) -> ImagePayload:
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object for ImagePayload")
        uri = _require(data, "uri")
        if not isinstance(uri, str):
            raise ValueError("field `uri` must be a string")
        return cls(uri=uri)

    def to_json(self) -> str:
        return _dump({"uri": self.uri})

    @classmethod
    def from_json(cls, text: str) -> ImagePayload:
        return cls._from_mapping(_load_object(text))


@dataclass(frozen=True)
class FilePathPayload:
    """A list of file paths, in display order."""

    paths: list[str]

    @classmethod
    def _from_mapping(cls, data: Any) -> FilePathPayload:
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object for FilePathPayload")
        paths = _require(data, "paths")
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ValueError("field `paths` must be a list of strings")
        return cls(paths=list(paths))

    def to_json(self) -> str:
        return _dump({"paths": self.paths})

    @classmethod
    def from_json(cls, text: str) -> FilePathPayload:
        return cls._from_mapping(_load_object(text))


T = TypeVar("T")


@dataclass(frozen=True)
class Event(Generic[T]):
    """An event envelope as delivered to a listener."""

    event: str
    id: int
    payload: T
    window_label: Optional[str] = None

    @classmethod
    def from_json(cls, text: str, payload_type: type) -> Event:
        """Parse an envelope whose keys are camelCase, decoding the payload as `payload_type`."""
        data = _load_object(text)
        name = _require(data, "event")
        if not isinstance(name, str):
            raise ValueError("field `event` must be a string")
        ident = _require(data, "id")
        if isinstance(ident, bool) or not isinstance(ident, int) or ident < 0:
            raise ValueError("field `id` must be a non-negative integer")
        label = data.get("windowLabel")
        if label is not None and not isinstance(label, str):
            raise ValueError("field `windowLabel` must be a string or null")
        raw = _require(data, "payload")
        if payload_type in (ImagePayload, FilePathPayload):
            payload = payload_type._from_mapping(raw)
        elif isinstance(raw, payload_type) and not (
            isinstance(raw, bool) and payload_type is int
        ):
            payload = raw
        else:
            raise ValueError(f"payload is not a valid {payload_type.__name__}")
        return cls(event=name, id=ident, payload=payload, window_label=label)