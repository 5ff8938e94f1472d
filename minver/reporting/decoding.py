"""Decode serialized events — one UTF-8 JSON object per event.

The wire shape is ``Event.model_dump(mode="json")``: an object with an
optional ``event_id``/``timestamp_utc`` and a ``message`` object whose
``kind`` field selects the message variant.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator

from pydantic import ValidationError

from minver.exceptions import EventDecodeError
from minver.models.events import Event
from minver.models.messages import MessageKind


def decode_event(raw: bytes | str) -> Event:
    """Deserialize and validate one event record."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EventDecodeError(f"Invalid UTF-8: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise EventDecodeError(f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise EventDecodeError(
            f"Event must be a JSON object, got {type(data).__name__}"
        )

    message = data.get("message")
    if not isinstance(message, dict):
        raise EventDecodeError("Missing message object")

    kind_str = message.get("kind")
    if kind_str is None:
        raise EventDecodeError("Missing message kind")

    try:
        MessageKind(kind_str)
    except (TypeError, ValueError) as exc:
        raise EventDecodeError(f"Unknown message kind: {kind_str!r}") from exc

    try:
        return Event.model_validate(data)
    except ValidationError as exc:
        raise EventDecodeError(f"Event validation failed: {exc}") from exc


def iter_events(lines: Iterable[bytes | str]) -> Iterator[Event]:
    """Decode each non-blank line of a JSON-lines stream."""
    for line in lines:
        if not line.strip():
            continue
        yield decode_event(line)


def encode_event(event: Event) -> str:
    """Serialize an event to a single JSON line (without the newline)."""
    return json.dumps(event.model_dump(mode="json"), sort_keys=True)
