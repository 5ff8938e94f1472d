"""Event handler protocol and production handler factories.

All handlers implement ``EventHandler``: a ``handler_name`` attribute and a
``handle(event)`` method.  ``EventReporter`` calls ``handle`` on every
subscribed handler for every reported event.
"""

from __future__ import annotations

import sys
from typing import Protocol, runtime_checkable

from minver.models.events import Event
from minver.reporting.handlers.minimal import MinimalOutputHandler
from minver.reporting.sinks import LockedStreamSink


@runtime_checkable
class EventHandler(Protocol):
    """Protocol that every reporter handler must implement."""

    handler_name: str

    def handle(self, event: Event) -> None:
        """Consume one event.  Returns nothing."""
        ...


def minimal_output_handler_for_std_streams(
    *, strict: bool = __debug__
) -> MinimalOutputHandler:
    """Build a MinimalOutputHandler writing to stdout (success) and stderr (failure).

    Each stream gets its own lock.
    """
    return MinimalOutputHandler(
        LockedStreamSink(sys.stdout, name="stdout"),
        LockedStreamSink(sys.stderr, name="stderr"),
        strict=strict,
    )


__all__ = [
    "EventHandler",
    "MinimalOutputHandler",
    "minimal_output_handler_for_std_streams",
]
