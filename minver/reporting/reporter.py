"""EventReporter — feeds reporter events to the subscribed output handlers.

The CLI builds one reporter per invocation, subscribes the handler selected
by the output mode, and streams decoded events through it.  A handler that
fails on an event is logged and skipped as long as another handler rendered
it; an event nobody could render aborts the stream with ``EventReportError``.

Assertion failures (``UnreachableMessageError`` among them) mean a handler's
rule table disagrees with the message model.  They are never tolerated and
propagate from ``report_event`` unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from minver.exceptions import EventReportError

if TYPE_CHECKING:
    from minver.models.events import Event
    from minver.reporting.handlers import EventHandler

logger = logging.getLogger(__name__)


class EventReporter:
    """Delivers each event to every subscribed handler, in subscription order.

    Parameters
    ----------
    handlers:
        Handlers to subscribe up front.
    """

    def __init__(self, handlers: Iterable[EventHandler] = ()) -> None:
        self._handlers: list[EventHandler] = []
        for handler in handlers:
            self.subscribe(handler)

    def subscribe(self, handler: EventHandler) -> None:
        """Subscribe *handler*; subscribing the same instance again is a no-op."""
        if handler in self._handlers:
            return
        self._handlers.append(handler)
        logger.info("Subscribed %s handler", handler.handler_name)

    def report_event(self, event: Event) -> int:
        """Hand *event* to every handler.

        Returns the number of handlers that accepted it.

        Raises
        ------
        AssertionError
            As raised by a handler whose rules missed a final result.
        EventReportError
            If handlers are subscribed and all of them failed.
        """
        if not self._handlers:
            logger.warning("No handler subscribed, %s event ignored", event.message.kind)
            return 0

        accepted = 0
        last_error: Exception | None = None
        for handler in self._handlers:
            try:
                handler.handle(event)
            except AssertionError:
                raise
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s handler could not render %s event %s: %s",
                    handler.handler_name,
                    event.message.kind,
                    event.event_id,
                    exc,
                )
                last_error = exc
            else:
                accepted += 1

        if last_error is not None and accepted == 0:
            raise EventReportError(
                f"No handler could render {event.message.kind} event "
                f"{event.event_id}: {last_error}"
            ) from last_error

        return accepted

    def report_stream(self, events: Iterable[Event]) -> int:
        """Report events in order until the iterable is exhausted.

        Returns the number of events reported.  Decoding errors raised by a
        lazy *events* iterable propagate, leaving earlier output in place.
        """
        count = 0
        for event in events:
            self.report_event(event)
            count += 1
        logger.debug("Reported %d events", count)
        return count
