"""minver reporting — handlers, sinks and the fan-out reporter.

The ``EventReporter`` delivers every event to each subscribed handler.
Handlers render events to line sinks; the minimal output handler writes
one line per final result, split across a success and a failure sink.
"""

from minver.reporting.decoding import decode_event, encode_event, iter_events
from minver.reporting.handlers import (
    EventHandler,
    MinimalOutputHandler,
    minimal_output_handler_for_std_streams,
)
from minver.reporting.reporter import EventReporter
from minver.reporting.sinks import BufferSink, LineSink, LockedStreamSink

__all__ = [
    "BufferSink",
    "EventHandler",
    "EventReporter",
    "LineSink",
    "LockedStreamSink",
    "MinimalOutputHandler",
    "decode_event",
    "encode_event",
    "iter_events",
    "minimal_output_handler_for_std_streams",
]
