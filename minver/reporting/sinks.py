"""Synchronized line sinks for reporter output.

A sink is a line-oriented writable destination that serializes its own
writers: every ``write_line`` call holds the sink's lock for exactly one
line.  Handlers receive sinks by injection so they never depend on a
concrete stream type; production code wraps ``sys.stdout``/``sys.stderr``,
tests use ``BufferSink``.
"""

from __future__ import annotations

import io
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class LineSink(Protocol):
    """Protocol every reporter sink must implement.

    Attributes
    ----------
    sink_name : str
        Human-readable identifier (e.g. ``"stdout"``, ``"failure"``).
    """

    @property
    def sink_name(self) -> str:
        """Return the name of this sink."""
        ...

    def write_line(self, line: str) -> None:
        """Write *line* followed by a newline, atomically w.r.t. other writers."""
        ...


class LockedStreamSink:
    """Wraps a text stream behind its own lock.

    Parameters
    ----------
    stream:
        Any text stream (``sys.stdout``, an open file, ``io.StringIO``).
    name:
        Identifier used in logs and by ``EventReporter``.
    """

    def __init__(self, stream: TextIO, name: str = "stream") -> None:
        self._stream = stream
        self._name = name
        self._lock = threading.Lock()
        self._lines_written = 0

    @property
    def sink_name(self) -> str:
        return self._name

    @property
    def lines_written(self) -> int:
        with self._lock:
            return self._lines_written

    def write_line(self, line: str) -> None:
        """Write one newline-terminated line and flush.

        Stream errors (closed stream, broken pipe) propagate to the caller
        unchanged; the line is abandoned, not retried.
        """
        with self._lock:
            self._stream.write(f"{line}\n")
            self._stream.flush()
            self._lines_written += 1

    @contextmanager
    def locked(self) -> Iterator[TextIO]:
        """Hold the sink's lock and yield the underlying stream."""
        with self._lock:
            yield self._stream

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"


class BufferSink(LockedStreamSink):
    """In-memory sink backed by ``io.StringIO``."""

    def __init__(self, name: str = "buffer") -> None:
        self._buffer = io.StringIO()
        super().__init__(self._buffer, name=name)

    def getvalue(self) -> str:
        """Return everything written so far."""
        with self.locked() as stream:
            return stream.getvalue()
