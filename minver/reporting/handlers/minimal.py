"""Minimal output handler — one machine-parseable line per final result.

For callers that want to parse the outcome of a command cheaply without
adopting the JSON schema.  Affirmative outcomes go to the success sink,
negative or unsupported outcomes to the failure sink:

==========================  =========  ===============
Message                     Sink       Line
==========================  =========  ===============
ResolvedVersion (found)     success    ``<version>``
ResolvedVersion (none)      failure    ``none``
ListResult                  failure    ``unsupported``
SetOutput                   success    ``<version>``
ShowOutput                  success    ``<version>``
VerifyResult (compatible)   success    ``true``
VerifyResult (otherwise)    failure    ``false``
==========================  =========  ===============

Intermediate messages (progress, metadata, toolchain probes) are discarded.

Callers must not lock the success and failure sinks at the same time;
this handler only ever takes one of the two locks per event.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from minver.exceptions import UnreachableMessageError
from minver.models.messages import (
    ListResult,
    ResolvedVersion,
    SetOutput,
    ShowOutput,
    VerifyResult,
)

if TYPE_CHECKING:
    from minver.models.events import Event
    from minver.reporting.sinks import LineSink

logger = logging.getLogger(__name__)

NONE_LINE = "none"
UNSUPPORTED_LINE = "unsupported"


class MinimalOutputHandler:
    """Routes each final-result event to exactly one of two sinks.

    Parameters
    ----------
    success_sink:
        Receives versions and ``true``.
    failure_sink:
        Receives ``none``, ``unsupported`` and ``false``.
    strict:
        When a final-result message matches no rule, raise
        ``UnreachableMessageError`` instead of logging and writing nothing.
        Defaults to ``__debug__``.
    """

    handler_name = "minimal"

    def __init__(
        self,
        success_sink: LineSink,
        failure_sink: LineSink,
        *,
        strict: bool = __debug__,
    ) -> None:
        self._success_sink = success_sink
        self._failure_sink = failure_sink
        self._strict = strict

    @property
    def success_sink(self) -> LineSink:
        return self._success_sink

    @property
    def failure_sink(self) -> LineSink:
        return self._failure_sink

    @property
    def strict(self) -> bool:
        return self._strict

    def handle(self, event: Event) -> None:
        """Write at most one line for *event*."""
        message = event.message

        # Checked first so progress ticks never contend for a sink lock.
        if not message.is_final_result():
            return

        if isinstance(message, ResolvedVersion):
            if message.version is not None:
                self._success_sink.write_line(str(message.version))
            else:
                self._failure_sink.write_line(NONE_LINE)
        elif isinstance(message, ListResult):
            # Listing output is only available in the human and json modes.
            self._failure_sink.write_line(UNSUPPORTED_LINE)
        elif isinstance(message, (SetOutput, ShowOutput)):
            self._success_sink.write_line(str(message.version))
        elif isinstance(message, VerifyResult):
            if message.compatible:
                self._success_sink.write_line("true")
            else:
                self._failure_sink.write_line("false")
        else:
            self._unreachable(message)

    def _unreachable(self, message: object) -> None:
        detail = (
            f"Final-result message {type(message).__name__} has no minimal "
            "output rule; see Message.is_final_result"
        )
        if self._strict:
            raise UnreachableMessageError(detail)
        logger.error(detail)

    def __repr__(self) -> str:
        return (
            f"MinimalOutputHandler(success={self._success_sink!r}, "
            f"failure={self._failure_sink!r}, strict={self._strict})"
        )
