"""Exception hierarchy for minver.

Every error raised by minver itself derives from ``MinverError`` so callers
can catch the whole family.  Stream write failures are *not* wrapped: they
propagate as the ``OSError``/``ValueError`` the stream raised.
"""

from __future__ import annotations


class MinverError(Exception):
    """Base class for all minver errors."""


class VersionParseError(MinverError, ValueError):
    """Raised when a version string is not ``major.minor[.patch]``."""


class EventDecodeError(MinverError, ValueError):
    """Raised when a serialized event record fails validation."""


class EventReportError(MinverError, RuntimeError):
    """Raised when every subscribed handler fails for an event."""


class UnreachableMessageError(MinverError, AssertionError):
    """Raised when a final-result message matches no rendering rule.

    Signals that ``Message.is_final_result`` and a handler's rule table have
    drifted apart.
    """
