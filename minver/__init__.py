"""minver: result reporting for minimum-supported-version queries.

Renders the events produced by version searches, ``set``/``show`` and
``verify`` commands.  The minimal output handler writes one
machine-parseable line per final result: successes to stdout, failures to
stderr.
"""

__version__ = "0.1.0"

from minver.models.events import Event
from minver.reporting.handlers.minimal import MinimalOutputHandler
from minver.reporting.reporter import EventReporter

__all__ = ["Event", "EventReporter", "MinimalOutputHandler", "__version__"]
