"""Stream error reporter adapter.

Implements ErrorReporterPort by writing messages to a terminal stream.
"""

import sys
from typing import TextIO

from userdetails.core.ports import ErrorReporterPort


class StreamErrorReporter(ErrorReporterPort):
    """Writes denial messages to a text stream, one per line."""

    def __init__(self, stream: TextIO | None = None):
        """Initialize stream error reporter.

        Args:
            stream: Stream to write to. If None, sys.stderr is looked up
                on every report so redirection after construction is honoured.
        """
        self.stream = stream

    def report(self, message: str) -> None:
        """Write the message followed by a newline."""
        stream = self.stream if self.stream is not None else sys.stderr
        print(message, file=stream, flush=True)
