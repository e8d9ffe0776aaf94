from __future__ import annotations


class StreamError(Exception):
    """Base class for every error raised by a Stream."""


class InsufficientData(StreamError, EOFError):
    """
    The source ran out before a fixed-size request could be satisfied.
    Whatever was obtained stays buffered in the stream.
    """

    def __init__(self, requested: int, available: int):
        super().__init__(f"insufficient data: need {requested} bytes, have {available}")
        self.requested = requested
        self.available = available


class SourceError(StreamError, OSError):
    """Hard failure reported by the underlying source."""


class StalledSourceError(SourceError):
    """The source keeps returning no data without signalling end of input."""
