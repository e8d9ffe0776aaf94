"""
Adapters between a Stream and the object it pulls bytes from.

Any Python binary reader works as a source: io.BytesIO, open(..., "rb"),
socket.makefile("rb"), raw FileIO. When the source has read1() it is
preferred, so sockets and pipes hand back what is available instead of
blocking until a full chunk arrives.
"""
from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from .errors import SourceError, StalledSourceError
from peekstream.models.settings import DEFAULT_SETTINGS, StreamSettings

logger = logging.getLogger(__name__)


class Source(Protocol):
    def read(self, size: int = -1, /) -> Optional[bytes]: ...


def read_some(source: Source, size: int, settings: StreamSettings = DEFAULT_SETTINGS) -> bytes:
    """
    Perform one short read of at most `size` bytes.

    An empty result means end of input. OSError and ValueError (e.g. reading a
    closed file) from the source are raised as SourceError; any other
    exception is a bug in the source and propagates unchanged.

    A non-blocking source that has nothing available (returns None or raises
    BlockingIOError) is retried up to `settings.max_empty_reads` times,
    sleeping `settings.empty_read_delay * attempt` seconds between tries,
    then StalledSourceError is raised.
    """
    read = getattr(source, "read1", None) or source.read
    empty_reads = 0
    while True:
        try:
            chunk = read(size)
        except BlockingIOError:
            chunk = None
        except (OSError, ValueError) as e:
            raise SourceError(f"source read failed: {e}") from e

        if chunk is not None:
            if chunk:
                logger.debug("read %d/%d bytes from source", len(chunk), size)
            else:
                logger.debug("source exhausted")
            return chunk

        empty_reads += 1
        if empty_reads > settings.max_empty_reads:
            raise StalledSourceError(f"source returned no data {empty_reads} times in a row")
        logger.debug("source returned no data, retry %d/%d", empty_reads, settings.max_empty_reads)
        if settings.empty_read_delay:
            time.sleep(settings.empty_read_delay * empty_reads)


def fill(source: Source, sink: bytearray, size: int, settings: StreamSettings = DEFAULT_SETTINGS) -> int:
    """
    Append up to `size` bytes to `sink`, stopping early only at end of input.
    Every chunk lands in `sink` as soon as it is read, so bytes obtained before
    a failure are never lost. Returns the number of bytes appended; turning a
    short count into InsufficientData is up to the caller.
    """
    got = 0
    while got < size:
        chunk = read_some(source, size - got, settings)
        if not chunk:
            break
        sink += chunk
        got += len(chunk)
    return got
