"""
Lookahead buffer over a sequential byte source.

A Stream keeps the bytes it pulled from its source but has not handed out yet.
Peek-style calls only ever grow that pending prefix; read/skip calls remove
exactly what they return from its front. Everything returned is an immutable
copy, never a view into the pending buffer.
"""
from __future__ import annotations

import io
import logging
from typing import Callable, Optional, Union

from .errors import InsufficientData
from .source import Source, fill, read_some
from peekstream.models.settings import DEFAULT_SETTINGS, StreamSettings

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
BytePredicate = Callable[[int], bool]


def _byte(b: int) -> bytes:
    if not 0 <= b <= 255:
        raise ValueError(f"byte out of range: {b}")
    return bytes((b,))


class Stream:
    __slots__ = ("source", "settings", "_buf", "_pos")

    def __init__(self, source: Source, settings: Optional[StreamSettings] = None):
        self.source = source
        self.settings = settings or DEFAULT_SETTINGS
        self._buf = bytearray()
        self._pos = 0

    @classmethod
    def from_bytes(cls, data: BytesLike, settings: Optional[StreamSettings] = None) -> "Stream":
        return cls(io.BytesIO(bytes(data)), settings)

    def __repr__(self) -> str:
        return f"<Stream pos={self._pos} buffered={len(self._buf)}>"

    def tell(self) -> int:
        """Number of bytes consumed so far."""
        return self._pos

    @property
    def buffered(self) -> int:
        return len(self._buf)

    def _consume(self, n: int) -> None:
        # bytearray front deletion is amortized O(1)
        del self._buf[:n]
        self._pos += n

    def _fill_to(self, n: int) -> int:
        """Pull until n bytes are buffered or the source ends; return the buffered count."""
        have = len(self._buf)
        if have < n:
            fill(self.source, self._buf, n - have, self.settings)
        return len(self._buf)

    # -----------------------------
    # Lookahead
    # -----------------------------

    def is_empty(self) -> bool:
        """True when no further byte can be obtained from the stream."""
        if self._buf:
            return False
        try:
            self.peek(1)
        except InsufficientData:
            return True
        return False

    def peek(self, n: int) -> bytes:
        """
        Return the next n bytes without consuming them.

        Raises InsufficientData if the source ends first; the bytes that did
        arrive stay buffered, so a retry or another call still sees them.
        """
        if n < 0:
            raise ValueError(f"negative size: {n}")
        if self._fill_to(n) < n:
            logger.debug("peek(%d) hit end of input with %d bytes buffered", n, len(self._buf))
            raise InsufficientData(n, len(self._buf))
        return bytes(self._buf[:n])

    def peek_up_to(self, n: int) -> bytes:
        """Like peek(), but returns fewer bytes (maybe none) at end of input."""
        try:
            return self.peek(n)
        except InsufficientData:
            return bytes(self._buf[:n])

    def starts_with(self, pattern: BytesLike) -> bool:
        return self.peek(len(pattern)) == bytes(pattern)

    def starts_with_byte(self, b: int) -> bool:
        return self.starts_with(_byte(b))

    # -----------------------------
    # Consumption
    # -----------------------------

    def skip(self, n: int) -> None:
        self.peek(n)
        self._consume(n)

    def skip_bytes(self, pattern: BytesLike) -> bool:
        """Consume `pattern` if the stream starts with it; report whether it did."""
        pattern = bytes(pattern)
        if self.peek(len(pattern)) != pattern:
            return False
        self._consume(len(pattern))
        return True

    def skip_byte(self, b: int) -> bool:
        return self.skip_bytes(_byte(b))

    def skip_while(self, predicate: BytePredicate) -> None:
        self.read_while(predicate)

    def read(self, n: int) -> bytes:
        data = self.peek(n)
        self._consume(n)
        return data

    def read_while(self, predicate: BytePredicate) -> bytes:
        """
        Consume and return the longest prefix whose bytes all satisfy
        `predicate`. The first byte that fails it is left in the stream.

        Nothing is consumed until the scan completes, so a source error or a
        raising predicate leaves every scanned byte buffered.
        """
        end = 0
        while True:
            avail = self._fill_to(end + self.settings.scan_block_size)
            if avail == end:
                break
            while end < avail and predicate(self._buf[end]):
                end += 1
            if end < avail:
                break
        return self.read(end)

    def read_all(self) -> bytes:
        """Consume and return everything up to end of input."""
        while True:
            have = len(self._buf)
            if self._fill_to(have + self.settings.chunk_size) == have:
                break
        return self.read(len(self._buf))

    # -----------------------------
    # Delimiter search
    # -----------------------------

    def peek_until(self, delim: BytesLike) -> Optional[bytes]:
        """
        Return the bytes before the first occurrence of `delim`, without
        consuming anything. Returns None (not b"") when the source ends
        before the delimiter shows up. An empty delimiter matches at once.
        """
        delim = bytes(delim)
        start = 0
        while True:
            idx = self._buf.find(delim, start)
            if idx >= 0:
                return bytes(self._buf[:idx])
            # a match may straddle the old and new data
            start = max(0, len(self._buf) - len(delim) + 1)
            chunk = read_some(self.source, self.settings.chunk_size, self.settings)
            if not chunk:
                logger.debug("no match for %r before end of input", delim)
                return None
            self._buf += chunk

    def peek_until_byte(self, b: int) -> Optional[bytes]:
        return self.peek_until(_byte(b))

    def read_until(self, delim: BytesLike) -> Optional[bytes]:
        """Consume and return the bytes before `delim`; the delimiter stays."""
        data = self.peek_until(delim)
        if data is None:
            return None
        self._consume(len(data))
        return data

    def read_until_and_skip(self, delim: BytesLike) -> Optional[bytes]:
        """Like read_until(), but the delimiter is consumed as well."""
        data = self.peek_until(delim)
        if data is None:
            return None
        self._consume(len(data) + len(delim))
        return data

    def read_until_byte(self, b: int) -> Optional[bytes]:
        return self.read_until(_byte(b))

    def read_until_byte_and_skip(self, b: int) -> Optional[bytes]:
        return self.read_until_and_skip(_byte(b))
