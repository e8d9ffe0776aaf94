from __future__ import annotations
from typing import Iterator

from .stream import BytesLike, Stream


def iter_records(stream: Stream, delim: BytesLike, *, keep_tail: bool = True) -> Iterator[bytes]:
    """
    Yield delimiter-terminated records (delimiter stripped) until no further
    delimiter exists. Unterminated trailing bytes are yielded last when
    `keep_tail` is set; otherwise they are left in the stream.
    """
    if not delim:
        raise ValueError("empty delimiter")
    while True:
        record = stream.read_until_and_skip(delim)
        if record is None:
            break
        yield record
    if keep_tail:
        tail = stream.read_all()
        if tail:
            yield tail
