#!/usr/bin/env python3
"""Split a file on a delimiter and report record count and sizes."""
import argparse
import logging
from pathlib import Path

from peekstream.binary.records import iter_records
from peekstream.binary.stream import Stream
from peekstream.models.settings import StreamSettings


def main(argv=None):
    p = argparse.ArgumentParser(description="split a byte stream into delimited records")
    p.add_argument("input", type=Path)
    p.add_argument("--delim", default="0a", help="delimiter as hex (default: 0a, newline)")
    p.add_argument("--chunk-size", type=int, default=4096)
    p.add_argument("--show", type=int, default=5, help="print the first N records")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger = logging.getLogger("split_records")

    delim = bytes.fromhex(args.delim)
    count = total = longest = 0
    with args.input.open("rb") as fh:
        s = Stream(fh, StreamSettings(chunk_size=args.chunk_size))
        for rec in iter_records(s, delim):
            if count < args.show:
                print(f"[{count}] @{s.tell()}: {rec[:60]!r}")
            count += 1
            total += len(rec)
            longest = max(longest, len(rec))

    logger.info("records=%d payload_bytes=%d longest=%d", count, total, longest)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
