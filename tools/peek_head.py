#!/usr/bin/env python3
"""Show the first bytes of a file (or stdin) through a Stream without consuming them."""
import argparse
import logging
import sys

from peekstream.binary.stream import Stream


def hexs(b, n=64): return b[:n].hex(" ")


def main(argv=None):
    p = argparse.ArgumentParser(description="peek at the head of a byte stream")
    p.add_argument("input", help="file path, or - for stdin")
    p.add_argument("-n", "--count", type=int, default=64, help="bytes to show (default: 64)")
    p.add_argument("--expect", help="hex prefix to check for, e.g. 89504e47")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    fh = sys.stdin.buffer if args.input == "-" else open(args.input, "rb")
    try:
        s = Stream(fh)
        head = s.peek_up_to(args.count)
        print(f"{len(head)} bytes:", hexs(head, args.count))
        if args.expect:
            prefix = bytes.fromhex(args.expect)
            print("prefix match:", s.peek_up_to(len(prefix)) == prefix)
    finally:
        if fh is not sys.stdin.buffer:
            fh.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
