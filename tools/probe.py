# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

from __future__ import annotations

import argparse
import logging
import sys

from bytesupply import ByteSupplyError, FiniteBuffer, RingBuffer, Unstructured

STRATEGIES = {"finite": FiniteBuffer, "ring": RingBuffer}


def build_buffer(args: argparse.Namespace) -> Unstructured:
    buffer = STRATEGIES[args.strategy].from_bytes(bytes.fromhex(args.hex))
    if args.container_size_limit is not None:
        buffer.with_container_size_limit(args.container_size_limit)
    for _ in range(args.shrink):
        buffer.shrink()
    return buffer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Show what a byte-supply buffer yields for the given bytes."
    )
    parser.add_argument("hex", help="Backing bytes as a hex string, e.g. 01020304.")
    parser.add_argument(
        "--strategy", choices=sorted(STRATEGIES), default="ring", help="Buffer strategy."
    )
    parser.add_argument("--skip", type=int, default=0, help="Bytes to skip before filling.")
    parser.add_argument("--fill", type=int, default=0, help="Bytes to fill and print.")
    parser.add_argument("--shrink", type=int, default=0, help="Shrink passes before reading.")
    parser.add_argument(
        "--size-hints", type=int, default=0, help="How many size hints to draw after filling."
    )
    parser.add_argument(
        "--container-size-limit",
        type=int,
        default=None,
        help="Override the size-hint limit (default: length of the input).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log buffer transitions.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        buffer = build_buffer(args)
        print(f"virtual_len: {buffer.virtual_len}")
        if args.skip:
            buffer.skip(args.skip)
        if args.fill:
            print(f"fill: {buffer.read(args.fill).hex(' ')}")
        for _ in range(args.size_hints):
            print(f"size_hint: {buffer.size_hint()}")
    except ByteSupplyError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"[error] {error}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
