"""Command line interface for the wordset integer set tool."""
from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from . import __version__, io
from .engine.bitset import WORD_BITS
from .engine.intset import IntegerSet

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_OPERATIONS = {
    "intersect": IntegerSet.intersect,
    "subtract": IntegerSet.subtract,
    "union": IntegerSet.union,
    "symmetric-difference": IntegerSet.symmetric_difference,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordset", description="Dense integer set CLI")
    parser.add_argument("-V", "--version", action="version", version=f"wordset {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    sub = parser.add_subparsers(dest="command", required=True)

    encode = sub.add_parser("encode", help="serialize a list of integers")
    encode.add_argument("--items", required=True)
    encode.add_argument("--out", default="-")

    decode = sub.add_parser("decode", help="list the members of a serialized set")
    decode.add_argument("--input", required=True)
    decode.add_argument("--format", choices=["text", "json"], default="text")

    combine = sub.add_parser("combine", help="combine two serialized sets")
    combine.add_argument("--op", choices=sorted(_OPERATIONS), required=True)
    combine.add_argument("left")
    combine.add_argument("right")
    combine.add_argument("--out", default="-")

    stats = sub.add_parser("stats", help="summarize a serialized set")
    stats.add_argument("--input", required=True)
    stats.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _command_encode(args: argparse.Namespace) -> None:
    value = IntegerSet(io.read_items(args.items))
    io.save_set(value, args.out)


def _command_decode(args: argparse.Namespace) -> None:
    value = io.load_set(args.input)
    if args.format == "json":
        io.write_json({"items": list(value)}, "-")
    else:
        io.write_text(str(value) + "\n", "-")


def _command_combine(args: argparse.Namespace) -> None:
    left = io.load_set(args.left)
    right = io.load_set(args.right)
    logger.debug("applying %s", args.op)
    _OPERATIONS[args.op](left, right)
    io.save_set(left, args.out)


def _command_stats(args: argparse.Namespace) -> None:
    value = io.load_set(args.input)
    payload = {
        "cardinality": value.cardinality(),
        "max": value.max(),
        "words": value.word_count(),
        "word_bits": WORD_BITS,
    }
    if args.format == "json":
        io.write_json(payload, "-")
    else:
        lines = [f"{key}: {payload[key]}" for key in ("cardinality", "max", "words", "word_bits")]
        io.write_text("\n".join(lines) + "\n", "-")


_COMMANDS = {
    "encode": _command_encode,
    "decode": _command_decode,
    "combine": _command_combine,
    "stats": _command_stats,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    command = _COMMANDS.get(args.command)
    if command is None:
        parser.error(f"unknown command {args.command}")
        return 1
    try:
        command(args)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
