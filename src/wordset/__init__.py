"""wordset dense integer sets packed into machine words."""

from __future__ import annotations

from collections.abc import Sequence

__version__ = "0.1.0"

from .engine.bitset import WORD_BITS
from .engine.intset import IntegerSet


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point mirroring :func:`wordset.cli.main`."""

    from .cli import main as cli_main

    return cli_main(argv)


__all__ = ["main", "IntegerSet", "WORD_BITS", "__version__"]
