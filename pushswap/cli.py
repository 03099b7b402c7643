"""Command line: read integers, print the moves that sort them."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.output import put_str
from pushswap.parsing import InputError, input_is_empty, parse_input, split_args
from pushswap.sorting import handle_sorting
from pushswap.stack import Machine

__all__ = ["main"]


def _fail() -> int:
    put_str("Error\n", sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves sorting the given integers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if input_is_empty(args):
        return _fail()
    try:
        ranks = parse_input(split_args(args))
    except InputError:
        return _fail()
    machine = Machine(ranks)
    if not machine.a.is_sorted():
        handle_sorting(machine)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())