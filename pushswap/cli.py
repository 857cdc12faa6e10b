"""Command-line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import solve
from pushswap.parsing import InputError, parse_arguments

_ERROR = "Error\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter on ``argv`` (the process arguments by default)."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    if len(args) == 1 and not args[0]:
        sys.stdout.write(_ERROR)
        # A lone empty argument exits with the number of characters written.
        return len(_ERROR)
    try:
        numbers = parse_arguments(args)
    except InputError:
        sys.stdout.write(_ERROR)
        return 1
    sys.stdout.write("".join(f"{op}\n" for op in solve(numbers)))
    return 0


if __name__ == "__main__":
    sys.exit(main())