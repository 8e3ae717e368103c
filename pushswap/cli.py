"""The command: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import push_swap


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; on bad input print ``Error`` to stderr."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in push_swap(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())