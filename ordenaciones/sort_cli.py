"""Command line front end: fill a sequence of NIFs and sort it with a chosen method."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .sequence import StaticSequence
from .sorting import make_sort_method

_PROG = "ordenar"
_USAGE = f"Uso: {_PROG} -size <tamaño> -ord <método> -init <tipo> [-trace <y/n>]"


@dataclass
class SortOptions:
    """Settings read from the command line."""

    size: int = 0
    method: str = ""
    init_type: str = "random"
    filename: str = ""
    trace: bool = True


def parse_arguments(argv: Sequence[str]) -> SortOptions:
    """Read the options; a flag without a following value is ignored."""
    args = list(argv)
    if not args:
        raise ValueError(_USAGE)
    options = SortOptions()
    tokens = iter(args)
    for arg in tokens:
        if arg == "-size":
            value = next(tokens, None)
            if value is not None:
                options.size = int(value)
        elif arg == "-ord":
            value = next(tokens, None)
            if value is not None:
                options.method = value
        elif arg == "-init":
            value = next(tokens, None)
            if value is not None:
                options.init_type = value
                if value == "file":
                    filename = next(tokens, None)
                    if filename is not None:
                        options.filename = filename
        elif arg == "-trace":
            value = next(tokens, None)
            if value is not None:
                options.trace = value == "y"
    return options


def _fill(sequence: StaticSequence, options: SortOptions) -> None:
    if options.init_type == "manual":
        sequence.fill_manual()
    elif options.init_type == "random":
        sequence.fill_random()
    elif options.init_type == "file":
        sequence.fill_from_file(options.filename)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_arguments(args)
        sequence = StaticSequence(options.size)
        _fill(sequence, options)
        method = make_sort_method(options.method, sequence, options.trace)
    except (ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    method.sort()
    return 0


if __name__ == "__main__":
    sys.exit(main())