"""Command line front end: fill a binary tree with NIFs and explore it from a menu."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO

from .nif import Nif
from .trees import AvlTree, BalancedTree, BinaryTree, SearchTree

_PROG = "arbol"
_USAGE = (
    f"Uso: {_PROG} -ab <avl|abb> -trace <y|n> "
    "-init <file [filename]|random [size]|manual>"
)
_BAD_OPTION = "Error: Opción incorrecta"
_BAD_SIZE = "Error: Tamaño incorrecto"
_RANDOM_LOW = 10_000_000
_RANDOM_SPAN = 10_000_000
_MENU = "[0] Salir\n[1] Insertar\n[2] Buscar\n[3] Mostrar\n"


@dataclass
class TreeOptions:
    """Settings read from the command line."""

    kind: str = ""
    init_type: str = ""
    filename: str = ""
    trace: bool = False
    size: int = 0


def parse_arguments(argv: Sequence[str]) -> TreeOptions:
    """Read the options; raise ValueError when they cannot be used."""
    args = list(argv)
    if not args:
        raise ValueError(_USAGE)
    options = TreeOptions()
    tokens = iter(args)
    for arg in tokens:
        if arg == "-ab":
            value = next(tokens, None)
            if value is not None:
                options.kind = value
        elif arg == "-trace":
            value = next(tokens, None)
            options.trace = value == "y"
        elif arg == "-init":
            value = next(tokens, None)
            if value is None:
                continue
            options.init_type = value
            if value == "file":
                filename = next(tokens, None)
                if filename is not None:
                    options.filename = filename
            elif value == "random":
                size = next(tokens, None)
                if size is None:
                    raise ValueError(_BAD_SIZE)
                options.size = int(size)
                if options.size == 0:
                    raise ValueError(_BAD_SIZE)
    return options


def make_tree(kind: str, trace: bool = False, out: TextIO | None = None) -> BinaryTree:
    """Build the tree named ``kind``: ``abe``, ``abb`` or ``avl``."""
    if kind == "abe":
        return BalancedTree(out)
    if kind == "abb":
        return SearchTree(out)
    if kind == "avl":
        return AvlTree(trace, out)
    raise ValueError(_BAD_OPTION)


def _read_keys(filename: str) -> Iterator[Nif]:
    """Yield the integers in ``<filename>.txt`` up to the first token that is not one."""
    path = f"{os.fspath(filename)}.txt"
    try:
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return
    for token in tokens:
        try:
            yield Nif(int(token))
        except ValueError:
            return


def _read_value(read: Callable[[], str]) -> Nif:
    return Nif(int(read().strip()))


def _manual_insert(tree: BinaryTree, read: Callable[[], str], out: TextIO) -> bool:
    """Ask for one value and insert it; return False when input has ended."""
    out.write("Introduce el valor : ")
    out.flush()
    try:
        value = _read_value(read)
    except EOFError:
        return False
    tree.insert(value)
    return True


def _read_option(read: Callable[[], str]) -> int:
    try:
        return int(read().strip())
    except (EOFError, ValueError):
        return 0


def run_menu(
    tree: BinaryTree,
    read: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Show the menu and the tree until the user chooses 0 or input ends."""
    reader = read if read is not None else input
    stream = out if out is not None else sys.stdout
    while True:
        stream.write(_MENU)
        stream.write(tree.format_levels() + "\n")
        stream.flush()
        option = _read_option(reader)
        if option == 0:
            return
        if option == 1:
            if not _manual_insert(tree, reader, stream):
                return
        elif option == 2:
            stream.write("Introduce el valor a buscar: ")
            stream.flush()
            try:
                value = _read_value(reader)
            except EOFError:
                return
            if tree.search(value):
                stream.write(f"El valor {value} se encuentra en el árbol\n")
            else:
                stream.write(f"El valor {value} no se encuentra en el árbol\n")
        elif option == 3:
            stream.write(tree.format_levels() + "\n")


def _fill(
    tree: BinaryTree,
    options: TreeOptions,
    read: Callable[[], str],
    out: TextIO,
    rng: random.Random | None,
) -> None:
    if options.init_type == "random":
        generator = rng if rng is not None else random
        for _ in range(options.size):
            tree.insert(Nif(generator.randrange(_RANDOM_SPAN) + _RANDOM_LOW))
    elif options.init_type == "file":
        for key in _read_keys(options.filename):
            tree.insert(key)
    elif options.init_type == "manual":
        _manual_insert(tree, read, out)
    else:
        raise ValueError(_BAD_OPTION)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tree explorer and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    try:
        options = parse_arguments(args)
        out.write(f"{int(options.trace)}\n")
        tree = make_tree(options.kind, options.trace)
        _fill(tree, options, input, out, None)
        run_menu(tree, input, out)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())