"""Command line front end: build a sequence of NIFs and sort it by method code."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from .classic_sorts import sort_by_code
from .nif import Nif

_PROG = "programa"
RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"
_BAR = "\033[1;31m|\033[0m"
_BORDER = "\033[1;31m+----------------------------------------+\033[0m"
_RED_RULE = "=" * 40
_GREEN_RULE = "=" * 56
_METHOD_NAMES = {
    0: "inserción",
    1: "shake",
    2: "heapsort",
    3: "quicksort",
    4: "shellsort",
}
_NIF_LIMIT = 99_999_999


@dataclass
class Options:
    """Settings read from the command line."""

    sequence_size: int = 0
    ordenation_type: str = ""
    introducing_data: str = ""
    trace: bool = False
    file_name: str = ""


def print_box(message: str, out: TextIO | None = None) -> None:
    """Print ``message`` framed by asterisks."""
    stream = out if out is not None else sys.stdout
    rule = "*" * (len(message) + 4)
    stream.write(f"{rule}\n* {message} *\n{rule}\n")


def _no_arguments_message() -> str:
    return (
        "No se han introducido argumentos. Pruebe con '"
        f"{_PROG} --help' para más información"
    )


def _print_help(out: TextIO) -> None:
    print_box("Funcionalidades del programa:", out)
    out.write(
        "  Este programa se encarga de ordenar una secuencia de elementos "
        "utilizando diferentes métodos de ordenación.\n\n"
    )
    print_box("Modo de empleo:", out)
    out.write(
        f"  {_PROG} -size <s> -ord <m> -init <i> [f] -trace <y|n>\n"
        "Donde:\n"
        "  -size <s>   : Tamaño de la secuencia (s) obligatorio\n"
        "  -ord <m>    : Código que identifica un método de ordenación (m) obligatorio\n"
        "  -init <i>   : Forma de introducir los datos de la secuencia\n"
        "                i=manual\n"
        "                i=random\n"
        "                i=file f=nombre del fichero de entrada\n"
        "  -trace <y|n>: Indica si se muestra o no la traza durante la ejecución\n\n"
    )
    print_box("Ejemplos de uso:", out)
    out.write(
        f"  {_PROG} -size 100 -ord 1 -init manual -trace y\n"
        f"  {_PROG} -size 100 -ord 1 -init file fichero.txt -trace n\n"
        f"  {_PROG} -size 100 -ord 1 -init random -trace y\n"
    )


def parse_arguments(argv: Sequence[str]) -> Options:
    """Read the options; raise ValueError when a required value is missing or wrong."""
    args = list(argv)
    if not args:
        raise ValueError(_no_arguments_message())
    options = Options()
    for index, arg in enumerate(args):
        value = args[index + 1] if index + 1 < len(args) else None
        if arg == "-size":
            if value is None:
                raise ValueError("El tamaño de la secuencia es obligatorio")
            options.sequence_size = int(value)
            if options.sequence_size < 0:
                raise ValueError("El tamaño de la secuencia no puede ser negativo")
        elif arg == "-ord":
            if value is None:
                raise ValueError("El método de ordenación es obligatorio")
            options.ordenation_type = value
        elif arg == "-init":
            if value is None:
                raise ValueError("La forma de introducir los datos es obligatoria")
            options.introducing_data = value
            if value == "file":
                if index + 2 >= len(args):
                    raise ValueError("El nombre del fichero es obligatorio")
                options.file_name = args[index + 2]
        elif arg == "-trace":
            if value is None:
                raise ValueError("El valor de trace es obligatorio")
            if value == "y":
                options.trace = True
            elif value == "n":
                options.trace = False
            else:
                raise ValueError("El valor de trace debe ser 'y' o 'n'")
    return options


def _make_nif(value: int) -> Nif:
    if value < 0 or value > _NIF_LIMIT:
        raise ValueError("NIF no válido")
    return Nif(value)


def _print_options(options: Options, out: TextIO) -> None:
    rows = (
        (" Tamaño de la secuencia: ", options.sequence_size),
        (" Tipo de ordenación:     ", options.ordenation_type),
        (" Introducción de datos:  ", options.introducing_data),
        (" Mostrar traza:          ", int(options.trace)),
        (" Nombre del fichero:     ", options.file_name),
    )
    out.write(f"{_BORDER}\n")
    out.write(
        f"{_BAR}\033[1;32mArgumentos pasados por línea de comandos\033[0m{_BAR}\n"
    )
    out.write(f"{_BORDER}\n")
    for label, value in rows:
        out.write(f"{_BAR}\033[1;32m{label}\033[0m{value!s:>14}\033[1;31m |\033[0m\n")
    out.write(f"{_BORDER}\n")


def _banner(colour: str, rule: str, text: str, out: TextIO) -> None:
    out.write(f"{colour}\n{rule}\n{text}\n{rule}\n\n{RESET}")


def _build_sequence(
    options: Options,
    read: Callable[[], str],
    out: TextIO,
    rng: random.Random | None = None,
) -> list[Nif]:
    size = options.sequence_size
    if options.introducing_data == "manual":
        _banner(RED, _RED_RULE, "  Se introducen los datos manualmente", out)
        out.write("Enter the elements of the sequence: \n")
        values = []
        for index in range(size):
            out.write(f"Element {index + 1}: ")
            out.flush()
            values.append(_make_nif(int(read().strip())))
        return values
    if options.introducing_data == "random":
        _banner(RED, _RED_RULE, "  Se generan los datos aleatoriamente", out)
        generator = rng if rng is not None else random
        return [_make_nif(generator.randrange(100)) for _ in range(size)]
    if options.introducing_data == "file":
        try:
            with open(options.file_name, encoding="utf-8") as handle:
                tokens = handle.read().split()
        except OSError as error:
            raise ValueError("no se pudo abrir el archivo") from error
        _banner(RED, _RED_RULE, "  Se leen los datos del fichero", out)
        if len(tokens) < size:
            raise ValueError(f"se esperaban {size} valores y hay {len(tokens)}")
        return [_make_nif(int(token)) for token in tokens[:size]]
    raise ValueError("introducción de datos no válida")


def _read_alpha(read: Callable[[], str], out: TextIO) -> float:
    out.write("Put ALPHA value: ")
    out.flush()
    return float(read().strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sorter and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if not args:
        print_box(_no_arguments_message(), out)
        return 1
    if len(args) == 1 and args[0] in ("--help", "-h"):
        _print_help(out)
        return 1
    try:
        options = parse_arguments(args)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    _print_options(options, out)
    try:
        sequence = _build_sequence(options, input, out)
        code = int(options.ordenation_type)
        if code not in _METHOD_NAMES:
            raise ValueError("método de ordenación no válido")
        _banner(
            GREEN,
            _GREEN_RULE,
            f"Se ha seleccionado el método de ordenación por {_METHOD_NAMES[code]}",
            out,
        )
        alpha = _read_alpha(input, out) if code == 4 else None
        sort_by_code(code, sequence, options.trace, out, alpha)
    except (ValueError, EOFError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())