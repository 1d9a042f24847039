import io
import re

import pytest

from ordenaciones.classic_cli import Options, main, parse_arguments, print_box


def _sorted_line(text):
    match = re.search(r"SORTED: (.*)\n", text)
    assert match is not None
    return [int(v) for v in match.group(1).split()]


def test_print_box():
    out = io.StringIO()
    print_box("hola", out)
    assert out.getvalue() == "********\n* hola *\n********\n"


def test_parse_arguments_reads_all_options():
    options = parse_arguments(
        ["-size", "5", "-ord", "3", "-init", "file", "datos.txt", "-trace", "y"]
    )
    assert options == Options(5, "3", "file", True, "datos.txt")


def test_parse_arguments_defaults():
    options = parse_arguments(["-size", "4"])
    assert options.trace is False
    assert options.file_name == ""
    assert options.sequence_size == 4


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["-size"],
        ["-size", "3", "-ord"],
        ["-init"],
        ["-init", "file"],
        ["-trace"],
        ["-trace", "x"],
        ["-size", "abc"],
        ["-size", "-2"],
    ],
)
def test_parse_arguments_errors(argv):
    with pytest.raises(ValueError):
        parse_arguments(argv)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "No se han introducido argumentos" in capsys.readouterr().out


def test_main_help(capsys):
    assert main(["--help"]) == 1
    assert "Modo de empleo:" in capsys.readouterr().out


def test_main_sorts_file(tmp_path, capsys):
    data = tmp_path / "datos.txt"
    data.write_text("40 10 30 20 50\n", encoding="utf-8")
    status = main(["-size", "5", "-ord", "0", "-init", "file", str(data), "-trace", "n"])
    assert status == 0
    assert _sorted_line(capsys.readouterr().out) == [10, 20, 30, 40, 50]


def test_main_random_quick(capsys):
    assert main(["-size", "12", "-ord", "3", "-init", "random", "-trace", "y"]) == 0
    values = _sorted_line(capsys.readouterr().out)
    assert len(values) == 12
    assert values == sorted(values)
    assert all(0 <= v < 100 for v in values)


def test_main_shell_reads_alpha(tmp_path, capsys, monkeypatch):
    data = tmp_path / "datos.txt"
    data.write_text("9 8 7 6 5 4 3 2 1\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("0.5\n"))
    status = main(["-size", "9", "-ord", "4", "-init", "file", str(data)])
    assert status == 0
    output = capsys.readouterr().out
    assert "Put ALPHA value: " in output
    assert _sorted_line(output) == list(range(1, 10))


def test_main_manual_input(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n3\n5\n"))
    assert main(["-size", "3", "-ord", "1", "-init", "manual"]) == 0
    output = capsys.readouterr().out
    assert "Element 3: " in output
    assert _sorted_line(output) == [3, 5, 7]


def test_main_rejects_unknown_method(tmp_path, capsys):
    data = tmp_path / "datos.txt"
    data.write_text("1 2\n", encoding="utf-8")
    assert main(["-size", "2", "-ord", "9", "-init", "file", str(data)]) == 1
    assert "no válido" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nada.txt"
    assert main(["-size", "2", "-ord", "0", "-init", "file", str(missing)]) == 1
    assert "no se pudo abrir el archivo" in capsys.readouterr().err


def test_main_rejects_invalid_nif(tmp_path, capsys):
    data = tmp_path / "datos.txt"
    data.write_text("5 -3\n", encoding="utf-8")
    assert main(["-size", "2", "-ord", "0", "-init", "file", str(data)]) == 1
    assert "NIF no válido" in capsys.readouterr().err


def test_main_rejects_unknown_init(capsys):
    assert main(["-size", "2", "-ord", "0", "-init", "otro"]) == 1
    assert "introducción de datos no válida" in capsys.readouterr().err