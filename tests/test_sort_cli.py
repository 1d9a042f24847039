import io

import pytest

from ordenaciones.sort_cli import SortOptions, main, parse_arguments

VALUES = ["45678912", "12345678", "99999999", "23456789", "56789012"]


def _data_file(tmp_path):
    base = tmp_path / "datos"
    (tmp_path / "datos.txt").write_text(" ".join(VALUES), encoding="utf-8")
    return str(base)


def _sorted_line():
    return " ".join(sorted(VALUES, key=int)) + " "


def test_parse_all_options():
    options = parse_arguments(
        ["-size", "5", "-ord", "quick", "-init", "file", "datos", "-trace", "n"]
    )
    assert options == SortOptions(5, "quick", "file", "datos", False)


def test_parse_defaults():
    options = parse_arguments(["-ord", "heap"])
    assert options == SortOptions(0, "heap", "random", "", True)


def test_parse_trace_yes():
    assert parse_arguments(["-trace", "y"]).trace is True


def test_parse_trailing_flag_is_ignored():
    options = parse_arguments(["-ord", "radix", "-size"])
    assert options.size == 0
    assert options.method == "radix"


def test_parse_empty_raises_usage():
    with pytest.raises(ValueError, match="Uso"):
        parse_arguments([])


def test_parse_bad_size():
    with pytest.raises(ValueError):
        parse_arguments(["-size", "abc"])


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Uso" in capsys.readouterr().err


def test_main_invalid_method(tmp_path, capsys):
    status = main(["-size", "5", "-ord", "bogus", "-init", "file", _data_file(tmp_path)])
    assert status == 1
    assert "Método de ordenación no válido" in capsys.readouterr().err


@pytest.mark.parametrize("method", ["selection", "quick", "heap", "shell", "radix"])
def test_main_sorts_file_without_trace(tmp_path, capsys, method):
    path = _data_file(tmp_path)
    status = main(["-size", "5", "-ord", method, "-init", "file", path, "-trace", "n"])
    assert status == 0
    out = capsys.readouterr().out
    if method != "selection":
        assert out.splitlines()[-1] == "Final Sequence: " + _sorted_line()


def test_main_heap_with_trace_shows_initial(tmp_path, capsys):
    path = _data_file(tmp_path)
    assert main(["-size", "5", "-ord", "heap", "-init", "file", path, "-trace", "y"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Initial Sequence: " + " ".join(VALUES) + " "
    assert lines[-1] == "Final Sequence: " + _sorted_line()


def test_main_missing_file(tmp_path, capsys):
    missing = str(tmp_path / "nada")
    assert main(["-size", "3", "-ord", "heap", "-init", "file", missing]) == 1
    assert capsys.readouterr().err != ""


def test_main_manual_selection_trace(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("87654321\n12345678\n"))
    status = main(["-size", "2", "-ord", "selection", "-init", "manual", "-trace", "y"])
    assert status == 0
    assert "12345678 87654321 \n" in capsys.readouterr().out


def test_main_random_radix(capsys):
    assert main(["-size", "6", "-ord", "radix", "-init", "random", "-trace", "n"]) == 0
    last = capsys.readouterr().out.splitlines()[-1]
    assert last.startswith("Final Sequence: ")
    numbers = [int(token) for token in last[len("Final Sequence: "):].split()]
    assert len(numbers) == 6
    assert numbers == sorted(numbers)
    assert all(90_000_000 <= n < 100_000_000 for n in numbers)