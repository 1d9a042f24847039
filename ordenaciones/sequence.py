"""Fixed-size sequences of NIF keys."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from .nif import Nif, parse_nif, random_nif


class StaticSequence:
    """A sequence with a fixed number of slots, each holding a key."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("sequence size must not be negative")
        self._data: list = [Nif() for _ in range(size)]

    def _check(self, index: int) -> int:
        if not 0 <= index < len(self._data):
            raise IndexError("Index out of bounds")
        return index

    def __getitem__(self, index: int):
        return self._data[self._check(index)]

    def __setitem__(self, index: int, value) -> None:
        self._data[self._check(index)] = value

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"StaticSequence({self._data!r})"

    def fill_random(self, rng: random.Random | None = None) -> None:
        """Fill every slot with a random NIF."""
        self._data = [random_nif(rng) for _ in self._data]

    def fill_from_file(self, filename: str | os.PathLike) -> None:
        """Fill the slots from ``<filename>.txt``, one whitespace-separated NIF each."""
        with open(f"{os.fspath(filename)}.txt", encoding="utf-8") as handle:
            tokens = handle.read().split()
        if len(tokens) < len(self._data):
            raise ValueError(
                f"expected {len(self._data)} values, found {len(tokens)}"
            )
        self._data = [parse_nif(token) for token in tokens[: len(self._data)]]

    def fill_manual(
        self,
        read: Callable[[], str] | None = None,
        out: TextIO | None = None,
    ) -> None:
        """Ask for each value in turn and read it with ``read``."""
        reader = read if read is not None else input
        stream = out if out is not None else sys.stdout
        for index in range(len(self._data)):
            stream.write(f"Introduce el valor {index}: ")
            stream.flush()
            self._data[index] = parse_nif(reader())