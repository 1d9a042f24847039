"""Spanish tax identification numbers (NIF) used as sortable keys."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import total_ordering

NIF_MIN = 10_000_000
NIF_MAX = 99_999_999
RANDOM_LOW = 90_000_000
RANDOM_SPAN = 10_000_000


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _as_int(value: object) -> int:
    if isinstance(value, Nif):
        return value.number
    if isinstance(value, int):
        return value
    raise TypeError(f"cannot compare Nif with {type(value).__name__}")


@total_ordering
@dataclass(frozen=True, eq=False)
class Nif:
    """An identification number that orders, divides and prints like an integer."""

    number: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (Nif, int)):
            return NotImplemented
        return self.number == _as_int(other)

    def __hash__(self) -> int:
        return hash(self.number)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, (Nif, int)):
            return NotImplemented
        return self.number < _as_int(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, (Nif, int)):
            return NotImplemented
        return self.number > _as_int(other)

    def __floordiv__(self, divisor: int) -> Nif:
        return Nif(_trunc_div(self.number, divisor))

    def __mod__(self, divisor: int) -> int:
        return self.number - divisor * _trunc_div(self.number, divisor)

    def __int__(self) -> int:
        return self.number

    def __index__(self) -> int:
        return self.number

    def __str__(self) -> str:
        return str(self.number)


def parse_nif(text: str) -> Nif:
    """Read a NIF from text, requiring an 8-digit number."""
    number = int(text.strip())
    if number < NIF_MIN or number > NIF_MAX:
        raise ValueError("NIF must be an 8-digit number")
    return Nif(number)


def random_nif(rng: random.Random | None = None) -> Nif:
    """Return a random NIF in the range used for generated sequences."""
    generator = rng if rng is not None else random
    return Nif(generator.randrange(RANDOM_SPAN) + RANDOM_LOW)