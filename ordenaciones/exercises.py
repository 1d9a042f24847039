"""Exam-style exercises that sort the parts of a sequence and merge them."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, MutableSequence
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def _line(items: Iterable) -> str:
    return "".join(f"{item} " for item in items) + "\n"


def _values(seq: MutableSequence, indices: Iterable[int]) -> list:
    return [seq[index] for index in indices]


def _merge(first: list, second: list, prefer_first: Callable[[object, object], bool]) -> list:
    """Merge two runs, taking from ``first`` whenever ``prefer_first`` says so."""
    merged = []
    i = j = 0
    while i < len(first) and j < len(second):
        if prefer_first(first[i], second[j]):
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def _store(seq: MutableSequence, merged: list) -> None:
    for index, item in enumerate(merged[: len(seq)]):
        seq[index] = item


def _swap(seq: MutableSequence, a: int, b: int) -> None:
    seq[a], seq[b] = seq[b], seq[a]


def selection_insertion_merge(seq: MutableSequence, out: TextIO | None = None) -> None:
    """Selection-sort the first half ascending, insertion-sort the second half
    descending, then merge both into a descending sequence."""
    stream = _stream(out)
    n = len(seq)
    if n == 0:
        return
    mid = (n - 1) // 2

    for i in range(mid + 1):
        smallest = min(range(i, mid + 1), key=seq.__getitem__)
        _swap(seq, i, smallest)
    stream.write("Primera mitad ordenada con seleccion\n")
    stream.write(_line(_values(seq, range(mid + 1))))

    for i in range(mid + 2, n):
        item = seq[i]
        j = i - 1
        while j >= mid + 1 and item > seq[j]:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = item
    stream.write("Segunda mitad ordenada con insercion\n")
    stream.write(_line(_values(seq, range(mid + 1, n))))

    first = _values(seq, range(mid, -1, -1))
    second = _values(seq, range(mid + 1, n))
    _store(seq, _merge(first, second, lambda a, b: a > b))


def _gap_pass(seq: MutableSequence, delta: int) -> None:
    n = len(seq)
    for i in range((n - 1) // 2 + 1, n):
        item = seq[i]
        j = i
        while j + delta < n and seq[j + delta] > item:
            _swap(seq, j + delta, i)
            j += delta


def bubble_shell_merge(seq: MutableSequence, out: TextIO | None = None) -> None:
    """Bubble-sort the first half, run gap passes over the second half, then
    merge the first half forwards with the sequence read backwards."""
    stream = _stream(out)
    n = len(seq)
    if n == 0:
        return
    mid = (n - 1) // 2

    for i in range(1, mid + 1):
        for j in range(mid, i - 1, -1):
            if seq[j - 1] > seq[j]:
                _swap(seq, j - 1, j)
    stream.write("Primera mitad ordenada con BUBBLE\n")
    stream.write(_line(_values(seq, range(mid + 1))))

    delta = (n - 1) - mid
    while delta > 1:
        delta //= 2
        stream.write(f"Valor de Delta {delta}\n")
        _gap_pass(seq, delta)
    stream.write("Segunda mitad ordenada con SHELL\n")
    stream.write(_line(_values(seq, range(mid + 1, n))))

    first = _values(seq, range(mid + 1))
    second = _values(seq, range(n - 1, mid - 1, -1))
    _store(seq, _merge(first, second, lambda a, b: a < b))


def descending_bubble_insertion_merge(seq: MutableSequence, out: TextIO | None = None) -> None:
    """Bubble-sort the first half descending, insertion-sort the second half
    ascending, then merge both into an ascending sequence."""
    stream = _stream(out)
    n = len(seq)
    if n == 0:
        return
    mid = (n - 1) // 2

    for i in range(mid + 1):
        for j in range(mid, i, -1):
            if seq[j - 1] < seq[j]:
                _swap(seq, j - 1, j)
    stream.write("Primera mitad ordenada con BUBBLE\n")
    stream.write(_line(_values(seq, range(mid + 1))))

    for i in range(mid + 2, n):
        item = seq[i]
        j = i - 1
        while j >= mid + 1 and item < seq[j]:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = item
    stream.write("Segunda mitad ordenada con INSERCION\n")
    stream.write(_line(_values(seq, range(mid + 1, n))))

    first = _values(seq, range(mid, -1, -1))
    second = _values(seq, range(mid + 1, n))
    _store(seq, _merge(first, second, lambda a, b: a < b))


def insertion_partition(seq: MutableSequence) -> None:
    """Partition around the middle value, insertion-sorting the growing
    left part and right part as the two fronts advance."""
    n = len(seq)
    if n == 0:
        return
    i, f = 0, n - 1
    pivot = seq[(i + f) // 2]
    while i <= f:
        while i < n and seq[i] <= pivot:
            item = seq[i]
            j = i
            while j > 0 and item < seq[j - 1]:
                seq[j] = seq[j - 1]
                j -= 1
            seq[j] = item
            i += 1
        while f >= 0 and seq[f] >= pivot:
            item = seq[f]
            j = f
            while j < n - 1 and item > seq[j + 1]:
                seq[j] = seq[j + 1]
                j += 1
            seq[j] = item
            f -= 1
        if i <= f:
            _swap(seq, i, f)


def odd_even_merge(seq: MutableSequence, out: TextIO | None = None) -> None:
    """Insertion-sort odd positions ascending, selection-sort even positions
    descending, then merge both into an ascending sequence."""
    stream = _stream(out)
    n = len(seq)
    if n == 0:
        return

    for i in range(3, n, 2):
        item = seq[i]
        j = i - 2
        while j >= 1 and item < seq[j]:
            seq[j + 2] = seq[j]
            j -= 2
        seq[j + 2] = item
    stream.write("IMPARES ORDENADOS CON INSERCION DE MENOR A MAYOR\n")
    stream.write(_line(_values(seq, range(1, n, 2))))

    for i in range(0, n, 2):
        largest = max(range(i, n, 2), key=seq.__getitem__)
        _swap(seq, i, largest)
    stream.write("PARES ORDENADOS CON SELECCION DE MAYO A MENOR\n")
    stream.write(_line(_values(seq, range(0, n, 2))))

    last_even = n - 2 if n % 2 == 0 else n - 1
    evens = _values(seq, range(last_even, -1, -2))
    odds = _values(seq, range(1, n, 2))
    _store(seq, _merge(evens, odds, lambda a, b: a < b))


def halves_merge(seq: MutableSequence) -> None:
    """Selection-sort the first half, insertion-sort the second, then merge."""
    n = len(seq)
    if n == 0:
        return
    mid = (n - 1) // 2

    for i in range(mid + 1):
        smallest = min(range(i, mid + 1), key=seq.__getitem__)
        _swap(seq, i, smallest)

    for i in range(mid + 1, n):
        item = seq[i]
        j = i
        while j > mid + 1 and item < seq[j - 1]:
            seq[j] = seq[j - 1]
            j -= 1
        seq[j] = item

    first = _values(seq, range(mid + 1))
    second = _values(seq, range(mid + 1, n))
    _store(seq, _merge(first, second, lambda a, b: a < b))