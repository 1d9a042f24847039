"""In-place sorts that announce themselves and can print a trace of their steps."""

from __future__ import annotations

import sys
from collections.abc import MutableSequence
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def _items(seq: MutableSequence) -> str:
    return "".join(f"{item} " for item in seq)


def _announce(stream: TextIO, title: str, seq: MutableSequence) -> None:
    stream.write(f"{title}\n")
    stream.write(f"ORIGINAL: {_items(seq)}\n")


def _conclude(stream: TextIO, title: str, seq: MutableSequence) -> None:
    stream.write(f"SORTED: {_items(seq)}\n")
    stream.write(f"{title} Finished\n")


def insertion_sort(
    seq: MutableSequence, trace: bool = False, out: TextIO | None = None
) -> None:
    """Insertion sort; with a trace the sequence is shown after each insertion."""
    stream = _stream(out)
    _announce(stream, "Insertion Sort", seq)
    for i in range(1, len(seq)):
        key = seq[i]
        j = i - 1
        while j >= 0 and seq[j] > key:
            seq[j + 1] = seq[j]
            j -= 1
        seq[j + 1] = key
        if trace:
            stream.write(f"Step {i}: {_items(seq)}\n")
    _conclude(stream, "Insertion Sort", seq)


def shake_sort(
    seq: MutableSequence, trace: bool = False, out: TextIO | None = None
) -> None:
    """Cocktail sort; with a trace the sequence is shown after each round trip."""
    stream = _stream(out)
    _announce(stream, "Shake Sort", seq)
    size = len(seq)
    swapped = True
    while swapped:
        swapped = False
        for i in range(size - 1):
            if seq[i] > seq[i + 1]:
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        for i in range(size - 2, -1, -1):
            if seq[i] > seq[i + 1]:
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        if trace:
            stream.write(f"Step: {_items(seq)}\n")
    _conclude(stream, "Shake Sort", seq)


def quick_sort(
    seq: MutableSequence, trace: bool = False, out: TextIO | None = None
) -> None:
    """Quicksort around the middle element; a trace numbers every partition."""
    stream = _stream(out)
    _announce(stream, "Quick Sort", seq)
    steps = 0

    def partition_sort(low: int, high: int) -> None:
        nonlocal steps
        if low >= high:
            return
        pivot = seq[(low + high) // 2]
        i, j = low, high
        while i <= j:
            while seq[i] < pivot:
                i += 1
            while seq[j] > pivot:
                j -= 1
            if i <= j:
                seq[i], seq[j] = seq[j], seq[i]
                i += 1
                j -= 1
        if trace:
            steps += 1
            stream.write(f"Step: {steps}: {_items(seq)}\n")
        partition_sort(low, j)
        partition_sort(i, high)
        steps += 1

    partition_sort(0, len(seq) - 1)
    _conclude(stream, "Quick Sort", seq)


def _heapify(seq: MutableSequence, size: int, i: int) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        if left < size and seq[left] > seq[largest]:
            largest = left
        if right < size and seq[right] > seq[largest]:
            largest = right
        if largest == i:
            return
        seq[i], seq[largest] = seq[largest], seq[i]
        i = largest


def heap_sort(
    seq: MutableSequence, trace: bool = False, out: TextIO | None = None
) -> None:
    """Heapsort; a trace shows the first, quarter, half, three-quarter and last extraction."""
    stream = _stream(out)
    _announce(stream, "Heap Sort", seq)
    size = len(seq)
    for i in range(size // 2 - 1, -1, -1):
        _heapify(seq, size, i)
    shown = {1, size // 4, size // 2, size // 4 * 3, size - 1}
    for step, end in enumerate(range(size - 1, 0, -1), start=1):
        seq[0], seq[end] = seq[end], seq[0]
        _heapify(seq, end, 0)
        if trace and step in shown:
            stream.write(f"Step {step}: {_items(seq)}\n")
    _conclude(stream, "Heap Sort", seq)


def shell_sort(
    seq: MutableSequence,
    alpha: float,
    trace: bool = False,
    out: TextIO | None = None,
) -> None:
    """Shell sort whose gap is scaled by ``alpha`` (strictly between 0 and 1) each pass."""
    if not 0 < alpha < 1:
        raise ValueError("ALPHA must lie strictly between 0 and 1")
    stream = _stream(out)
    _announce(stream, "Shell Sort", seq)
    size = len(seq)
    gap = int(size * alpha)
    while gap > 0:
        for i in range(gap, size):
            temp = seq[i]
            j = i
            while j >= gap and seq[j - gap] > temp:
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = temp
        if trace:
            stream.write(f"ALPHA: {gap} Step: {_items(seq)}\n")
        gap = int(gap * alpha)
    _conclude(stream, "Shell Sort", seq)


def sort_by_code(
    code: int,
    seq: MutableSequence,
    trace: bool = False,
    out: TextIO | None = None,
    alpha: float | None = None,
) -> None:
    """Sort with the method numbered ``code``: 0 insertion, 1 shake, 2 heap, 3 quick, 4 shell."""
    if code == 0:
        insertion_sort(seq, trace, out)
    elif code == 1:
        shake_sort(seq, trace, out)
    elif code == 2:
        heap_sort(seq, trace, out)
    elif code == 3:
        quick_sort(seq, trace, out)
    elif code == 4:
        if alpha is None:
            raise ValueError("shell sort needs an ALPHA value")
        shell_sort(seq, alpha, trace, out)
    else:
        raise ValueError("método de ordenación no válido")