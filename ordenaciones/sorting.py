"""Sorting methods that work in place on a sequence, optionally printing a trace."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from itertools import chain
from typing import TextIO


class SortMethod(ABC):
    """Base for a sorting method bound to one sequence."""

    def __init__(self, sequence, trace: bool = False, out: TextIO | None = None) -> None:
        self.sequence = sequence
        self.trace = trace
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _emit(self, text: str) -> None:
        self.out.write(text)

    def _print_sequence(self) -> None:
        self._emit("".join(f"{item} " for item in self.sequence) + "\n")

    def _print_labelled(self, label: str) -> None:
        self._emit(label)
        self._print_sequence()

    @abstractmethod
    def sort(self) -> None:
        """Sort the bound sequence in place."""


class SelectionSortMethod(SortMethod):
    """Selection sort; with a trace the sequence is printed after every swap."""

    def sort(self) -> None:
        seq = self.sequence
        n = len(seq)
        for i in range(n - 1):
            smallest = i
            for j in range(i + 1, n):
                if seq[j] < seq[smallest]:
                    smallest = j
            seq[i], seq[smallest] = seq[smallest], seq[i]
            if self.trace:
                self._print_sequence()


class QuickSortMethod(SortMethod):
    """Quicksort with the last element of each range as pivot."""

    def sort(self) -> None:
        if self.trace:
            self._print_labelled("Initial Sequence: ")
            self._quick_sort()
            self._emit("\n")
        else:
            self._print_sequence()
            self._quick_sort()
        self._print_labelled("Final Sequence: ")

    def _quick_sort(self) -> None:
        pending = [(0, len(self.sequence) - 1)]
        while pending:
            low, high = pending.pop()
            if low < high:
                pivot_index = self._partition(low, high)
                pending.append((pivot_index + 1, high))
                pending.append((low, pivot_index - 1))

    def _partition(self, low: int, high: int) -> int:
        seq = self.sequence
        pivot = seq[high]
        if self.trace:
            self._emit(f"Pivot: {pivot} \n")
        i = low - 1
        for j in range(low, high):
            if seq[j] < pivot:
                i += 1
                if self.trace:
                    self._emit(f"swap: {seq[i]} {seq[j]}\n")
                seq[i], seq[j] = seq[j], seq[i]
                if self.trace:
                    self._print_sequence()
        seq[i + 1], seq[high] = seq[high], seq[i + 1]
        if self.trace:
            self._print_labelled("swap del pivote: ")
            self._emit("\n")
        return i + 1


class HeapSortMethod(SortMethod):
    """Heapsort over a max-heap."""

    def sort(self) -> None:
        seq = self.sequence
        n = len(seq)
        self._print_labelled("Initial Sequence: ")
        for i in range(n // 2 - 1, -1, -1):
            self._sift_down(n, i)
        for end in range(n - 1, 0, -1):
            seq[0], seq[end] = seq[end], seq[0]
            self._sift_down(end, 0)
        self._print_labelled("Final Sequence: ")

    def _sift_down(self, n: int, i: int) -> None:
        seq = self.sequence
        while True:
            largest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and seq[left] > seq[largest]:
                largest = left
            if right < n and seq[right] > seq[largest]:
                largest = right
            if largest == i:
                return
            if self.trace:
                self._emit(f"swap: {seq[i]} {seq[largest]}\n")
            seq[i], seq[largest] = seq[largest], seq[i]
            if self.trace:
                self._print_sequence()
            i = largest


class ShellSortMethod(SortMethod):
    """Shell sort whose gaps shrink by a factor ``increment`` each pass."""

    def __init__(
        self,
        sequence,
        increment: float = 0.5,
        trace: bool = False,
        out: TextIO | None = None,
    ) -> None:
        if not 0 < increment < 1:
            raise ValueError("increment must lie strictly between 0 and 1")
        super().__init__(sequence, trace, out)
        self.increment = increment

    def sort(self) -> None:
        seq = self.sequence
        n = len(seq)
        self._print_labelled("Initial Sequence: ")
        gap = int(n * self.increment)
        while gap > 0:
            for i in range(gap, n):
                temp = seq[i]
                j = i
                while j >= gap and seq[j - gap] > temp:
                    if self.trace:
                        self._emit(f"swap: {seq[j]} {seq[j - gap]}\n")
                        self._print_sequence()
                    seq[j] = seq[j - gap]
                    j -= gap
                seq[j] = temp
            if self.trace:
                self._print_sequence()
            gap = int(gap * self.increment)
        self._print_labelled("Final Sequence: ")


class RadixSortMethod(SortMethod):
    """Least-significant-digit radix sort for non-negative integer keys."""

    def sort(self) -> None:
        self._print_labelled("Initial Sequence: ")
        self._radix_sort()
        self._print_labelled("Final Sequence: ")

    def _radix_sort(self) -> None:
        seq = self.sequence
        if len(seq) == 0:
            return
        largest = int(max(seq))
        exp = 1
        while largest // exp > 0:
            if self.trace:
                self._print_sequence()
            self._counting_sort(exp)
            exp *= 10
        if self.trace:
            self._print_sequence()

    def _counting_sort(self, exp: int) -> None:
        seq = self.sequence
        buckets: list[list] = [[] for _ in range(10)]
        for item in seq:
            buckets[(int(item) // exp) % 10].append(item)
        for index, item in enumerate(chain.from_iterable(buckets)):
            seq[index] = item


def make_sort_method(
    name: str, sequence, trace: bool = False, out: TextIO | None = None
) -> SortMethod:
    """Build the sorting method called ``name``; shell sort halves its gap."""
    if name == "selection":
        return SelectionSortMethod(sequence, trace, out)
    if name == "quick":
        return QuickSortMethod(sequence, trace, out)
    if name == "heap":
        return HeapSortMethod(sequence, trace, out)
    if name == "shell":
        return ShellSortMethod(sequence, 0.5, trace, out)
    if name == "radix":
        return RadixSortMethod(sequence, trace, out)
    raise ValueError("Método de ordenación no válido")