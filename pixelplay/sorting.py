"""Whole-array sorting algorithms that animate each step on a canvas."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from typing import Protocol

Color = tuple[int, int, int, int]
Rect = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
GREEN: Color = (0, 255, 0, 255)
RED: Color = (255, 0, 0, 255)
CYAN: Color = (0, 255, 255, 255)
BACKGROUND: Color = (32, 32, 32, 255)


class AlgorithmType(Enum):
    """The sorting algorithms that can be visualised."""

    INSERTION_SORT = "Insertion Sort"
    BINARY_INSERTION_SORT = "Binary Insertion Sort"
    SELECTION_SORT = "Selection Sort"
    QUICK_SORT = "Quick Sort"


class Canvas(Protocol):
    """Where an algorithm draws its bars and learns whether to keep going."""

    def draw_bar(self, algorithm: SortingAlgorithm, index: int, color: Color) -> None: ...

    def clear_bar(self, algorithm: SortingAlgorithm, index: int) -> None: ...

    def present(self) -> None: ...

    def keep_running(self) -> bool: ...


class HeadlessCanvas:
    """A canvas kept in memory: it records each bar's colour and counts frames."""

    def __init__(self) -> None:
        self.colors: dict[int, Color] = {}
        self.frames = 0

    def draw_bar(self, algorithm: SortingAlgorithm, index: int, color: Color) -> None:
        self.colors[index] = color

    def clear_bar(self, algorithm: SortingAlgorithm, index: int) -> None:
        self.colors[index] = BACKGROUND

    def present(self) -> None:
        self.frames += 1

    def keep_running(self) -> bool:
        return True


def unique_random_numbers(count: int, rng: random.Random | None = None) -> list[int]:
    """Return the numbers 1..count, each once, in random order."""
    chooser = rng if rng is not None else random.Random()
    return chooser.sample(range(1, count + 1), count)


class SortingAlgorithm(ABC):
    """An array of distinct numbers, drawn as bars and sorted in place."""

    def __init__(
        self, screen_width: int, size: int, rng: random.Random | None = None
    ) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.screen_width = screen_width
        self.values: list[int] = unique_random_numbers(size, rng)
        self.is_sorted = False

    def _bar_width(self) -> int:
        return self.screen_width // len(self.values)

    def bar_rect(self, index: int) -> Rect:
        """Return the (x, y, w, h) rectangle of the bar at `index`."""
        width = self._bar_width()
        height = self.values[index] * width
        return (index * width, self.screen_width - height, width, height)

    def column_rect(self, index: int) -> Rect:
        """Return the full-height (x, y, w, h) column that the bar at `index` occupies."""
        width = self._bar_width()
        return (index * width, 0, width, self.screen_width)

    def draw_all(self, canvas: Canvas) -> None:
        """Redraw every bar in white and present the result."""
        for index in range(len(self.values)):
            canvas.clear_bar(self, index)
            canvas.draw_bar(self, index, WHITE)
        canvas.present()

    def _paint(self, canvas: Canvas, bars: Iterable[tuple[int, Color]]) -> None:
        """Clear and redraw the given bars, then present."""
        bars = list(bars)
        for index, _ in bars:
            canvas.clear_bar(self, index)
        for index, color in bars:
            canvas.draw_bar(self, index, color)
        canvas.present()

    @abstractmethod
    def sort(self, canvas: Canvas) -> bool:
        """Sort the values, animating on `canvas`; return False if the user quit."""


class InsertionSort(SortingAlgorithm):
    """Insertion sort that swaps the key down one place at a time."""

    def sort(self, canvas: Canvas) -> bool:
        values = self.values
        if not self.is_sorted:
            for i in range(1, len(values)):
                key = values[i]
                j = i - 1

                canvas.draw_bar(self, i, GREEN)
                canvas.draw_bar(self, j, RED)
                canvas.present()
                canvas.draw_bar(self, i, WHITE)
                canvas.draw_bar(self, j, WHITE)

                while j >= 0 and values[j] > key:
                    values[j + 1] = values[j]
                    values[j] = key

                    canvas.clear_bar(self, j)
                    canvas.clear_bar(self, j + 1)
                    canvas.draw_bar(self, j, GREEN)
                    canvas.draw_bar(self, j + 1, WHITE)
                    if j > 0:
                        canvas.draw_bar(self, j - 1, RED)
                    canvas.present()

                    canvas.draw_bar(self, j, WHITE)
                    if j > 0:
                        canvas.draw_bar(self, j - 1, WHITE)
                    j -= 1

                    if not canvas.keep_running():
                        return False
                values[j + 1] = key

        self.draw_all(canvas)
        self.is_sorted = True
        return True


class BinaryInsertionSort(SortingAlgorithm):
    """Insertion sort that finds each insertion point by binary search."""

    def __init__(
        self, screen_width: int, size: int, rng: random.Random | None = None
    ) -> None:
        super().__init__(screen_width, size, rng)
        self._running = True

    def binary_search(
        self, canvas: Canvas, item: int, low: int, high: int
    ) -> int | None:
        """Return where `item` belongs in values[low..high], or None if the user quit."""
        values = self.values
        while True:
            if not self._running:
                return None
            self._running = canvas.keep_running()

            if high <= low:
                return low + 1 if item > values[low] else low
            mid = (low + high) // 2
            if item == values[mid]:
                return mid + 1
            if item > values[mid]:
                low = mid + 1
            else:
                high = mid - 1

    def sort(self, canvas: Canvas) -> bool:
        values = self.values
        for i in range(1, len(values)):
            j = i - 1
            selected = values[i]
            loc = self.binary_search(canvas, selected, 0, j)
            if loc is None:
                return False

            while j >= loc:
                values[j + 1] = values[j]
                if not self._running:
                    return False
                self._running = canvas.keep_running()
                self._paint(canvas, [(j + 1, WHITE)])
                j -= 1
            values[j + 1] = selected
            self._paint(canvas, [(j + 1, WHITE)])

        self.is_sorted = True
        return True


class SelectionSort(SortingAlgorithm):
    """Selection sort: move the smallest remaining value to the front each pass."""

    def sort(self, canvas: Canvas) -> bool:
        values = self.values
        for step in range(len(values) - 1):
            min_idx = step
            self._paint(canvas, [(step, GREEN)])

            for i in range(step + 1, len(values)):
                canvas.draw_bar(self, i, RED)
                canvas.present()
                canvas.draw_bar(self, i, WHITE)
                if values[i] < values[min_idx]:
                    min_idx = i
                if not canvas.keep_running():
                    return False

            values[step], values[min_idx] = values[min_idx], values[step]
            self._paint(canvas, [(step, RED), (min_idx, GREEN)])
            canvas.draw_bar(self, step, WHITE)
            canvas.draw_bar(self, min_idx, WHITE)
            canvas.present()

        self.is_sorted = True
        return True


class QuickSort(SortingAlgorithm):
    """Quicksort with the last element of each range as pivot."""

    def partition(self, canvas: Canvas, low: int, high: int) -> int | None:
        """Partition values[low..high] around values[high]; return the pivot's
        final index, or None if the user quit."""
        values = self.values
        pivot = values[high]
        canvas.draw_bar(self, high, CYAN)
        canvas.present()
        if not canvas.keep_running():
            return None

        i = low - 1
        for j in range(low, high + 1):
            if not canvas.keep_running():
                return None
            if values[j] < pivot:
                i += 1
                self._paint(canvas, [(j, RED), (i, GREEN)])
                values[i], values[j] = values[j], values[i]
                self._paint(canvas, [(j, GREEN), (i, RED)])
                self._paint(canvas, [(j, WHITE), (i, WHITE)])

        canvas.draw_bar(self, high, WHITE)
        self._paint(canvas, [(i + 1, RED), (high, GREEN)])
        values[i + 1], values[high] = values[high], values[i + 1]
        self._paint(canvas, [(i + 1, GREEN), (high, RED)])
        self._paint(canvas, [(i + 1, WHITE), (high, WHITE)])
        return i + 1

    def _sort_range(self, canvas: Canvas, low: int, high: int) -> bool:
        pending = [(low, high)]
        while pending:
            lo, hi = pending.pop()
            if not canvas.keep_running():
                return False
            if lo < hi:
                pivot_index = self.partition(canvas, lo, hi)
                if pivot_index is None:
                    return False
                # Right range pushed first so the left one is handled first.
                pending.append((pivot_index + 1, hi))
                pending.append((lo, pivot_index - 1))
        return True

    def sort(self, canvas: Canvas) -> bool:
        result = self._sort_range(canvas, 0, len(self.values) - 1)
        self.is_sorted = True
        return result


_ALGORITHMS: dict[AlgorithmType, type[SortingAlgorithm]] = {
    AlgorithmType.INSERTION_SORT: InsertionSort,
    AlgorithmType.BINARY_INSERTION_SORT: BinaryInsertionSort,
    AlgorithmType.SELECTION_SORT: SelectionSort,
    AlgorithmType.QUICK_SORT: QuickSort,
}


def create_algorithm(
    kind: AlgorithmType,
    screen_width: int,
    size: int,
    rng: random.Random | None = None,
) -> SortingAlgorithm:
    """Return a new algorithm of the given kind over `size` shuffled numbers."""
    try:
        cls = _ALGORITHMS[AlgorithmType(kind)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unknown algorithm: {kind!r}") from exc
    return cls(screen_width, size, rng)