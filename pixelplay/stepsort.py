"""Sorts that advance one comparison per call, for frame-by-frame animation."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from enum import Enum

SCREEN_SIZE = 500

Rgb = tuple[int, int, int]


class StepKind(Enum):
    """The step-wise sorting algorithms on offer."""

    INSERTION_SORT = "insertion"
    BUBBLE_SORT = "bubble"


def spectrum(count: int) -> list[Rgb]:
    """Return `count` RGB colours sweeping from red through yellow, green and blue."""
    r, g, b = 255, 5, 5
    quarter, half, three_quarters = count // 4, count // 2, 3 * count // 4
    colors: list[Rgb] = []
    for i in range(count):
        if i <= quarter:
            g = min(g + 2, 255)
        elif i < half:
            r = max(r - 2, 1)
        elif half < i < three_quarters:
            b = min(b + 2, 255)
        else:
            g = max(g - 2, 1)
        colors.append((r, g, b))
    return colors


class StepAlgorithm(ABC):
    """A shuffled permutation of 1..size sorted a little at a time."""

    def __init__(self, size: int = SCREEN_SIZE, rng: random.Random | None = None) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        chooser = rng if rng is not None else random.Random()
        self.size = size
        self.values: list[int] = chooser.sample(range(1, size + 1), size)
        self.colors: list[Rgb] = spectrum(size)
        self.cur_i = 0
        self.cur_j = 0
        self.start_sort = False

    @abstractmethod
    def step(self) -> list[int]:
        """Do one unit of work; return the indices whose values changed."""

    def still_sorting(self) -> bool:
        """Tell whether more steps remain."""
        return self.cur_i < self.size


class BubbleSort(StepAlgorithm):
    """Exchange sort: compares position i with every later position j."""

    def _compare(self, changed: list[int]) -> None:
        i, j = self.cur_i, self.cur_j
        if i < self.size and j < self.size and self.values[j] < self.values[i]:
            self.values[i], self.values[j] = self.values[j], self.values[i]
            changed.extend((i, j))

    def step(self) -> list[int]:
        changed: list[int] = []
        if self.cur_i < self.size:
            if self.cur_j < self.size:
                self._compare(changed)
                self.cur_j += 1
            else:
                self.cur_i += 1
                self.cur_j = self.cur_i + 1
                self._compare(changed)
        return changed


class InsertionSort(StepAlgorithm):
    """Insertion sort that shifts one element per step."""

    def __init__(self, size: int = SCREEN_SIZE, rng: random.Random | None = None) -> None:
        super().__init__(size, rng)
        self.start_sort = True
        self.key: int | None = None

    def step(self) -> list[int]:
        if self.start_sort:
            self.cur_i = 1
            self.cur_j = 0
            self.key = self.values[1] if self.size > 1 else None
            self.start_sort = False

        changed: list[int] = []
        if self.cur_i < self.size:
            j = self.cur_j
            if j >= 0 and self.values[j] > self.key:
                self.values[j + 1] = self.values[j]
                changed.extend((j + 1, j))
                self.cur_j -= 1
            else:
                self.values[j + 1] = self.key
                changed.append(j + 1)
                self.cur_i += 1
                self.key = self.values[self.cur_i] if self.cur_i < self.size else None
                self.cur_j = self.cur_i - 1
        return changed

    def still_sorting(self) -> bool:
        return self.start_sort or super().still_sorting()


_ALGORITHMS: dict[StepKind, type[StepAlgorithm]] = {
    StepKind.INSERTION_SORT: InsertionSort,
    StepKind.BUBBLE_SORT: BubbleSort,
}


def build_step_algorithm(
    kind: StepKind, size: int = SCREEN_SIZE, rng: random.Random | None = None
) -> StepAlgorithm:
    """Return a fresh step-wise sorter of the given kind."""
    try:
        cls = _ALGORITHMS[StepKind(kind)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"unknown algorithm: {kind!r}") from exc
    return cls(size, rng)