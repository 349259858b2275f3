"""Time the classic sorts on a random array of small integers."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from dsapractice.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

_SORTS: tuple[tuple[str, Callable[[Iterable[Any]], list[Any]]], ...] = (
    ("Bubble Sort", bubble_sort),
    ("Insertion Sort", insertion_sort),
    ("Selection Sort", selection_sort),
    ("Merge Sort", merge_sort),
    ("Quick Sort", quick_sort),
)


@dataclass(frozen=True)
class Timing:
    """CPU time one sorting algorithm took."""

    name: str
    seconds: float

    def __str__(self) -> str:
        return f"Time taken for {self.name}: {self.seconds:f} seconds"


def random_values(size: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random integers in the range 0..99."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(100) for _ in range(size)]


def time_sorts(values: Iterable[Any]) -> list[Timing]:
    """Run every sort on the same values and return their CPU times in order."""
    data = list(values)
    timings = []
    for name, sort in _SORTS:
        start = time.process_time()
        sort(data)
        timings.append(Timing(name, time.process_time() - start))
    return timings


def main(argv: Sequence[str] | None = None) -> int:
    """Generate a random array, print it and the time each sort takes."""
    parser = argparse.ArgumentParser(description="Compare sorting algorithm run times.")
    parser.add_argument("size", type=int, nargs="?")
    parser.add_argument("--seed", type=int)
    args = parser.parse_args(argv)

    size = args.size
    if size is None:
        try:
            size = int(input("Enter the size of the array: "))
        except ValueError:
            parser.error("size must be an integer")
    if size < 0:
        parser.error("size must not be negative")

    values = random_values(size, random.Random(args.seed))
    print("Unsorted array: " + "".join(f"{value} " for value in values))
    for timing in time_sorts(values):
        print(timing)
    return 0