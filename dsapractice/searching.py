"""Recursive binary search over a sorted sequence."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

EXAMPLE_ITEMS = (2, 3, 4, 10, 40)
EXAMPLE_KEY = 10


def binary_search(items: Sequence[Any], key: Any) -> int | None:
    """Return the index of ``key`` in the sorted ``items``, or None if absent."""

    def search(low: int, high: int) -> int | None:
        if high < low:
            return None
        mid = low + (high - low) // 2
        if items[mid] == key:
            return mid
        if items[mid] > key:
            return search(low, mid - 1)
        return search(mid + 1, high)

    return search(0, len(items) - 1)


def main(argv: Sequence[str] | None = None) -> int:
    """Search for a key in a sorted list of integers and report the result."""
    parser = argparse.ArgumentParser(
        description="Binary search for KEY among sorted VALUES."
    )
    parser.add_argument("key", type=int, nargs="?", default=EXAMPLE_KEY)
    parser.add_argument("values", type=int, nargs="*")
    args = parser.parse_args(argv)

    items = args.values if args.values else list(EXAMPLE_ITEMS)
    result = binary_search(items, args.key)
    if result is None:
        print("Element is not present in array")
    else:
        print(f"Element is present at index {result}")
    return 0