"""A fixed-capacity FIFO queue with an interactive menu."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

MAX_SIZE = 5

MENU = (
    "\n Press (1) for Enqueue \n Press (2) for Dequeue \n"
    " Press (3) for Display \n Press (4) for EXIT \n \n"
)


class QueueOverflow(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueUnderflow(Exception):
    """Raised when dequeuing from an empty queue."""


class BoundedQueue:
    """FIFO queue that holds at most ``max_size`` items."""

    def __init__(self, max_size: int = MAX_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear; raise QueueOverflow when full."""
        if len(self._items) >= self.max_size:
            raise QueueOverflow(f"queue is full ({self.max_size} items)")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; raise QueueUnderflow when empty."""
        if not self._items:
            raise QueueUnderflow("queue is empty")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r}, max_size={self.max_size})"


def _read_int(prompt: str) -> int | None:
    """Prompt until an integer is entered; None at end of input."""
    while True:
        try:
            raw = input(prompt)
        except EOFError:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            print("Enter a valid number...........")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive enqueue/dequeue/display menu."""
    argparse.ArgumentParser(description="Interactive bounded queue.").parse_args(argv)
    queue = BoundedQueue()
    print(MENU, end="")
    while True:
        try:
            raw = input("Enter your choice : ")
        except EOFError:
            print()
            return 0
        try:
            choice = int(raw.strip())
        except ValueError:
            choice = None

        if choice == 1:
            if len(queue) >= queue.max_size:
                print("Overflow and Exit ........... ")
                continue
            item = _read_int("Enter the number : ")
            if item is None:
                print()
                return 0
            queue.enqueue(item)
            print("Item Inserted........ ")
        elif choice == 2:
            try:
                item = queue.dequeue()
            except QueueUnderflow:
                print("Underflow and exit..............")
            else:
                print(f"Item : {item} has been deleted.................")
        elif choice == 3:
            if len(queue) == 0:
                print("Queue is Empty.......... ")
            else:
                print("".join(f"{value} \t" for value in queue))
        elif choice == 4:
            print("EXIT...........")
            return 0
        else:
            print("Enter the Valid option...........")