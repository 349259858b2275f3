# dsapractice

Plain, readable implementations of classic algorithms and data structures,
meant for study and experimentation. No third-party dependencies.

## What is inside

- `dsapractice.searching`: recursive `binary_search(items, key)` over a sorted
  sequence. It returns the index of `key`, or `None` when `key` is absent.
- `dsapractice.sorting`: `bubble_sort`, `selection_sort`, `insertion_sort`,
  `merge_sort` and `quick_sort`. Each takes any iterable and returns a new
  sorted list; the input is left untouched.
- `dsapractice.benchmark`: `random_values(size, rng=None)` returns `size`
  random integers from 0 to 99 (a negative size raises `ValueError`), and
  `time_sorts(values)` runs every sort on the same values and returns a list of
  `Timing(name, seconds)` records measured in CPU time.
- `dsapractice.circular_list`: `CircularLinkedList` (singly linked) and
  `DoublyCircularLinkedList`. Both accept initial values, support
  `insert_at_end`, iteration and `len()`; the doubly linked list also supports
  `reversed()`. `str()` of a `CircularLinkedList` joins its values with two
  spaces.
- `dsapractice.bounded_queue`: `BoundedQueue(max_size=5)`, a FIFO queue with a
  fixed capacity. `enqueue` raises `QueueOverflow` when full, `dequeue` raises
  `QueueUnderflow` when empty; the queue can be iterated and measured with
  `len()`.
- `dsapractice.binary_tree`: `Node`, `build_tree(answers)` and
  `preorder(root)`. Answers are given in pre-order: `0` means "no node", any
  other number is followed by the node's data, then its left subtree, then its
  right subtree. Running out of answers raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from dsapractice.searching import binary_search
from dsapractice.sorting import merge_sort
from dsapractice.bounded_queue import BoundedQueue
from dsapractice.binary_tree import build_tree, preorder

print(binary_search([2, 3, 4, 10, 40], 10))   # 3
print(binary_search([2, 3, 4, 10, 40], 5))    # None
print(merge_sort([5, 1, 4, 2]))               # [1, 2, 4, 5]

queue = BoundedQueue()
queue.enqueue(7)
print(queue.dequeue())                         # 7

root = build_tree([1, 1, 1, 2, 0, 0, 1, 3, 0, 0])
print(list(preorder(root)))                    # [1, 2, 3]
```

## Commands

```
dsa-search [KEY [VALUES ...]]
```
Binary search for `KEY` (default 10) among the sorted `VALUES` (default
`2 3 4 10 40`) and print the index found.

```
dsa-benchmark [SIZE] [--seed SEED]
```
Fill an array of `SIZE` random integers (asking for the size when it is not
given), print it, then print the CPU time each sort takes on it.

```
dsa-queue
```
Interactive menu for a five-slot queue: 1 enqueue, 2 dequeue, 3 display,
4 exit.

```
dsa-tree [ANSWERS ...]
```
Build a tree from the given answers (or from whitespace-separated integers on
standard input when none are given) and print its pre-order walk.

## Limits

The trees here are plain binary trees built from answers; there are no
self-balancing trees and no insert, delete or search operations on them. The
linked lists only append; they offer no removal or lookup.