"""Binary trees built from a sequence of menu answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class Node:
    """A binary tree node."""

    data: int
    left: Node | None = None
    right: Node | None = None


def build_tree(answers: Iterable[int]) -> Node | None:
    """Build a tree from answers given in pre-order.

    Each node is introduced by a choice: 0 means no node, anything else is
    followed by the node's data, then its left subtree, then its right subtree.
    """
    stream = iter(answers)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("answers ended before the tree was complete") from None

    def create() -> Node | None:
        if take() == 0:
            return None
        node = Node(take())
        node.left = create()
        node.right = create()
        return node

    return create()


def preorder(root: Node | None) -> Iterator[int]:
    """Yield the data of every node, root first, then left, then right."""
    pending = [root] if root is not None else []
    while pending:
        node = pending.pop()
        yield node.data
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a tree from integer answers and print its pre-order walk."""
    parser = argparse.ArgumentParser(
        description="Build a binary tree: 0 for no node, 1 DATA for a node, in pre-order."
    )
    parser.add_argument("answers", type=int, nargs="*")
    args = parser.parse_args(argv)

    answers = args.answers
    if not answers:
        try:
            answers = [int(token) for token in sys.stdin.read().split()]
        except ValueError:
            print("answers must be integers", file=sys.stderr)
            return 1

    try:
        root = build_tree(answers)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1

    if root is None:
        print("Tree is empty")
    else:
        print("Preorder : " + " ".join(str(value) for value in preorder(root)))
    return 0