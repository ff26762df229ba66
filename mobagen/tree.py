"""An unbalanced binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class Node:
    """A tree node with optional left and right children."""

    value: Any
    left: Optional[Node] = None
    right: Optional[Node] = None


class BinaryTree:
    """Binary search tree; equal values go to the right."""

    def __init__(self) -> None:
        self.root: Optional[Node] = None

    def add(self, value) -> None:
        """Insert ``value`` below the first free leaf on its search path."""
        if self.root is None:
            self.root = Node(value)
            return
        current = self.root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = Node(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = Node(value)
                    return
                current = current.right

    def __iter__(self) -> Iterator:
        """Yield the values in sorted (in-order) order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right