"""
Stack frontier for depth-first search.

Purpose: Hold discovered-but-unprocessed search nodes in LIFO order and
         answer whether a coordinate is already queued.

Inputs:
    - Search nodes (anything with a .coordinate attribute)

Outputs:
    - Nodes in last-in, first-out order
"""

from collections import Counter
from typing import List


class EmptyFrontier(IndexError):
    """Raised when popping from an empty frontier."""


class StackFrontier:
    """LIFO frontier with a coordinate index for duplicate checks."""

    def __init__(self):
        self._nodes: List = []
        self._queued = Counter()

    def push(self, node):
        """Add a node to the tail."""
        self._nodes.append(node)
        self._queued[node.coordinate] += 1

    def pop(self):
        """
        Remove and return the tail node.

        Raises:
            EmptyFrontier: No nodes remain
        """
        if not self._nodes:
            raise EmptyFrontier("empty frontier")
        node = self._nodes.pop()
        self._queued[node.coordinate] -= 1
        if not self._queued[node.coordinate]:
            del self._queued[node.coordinate]
        return node

    def is_empty(self) -> bool:
        return not self._nodes

    def contains_coordinate(self, coord) -> bool:
        """Check if any queued node stands on coord."""
        return coord in self._queued

    def clear(self):
        self._nodes.clear()
        self._queued.clear()

    def nodes(self) -> List:
        """Queued nodes, bottom of the stack first."""
        return list(self._nodes)

    def __len__(self):
        return len(self._nodes)
