"""Linked-list node used both for vertices and for adjacency entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class Node:
    """A vertex head or an adjacency entry in a graph's linked lists.

    ``color`` is 0 for white (unvisited), 1 for gray and 2 for black.
    For an adjacency entry ``index`` is the edge's destination and
    ``weight`` the edge weight; for a vertex ``weight`` holds a distance.
    """

    weight: int = 0
    index: int = -1
    color: int = 0
    next: Optional[Node] = None
    previous: Optional[Node] = None

    def __iter__(self) -> Iterator[Node]:
        """Yield this node and then every node linked after it."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return (
            f"Node(weight={self.weight}, index={self.index}, "
            f"color={self.color})"
        )