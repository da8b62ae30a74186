"""
Undirected, weighted graph abstraction used by the path finders.

Nodes are integer indices. Every edge {a, b} is visible from both endpoints
with the same non-negative integer weight.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping


class Graph(ABC):
    """Read-only adjacency view over integer node indices."""

    @abstractmethod
    def nodes(self) -> Iterable[int]:
        """Return all node indices in the graph."""
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, node: int) -> Mapping[int, int]:
        """
        Neighbours and edge weights for a given node.

        Returns: dict[int, int]
        """
        raise NotImplementedError

    def contains(self, node: int) -> bool:
        return 0 <= node < self.node_count()
