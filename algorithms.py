"""
Shortest-path interfaces for the graph editor.

Keeps path finding separate from graph mutation and interaction state.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from graph import Graph
from results import ErrorKind, Result, invalid_operation


@dataclass(frozen=True)
class PathResult:
    """Ordered node indices from source to target plus the summed edge weight."""

    nodes: List[int]
    cost: int


def path_edges(nodes: Sequence[int]) -> List[Tuple[int, int]]:
    """Canonical (low, high) pairs for consecutive nodes along a path."""
    return [(min(u, v), max(u, v)) for u, v in zip(nodes, nodes[1:])]


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, int]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest -> path_cost(source -> dest). Unreachable nodes are absent.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError

    def shortest_path(self, graph: Graph, source: int, target: int) -> Result[PathResult]:
        """
        Minimum-weight path from source to target.

        Fails with INVALID_OPERATION for unknown ids and NO_PATH_EXISTS when
        target is not reachable. Ties between equal-cost paths are broken
        however the engine happens to settle them.
        """
        for n in (source, target):
            if not graph.contains(n):
                return invalid_operation(f"Unknown node {n}")
        if source == target:
            return Result.success(PathResult([source], 0))

        dist, prev = self.shortest_paths(graph, source)
        if target not in dist:
            return Result.failure(ErrorKind.NO_PATH_EXISTS, f"No path from node {source} to node {target}")

        path = [target]
        at = target
        while at != source:
            at = prev[at]
            path.append(at)
        path.reverse()
        return Result.success(PathResult(path, dist[target]))
