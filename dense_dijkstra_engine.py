"""
Array-scan shortest-path engine for small graphs.

Keeps tentative distances in a numpy array and picks the closest unsettled
node with a linear scan each round, O(V^2) overall. Editor graphs stay in the
tens of nodes, where this is as fast as the heap version.
"""

from typing import Dict, List
import numpy as np

from graph import Graph
from algorithms import ShortestPathEngine

# Larger than any achievable path sum.
INFINITY = np.iinfo(np.int64).max


class DenseDijkstraEngine(ShortestPathEngine):
    """
    Dijkstra over a dense distance vector.
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, int]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        ids: List[int] = sorted(graph.nodes())
        pos = {node: i for i, node in enumerate(ids)}
        n = len(ids)

        dist = np.full(n, INFINITY, dtype=np.int64)
        settled = np.zeros(n, dtype=bool)
        prev = np.full(n, -1, dtype=np.int64)
        dist[pos[source]] = 0

        for _ in range(n):
            candidates = np.where(settled, INFINITY, dist)
            u = int(np.argmin(candidates))
            if candidates[u] == INFINITY:
                break  # everything left is unreachable
            settled[u] = True

            for v_id, w in graph.neighbors(ids[u]).items():
                v = pos[v_id]
                if settled[v]:
                    continue
                alt = int(dist[u]) + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u

        reached = np.flatnonzero(dist != INFINITY)
        costs = {ids[i]: int(dist[i]) for i in reached}
        parents = {ids[i]: ids[int(prev[i])] for i in reached if prev[i] >= 0}
        return costs, parents
