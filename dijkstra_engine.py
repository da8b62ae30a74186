"""
Heap-based shortest-path engine.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from typing import Dict
import heapq

from graph import Graph
from algorithms import ShortestPathEngine


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap.

    Complexity:
        O((V + E) log V) over the nodes reachable from the source.
    """

    def shortest_path_costs(self, graph: Graph, source: int) -> Dict[int, int]:
        dist, _ = self.shortest_paths(graph, source)
        return dist

    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        A node absent from dist was never reached, so it has no entry in prev
        either; callers must check dist before walking prev. The predecessor
        map omits the source itself because it has no parent.
        """
        dist: Dict[int, int] = {source: 0}
        prev: Dict[int, int] = {}
        settled = set()
        pq = [(0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)
            # Skip outdated entries
            if u in settled:
                continue
            settled.add(u)

            for v, w in graph.neighbors(u).items():
                if v in settled:
                    continue
                alt = d_u + w
                if v not in dist or alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        return dist, prev
