"""
Mutable undirected, weighted graph owned by the editor.

Implements the Graph interface. Edges are keyed by the canonical pair
(min(a, b), max(a, b)) so that {a, b} and {b, a} are the same entry; the
per-node adjacency maps are updated in the same call as the edge map.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from graph import Graph
from nodes import Node, generate_label
from results import Result, invalid_operation, parse_weight

DEFAULT_WEIGHT = 1

EdgeKey = Tuple[int, int]


def edge_key(a: int, b: int) -> EdgeKey:
    """Canonical key for the undirected edge {a, b}."""
    return (a, b) if a < b else (b, a)


class GraphStore(Graph):
    """
    Nodes plus a symmetric edge set with integer weights.

    Node indices are handed out sequentially and never reused.
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, Node] = {}
        self._next_index = 0
        self._weights: Dict[EdgeKey, int] = {}
        self._adj: Dict[int, Dict[int, int]] = {}

    # --- Nodes ---------------------------------------------------------------

    def add_node(self, position: Any) -> int:
        """Append a node at position and return its index."""
        index = self._next_index
        self._next_index += 1
        self._nodes[index] = Node(index, generate_label(index), position)
        self._adj[index] = {}
        return index

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def label_of(self, node_id: int) -> str:
        return self._nodes[node_id].label

    def set_selected(self, node_id: int, selected: bool) -> None:
        self._nodes[node_id].selected = selected

    def clear_selection(self) -> None:
        for node in self._nodes.values():
            node.selected = False

    # --- Edges ---------------------------------------------------------------

    def has_edge(self, a: int, b: int) -> bool:
        return edge_key(a, b) in self._weights

    def weight(self, a: int, b: int) -> Optional[int]:
        return self._weights.get(edge_key(a, b))

    def edges(self) -> List[Tuple[int, int, int]]:
        """All edges as (a, b, weight) with a < b, in insertion order."""
        return [(a, b, w) for (a, b), w in self._weights.items()]

    def add_edge(self, a: int, b: int) -> Result[None]:
        """Connect a and b with the default weight."""
        rejected = self._check_endpoints(a, b)
        if rejected is not None:
            return rejected
        if self.has_edge(a, b):
            return invalid_operation(f"Edge {self._pair_label(a, b)} already exists")

        self._weights[edge_key(a, b)] = DEFAULT_WEIGHT
        self._adj[a][b] = DEFAULT_WEIGHT
        self._adj[b][a] = DEFAULT_WEIGHT
        return Result.success()

    def remove_edge(self, a: int, b: int) -> Result[None]:
        rejected = self._check_endpoints(a, b)
        if rejected is not None:
            return rejected
        if not self.has_edge(a, b):
            return invalid_operation(f"No edge between {self._pair_label(a, b)}")

        del self._weights[edge_key(a, b)]
        del self._adj[a][b]
        del self._adj[b][a]
        return Result.success()

    def toggle_edge(self, a: int, b: int) -> Result[bool]:
        """
        Connect-nodes interaction: remove the edge if present, else add it.

        Re-adding a removed edge starts again from the default weight.
        Returns whether an edge exists between a and b afterwards.
        """
        if self.has_edge(a, b):
            outcome = self.remove_edge(a, b)
            return Result.success(False) if outcome.ok else Result(error=outcome.error)
        outcome = self.add_edge(a, b)
        return Result.success(True) if outcome.ok else Result(error=outcome.error)

    def set_weight(self, a: int, b: int, raw_text: str) -> Result[int]:
        """
        Parse raw_text as a positive integer and assign it to edge {a, b}.

        The graph is left untouched on any failure.
        """
        rejected = self._check_endpoints(a, b)
        if rejected is not None:
            return rejected
        if not self.has_edge(a, b):
            return invalid_operation(f"No edge between {self._pair_label(a, b)}")

        weight, error = parse_weight(raw_text)
        if error is not None:
            return Result(error=error)

        self._weights[edge_key(a, b)] = weight
        self._adj[a][b] = weight
        self._adj[b][a] = weight
        return Result.success(weight)

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> Iterable[int]:
        return list(self._nodes.keys())

    def node_count(self) -> int:
        return len(self._nodes)

    def contains(self, node: int) -> bool:
        return node in self._nodes

    def neighbors(self, node: int) -> Mapping[int, int]:
        return dict(self._adj.get(node, {}))

    # --- Internal helpers ----------------------------------------------------

    def _check_endpoints(self, a: int, b: int) -> Optional[Result]:
        for n in (a, b):
            if not self.contains(n):
                return invalid_operation(f"Unknown node {n}")
        if a == b:
            return invalid_operation(f"Cannot connect {self.label_of(a)} to itself")
        return None

    def _pair_label(self, a: int, b: int) -> str:
        return f"{self.label_of(a)}-{self.label_of(b)}"
