"""
Interaction state for the graph editor.

Translates abstract input (clicks at canvas positions, key names, typed text)
into GraphStore mutations and path queries, and exposes everything a renderer
needs to draw the current frame: selection, highlighted path, the weight being
typed and the last error message.
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple
import numpy as np

from algorithms import ShortestPathEngine, path_edges
from dijkstra_engine import SimpleDijkstraEngine
from graph_store import GraphStore

NODE_RADIUS = 25

Position = Tuple[float, float]


class EditMode(Enum):
    DRAW_NODE = "d"
    DRAW_EDGE = "l"
    DEFINE_WEIGHT = "p"
    FIND_PATH = "g"


MODE_NAMES = {
    EditMode.DRAW_NODE: "Node",
    EditMode.DRAW_EDGE: "Edge",
    EditMode.DEFINE_WEIGHT: "Weight",
    EditMode.FIND_PATH: "Go To",
}

HELP_TEXT = "Press D: Draw Node | L: Draw Edge | P: Define Weight | G: Go To"


class PathPhase(Enum):
    """
    IDLE: no endpoint chosen.
    AWAITING_SECOND_ENDPOINT: first endpoint chosen.
    PATH_DISPLAYED: a path is highlighted; escape returns to IDLE.
    """

    IDLE = "idle"
    AWAITING_SECOND_ENDPOINT = "awaiting_second_endpoint"
    PATH_DISPLAYED = "path_displayed"


class InteractionState:
    """
    Editor state machine bound to one GraphStore.

    Single-threaded: every method runs to completion before the next event.
    """

    def __init__(
        self,
        store: GraphStore,
        engine: Optional[ShortestPathEngine] = None,
        node_radius: float = NODE_RADIUS,
    ) -> None:
        self.store = store
        self.engine = engine or SimpleDijkstraEngine()
        self.node_radius = node_radius

        self.mode = EditMode.DRAW_NODE
        self.phase = PathPhase.IDLE
        self.error = ""
        self.path_cost: Optional[int] = None
        self._selected: List[int] = []
        self._highlighted_nodes: List[int] = []
        self._highlighted_edges: List[Tuple[int, int]] = []
        self._awaiting_weight = False
        self._weight_buffer = ""

    # --- Renderer-facing state -------------------------------------------------

    @property
    def selected(self) -> List[int]:
        return list(self._selected)

    @property
    def highlighted_nodes(self) -> List[int]:
        return list(self._highlighted_nodes)

    @property
    def highlighted_edges(self) -> List[Tuple[int, int]]:
        return list(self._highlighted_edges)

    @property
    def awaiting_weight(self) -> bool:
        return self._awaiting_weight

    @property
    def weight_buffer(self) -> str:
        return self._weight_buffer

    def status_line(self) -> List[str]:
        """Help lines shown in the corner of the canvas."""
        lines = [HELP_TEXT, f"Mode: {MODE_NAMES[self.mode]}"]
        if self._awaiting_weight:
            lines.append(f"Enter weight: {self._weight_buffer}")
        if self.phase is PathPhase.PATH_DISPLAYED:
            lines.append("Press ESC to return")
        return lines

    # --- Hit testing -----------------------------------------------------------

    def node_at(self, position: Position) -> Optional[int]:
        """First node whose centre is strictly within node_radius of position."""
        ids = list(self.store.nodes())
        if not ids:
            return None
        centres = np.array([self.store.node(i).position for i in ids], dtype=float)
        dists = np.hypot(centres[:, 0] - position[0], centres[:, 1] - position[1])
        hits = np.flatnonzero(dists < self.node_radius)
        return ids[int(hits[0])] if hits.size else None

    # --- Events ---------------------------------------------------------------

    def click(self, position: Position) -> None:
        if self._awaiting_weight:
            return

        index = self.node_at(position)
        if self.mode is EditMode.DRAW_NODE:
            if index is None:
                self.store.add_node(position)
        elif self.mode in (EditMode.DRAW_EDGE, EditMode.DEFINE_WEIGHT):
            if index is not None:
                self._select_for_edge(index)
        elif self.mode is EditMode.FIND_PATH:
            if index is not None:
                self._select_endpoint(index)

    def key(self, name: str) -> None:
        name = name.lower()
        if self.phase is PathPhase.PATH_DISPLAYED:
            if name == "escape":
                self.exit_path_view()
            return

        if self._awaiting_weight:
            if name == "return":
                self._submit_weight()
            elif name == "backspace":
                self._weight_buffer = self._weight_buffer[:-1]
            elif name == "escape":
                self._finish_weight_entry()
            return

        for mode in EditMode:
            if mode.value == name:
                self._set_mode(mode)
                return

    def text(self, chars: str) -> None:
        if self._awaiting_weight:
            self._weight_buffer += chars

    def exit_path_view(self) -> None:
        """Clear highlighting and selection; stays in FIND_PATH mode."""
        self.phase = PathPhase.IDLE
        self.path_cost = None
        self._highlighted_nodes = []
        self._highlighted_edges = []
        self._clear_selection()

    # --- Internal helpers ------------------------------------------------------

    def _set_mode(self, mode: EditMode) -> None:
        if mode is not self.mode:
            # Half-finished selections do not carry over between modes.
            self._clear_selection()
            self.phase = PathPhase.IDLE
        self.mode = mode

    def _select_for_edge(self, index: int) -> None:
        if index in self._selected:
            self._selected.remove(index)
            self.store.set_selected(index, False)
            return

        self._selected.append(index)
        self.store.set_selected(index, True)
        if len(self._selected) < 2:
            return

        a, b = self._selected
        if self.mode is EditMode.DRAW_EDGE:
            outcome = self.store.toggle_edge(a, b)
            self.error = "" if outcome.ok else outcome.error.message
        elif self.store.has_edge(a, b):
            self._awaiting_weight = True
            self._weight_buffer = ""

        if not self._awaiting_weight:
            self._clear_selection()

    def _submit_weight(self) -> None:
        a, b = self._selected
        outcome = self.store.set_weight(a, b, self._weight_buffer)
        if outcome.ok:
            self.error = ""
            self._finish_weight_entry()
        else:
            self.error = outcome.error.message
            self._weight_buffer = ""

    def _finish_weight_entry(self) -> None:
        self._awaiting_weight = False
        self._weight_buffer = ""
        self._clear_selection()

    def _select_endpoint(self, index: int) -> None:
        if self.phase is PathPhase.PATH_DISPLAYED:
            return
        if self.phase is PathPhase.IDLE:
            self._selected = [index]
            self.store.set_selected(index, True)
            self.phase = PathPhase.AWAITING_SECOND_ENDPOINT
            return

        source = self._selected[0]
        self.store.set_selected(index, True)
        outcome = self.engine.shortest_path(self.store, source, index)
        if not outcome.ok:
            self.error = f"No path from {self.store.label_of(source)} to {self.store.label_of(index)}"
            self._clear_selection()
            self.phase = PathPhase.IDLE
            return

        self.error = ""
        self._show_path(outcome.value.nodes)
        self.path_cost = outcome.value.cost
        self.phase = PathPhase.PATH_DISPLAYED

    def _show_path(self, nodes: Sequence[int]) -> None:
        self._selected = list(nodes)
        self._highlighted_nodes = list(nodes)
        self._highlighted_edges = path_edges(nodes)

    def _clear_selection(self) -> None:
        self._selected = []
        self.store.clear_selection()
