"""
CLI to build a graph from a YAML scenario and answer shortest-path queries.

Reads a scenario file (nodes, edges, optional scripted UI events, queries),
builds a GraphStore, replays the events through the editor state machine and
prints one line per query. Results can also be written to CSV.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union
import argparse
import csv
import time

from algorithms import ShortestPathEngine
from dense_dijkstra_engine import DenseDijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph_store import GraphStore
from interaction import InteractionState
from simulation import run_event_script

ENGINES = {
    "heap": SimpleDijkstraEngine,
    "dense": DenseDijkstraEngine,
}

NodeRef = Union[int, str]


@dataclass(frozen=True)
class EdgeSpec:
    a: NodeRef
    b: NodeRef
    weight: Optional[str] = None  # raw text, parsed like keyboard entry


@dataclass(frozen=True)
class QuerySpec:
    source: NodeRef
    target: NodeRef


@dataclass(frozen=True)
class ScenarioConfig:
    name: str
    nodes: Sequence[Tuple[float, float]]
    edges: Sequence[EdgeSpec] = field(default_factory=list)
    queries: Sequence[QuerySpec] = field(default_factory=list)
    events: Sequence[Mapping[str, Any]] = field(default_factory=list)
    engine: str = "heap"


def load_scenario(path: Path) -> ScenarioConfig:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Scenario {path} must be a mapping at the top level.")

    nodes = []
    for i, raw in enumerate(data.get("nodes") or []):
        if not isinstance(raw, (list, tuple)) or len(raw) != 2:
            raise ValueError(f"nodes[{i}] must be an [x, y] pair, got {raw!r}")
        nodes.append((float(raw[0]), float(raw[1])))

    edges = []
    for i, raw in enumerate(data.get("edges") or []):
        if not isinstance(raw, dict) or "a" not in raw or "b" not in raw:
            raise ValueError(f"edges[{i}] requires 'a' and 'b'.")
        weight = raw.get("weight")
        edges.append(EdgeSpec(raw["a"], raw["b"], None if weight is None else str(weight)))

    queries = []
    for i, raw in enumerate(data.get("queries") or []):
        if not isinstance(raw, dict) or "source" not in raw or "target" not in raw:
            raise ValueError(f"queries[{i}] requires 'source' and 'target'.")
        queries.append(QuerySpec(raw["source"], raw["target"]))

    engine = str(data.get("engine", "heap"))
    if engine not in ENGINES:
        raise ValueError(f"Unknown engine '{engine}', expected one of {sorted(ENGINES)}.")

    return ScenarioConfig(
        name=str(data.get("name", path.stem)),
        nodes=nodes,
        edges=edges,
        queries=queries,
        events=list(data.get("events") or []),
        engine=engine,
    )


def resolve_node(store: GraphStore, ref: NodeRef) -> int:
    """Accept either a node index or its label."""
    if isinstance(ref, int):
        return ref
    for index in store.nodes():
        if store.label_of(index) == ref:
            return index
    raise ValueError(f"Unknown node label '{ref}'")


def build_graph(cfg: ScenarioConfig) -> GraphStore:
    store = GraphStore()
    for position in cfg.nodes:
        store.add_node(position)

    for edge in cfg.edges:
        a = resolve_node(store, edge.a)
        b = resolve_node(store, edge.b)
        outcome = store.add_edge(a, b)
        if not outcome.ok:
            print(f"[scenario] rejected edge {edge.a}-{edge.b}: {outcome.error.message}")
            continue
        if edge.weight is not None:
            weighted = store.set_weight(a, b, edge.weight)
            if not weighted.ok:
                print(f"[scenario] rejected weight {edge.weight!r} on {edge.a}-{edge.b}: {weighted.error.message}")
    return store


def run_scenario(
    scenario_path: Path,
    results_csv: Path | None = None,
    engine: str | None = None,
) -> List[Dict[str, object]]:
    cfg = load_scenario(scenario_path)
    engine_name = engine or cfg.engine
    if engine_name not in ENGINES:
        raise ValueError(f"Unknown engine '{engine_name}', expected one of {sorted(ENGINES)}.")
    path_engine: ShortestPathEngine = ENGINES[engine_name]()
    start = time.time()

    store = build_graph(cfg)
    if cfg.events:
        state = InteractionState(store, engine=path_engine)
        run_event_script(state, cfg.events)
        print(f"[scenario] replayed {len(cfg.events)} events (mode={state.mode.name} phase={state.phase.name})")
        if state.error:
            print(f"[scenario] editor error: {state.error}")
    print(
        f"[scenario] {cfg.name}: {store.node_count()} nodes, {len(store.edges())} edges, "
        f"{len(cfg.queries)} queries, engine={engine_name}"
    )

    rows: List[Dict[str, object]] = []
    for query in cfg.queries:
        source = resolve_node(store, query.source)
        target = resolve_node(store, query.target)
        outcome = path_engine.shortest_path(store, source, target)
        row: Dict[str, object] = {
            "source": _label(store, source),
            "target": _label(store, target),
            "path": "",
            "cost": None,
            "error": "",
        }
        if outcome.ok:
            row["path"] = " -> ".join(store.label_of(n) for n in outcome.value.nodes)
            row["cost"] = outcome.value.cost
            print(f"[path] {row['path']} cost={row['cost']}")
        else:
            row["error"] = outcome.error.kind.value
            print(f"[path] {row['source']} -> {row['target']}: {outcome.error.message}")
        rows.append(row)

    if results_csv:
        write_results_csv(rows, results_csv)

    elapsed = time.time() - start
    print(f"[scenario] completed {len(rows)} queries in {elapsed:.3f}s")
    return rows


def write_results_csv(rows: Sequence[Mapping[str, object]], path: Path) -> None:
    """
    Write one row per query to CSV.
    """
    fieldnames = ["source", "target", "path", "cost", "error"]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            writer.writerow({name: row.get(name, "") for name in fieldnames})


def _label(store: GraphStore, index: int) -> str:
    return store.label_of(index) if store.contains(index) else str(index)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("scenario", type=Path, nargs="?", default=Path(__file__).parent / "scenarios" / "example.yml")
    parser.add_argument("--results-csv", type=Path, default=None)
    parser.add_argument("--engine", choices=sorted(ENGINES), default=None)
    args = parser.parse_args(argv)

    run_scenario(args.scenario, results_csv=args.results_csv, engine=args.engine)
    if args.results_csv:
        print(f"Wrote results to {args.results_csv}")


if __name__ == "__main__":
    main()
