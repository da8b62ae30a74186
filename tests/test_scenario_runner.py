from pathlib import Path
import csv

import pytest

from scenario_runner import build_graph, load_scenario, main, run_scenario


SAMPLE = """
name: sample
nodes:
  - [100, 100]
  - [300, 100]
  - [500, 100]
  - [700, 100]
  - [900, 100]
edges:
  - {a: A, b: B}
  - {a: B, b: C, weight: 2}
  - {a: 0, b: 2, weight: 5}
  - {a: C, b: D}
queries:
  - {source: A, target: D}
  - {source: A, target: E}
  - {source: C, target: C}
"""


def write(tmp_path: Path, text: str) -> Path:
    cfg = tmp_path / "scenario.yml"
    cfg.write_text(text)
    return cfg


def test_load_scenario_parses_nodes_edges_queries(tmp_path: Path):
    cfg = load_scenario(write(tmp_path, SAMPLE))

    assert cfg.name == "sample"
    assert cfg.nodes[0] == (100.0, 100.0)
    assert len(cfg.edges) == 4
    # Weights stay raw text so they go through the same parser as typed input
    assert cfg.edges[1].weight == "2"
    assert cfg.edges[0].weight is None
    assert cfg.queries[0].source == "A"
    assert cfg.engine == "heap"


def test_build_graph_resolves_labels_and_indices(tmp_path: Path):
    store = build_graph(load_scenario(write(tmp_path, SAMPLE)))

    assert store.edges() == [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)]


@pytest.mark.parametrize("engine", ["heap", "dense"])
def test_run_scenario_answers_queries(tmp_path: Path, engine: str):
    rows = run_scenario(write(tmp_path, SAMPLE), engine=engine)

    assert rows[0]["path"] == "A -> B -> C -> D"
    assert rows[0]["cost"] == 4
    assert rows[1]["error"] == "no_path_exists"
    assert rows[1]["path"] == ""
    assert rows[2]["path"] == "C"
    assert rows[2]["cost"] == 0


def test_run_scenario_writes_csv(tmp_path: Path):
    out = tmp_path / "results" / "paths.csv"
    run_scenario(write(tmp_path, SAMPLE), results_csv=out)

    with out.open() as f:
        rows = list(csv.DictReader(f))
    assert [r["source"] for r in rows] == ["A", "A", "C"]
    assert rows[0]["cost"] == "4"


def test_run_scenario_reports_rejected_edges(tmp_path: Path, capsys):
    text = """
nodes:
  - [0, 0]
  - [100, 0]
edges:
  - {a: A, b: A}
  - {a: A, b: B, weight: -3}
"""
    run_scenario(write(tmp_path, text))
    out = capsys.readouterr().out

    assert "[scenario] rejected edge A-A" in out
    assert "[scenario] rejected weight '-3'" in out


def test_scenario_events_are_replayed(tmp_path: Path, capsys):
    text = """
nodes:
  - [100, 100]
  - [300, 100]
events:
  - {key: l}
  - {click: [100, 100]}
  - {click: [300, 100]}
queries:
  - {source: A, target: B}
"""
    rows = run_scenario(write(tmp_path, text))

    assert rows[0]["path"] == "A -> B"
    assert "replayed 3 events" in capsys.readouterr().out


def test_malformed_scenarios_raise_value_error(tmp_path: Path):
    with pytest.raises(ValueError):
        load_scenario(write(tmp_path, "nodes:\n  - [1]\n"))
    with pytest.raises(ValueError):
        load_scenario(write(tmp_path, "nodes: []\nedges:\n  - {a: A}\n"))
    with pytest.raises(ValueError):
        load_scenario(write(tmp_path, "engine: quantum\n"))
    with pytest.raises(ValueError):
        run_scenario(write(tmp_path, "nodes:\n  - [0, 0]\nqueries:\n  - {source: A, target: Q}\n"))


def test_main_runs_bundled_example(capsys):
    main([])
    out = capsys.readouterr().out
    assert "[path] A -> B -> C -> D cost=4" in out


def test_non_mapping_edge_or_query_entries_raise_value_error(tmp_path: Path):
    with pytest.raises(ValueError):
        load_scenario(write(tmp_path, "nodes: []\nedges:\n  - 5\n"))
    with pytest.raises(ValueError):
        load_scenario(write(tmp_path, "nodes: []\nqueries:\n  - [A, B]\n"))
