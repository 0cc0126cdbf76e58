import os

import networkx as nx

from experiments.runner_basic import run_suite, write_csv
from main import main
from visualisierung.draw import color_for, conflict_edges, visualize_coloring


def test_main_wfc_on_demo_graph(capsys):
    assert main(["--algo", "wfc", "--no-viz", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "[Main] algo=wfc" in out
    assert "[WFC] feasible=True" in out


def test_main_baseline_on_input_file(tmp_path, capsys):
    p = tmp_path / "k4.col"
    p.write_text("p edge 4 6\ne 1 2\ne 1 3\ne 1 4\ne 2 3\ne 2 4\ne 3 4\n", encoding="utf-8")
    assert main(["--algo", "dsatur", "--input", str(p), "--no-viz"]) == 0
    out = capsys.readouterr().out
    assert "[DSATUR] colors=4" in out


def test_main_writes_picture(tmp_path):
    out_dir = tmp_path / "pics"
    assert main(["--seed", "2", "--viz-out", str(out_dir)]) == 0
    assert len(os.listdir(out_dir)) == 1


def test_visualize_marks_conflicts(tmp_path):
    G = nx.path_graph(3)
    col = {0: 1, 1: 1, 2: 2}
    assert conflict_edges(G, col) == [(0, 1)]
    path = visualize_coloring(G, col, step="Demo Step!", out_dir=str(tmp_path))
    assert os.path.basename(path) == "step-demo-step_colors-002_conflicts-001.png"
    assert os.path.exists(path)


def test_palette_is_one_based():
    assert color_for(1) == color_for(13)
    assert color_for(1) != color_for(2)


def test_runner_suite_rows(tmp_path):
    rows = run_suite([("K4", nx.complete_graph(4)), ("C6", nx.cycle_graph(6))])
    assert [(r["instance"], r["algo"]) for r in rows] == [
        ("K4", "wfc"), ("K4", "dsatur"), ("K4", "slo"),
        ("C6", "wfc"), ("C6", "dsatur"), ("C6", "slo"),
    ]
    assert all(r["feasible"] for r in rows)
    assert rows[0]["UB"] == 4 and rows[0]["LB"] == 4 and rows[0]["attempts"] == 1
    out = tmp_path / "rows.csv"
    write_csv(rows, str(out))
    assert out.read_text(encoding="utf-8").splitlines()[0].startswith("instance,n,m,algo")
