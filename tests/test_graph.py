import networkx as nx
import pytest

from graph.baselines import dsatur_coloring, run_baseline_coloring, smallest_last_coloring
from graph.clique import greedy_max_clique
from graph.contract import (
    AdjacencyView,
    GraphQuery,
    NetworkXView,
    as_graph_query,
    count_edges,
    iter_edges,
    iter_vertices,
    max_degree,
)
from graph.loader import load_dimacs_col, load_edgelist_txt, load_graph
from graph.verify import print_check_summary, verify_coloring


# ---- contract ----

def test_networkx_view_index_mapping():
    G = nx.Graph()
    G.add_edges_from([("b", "a"), ("a", "c")])
    view = NetworkXView(G)
    assert isinstance(view, GraphQuery)
    assert view.vertex_count() == 3
    assert view.vertex_bound() == 3
    assert [view.from_index(i) for i in range(3)] == ["b", "a", "c"]
    assert all(view.to_index(view.from_index(i)) == i for i in range(3))
    assert sorted(view.neighbors("a")) == ["b", "c"]


def test_networkx_view_rejects_directed():
    with pytest.raises(TypeError):
        NetworkXView(nx.DiGraph([(0, 1)]))


def test_adjacency_view_appends_neighbour_only_nodes():
    view = AdjacencyView({1: [2, 9]})
    assert list(iter_vertices(view)) == [1, 2, 9]
    assert list(view.neighbors(9)) == []
    assert view.to_index(9) == 2


def test_as_graph_query_dispatch():
    G = nx.path_graph(3)
    assert isinstance(as_graph_query(G), NetworkXView)
    assert isinstance(as_graph_query({0: [1]}), AdjacencyView)
    view = AdjacencyView({0: [1]})
    assert as_graph_query(view) is view
    with pytest.raises(TypeError):
        as_graph_query(42)


def test_degree_helpers_and_edges():
    view = NetworkXView(nx.star_graph(3))
    assert max_degree(view) == 3
    assert max_degree(AdjacencyView({})) == 0
    assert sorted(iter_edges(view)) == [(0, 1), (0, 2), (0, 3)]
    assert count_edges(view) == 3


def test_iter_edges_skips_self_loops():
    G = nx.Graph([(0, 1), (1, 1)])
    assert list(iter_edges(NetworkXView(G))) == [(0, 1)]


# ---- verify ----

def test_verify_feasible():
    G = nx.cycle_graph(4)
    rep = verify_coloring(G, {0: 1, 1: 2, 2: 1, 3: 2}, allowed_colors=[1, 2])
    assert rep["feasible"]
    assert rep["used_colors"] == [1, 2]
    assert rep["num_used_colors"] == 2
    assert rep["num_conflicts"] == 0


def test_verify_reports_problems():
    G = nx.path_graph(4)
    rep = verify_coloring(G, {0: 1, 1: 1, 2: 0, 3: True}, allowed_colors=[1, 2])
    assert not rep["feasible"]
    assert rep["num_conflicts"] == 1
    assert rep["conflicts_sample"] == [(0, 1, 1, 1)]
    assert sorted(rep["bad_nodes"]) == [2, 3]
    assert 2 in rep["out_of_range_nodes"]


def test_verify_missing_nodes():
    rep = verify_coloring(nx.path_graph(3), {0: 1, 1: 2})
    assert rep["missing_nodes"] == [2]
    assert rep["num_conflicts"] == 1
    assert not rep["feasible"]


def test_print_check_summary(capsys):
    rep = verify_coloring(nx.path_graph(2), {0: 1, 1: 1})
    print_check_summary(rep, prefix="[T] ")
    out = capsys.readouterr().out
    assert "[T] feasible=False|used_colors=1|conflicts=1" in out
    assert "conflicts_sample" in out


# ---- loaders ----

def test_load_dimacs_col(tmp_path):
    p = tmp_path / "tri.col"
    p.write_text("c triangle\np edge 4 3\ne 1 2\ne 2 3\ne 3 1\ne 4 4\n", encoding="utf-8")
    G = load_dimacs_col(p)
    assert G.number_of_nodes() == 4
    assert sorted(tuple(sorted(e)) for e in G.edges()) == [(0, 1), (0, 2), (1, 2)]


def test_load_dimacs_without_p_line(tmp_path):
    p = tmp_path / "noheader.col"
    p.write_text("e 1 3\n", encoding="utf-8")
    G = load_dimacs_col(p)
    assert G.number_of_nodes() == 3
    assert G.number_of_edges() == 1


def test_load_edgelist(tmp_path):
    p = tmp_path / "edges.txt"
    p.write_text("# comment\n10 20\n20 30\nbad line\n30 30\n", encoding="utf-8")
    G = load_edgelist_txt(p)
    assert sorted(G.nodes()) == [0, 1, 2]
    assert G.number_of_edges() == 2


def test_load_graph_dispatch(tmp_path):
    col = tmp_path / "g.col"
    col.write_text("p edge 2 1\ne 1 2\n", encoding="utf-8")
    assert load_graph(col).number_of_edges() == 1
    with pytest.raises(FileNotFoundError):
        load_graph(tmp_path / "missing.col")


# ---- baselines / clique ----

def test_baselines_are_one_based_and_valid():
    G = nx.petersen_graph()
    for col in (dsatur_coloring(G), smallest_last_coloring(G), run_baseline_coloring(G, "dsatur")):
        used = sorted(set(col.values()))
        assert used == list(range(1, len(used) + 1))
        assert verify_coloring(G, col)["feasible"]


def test_unknown_baseline():
    with pytest.raises(ValueError):
        run_baseline_coloring(nx.path_graph(2), "nope")


def test_greedy_max_clique():
    G = nx.complete_graph(4)
    G.add_edge(3, 4)
    clique = greedy_max_clique(G)
    assert sorted(clique) == [0, 1, 2, 3]
    assert greedy_max_clique(nx.Graph()) == []
