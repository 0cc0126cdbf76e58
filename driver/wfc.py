# driver/wfc.py
"""
Wave-Function-Collapse colouring driver.

One attempt works under a fixed palette 1..max_colors:
  Init   -> every vertex gets the full palette as its domain
  Seed   -> the highest-degree vertex is fixed to colour 1, then propagated
  Expand -> pick the uncoloured vertex with the fewest candidates, collapse it
            to its lowest candidate, propagate; repeat
An attempt is stuck when the only vertices left have empty domains. The
driver then widens the palette by one and starts over from scratch.
"""
import time
from typing import Any, Dict, Optional

from graph.contract import GraphQuery, Vertex, as_graph_query, describe, max_degree
from graph.verify import verify_coloring
from heuristics.entropy import pick_next_vertex, pick_seed_vertex
from heuristics.propagate import init_domains, propagate


def attempt_coloring(graph: GraphQuery, max_colors: int, verbose: bool = False) -> Dict[str, Any]:
    """
    Single attempt under `max_colors`. Never mutates the graph.
    Returns dict(ok, coloring, max_colors, stuck, forced, picked).
    """
    colors: Dict[Vertex, int] = {}
    domains = init_domains(graph, max_colors)
    forced = 0
    picked = 0
    stuck: Optional[Vertex] = None

    start = pick_seed_vertex(graph)
    if start is not None:
        colors[start] = 1
        picked += 1
        forced += propagate(graph, start, colors, domains)

    n = graph.vertex_count()
    while len(colors) < n:
        v = pick_next_vertex(graph, colors, domains)
        if v is None:
            break
        dom = domains[v]
        if not dom:
            stuck = v
            break
        colors[v] = dom[0]
        picked += 1
        forced += propagate(graph, v, colors, domains)

    assert len(colors) <= n, "more colours than vertices: inconsistent GraphQuery"
    ok = stuck is None
    if verbose:
        state = "done" if ok else f"stuck at {stuck!r}"
        print(f"  [Attempt] max_colors={max_colors} | picked={picked} | forced={forced} "
              f"| colored={len(colors)}/{n} | {state}")
    return dict(ok=ok, coloring=colors, max_colors=max_colors, stuck=stuck,
                forced=forced, picked=picked)


def run_wfc(G, verbose: bool = False) -> Dict[str, Any]:
    """
    Colour G (networkx graph, adjacency dict or GraphQuery) with escalating palettes.

    Result keys:
      coloring            vertex -> colour (1-based)
      UB                  number of distinct colours used
      max_colors          palette size of the successful attempt
      initial_max_colors  max_degree + 1
      attempts            attempts made (>= 1)
      stop_reason         "complete" | "empty"
      feasible, final_check
      runtime_sec
    """
    t0 = time.perf_counter()
    graph = as_graph_query(G)
    n = graph.vertex_count()
    max_colors = max_degree(graph) + 1
    initial = max_colors
    if verbose:
        print(f"[WFC] {describe(graph, dict(max_colors=max_colors))}")

    # once max_colors reaches |V| an injective colouring always fits
    max_attempts = max(1, n - initial + 1)
    attempts = 0
    while True:
        attempts += 1
        if verbose:
            print(f"[Attempt {attempts}] max_colors={max_colors}")
        res = attempt_coloring(graph, max_colors, verbose=verbose)
        if res["ok"]:
            break
        assert attempts < max_attempts, f"attempt bound exceeded ({attempts} attempts, |V|={n})"
        # stuck: nothing carries over except the wider palette
        max_colors += 1
        if verbose:
            print(f"  [Escalate] vertex {res['stuck']!r} has no legal colour - restart with max_colors={max_colors}")

    coloring = res["coloring"]
    rep = verify_coloring(graph, coloring, allowed_colors=range(1, max_colors + 1))
    dt = time.perf_counter() - t0
    if verbose:
        print(f"[WFC] done. attempts={attempts} | max_colors={max_colors} | used={rep['num_used_colors']} "
              f"| feasible={rep['feasible']} | t={dt:.4f}s")
    return dict(
        coloring=coloring,
        UB=rep["num_used_colors"],
        max_colors=max_colors,
        initial_max_colors=initial,
        attempts=attempts,
        stop_reason="complete" if n else "empty",
        feasible=rep["feasible"],
        final_check=rep,
        runtime_sec=dt,
    )


def wfc_color(G) -> Dict[Vertex, int]:
    """Valid (not necessarily minimal) 1-based colouring of G."""
    return run_wfc(G, verbose=False)["coloring"]
