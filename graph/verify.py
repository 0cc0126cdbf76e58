# graph/verify.py
import numbers
from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

from graph.contract import as_graph_query, iter_edges, iter_vertices


def _is_color(c: Any) -> bool:
    # colours are positive ints; bool is an Integral but never a colour
    return isinstance(c, numbers.Integral) and not isinstance(c, bool) and int(c) >= 1


def verify_coloring(
    G,
    coloring: Dict[Hashable, int],
    allowed_colors: Optional[Iterable[int]] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:
    """
    Check a 1-based colouring against G (networkx graph, adjacency dict or GraphQuery).
    Report keys: missing_nodes, bad_nodes, used_colors, num_used_colors,
    out_of_range_nodes, num_conflicts, conflicts_sample, feasible.
    """
    graph = as_graph_query(G)
    report: Dict[str, Any] = {}

    V = list(iter_vertices(graph))

    # completeness check
    missing_nodes = [v for v in V if v not in coloring]
    report["missing_nodes"] = missing_nodes

    bad_nodes = [v for v, c in coloring.items() if not _is_color(c)]
    report["bad_nodes"] = bad_nodes

    used_colors = sorted({c for c in coloring.values() if _is_color(c)})
    report["used_colors"] = used_colors
    report["num_used_colors"] = len(used_colors)

    # colour bound check
    out_of_range_nodes: List[Hashable] = []
    if allowed_colors is not None:
        allowed_set = set(allowed_colors)
        out_of_range_nodes = [v for v, c in coloring.items() if c not in allowed_set]
    report["out_of_range_nodes"] = out_of_range_nodes

    # conflicts check: uncoloured endpoints count as conflicts too
    conflicts: List[Tuple[Hashable, Hashable, Optional[int], Optional[int]]] = []
    for u, v in iter_edges(graph):
        cu = coloring.get(u)
        cv = coloring.get(v)
        if cu is None or cv is None or cu == cv:
            conflicts.append((u, v, cu, cv))
    report["num_conflicts"] = len(conflicts)
    report["conflicts_sample"] = conflicts[:sample_conflicts]

    report["feasible"] = (
        not missing_nodes
        and not bad_nodes
        and not out_of_range_nodes
        and not conflicts
    )
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:
    feasible = report.get("feasible", False)
    num_conflicts = report.get("num_conflicts", -1)
    num_used = report.get("num_used_colors", -1)
    print(f"{prefix}feasible={feasible}|used_colors={num_used}|conflicts={num_conflicts}")
    if feasible:
        return
    for key in ("missing_nodes", "out_of_range_nodes", "bad_nodes"):
        vals = report.get(key, [])
        if vals:
            print(f"{prefix}{key}(sample) ={vals[:10]}")
    if num_conflicts > 0:
        print(f"{prefix}conflicts_sample ={report.get('conflicts_sample', [])}")
