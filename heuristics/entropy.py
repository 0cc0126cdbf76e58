# heuristics/entropy.py
import math
from typing import Dict, List, Optional

from graph.contract import GraphQuery, Vertex, degree, iter_vertices


def entropy(v: Vertex, colors: Dict[Vertex, int], domains: Dict[Vertex, List[int]]) -> int:
    """Remaining candidates of v; 0 once v is fixed (or has no domain)."""
    if v in colors:
        return 0
    return len(domains.get(v, ()))


def pick_seed_vertex(graph: GraphQuery) -> Optional[Vertex]:
    """
    Highest-degree vertex, first in index order on ties.
    None for an empty graph.
    """
    best, best_deg = None, -1
    for v in iter_vertices(graph):
        d = degree(graph, v)
        if d > best_deg:
            best, best_deg = v, d
    return best


def pick_next_vertex(
    graph: GraphQuery,
    colors: Dict[Vertex, int],
    domains: Dict[Vertex, List[int]],
) -> Optional[Vertex]:
    """
    Minimum-remaining-values choice among uncoloured vertices.
    An exhausted domain ranks last (infinite entropy), so it only comes back
    when nothing else is left. Ties keep index order. None if all are fixed.
    """
    best, best_e = None, None
    for v in iter_vertices(graph):
        if v in colors:
            continue
        e = entropy(v, colors, domains)
        key = e if e > 0 else math.inf
        if best_e is None or key < best_e:
            best, best_e = v, key
    return best
