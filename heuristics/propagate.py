# heuristics/propagate.py
from typing import Dict, List

from graph.contract import GraphQuery, Vertex, iter_vertices


def init_domains(graph: GraphQuery, max_colors: int) -> Dict[Vertex, List[int]]:
    """Every vertex starts with the full palette 1..max_colors."""
    return {v: list(range(1, max_colors + 1)) for v in iter_vertices(graph)}


def propagate(
    graph: GraphQuery,
    start: Vertex,
    colors: Dict[Vertex, int],
    domains: Dict[Vertex, List[int]],
) -> int:
    """
    Forward checking from a freshly fixed vertex `start`.

    Pops fixed vertices off an explicit stack and strikes their colour from the
    domains of uncoloured neighbours. A neighbour whose domain drops to a single
    candidate is fixed to it right away and pushed, so the constraint cascades.
    Both `colors` and `domains` are updated in place.

    Returns the number of vertices that were forced (start itself not counted).
    """
    forced = 0
    stack = [start]
    while stack:
        u = stack.pop()
        c = colors.get(u)
        if c is None:
            continue
        for w in graph.neighbors(u):
            if w in colors:
                continue
            dom = domains.get(w)
            if dom is None or c not in dom:
                continue
            dom.remove(c)
            # an emptied domain is left for the driver to notice
            if len(dom) == 1:
                colors[w] = dom[0]
                stack.append(w)
                forced += 1
    return forced
