# graph/clique.py
from typing import Hashable, List

from graph.contract import as_graph_query, degree, iter_vertices


def greedy_max_clique(G) -> List[Hashable]:
    """
    Greedy maximal clique (not guaranteed maximum); its size is a lower bound
    on the number of colours any valid colouring needs.
    """
    graph = as_graph_query(G)
    adj = {v: set(graph.neighbors(v)) for v in iter_vertices(graph)}
    # highest degree first, index order on ties
    nodes = sorted(adj, key=lambda v: degree(graph, v), reverse=True)
    clique: List[Hashable] = []
    for v in nodes:
        if all(u in adj[v] for u in clique):
            clique.append(v)
    return clique
