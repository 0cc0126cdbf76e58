# graph/contract.py
"""
Read-only graph access used by the colouring core.

The core never touches a concrete graph type. It only needs:
  - vertex_count()         number of vertices
  - vertex_bound()         size of the dense index range 0..bound-1
  - from_index(i) / to_index(v)
  - neighbors(v)           adjacent vertices (same result on every call)

Adjacency is assumed to be symmetric (undirected). This is a precondition
and is not checked here.
"""
from __future__ import annotations
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Optional, Tuple

from typing import Protocol, runtime_checkable

import networkx as nx

Vertex = Hashable


@runtime_checkable
class GraphQuery(Protocol):
    def vertex_count(self) -> int: ...

    def vertex_bound(self) -> int: ...

    def from_index(self, i: int) -> Vertex: ...

    def to_index(self, v: Vertex) -> int: ...

    def neighbors(self, v: Vertex) -> Iterable[Vertex]: ...


class NetworkXView:
    """
    GraphQuery over a networkx.Graph. Dense index = node insertion order.
    The view is a snapshot of the node order; mutating G afterwards is not supported.
    """

    def __init__(self, G: nx.Graph):
        if G.is_directed():
            raise TypeError("directed graphs are not supported; pass G.to_undirected()")
        self.G = G
        self._nodes: List[Vertex] = list(G.nodes())
        self._index: Dict[Vertex, int] = {v: i for i, v in enumerate(self._nodes)}

    def vertex_count(self) -> int:
        return self.G.number_of_nodes()

    def vertex_bound(self) -> int:
        return len(self._nodes)

    def from_index(self, i: int) -> Vertex:
        return self._nodes[i]

    def to_index(self, v: Vertex) -> int:
        return self._index[v]

    def neighbors(self, v: Vertex) -> Iterable[Vertex]:
        return self.G.neighbors(v)

    def __repr__(self) -> str:
        return f"NetworkXView(|V|={self.G.number_of_nodes()}, |E|={self.G.number_of_edges()})"


class AdjacencyView:
    """
    GraphQuery over a plain adjacency mapping {node: [neighbor, ...]}.
    Keys come first in the index; nodes that only appear as neighbours follow.
    """

    def __init__(self, adj: Mapping[Vertex, Iterable[Vertex]]):
        self._adj: Dict[Vertex, List[Vertex]] = {u: list(vs) for u, vs in adj.items()}
        self._nodes: List[Vertex] = list(self._adj.keys())
        self._index: Dict[Vertex, int] = {v: i for i, v in enumerate(self._nodes)}
        for vs in list(self._adj.values()):
            for v in vs:
                if v not in self._index:
                    self._index[v] = len(self._nodes)
                    self._nodes.append(v)
                    self._adj[v] = []

    def vertex_count(self) -> int:
        return len(self._nodes)

    def vertex_bound(self) -> int:
        return len(self._nodes)

    def from_index(self, i: int) -> Vertex:
        return self._nodes[i]

    def to_index(self, v: Vertex) -> int:
        return self._index[v]

    def neighbors(self, v: Vertex) -> Iterable[Vertex]:
        return self._adj[v]

    def __repr__(self) -> str:
        return f"AdjacencyView(|V|={len(self._nodes)})"


def as_graph_query(G: Any) -> GraphQuery:
    """Wrap G so it satisfies GraphQuery; objects that already do are returned as-is."""
    if isinstance(G, nx.Graph):
        return NetworkXView(G)
    if isinstance(G, GraphQuery):
        return G
    if isinstance(G, Mapping):
        return AdjacencyView(G)
    raise TypeError(f"unsupported graph type: {type(G).__name__}")


def iter_vertices(graph: GraphQuery) -> Iterator[Vertex]:
    for i in range(graph.vertex_bound()):
        yield graph.from_index(i)


def degree(graph: GraphQuery, v: Vertex) -> int:
    return sum(1 for _ in graph.neighbors(v))


def max_degree(graph: GraphQuery) -> int:
    return max((degree(graph, v) for v in iter_vertices(graph)), default=0)


def iter_edges(graph: GraphQuery) -> Iterator[Tuple[Vertex, Vertex]]:
    """Each undirected edge once, as (u, v) with index(u) < index(v). Self-loops are skipped."""
    seen = set()
    for u in iter_vertices(graph):
        iu = graph.to_index(u)
        for v in graph.neighbors(u):
            iv = graph.to_index(v)
            if iu == iv:
                continue
            key = (iu, iv) if iu < iv else (iv, iu)
            if key in seen:
                continue
            seen.add(key)
            yield (u, v) if iu < iv else (v, u)


def count_edges(graph: GraphQuery) -> int:
    return sum(1 for _ in iter_edges(graph))


def describe(graph: GraphQuery, extra: Optional[Dict[str, Any]] = None) -> str:
    n = graph.vertex_count()
    m = count_edges(graph)
    s = f"|V|={n} |E|={m} max_degree={max_degree(graph)}"
    if extra:
        s += " " + " ".join(f"{k}={v}" for k, v in extra.items())
    return s
