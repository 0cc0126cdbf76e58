# graph/loader.py
import re
from pathlib import Path
from typing import List, Tuple, Union

import networkx as nx

PathLike = Union[str, Path]


def load_demo_graph(seed: int = 0, n: int = 100, p: float = 0.08) -> nx.Graph:
    # small random graph for quick runs
    return nx.erdos_renyi_graph(n=n, p=p, seed=seed)


def compact_node_labels(G: nx.Graph) -> nx.Graph:
    # nodes become 0..n-1 so every loader produces the same kind of labels
    return nx.convert_node_labels_to_integers(G, first_label=0, ordering="sorted")


_DIMACS_P_LINE = re.compile(r"^\s*p\s+(\w+)\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)
_DIMACS_E_LINE = re.compile(r"^\s*e\s+(\d+)\s+(\d+)\s*$", re.IGNORECASE)


def load_dimacs_col(path: PathLike) -> nx.Graph:
    """
    DIMACS .col:
      c comment
      p edge <n> <m>
      e u v
    Ids are 1-based in the file and 0-based in the returned graph.
    Without a p-line, n is inferred from the largest id seen.
    """
    path = Path(path)
    n_decl = None
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("c"):
                continue
            mp = _DIMACS_P_LINE.match(line)
            if mp:
                n_decl = int(mp.group(2))
                continue
            me = _DIMACS_E_LINE.match(line)
            if me:
                u, v = int(me.group(1)) - 1, int(me.group(2)) - 1
                if u != v:
                    edges.append((u, v))

    if n_decl is None:
        n_decl = max((max(u, v) for u, v in edges), default=-1) + 1

    G = nx.Graph()
    G.add_nodes_from(range(n_decl))
    G.add_edges_from(edges)
    return compact_node_labels(G)


def load_edgelist_txt(path: PathLike) -> nx.Graph:
    """
    Whitespace edge list, one "u v" per line; '#' and 'c' lines are comments.
    Integer ids of any range, relabelled to 0..n-1. Unparsable lines are skipped.
    """
    path = Path(path)
    edges: List[Tuple[int, int]] = []
    with path.open("r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            s = line.strip()
            if not s or s.startswith("#") or s.startswith("c"):
                continue
            parts = s.split()
            if len(parts) < 2:
                continue
            try:
                u, v = int(parts[0]), int(parts[1])
            except ValueError:
                continue
            if u != v:
                edges.append((u, v))
    G = nx.Graph()
    G.add_edges_from(edges)
    return compact_node_labels(G)


def load_graph(path: PathLike) -> nx.Graph:
    """Pick the loader by suffix: .col -> DIMACS, anything else -> edge list."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)
    if path.suffix.lower() == ".col":
        return load_dimacs_col(path)
    return load_edgelist_txt(path)
