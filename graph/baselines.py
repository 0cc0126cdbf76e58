# graph/baselines.py
# networkx greedy colourings, remapped to contiguous 1-based colours so they
# line up with the WFC output.
from typing import Dict, Hashable

import networkx as nx

BASELINE_STRATEGIES = {
    "dsatur": "DSATUR",
    "slo": "smallest_last",
}


def _greedy_1based(G: nx.Graph, strategy: str) -> Dict[Hashable, int]:
    raw = nx.coloring.greedy_color(G, strategy=strategy)
    used = sorted(set(raw.values()))
    remap = {c: i + 1 for i, c in enumerate(used)}
    return {v: remap[c] for v, c in raw.items()}


def dsatur_coloring(G: nx.Graph) -> Dict[Hashable, int]:
    return _greedy_1based(G, BASELINE_STRATEGIES["dsatur"])


def smallest_last_coloring(G: nx.Graph) -> Dict[Hashable, int]:
    return _greedy_1based(G, BASELINE_STRATEGIES["slo"])


def run_baseline_coloring(G: nx.Graph, algo: str) -> Dict[Hashable, int]:
    if algo not in BASELINE_STRATEGIES:
        raise ValueError(f"Unknown baseline algo: {algo}")
    return _greedy_1based(G, BASELINE_STRATEGIES[algo])
