# visualisierung/draw.py
from __future__ import annotations
import os, re
import numbers
from typing import Dict, Hashable, List, Optional, Set, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

# Farben 1..12, danach zyklisch
PALETTE = [
    "#E63946", "#457B9D", "#2A9D8F", "#F4A261", "#8E44AD", "#F1C40F",
    "#7F8C8D", "#1ABC9C", "#D35400", "#27AE60", "#C2185B", "#5D6D7E",
]
UNCOLORED = "#DDDDDD"


def _sanitize_step(step: str) -> str:
    """Kleinbuchstaben, nur [a-z0-9-_]."""
    s = re.sub(r"[^a-z0-9\-_]+", "-", step.strip().lower())
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "step"


def color_for(c: int) -> str:
    """Palettenfarbe fuer eine 1-basierte Farbe."""
    return PALETTE[(int(c) - 1) % len(PALETTE)]


def _is_color(c) -> bool:
    return isinstance(c, numbers.Integral) and not isinstance(c, bool) and int(c) >= 1


def conflict_edges(G: nx.Graph, coloring: Dict[Hashable, int]) -> List[Tuple[Hashable, Hashable]]:
    """Kanten, deren Endpunkte dieselbe Farbe tragen."""
    out = []
    for u, v in G.edges():
        if u == v:
            continue
        cu, cv = coloring.get(u), coloring.get(v)
        if cu is not None and cu == cv:
            out.append((u, v))
    return out


def visualize_coloring(
    G: nx.Graph,
    coloring: Dict[Hashable, int],
    step: str,
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    pos: Optional[Dict] = None,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 150,
) -> str:
    """
    Zeichnet G mit der Faerbung und speichert ein PNG; Rueckgabe ist der Dateipfad.
      - Konfliktkanten und ihre Endknoten: schwarz
      - ungefaerbte Knoten: hellgrau
      - Beschriftung: Farbnummer
    """
    os.makedirs(out_dir, exist_ok=True)
    if pos is None:
        pos = nx.spring_layout(G, seed=layout_seed)

    bad = conflict_edges(G, coloring)
    bad_set = {frozenset(e) for e in bad}
    bad_nodes: Set[Hashable] = {x for e in bad for x in e}
    ok_edges = [e for e in G.edges() if frozenset(e) not in bad_set]

    fig = plt.figure(figsize=figure_size, dpi=dpi)
    if ok_edges:
        nx.draw_networkx_edges(G, pos, edgelist=ok_edges, width=0.6, alpha=0.35, edge_color="#AAAAAA")
    if bad:
        nx.draw_networkx_edges(G, pos, edgelist=bad, width=1.6, alpha=0.95, edge_color="black")

    nodes = list(G.nodes())
    fills = []
    for v in nodes:
        c = coloring.get(v)
        if v in bad_nodes:
            fills.append("black")
        elif _is_color(c):
            fills.append(color_for(c))
        else:
            fills.append(UNCOLORED)
    if nodes:
        nx.draw_networkx_nodes(G, pos, nodelist=nodes, node_color=fills,
                               edgecolors="#555555", linewidths=0.8, node_size=260)
    if show_labels:
        labels = {v: str(int(coloring[v])) for v in nodes if _is_color(coloring.get(v))}
        nx.draw_networkx_labels(G, pos, labels=labels, font_size=7)

    used = len({c for c in coloring.values() if _is_color(c)})
    plt.title(f"{step} - colors={used} - conflicts={len(bad)} "
              f"(colored {sum(1 for v in nodes if v in coloring)}/{G.number_of_nodes()})")
    plt.axis("off")
    plt.tight_layout()

    fname = f"step-{_sanitize_step(step)}_colors-{used:03d}_conflicts-{len(bad):03d}.png"
    fpath = os.path.join(out_dir, fname)
    fig.savefig(fpath, bbox_inches="tight")
    plt.close(fig)
    return fpath
