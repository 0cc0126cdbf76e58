# experiments/runner_basic.py
import argparse
import csv
import time
from typing import Any, Dict, List, Tuple

import networkx as nx

from graph.baselines import run_baseline_coloring
from graph.clique import greedy_max_clique
from graph.verify import verify_coloring
from driver.wfc import run_wfc


def default_instances() -> List[Tuple[str, nx.Graph]]:
    return [
        ("K6", nx.complete_graph(6)),
        ("C9", nx.cycle_graph(9)),
        ("Petersen", nx.petersen_graph()),
        ("Grid5x5", nx.grid_2d_graph(5, 5)),
        ("ER60_p006", nx.erdos_renyi_graph(60, 0.06, seed=0)),
        ("RR100_d10", nx.random_regular_graph(10, 100, seed=0)),
    ]


def run_one(G: nx.Graph, inst: str, algo: str) -> Dict[str, Any]:
    t0 = time.perf_counter()
    attempts = 0
    if algo == "wfc":
        res = run_wfc(G, verbose=False)
        rep = res["final_check"]
        attempts = res["attempts"]
    elif algo in ("dsatur", "slo"):
        col = run_baseline_coloring(G, algo)
        rep = verify_coloring(G, col)
    else:
        raise ValueError(f"Unknown algo: {algo}")
    dt = time.perf_counter() - t0

    LB = len(greedy_max_clique(G))
    return {
        "instance": inst,
        "n": G.number_of_nodes(),
        "m": G.number_of_edges(),
        "algo": algo,
        "LB": LB,
        "UB": rep["num_used_colors"],
        "gap": rep["num_used_colors"] - LB,
        "feasible": rep["feasible"],
        "conflicts": rep["num_conflicts"],
        "runtime_sec": dt,
        "attempts": attempts,
    }


def run_suite(instances, algos=("wfc", "dsatur", "slo")) -> List[Dict[str, Any]]:
    rows = []
    for name, G in instances:
        for algo in algos:
            rows.append(run_one(G, name, algo))
    return rows


def write_csv(rows: List[Dict[str, Any]], out: str) -> None:
    with open(out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", default="results_basic.csv")
    ap.add_argument("--algos", default="wfc,dsatur,slo")
    args = ap.parse_args()

    algos = [a.strip() for a in args.algos.split(",") if a.strip()]
    rows = run_suite(default_instances(), algos)
    for r in rows:
        print(f"[{r['algo']:6s}] {r['instance']:12s} LB={r['LB']} UB={r['UB']} "
              f"feasible={r['feasible']} t={r['runtime_sec']:.4f}s")
    write_csv(rows, args.out)
    print(f"Wrote {len(rows)} rows -> {args.out}")


if __name__ == "__main__":
    main()
