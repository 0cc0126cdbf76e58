# main.py
import argparse
import time

from graph.baselines import run_baseline_coloring
from graph.clique import greedy_max_clique
from graph.loader import load_demo_graph, load_graph
from graph.verify import verify_coloring, print_check_summary
from driver.wfc import run_wfc


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Wave-Function-Collapse graph colouring")
    ap.add_argument("--algo", default="wfc", choices=["wfc", "dsatur", "slo"])
    ap.add_argument("--input", default=None, help="DIMACS .col or edge-list file; demo graph if omitted")
    ap.add_argument("--seed", type=int, default=0, help="seed of the demo graph")
    ap.add_argument("--verbose", action="store_true")
    ap.add_argument("--viz-out", default="visualisierung/picture")
    ap.add_argument("--viz-layout-seed", type=int, default=42)
    ap.add_argument("--no-viz", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    G = load_graph(args.input) if args.input else load_demo_graph(seed=args.seed)
    LB = len(greedy_max_clique(G))
    print(f"[Main] algo={args.algo} | |V|={G.number_of_nodes()} |E|={G.number_of_edges()} | LB={LB}")

    if args.algo == "wfc":
        res = run_wfc(G, verbose=args.verbose)
        col, rep = res["coloring"], res["final_check"]
        print(f"[WFC] colors={res['UB']} | max_colors={res['max_colors']} "
              f"(init {res['initial_max_colors']}) | attempts={res['attempts']} | time={res['runtime_sec']:.4f}s")
    else:
        t0 = time.perf_counter()
        col = run_baseline_coloring(G, args.algo)
        dt = time.perf_counter() - t0
        rep = verify_coloring(G, col)
        print(f"[{args.algo.upper()}] colors={rep['num_used_colors']} | time={dt:.4f}s")

    print_check_summary(rep, prefix=f"[{args.algo.upper()}] ")

    if not args.no_viz:
        from visualisierung.draw import visualize_coloring
        path = visualize_coloring(G, col, step=f"Final-{args.algo}",
                                  out_dir=args.viz_out, layout_seed=args.viz_layout_seed)
        print(f"[Main] picture -> {path}")
    return 0 if rep["feasible"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
