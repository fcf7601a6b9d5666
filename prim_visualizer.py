import argparse
import random

from graph_source import random_vertex, random_weighted_graph, sample_graph
from mst_visualizer import MatplotlibColorSink
from prim_runner import PrimRunner


def build_parser():
    parser = argparse.ArgumentParser(description="Step-by-step visualization of Prim's minimum spanning tree algorithm")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random graph and start vertex")
    parser.add_argument("--start", default=None,
                        help="Start vertex (default: random vertex)")
    parser.add_argument("--delay", type=float, default=1.5,
                        help="Seconds to pause between steps (0 disables the pause)")
    parser.add_argument("--sample", action="store_true",
                        help="Use the fixed A-G sample graph instead of a random one")
    parser.add_argument("--no-show", action="store_true",
                        help="Do not keep the final figure open")
    return parser


def resolve_start(source, name):
    # Vertices of random graphs are ints, command line values are strings
    for vertex in source.vertices():
        if str(vertex) == name:
            return vertex
    return None


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    source = sample_graph() if args.sample else random_weighted_graph(rng)
    if args.start is None:
        start = random_vertex(source, rng)
    else:
        start = resolve_start(source, args.start)
        if start is None:
            parser.error(f"start vertex {args.start!r} is not in the graph {source.vertices()}")

    sink = MatplotlibColorSink(source, delay=args.delay,
                               title=f"Prim's Algorithm Visualization (Starting from Node {start})")
    runner = PrimRunner(source, sink)
    sink.watch("Spanning Tree", runner.tree_edges)
    sink.watch("Spanning Tree Vertices", runner.tree_vertices)

    print(f"--- Graph with {len(source.vertices())} vertices and {len(source.edges())} edges ---")
    print(f"Start with node {start}")
    runner.initialize(start)
    while True:
        sink.pause()
        edge = runner.step()
        if edge is None:
            print("No more edges to add to spanning tree")
            break
        print(f"Added edge {edge}")

    print(f"Final MST Found! Total Weight: {round(runner.total_weight, 1)}")
    if not args.no_show:
        sink.show()
    else:
        sink.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
