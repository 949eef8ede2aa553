import argparse
import logging
import sys
import time
from typing import Optional, Sequence

import numpy as np

from slotgraph import (
    Graph,
    GraphOptions,
    Grid,
    SlotGraphError,
    bfs,
    format_adjacency,
    format_grid,
    format_tree,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lay out a random grid graph and walk it breadth-first")
    parser.add_argument("--height", type=int, default=10, help="Grid height in slots (default: 10)")
    parser.add_argument("--width", type=int, default=10, help="Grid width in slots (default: 10)")
    parser.add_argument(
        "--density",
        type=float,
        default=10.0,
        help="Percentage of slots holding a vertex (default: 10)",
    )
    parser.add_argument(
        "--edge-frequency",
        type=int,
        default=3,
        help="Candidate neighbours sampled per vertex (default: 3)",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=1,
        help="Number of graphs to build; the board is only printed for 1 (default: 1)",
    )
    parser.add_argument(
        "--directed-freq",
        type=float,
        default=0.0,
        help="Probability that a generated edge is directed (default: 0)",
    )
    parser.add_argument(
        "--weights",
        type=int,
        default=None,
        help="Number of distinct edge weights, 0-7 (default: unweighted)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible layouts")
    parser.add_argument("--empty-char", default=".", help="Character for empty slots (default: .)")
    parser.add_argument("--border-char", default="x", help="Border character (default: x)")
    parser.add_argument("--start", help="Vertex name to start the breadth-first search from")
    parser.add_argument(
        "--adjacency",
        action="store_true",
        help="Also print the adjacency lists",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    _configure_logging(args.log_level)

    options = GraphOptions(
        x_slots=args.width,
        y_slots=args.height,
        vertex_density=args.density / 100.0,
        edge_frequency=args.edge_frequency,
        directed_freq=args.directed_freq,
        num_weights=args.weights,
        empty_char=args.empty_char,
        border_char=args.border_char,
    )
    rng = np.random.default_rng(args.seed)

    graph = None
    try:
        options.validate()
        for run in range(max(args.repeat, 1)):
            started = time.perf_counter()
            grid = Grid.from_options(options)
            graph = Graph(grid, options=options, rng=rng)
            logger.info("Run %d: built graph in %.6fs", run + 1, time.perf_counter() - started)
    except SlotGraphError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    if args.repeat > 1:
        return

    print(format_grid(graph.grid))

    if args.adjacency:
        print(format_adjacency(graph))

    if not graph.vertices:
        logger.warning("Graph has no vertices; skipping breadth-first search")
        return

    start = args.start if args.start is not None else next(iter(graph.vertices))
    try:
        tree = bfs(graph, start)
    except SlotGraphError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print(f"BFS from {start}:")
    print(format_tree(tree))


if __name__ == "__main__":
    main(sys.argv[1:])
