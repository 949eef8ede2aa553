"""Example: generate a seeded random board and print every vertex's BFS tree size."""

import numpy as np

from slotgraph import Graph, GraphOptions, bfs, format_grid


def main() -> None:
    options = GraphOptions(x_slots=15, y_slots=10, vertex_density=0.15, edge_frequency=5)
    graph = Graph(options=options, rng=np.random.default_rng(123))
    print(format_grid(graph.grid))
    for name in graph.vertices:
        tree = bfs(graph, name)
        print(f"{name}: reaches {len(tree)} vertices")


if __name__ == "__main__":
    main()
