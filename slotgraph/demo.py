import numpy as np

from . import Graph, GraphOptions, format_adjacency, format_grid, format_tree

DEMO_OPTIONS = GraphOptions(
    x_slots=12,
    y_slots=8,
    vertex_density=0.2,
    edge_frequency=4,
    directed_freq=0.25,
    num_weights=5,
)


def run(seed: int = 2024):
    graph = Graph(options=DEMO_OPTIONS, rng=np.random.default_rng(seed))
    print(format_grid(graph.grid))
    print()
    print(format_adjacency(graph))

    start = next(iter(graph.vertices))
    print(f"\nBFS from {start}:")
    print(format_tree(graph.bfs(start)))


if __name__ == "__main__":
    run()
