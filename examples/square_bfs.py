"""Example: draw a hand-made square graph and walk it breadth-first."""

from slotgraph import Edge, Graph, Grid, Vertex, bfs, format_grid, format_tree


def main() -> None:
    vertices = [
        Vertex((3, 3), "1"),
        Vertex((3, 5), "2"),
        Vertex((5, 5), "3"),
        Vertex((5, 3), "4"),
    ]
    edges = [
        Edge(vertices[0], vertices[1]),
        Edge(vertices[1], vertices[2], directed=True),
        Edge(vertices[2], vertices[3], weight=4, weighted=True),
        Edge(vertices[3], vertices[0]),
        Edge(vertices[0], vertices[2]),
    ]
    graph = Graph(Grid(6, 6), vertices=vertices, edges=edges)
    print(format_grid(graph.grid))
    print(format_tree(bfs(graph, "2")))


if __name__ == "__main__":
    main()
