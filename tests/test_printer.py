from slotgraph.graph import Graph
from slotgraph.grid import Grid
from slotgraph.model import Edge, Vertex
from slotgraph.printer import format_adjacency, format_grid, format_tree
from slotgraph.traversal import Tree, bfs


def _square_graph():
    v1 = Vertex((3, 3), '1')
    v2 = Vertex((3, 5), '2')
    v3 = Vertex((5, 5), '3')
    v4 = Vertex((5, 3), '4')
    edges = [Edge(v1, v2), Edge(v2, v3), Edge(v3, v4), Edge(v4, v1)]
    return Graph(Grid(6, 6), vertices=[v1, v2, v3, v4], edges=edges)


def test_format_tree_draws_branches():
    tree = bfs(_square_graph(), '1')

    assert format_tree(tree) == '1\n+---2\n|   +---3\n|\n+---4'


def test_format_tree_nested_last_child_uses_spaces():
    tree = Tree()
    root = tree.add_child_to_node(None, 'r')
    a = tree.add_child_to_node(root, 'a')
    tree.add_child_to_node(a, 'b')

    assert format_tree(tree) == 'r\n+---a\n    +---b'


def test_format_tree_empty():
    assert format_tree(Tree()) == ''


def test_format_grid_joins_rows():
    grid = Grid(1, 1)

    assert format_grid(grid) == 'xxxxx\nx   x\nx . x\nx   x\nxxxxx'


def test_format_adjacency_lists_neighbours():
    text = format_adjacency(_square_graph())

    lines = text.splitlines()
    assert lines[0] == "Vertex '1' (3, 3) is connected to:"
    assert lines[1] == "     - Vertex '2' (3, 5)"
    assert lines[2] == "     - Vertex '4' (5, 3)"
    assert len(lines) == 12
