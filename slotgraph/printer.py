"""Plain-text rendering of grids, BFS trees and adjacency lists."""

from typing import List

from .graph import Graph
from .grid import Grid
from .traversal import Node, Tree


def format_grid(grid: Grid) -> str:
    return "\n".join(grid.lines())


def _branch_lines(node: Node, indent: str) -> List[str]:
    lines: List[str] = []
    last = len(node.children) - 1
    for idx, child in enumerate(node.children):
        lines.append(f"{indent}+---{child.value}")
        if idx == last:
            lines.extend(_branch_lines(child, indent + "    "))
        else:
            lines.extend(_branch_lines(child, indent + "|   "))
            lines.append(f"{indent}|")
    return lines


def format_tree(tree: Tree) -> str:
    """Render ``tree`` as indented ``+---`` branches under the root value."""

    if tree.root_node is None:
        return ""
    lines = [str(tree.root_node.value)]
    lines.extend(_branch_lines(tree.root_node, ""))
    return "\n".join(lines)


def format_adjacency(graph: Graph) -> str:
    lines: List[str] = []
    for vertex, neighbors in graph.adjacency.items():
        col, row = vertex.position
        lines.append(f"Vertex '{vertex.name}' ({col}, {row}) is connected to:")
        for neighbor in neighbors:
            ncol, nrow = neighbor.position
            lines.append(f"     - Vertex '{neighbor.name}' ({ncol}, {nrow})")
    return "\n".join(lines)
