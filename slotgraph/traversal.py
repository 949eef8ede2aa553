"""Breadth-first traversal producing a discovery tree."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Union

from .errors import UnknownVertex
from .logging_utils import apply_debug_logging
from .model import Vertex

if TYPE_CHECKING:  # pragma: no cover
    from .graph import Graph

logger = logging.getLogger(__name__)

DISCOVERED = "gray"
FINISHED = "black"


@dataclass(eq=False)
class Node:
    value: Any
    children: List["Node"] = field(default_factory=list)
    parent: Optional["Node"] = field(default=None, repr=False)

    @property
    def childless(self) -> bool:
        return not self.children

    @property
    def depth(self) -> int:
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def add_child_node(self, node: "Node") -> None:
        node.parent = self
        self.children.append(node)


class Tree:
    """Rooted tree; ``nodes`` lists every node in insertion order."""

    def __init__(self, root: Optional[Node] = None) -> None:
        self.root_node = root
        self.nodes: List[Node] = [root] if root is not None else []

    def add_child_to_node(self, node: Optional[Node], value: Any) -> Node:
        child = Node(value)
        if node is None:
            self.root_node = child
        else:
            node.add_child_node(child)
        self.nodes.append(child)
        return child

    def values(self) -> List[Any]:
        return [node.value for node in self.nodes]

    def find(self, value: Any) -> Optional[Node]:
        for node in self.nodes:
            if node.value == value:
                return node
        return None

    def depth_of(self, value: Any) -> int:
        node = self.find(value)
        if node is None:
            raise KeyError(value)
        return node.depth

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        root = self.root_node.value if self.root_node is not None else None
        return f"Tree(root={root!r}, nodes={len(self.nodes)})"


def bfs(graph: "Graph", start: Union[str, Vertex]) -> Tree:
    """Breadth-first search from ``start`` over ``graph.adjacency``.

    Neighbours are expanded in adjacency order, so the tree is deterministic
    for a given graph. Each reachable vertex appears once, at its hop
    distance from the root.
    """

    if isinstance(start, Vertex):
        root = next((v for v in graph.adjacency if v == start), None)
        if root is None:
            raise UnknownVertex(f"start vertex {start!r} is not part of the graph")
    else:
        root = graph.vertices.get(str(start))
        if root is None:
            raise UnknownVertex(f"unknown start vertex {start!r}")

    colors: Dict[Vertex, str] = {root: DISCOVERED}
    tree = Tree(Node(root))
    nodes: Dict[Vertex, Node] = {root: tree.root_node}

    queue = deque([root])
    while queue:
        current = queue.popleft()
        for neighbor in graph.adjacency[current]:
            if neighbor not in colors:
                colors[neighbor] = DISCOVERED
                nodes[neighbor] = tree.add_child_to_node(nodes[current], neighbor)
                queue.append(neighbor)
        colors[current] = FINISHED

    logger.debug("BFS from %s reached %d vertices", root.name, len(tree))
    return tree


apply_debug_logging(globals(), logger=logger, skip={"Node", "Tree"})
