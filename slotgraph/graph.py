"""Graph assembly: vertices, edges, adjacency and the grid they are drawn on."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union

import numpy as np

from .config import GraphOptions
from .edges import generate_edges_for_vertex
from .alignment import classify
from .errors import ConfigurationError, InvalidName, InvalidPosition, UnalignedEdge, UnknownVertex
from .grid import Grid
from .lines import draw_edge
from .logging_utils import apply_debug_logging
from .model import Edge, Vertex
from .placement import name_sequence, place_random
from .traversal import Tree, bfs

logger = logging.getLogger(__name__)

Adjacency = Dict[Vertex, List[Vertex]]
VertexRef = Union[str, Vertex]


class Graph:
    """Vertices and edges laid out on a :class:`Grid`.

    With ``vertices`` (and optionally ``edges``) the graph is taken as given:
    the adjacency is derived and everything is drawn onto ``grid``. Without
    them, vertices are placed at random and edges generated per vertex, using
    ``options`` and ``rng``.
    """

    def __init__(
        self,
        grid: Optional[Grid] = None,
        *,
        vertices: Optional[Union[Mapping[str, Vertex], Iterable[Vertex]]] = None,
        edges: Optional[Iterable[Edge]] = None,
        num_vertices: Optional[int] = None,
        options: Optional[GraphOptions] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.options = options or GraphOptions()
        self.options.validate()
        self.grid = grid if grid is not None else Grid.from_options(self.options)
        self.vertices: Dict[str, Vertex] = {}
        self.edges: List[Edge] = []
        self.adjacency: Adjacency = {}

        if vertices is not None:
            self._adopt(vertices, edges or ())
            self.adjacency = self.build_adjacency()
            self.add_to_board()
        else:
            self._generate(num_vertices, rng if rng is not None else np.random.default_rng())

        logger.info(
            "Built graph with %d vertices and %d edges on %dx%d slots",
            len(self.vertices),
            len(self.edges),
            self.grid.x_slots,
            self.grid.y_slots,
        )

    def _adopt(
        self,
        vertices: Union[Mapping[str, Vertex], Iterable[Vertex]],
        edges: Iterable[Edge],
    ) -> None:
        items = vertices.values() if isinstance(vertices, Mapping) else vertices
        by_position: Dict[Vertex, Vertex] = {}
        for vertex in items:
            if not isinstance(vertex, Vertex):
                raise InvalidPosition(f"expected a Vertex, got {vertex!r}")
            if vertex.name in self.vertices:
                raise InvalidName(f"duplicate vertex name {vertex.name!r}")
            if vertex in by_position:
                raise InvalidPosition(
                    f"vertices {by_position[vertex].name!r} and {vertex.name!r} share position "
                    f"{tuple(vertex.position)}"
                )
            if not self.grid.contains(vertex.position):
                raise InvalidPosition(
                    f"vertex {vertex.name!r} at {tuple(vertex.position)} lies outside "
                    f"the {self.grid.x_slots}x{self.grid.y_slots} grid"
                )
            self.vertices[vertex.name] = vertex
            by_position[vertex] = vertex

        for edge in edges:
            for end in (edge.a, edge.b):
                if end not in by_position:
                    raise UnknownVertex(f"edge {edge!r} references unknown vertex {end!r}")
            if edge.a != edge.b and not classify(edge.a, edge.b).aligned:
                raise UnalignedEdge(
                    f"edge {edge!r} joins {tuple(edge.a.position)} and {tuple(edge.b.position)}, "
                    "which are not aligned"
                )
            self.edges.append(edge)

    def _generate(self, num_vertices: Optional[int], rng: np.random.Generator) -> None:
        count = num_vertices if num_vertices is not None else self.options.resolved_vertex_count()
        if count < 0:
            raise ConfigurationError(f"vertex count must be >= 0 (got {count!r})")
        # a name equal to the empty-slot marker would leave its slot looking free
        names = name_sequence(set(self.options.reserved_names) | {self.options.empty_char})
        if count > len(names):
            logger.warning("Limiting vertices number to valid names (%d > %d)", count, len(names))
            count = len(names)

        for name in names[:count]:
            vertex = place_random(self.grid, name, rng, self.options.max_placement_attempts)
            self.vertices[vertex.name] = vertex
            self.adjacency[vertex] = []

        for vertex in self.vertices.values():
            new_edges = generate_edges_for_vertex(vertex, self.vertices, self.grid, self.options, rng)
            self.edges.extend(new_edges)
            for edge in new_edges:
                self._link(self.adjacency, edge)

    @staticmethod
    def _link(adjacency: Adjacency, edge: Edge) -> None:
        adjacency[edge.a].append(edge.b)
        if not edge.directed:
            adjacency[edge.b].append(edge.a)

    def build_adjacency(self) -> Adjacency:
        """Derive the adjacency lists from ``vertices`` and ``edges`` in edge order."""

        adjacency: Adjacency = {vertex: [] for vertex in self.vertices.values()}
        canonical = {vertex: vertex for vertex in adjacency}
        for edge in self.edges:
            a = canonical[edge.a]
            b = canonical[edge.b]
            adjacency[a].append(b)
            if not edge.directed:
                adjacency[b].append(a)
        return adjacency

    def add_to_board(self) -> None:
        for vertex in self.vertices.values():
            self.grid.set_slot(vertex.position, vertex.name)
        for edge in self.edges:
            draw_edge(self.grid, edge)

    def vertex(self, ref: VertexRef) -> Vertex:
        """Resolve a vertex name or an equal :class:`Vertex` to the graph's own vertex."""

        if isinstance(ref, Vertex):
            for vertex in self.adjacency:
                if vertex == ref:
                    return vertex
            raise UnknownVertex(f"vertex {ref!r} is not part of the graph")
        try:
            return self.vertices[str(ref)]
        except KeyError as exc:
            raise UnknownVertex(f"unknown vertex {ref!r}") from exc

    def neighbors(self, ref: VertexRef) -> List[Vertex]:
        return list(self.adjacency[self.vertex(ref)])

    def bfs(self, start: VertexRef) -> Tree:
        return bfs(self, start)

    def __contains__(self, ref: object) -> bool:
        if isinstance(ref, Vertex):
            return ref in self.adjacency
        return ref in self.vertices

    def __len__(self) -> int:
        return len(self.vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self.vertices)}, edges={len(self.edges)}, grid={self.grid!r})"


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"Graph.vertex", "Graph.neighbors", "Graph._link", "Graph.build_adjacency"},
)
