"""Random edge generation between aligned vertices."""

from __future__ import annotations

import logging
from typing import List, Mapping

import numpy as np

from .alignment import classify
from .config import GraphOptions
from .grid import Grid
from .lines import add_line
from .logging_utils import apply_debug_logging
from .model import Edge, Vertex

logger = logging.getLogger(__name__)


def sample_candidates(
    vertices: Mapping[str, Vertex], k: int, rng: np.random.Generator
) -> List[Vertex]:
    """Pick up to ``k`` distinct vertices in random order."""

    names = list(vertices)
    count = min(int(k), len(names))
    if count <= 0:
        return []
    picked = rng.choice(len(names), size=count, replace=False)
    return [vertices[names[int(idx)]] for idx in picked]


def generate_edges_for_vertex(
    vertex: Vertex,
    vertices: Mapping[str, Vertex],
    grid: Grid,
    options: GraphOptions,
    rng: np.random.Generator,
) -> List[Edge]:
    """Connect ``vertex`` to sampled aligned neighbours and draw each new edge.

    Only the cell right next to ``vertex`` is checked for a previous line, so
    a new line may still cross the interior of an existing one.
    """

    new_edges: List[Edge] = []
    for candidate in sample_candidates(vertices, options.edge_frequency, rng):
        if candidate == vertex:
            continue
        direction, aligned = classify(vertex, candidate)
        if not aligned or not grid.direction_empty(vertex.position, direction):
            continue

        directed = bool(rng.random() < options.directed_freq)
        weight = None
        if options.weighting_enabled:
            weight = int(rng.integers(options.num_weights)) + 1
        edge = Edge(
            vertex,
            candidate,
            directed=directed,
            weight=weight if weight is not None else 1,
            weighted=weight is not None,
        )
        new_edges.append(edge)
        add_line(grid, vertex.position, candidate.position, directed, weight)

    logger.debug("Vertex %s gained %d edge(s)", vertex.name, len(new_edges))
    return new_edges


apply_debug_logging(globals(), logger=logger, skip={"sample_candidates"})
