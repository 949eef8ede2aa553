from .alignment import Alignment, classify
from .config import GraphOptions
from .errors import (
    ConfigurationError,
    InvalidName,
    InvalidPosition,
    InvalidSection,
    InvalidWeight,
    OutOfBounds,
    PlacementExhausted,
    SlotGraphError,
    UnalignedEdge,
    UnknownVertex,
)
from .grid import Grid, SECTIONS, section_index
from .lines import add_line, colorize, draw_edge
from .model import Edge, Position, Vertex
from .placement import name_sequence, place_random
from .edges import generate_edges_for_vertex
from .graph import Graph
from .traversal import Node, Tree, bfs
from .printer import format_adjacency, format_grid, format_tree

__all__ = [
    'Alignment',
    'classify',
    'GraphOptions',
    'SlotGraphError',
    'ConfigurationError',
    'InvalidName',
    'InvalidPosition',
    'InvalidSection',
    'InvalidWeight',
    'OutOfBounds',
    'PlacementExhausted',
    'UnalignedEdge',
    'UnknownVertex',
    'Grid',
    'SECTIONS',
    'section_index',
    'add_line',
    'colorize',
    'draw_edge',
    'Edge',
    'Position',
    'Vertex',
    'name_sequence',
    'place_random',
    'generate_edges_for_vertex',
    'Graph',
    'Node',
    'Tree',
    'bfs',
    'format_adjacency',
    'format_grid',
    'format_tree',
]
