"""Glyph rendering of edges onto a :class:`~slotgraph.grid.Grid`."""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

from .alignment import classify, is_diagonal
from .errors import InvalidWeight, UnalignedEdge
from .grid import Grid
from .model import MAX_WEIGHT, MIN_WEIGHT, Edge, Position, Vertex, is_integer

ENDPOINT_GLYPH = "*"

HORIZONTAL_GLYPH = "-"
VERTICAL_GLYPH = "|"
DIAGONAL_DOWN_GLYPH = "\\"
DIAGONAL_UP_GLYPH = "/"

ARROW_GLYPHS = {
    "right": ">",
    "left": "<",
    "top": "^",
    "bottom": "v",
    "bottomright": "┘",
    "topleft": "┌",
    "topright": "┐",
    "bottomleft": "└",
}

Cell = Tuple[Tuple[int, int], str]


def colorize(glyph: str, weight: Optional[int]) -> str:
    """Wrap ``glyph`` in the terminal colour escape for ``weight``."""

    if weight is None:
        return glyph
    if not is_integer(weight) or not MIN_WEIGHT <= weight <= MAX_WEIGHT:
        raise InvalidWeight(
            f"weight must be an integer in [{MIN_WEIGHT}, {MAX_WEIGHT}] (got {weight!r})"
        )
    return f"\033[{30 + int(weight)}m{glyph}\033[0m"


def _as_position(value: Any) -> Position:
    if isinstance(value, Vertex):
        return value.position
    return Position.coerce(value)


def _horizontal_cells(lower: int, higher: int, row: int) -> List[Cell]:
    cells: List[Cell] = [((lower, row), "right")]
    for col in range(lower + 1, higher):
        cells.append(((col, row), "left"))
        cells.append(((col, row), "right"))
    cells.append(((higher, row), "left"))
    return cells


def _vertical_cells(lower: int, higher: int, col: int) -> List[Cell]:
    cells: List[Cell] = [((col, lower), "bottom")]
    for row in range(lower + 1, higher):
        cells.append(((col, row), "top"))
        cells.append(((col, row), "bottom"))
    cells.append(((col, higher), "top"))
    return cells


def _diagonal_cells(lower: Position, higher: Position) -> Tuple[List[Cell], str]:
    # lower has the smaller column; the row step decides the slope
    if lower.row < higher.row:
        step, near, far, glyph = 1, "bottomright", "topleft", DIAGONAL_DOWN_GLYPH
    else:
        step, near, far, glyph = -1, "topright", "bottomleft", DIAGONAL_UP_GLYPH

    cells: List[Cell] = [((lower.col, lower.row), near)]
    col, row = lower.col + 1, lower.row + step
    while col < higher.col:
        cells.append(((col, row), far))
        cells.append(((col, row), near))
        col += 1
        row += step
    cells.append(((higher.col, higher.row), far))
    return cells, glyph


def add_line(
    grid: Grid,
    start: Any,
    end: Any,
    directed: bool = False,
    weight: Optional[int] = None,
) -> None:
    """Draw the line from ``start`` to ``end`` into ``grid``.

    The far endpoint cell gets ``*``: the destination for directed lines, the
    endpoint with the larger column (larger row for vertical lines) otherwise.
    Cells already holding other lines are overwritten.
    """

    start = _as_position(start)
    end = _as_position(end)
    if start == end:
        return

    if start.row == end.row:
        lower, higher = sorted((start.col, end.col))
        cells = _horizontal_cells(lower, higher, start.row)
        glyph = HORIZONTAL_GLYPH
        end_is_higher = end.col > start.col
    elif start.col == end.col:
        lower, higher = sorted((start.row, end.row))
        cells = _vertical_cells(lower, higher, start.col)
        glyph = VERTICAL_GLYPH
        end_is_higher = end.row > start.row
    elif is_diagonal(start, end):
        low, high = (start, end) if start.col < end.col else (end, start)
        cells, glyph = _diagonal_cells(low, high)
        end_is_higher = end.col > start.col
    else:
        raise UnalignedEdge(f"positions {tuple(start)} and {tuple(end)} are not aligned")

    if directed:
        glyph = ARROW_GLYPHS[classify(start, end).direction]
        endpoint_index = -1 if end_is_higher else 0
    else:
        endpoint_index = -1

    line_glyph = colorize(glyph, weight)
    endpoint_glyph = colorize(ENDPOINT_GLYPH, weight)
    for position, section in cells:
        grid.update_position(position, line_glyph, section)
    position, section = cells[endpoint_index]
    grid.update_position(position, endpoint_glyph, section)


def draw_edge(grid: Grid, edge: Edge) -> None:
    add_line(
        grid,
        edge.a.position,
        edge.b.position,
        edge.directed,
        edge.weight if edge.weighted else None,
    )
