"""Alignment and compass direction between two slot positions."""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

from .model import Position, Vertex


class Alignment(NamedTuple):
    direction: Optional[str]
    aligned: bool


def _position(value: Any) -> Position:
    if isinstance(value, Vertex):
        return value.position
    return Position.coerce(value)


def classify(a: Any, b: Any) -> Alignment:
    """Return the direction from ``a`` to ``b`` and whether a straight line joins them.

    The direction is the vertical part (``top``/``bottom``) followed by the
    horizontal part (``left``/``right``). It is only meaningful when
    ``aligned`` is true.
    """

    pa = _position(a)
    pb = _position(b)
    if pa == pb:
        return Alignment(None, False)

    aligned = False
    direction = ""

    if pa.row < pb.row:
        direction = "bottom"
    elif pa.row > pb.row:
        direction = "top"
    else:
        aligned = True

    if pa.col < pb.col:
        direction += "right"
    elif pa.col > pb.col:
        direction += "left"
    else:
        aligned = True

    if is_diagonal(pa, pb):
        aligned = True

    return Alignment(direction, aligned)


def is_diagonal(a: Position, b: Position) -> bool:
    return abs(a.col - b.col) == abs(a.row - b.row)
