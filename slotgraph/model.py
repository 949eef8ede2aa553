"""Value types: positions, vertices and edges."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, NamedTuple

from .errors import InvalidName, InvalidPosition, InvalidWeight

MIN_WEIGHT = 1
MAX_WEIGHT = 7


def is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Position(NamedTuple):
    """1-indexed slot coordinates ``(col, row)``."""

    col: int
    row: int

    @classmethod
    def coerce(cls, value: Any) -> "Position":
        if isinstance(value, Position):
            return value
        if isinstance(value, (str, bytes)) or not hasattr(value, "__len__") or len(value) != 2:
            raise InvalidPosition(f"position must be a (col, row) pair (got {value!r})")
        col, row = value
        if not (is_integer(col) and is_integer(row)):
            raise InvalidPosition(f"positions must be integers (got {value!r})")
        if col <= 0 or row <= 0:
            raise InvalidPosition(f"positions must be strictly positive (got {value!r})")
        return cls(int(col), int(row))


@dataclass(frozen=True, eq=False)
class Vertex:
    """Named vertex occupying one slot; identity is its position."""

    position: Position
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Position.coerce(self.position))
        if self.name is None:
            raise InvalidName("vertex name is missing")
        name = str(self.name)
        if not name:
            raise InvalidName("vertex name must be non-empty")
        object.__setattr__(self, "name", name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __lt__(self, other: "Vertex") -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return (self.position.row, self.position.col) < (other.position.row, other.position.col)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Vertex({self.name!r}, ({self.position.col}, {self.position.row}))"


@dataclass(frozen=True, eq=False)
class Edge:
    """Connection between two aligned vertices.

    ``weighted`` marks edges whose weight was sampled or supplied on purpose;
    only those are colour coded when drawn.
    """

    a: Vertex
    b: Vertex
    directed: bool = False
    weight: int = 1
    weighted: bool = False

    def __post_init__(self) -> None:
        if not (isinstance(self.a, Vertex) and isinstance(self.b, Vertex)):
            raise InvalidPosition(f"edge endpoints must be vertices (got {self.a!r}, {self.b!r})")
        if not is_integer(self.weight) or not MIN_WEIGHT <= self.weight <= MAX_WEIGHT:
            raise InvalidWeight(
                f"weight must be an integer in [{MIN_WEIGHT}, {MAX_WEIGHT}] (got {self.weight!r})"
            )
        object.__setattr__(self, "weight", int(self.weight))
        object.__setattr__(self, "directed", bool(self.directed))
        object.__setattr__(self, "weighted", bool(self.weighted))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        if self.a == other.a and self.b == other.b:
            return True
        return (
            not self.directed
            and not other.directed
            and self.a == other.b
            and self.b == other.a
        )

    def __hash__(self) -> int:
        return hash(frozenset((self.a.position, self.b.position)))

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        suffix = f", weight={self.weight}" if self.weighted else ""
        return f"Edge({self.a.name}{arrow}{self.b.name}{suffix})"
