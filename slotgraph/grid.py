"""Character surface holding the rendered graph.

Each logical slot ``(x, y)`` (1-indexed) owns a 3x3 block of cells. The block
is addressed through nine named sections; the outer ring of the surface is a
fixed border that rendering never touches.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from .errors import InvalidSection, OutOfBounds

logger = logging.getLogger(__name__)

BLANK = " "

# section -> (col offset, row offset) relative to (3x, 3y)
SECTIONS: Dict[str, Tuple[int, int]] = {
    "center": (-1, -1),
    "top": (-1, -2),
    "bottom": (-1, 0),
    "left": (-2, -1),
    "right": (0, -1),
    "topleft": (-2, -2),
    "topright": (0, -2),
    "bottomleft": (-2, 0),
    "bottomright": (0, 0),
}


def section_index(x: int, y: int, section: str) -> Tuple[int, int]:
    """Return the 0-indexed ``(col, row)`` cell of ``section`` in slot ``(x, y)``."""

    try:
        dx, dy = SECTIONS[section]
    except KeyError as exc:
        raise InvalidSection(f"Invalid section: {section!r}") from exc
    return x * 3 + dx, y * 3 + dy


class Grid:
    """Bounded slot grid rendered into a numpy object array."""

    def __init__(
        self,
        x_slots: int = 10,
        y_slots: int = 10,
        empty_char: str = ".",
        border_char: str = "x",
    ) -> None:
        self.x_slots = int(x_slots)
        self.y_slots = int(y_slots)
        self.empty_char = empty_char
        self.border_char = border_char
        self.display_matrix = self._initial_matrix()
        logger.debug(
            "Allocated %dx%d slot grid (%dx%d cells)",
            self.x_slots,
            self.y_slots,
            self.width,
            self.height,
        )

    @classmethod
    def from_options(cls, options: Any) -> "Grid":
        return cls(
            x_slots=options.x_slots,
            y_slots=options.y_slots,
            empty_char=options.empty_char,
            border_char=options.border_char,
        )

    @property
    def height(self) -> int:
        return self.y_slots * 3 + 2

    @property
    def width(self) -> int:
        return self.x_slots * 3 + 2

    @property
    def slot_count(self) -> int:
        return self.x_slots * self.y_slots

    def _initial_matrix(self) -> np.ndarray:
        matrix = np.full((self.height, self.width), BLANK, dtype=object)
        matrix[0, :] = self.border_char
        matrix[-1, :] = self.border_char
        matrix[:, 0] = self.border_char
        matrix[:, -1] = self.border_char
        # slot centres sit at rows/cols 2, 5, 8, ...
        matrix[2:-1:3, 2:-1:3] = self.empty_char
        return matrix

    def contains(self, position: Sequence[int]) -> bool:
        x, y = position
        return 1 <= x <= self.x_slots and 1 <= y <= self.y_slots

    def _cell(self, x: int, y: int, section: str) -> Tuple[int, int]:
        col, row = section_index(x, y, section)
        if not (1 <= col <= self.width - 2 and 1 <= row <= self.height - 2):
            raise OutOfBounds(
                f"section {section!r} of slot ({x}, {y}) maps to cell ({col}, {row}) "
                f"outside the {self.width}x{self.height} surface interior"
            )
        return col, row

    def char_at(self, x: int, y: int, section: str) -> str:
        col, row = self._cell(x, y, section)
        return self.display_matrix[row, col]

    def slot_empty(self, x: int, y: int) -> bool:
        return self.char_at(x, y, "center") == self.empty_char

    def direction_empty(self, position: Sequence[int], direction: str) -> bool:
        x, y = position
        return self.char_at(x, y, direction) == BLANK

    def update_position(self, position: Sequence[int], char: str, section: str) -> None:
        x, y = position
        col, row = self._cell(x, y, section)
        self.display_matrix[row, col] = char

    def set_slot(self, position: Sequence[int], char: str) -> None:
        self.update_position(position, char, "center")

    def empty_slots(self) -> List[Tuple[int, int]]:
        centres = self.display_matrix[2:-1:3, 2:-1:3]
        rows, cols = np.nonzero(centres == self.empty_char)
        return [(int(c) + 1, int(r) + 1) for r, c in zip(rows, cols)]

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.display_matrix]

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.display_matrix]

    def copy(self) -> "Grid":
        clone = Grid.__new__(Grid)
        clone.x_slots = self.x_slots
        clone.y_slots = self.y_slots
        clone.empty_char = self.empty_char
        clone.border_char = self.border_char
        clone.display_matrix = self.display_matrix.copy()
        return clone

    def __repr__(self) -> str:
        return f"Grid(x_slots={self.x_slots}, y_slots={self.y_slots})"
