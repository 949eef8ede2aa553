"""Random, collision-free placement of named vertices."""

from __future__ import annotations

import logging
import string
from typing import Iterable, List, Optional

import numpy as np

from .config import DEFAULT_RESERVED_NAMES
from .errors import PlacementExhausted
from .grid import Grid
from .model import Vertex

logger = logging.getLogger(__name__)

ATTEMPTS_PER_SLOT = 100


def name_sequence(reserved: Iterable[str] = DEFAULT_RESERVED_NAMES) -> List[str]:
    """Return the vertex name pool: digits, lowercase, uppercase, minus ``reserved``."""

    skip = set(reserved)
    pool = string.digits + string.ascii_lowercase + string.ascii_uppercase
    return [ch for ch in pool if ch not in skip]


def default_attempt_cap(grid: Grid) -> int:
    return ATTEMPTS_PER_SLOT * grid.slot_count


def place_random(
    grid: Grid,
    name: str,
    rng: np.random.Generator,
    max_attempts: Optional[int] = None,
) -> Vertex:
    """Place ``name`` on a uniformly random empty slot of ``grid``.

    Keeping the vertex count below the slot count is up to the caller; a grid
    without empty slots, or bad luck beyond ``max_attempts`` draws, raises
    :class:`PlacementExhausted`.
    """

    if not grid.empty_slots():
        raise PlacementExhausted(f"no empty slot left on {grid!r} for vertex {name!r}")

    cap = max_attempts if max_attempts is not None else default_attempt_cap(grid)
    for attempt in range(1, cap + 1):
        x_pos = int(rng.integers(grid.x_slots)) + 1
        y_pos = int(rng.integers(grid.y_slots)) + 1
        if grid.slot_empty(x_pos, y_pos):
            vertex = Vertex((x_pos, y_pos), name)
            grid.set_slot(vertex.position, vertex.name)
            logger.debug("Placed vertex %s at (%d, %d) after %d draw(s)", name, x_pos, y_pos, attempt)
            return vertex

    raise PlacementExhausted(f"no empty slot found for vertex {name!r} within {cap} attempts")
