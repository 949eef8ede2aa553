"""Configuration for grid and graph generation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

MAX_WEIGHTS = 7
DEFAULT_RESERVED_NAMES = "v"


@dataclass
class GraphOptions:
    """Settings shared by :class:`~slotgraph.grid.Grid` and :class:`~slotgraph.graph.Graph`."""

    x_slots: int = 10
    y_slots: int = 10
    vertex_density: float = 0.1
    num_vertices: Optional[int] = None
    edge_frequency: int = 3
    directed_freq: float = 0.0
    num_weights: Optional[int] = None
    empty_char: str = "."
    border_char: str = "x"
    reserved_names: str = DEFAULT_RESERVED_NAMES
    max_placement_attempts: Optional[int] = None

    @property
    def slot_count(self) -> int:
        return self.x_slots * self.y_slots

    @property
    def weighting_enabled(self) -> bool:
        return bool(self.num_weights)

    def resolved_vertex_count(self) -> int:
        if self.num_vertices is not None:
            return int(self.num_vertices)
        return int(self.vertex_density * self.slot_count)

    def validate(self) -> None:
        for key in ("x_slots", "y_slots"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{key} must be a positive integer (got {value!r})")
        if not 0.0 <= float(self.vertex_density) <= 1.0:
            raise ConfigurationError(
                f"vertex_density must lie in [0, 1] (got {self.vertex_density!r})"
            )
        if self.num_vertices is not None and int(self.num_vertices) < 0:
            raise ConfigurationError(f"num_vertices must be >= 0 (got {self.num_vertices!r})")
        if int(self.edge_frequency) < 0:
            raise ConfigurationError(f"edge_frequency must be >= 0 (got {self.edge_frequency!r})")
        if not 0.0 <= float(self.directed_freq) <= 1.0:
            raise ConfigurationError(
                f"directed_freq must lie in [0, 1] (got {self.directed_freq!r})"
            )
        if self.num_weights is not None:
            if (
                isinstance(self.num_weights, bool)
                or not isinstance(self.num_weights, int)
                or not 0 <= self.num_weights <= MAX_WEIGHTS
            ):
                raise ConfigurationError(
                    f"num_weights must be an integer in 0..{MAX_WEIGHTS} (got {self.num_weights!r})"
                )
        for key in ("empty_char", "border_char"):
            value = getattr(self, key)
            if not isinstance(value, str) or len(value) != 1 or value == " ":
                raise ConfigurationError(f"{key} must be a single visible character (got {value!r})")
        if self.empty_char == self.border_char:
            raise ConfigurationError("empty_char and border_char must differ")
        if self.max_placement_attempts is not None and int(self.max_placement_attempts) <= 0:
            raise ConfigurationError(
                f"max_placement_attempts must be positive (got {self.max_placement_attempts!r})"
            )
