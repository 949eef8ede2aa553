"""Exception types raised by the layout and traversal engine."""


class SlotGraphError(Exception):
    """Base class for every error raised by :mod:`slotgraph`."""


class InvalidPosition(SlotGraphError, ValueError):
    """Raised for non-integer, non-positive or out-of-bounds coordinates."""


class InvalidName(SlotGraphError, ValueError):
    """Raised when a vertex name is missing, empty or duplicated."""


class InvalidWeight(SlotGraphError, ValueError):
    """Raised when an edge weight is not an integer in ``[1, 7]``."""


class InvalidSection(SlotGraphError, ValueError):
    """Raised for an unknown slot section tag."""


class UnknownVertex(SlotGraphError, LookupError):
    """Raised when a vertex is not part of the graph."""


class PlacementExhausted(SlotGraphError, RuntimeError):
    """Raised when random placement cannot find an empty slot."""


class OutOfBounds(SlotGraphError, IndexError):
    """Raised when a cell index falls outside the writable surface."""


class UnalignedEdge(SlotGraphError, ValueError):
    """Raised when a line is requested between two unaligned positions."""


class ConfigurationError(SlotGraphError, ValueError):
    """Raised by :meth:`GraphOptions.validate` for unusable settings."""
