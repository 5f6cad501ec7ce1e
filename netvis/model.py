"""Core data types shared by the readers, layouts and views."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "Color",
    "Node",
    "DARK_GRAY",
    "GRAY",
    "RED",
    "ORANGE",
    "YELLOW",
    "GREEN",
    "MAGENTA",
]


@dataclass(frozen=True)
class Color:
    """An opaque RGB color with 8-bit components."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"color component {name}={value} is outside 0..255")

    def hex(self) -> str:
        """Return the color as a ``#rrggbb`` string."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


DARK_GRAY = Color(128, 128, 128)
GRAY = Color(0x66, 0x66, 0x66)
RED = Color(255, 0, 0)
ORANGE = Color(255, 140, 0)
YELLOW = Color(255, 255, 0)
GREEN = Color(0, 255, 0)
MAGENTA = Color(255, 0, 255)


@dataclass
class Node:
    """A graph node: relative position on the canvas, appearance and adjacency.

    ``x`` and ``y`` are relative coordinates, normally within ``[0, 1]``;
    ``neighbors`` holds zero-based indices of adjacent nodes.
    """

    x: float = 0.0
    y: float = 0.0
    color: Color = DARK_GRAY
    size: float = 5.0
    name: str = ""
    id: int = 0
    neighbors: list[int] = field(default_factory=list)

    def degree(self) -> int:
        """Number of adjacency entries of this node."""
        return len(self.neighbors)