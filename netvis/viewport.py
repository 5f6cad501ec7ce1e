"""View state of a drawn graph: zoom, panning, selection and draw colors."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence

from .model import GRAY, GREEN, MAGENTA, ORANGE, RED, YELLOW, Color, Node

__all__ = ["Viewport"]

_HIGHLIGHTS = (RED, ORANGE, YELLOW, GREEN)
_ZOOM_FACTOR = 0.9
_HIT_HALF = 5.0
_EDGE_HALF = 3.0
_SELECTED_SIZE = 7.0
_NORMAL_SIZE = 5.0


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _contains_odd_even(polygon: Sequence[tuple[float, float]], px: float, py: float) -> bool:
    inside = False
    previous = polygon[-1]
    for current in polygon:
        (x1, y1), (x2, y2) = previous, current
        if (y1 > py) != (y2 > py):
            cross_x = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
            if px < cross_x:
                inside = not inside
        previous = current
    return inside


class Viewport:
    """Nodes as shown on a canvas of ``width`` by ``height`` pixels."""

    def __init__(self, width: float = 800, height: float = 600) -> None:
        self.nodes: list[Node] = []
        self.width = 1.0
        self.height = 1.0
        self.resize(width, height)
        self.clicked_node: int | None = None
        self.clicked_edge: int | None = None
        self.last_pos: tuple[float, float] | None = None

    def set_nodes(self, nodes: Sequence[Node]) -> None:
        """Show a copy of ``nodes``, clearing any selection."""
        self.nodes = [dataclasses.replace(n, neighbors=list(n.neighbors)) for n in nodes]
        self.clicked_node = None
        self.clicked_edge = None

    def resize(self, width: float, height: float) -> None:
        """Change the canvas size in pixels."""
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def zoom(self, delta: int, x: float, y: float) -> None:
        """Zoom about pixel ``(x, y)`` for a wheel movement of ``delta`` eighths of a degree.

        Each full 15-degree step away from the user shrinks the view by 0.9.
        """
        steps = _trunc_div(_trunc_div(int(delta), -8), 15)
        scale = _ZOOM_FACTOR ** steps
        cx = x / self.width
        cy = y / self.height
        for node in self.nodes:
            node.x = (node.x - cx) * scale + cx
            node.y = (node.y - cy) * scale + cy
            node.size *= scale

    def _pixel(self, index: int) -> tuple[float, float]:
        node = self.nodes[index]
        return node.x * self.width, node.y * self.height

    def press(self, x: float, y: float) -> bool:
        """Select the node or edge under pixel ``(x, y)``; return whether one was hit."""
        self.last_pos = (x, y)

        for index in range(len(self.nodes)):
            nx, ny = self._pixel(index)
            if nx - _HIT_HALF <= x <= nx + _HIT_HALF and ny - _HIT_HALF <= y <= ny + _HIT_HALF:
                self.clicked_node = index
                self.nodes[index].size = _SELECTED_SIZE
                return True

        for index, neighbor in self.edges():
            x1, y1 = self._pixel(index)
            x2, y2 = self._pixel(neighbor)
            if ((x2 - x1) ** 2 + (y2 - y1) ** 2) ** 0.5 < 1e-4:
                continue
            polygon = (
                (x1 - _EDGE_HALF, y1 - _EDGE_HALF),
                (x1 + _EDGE_HALF, y1 + _EDGE_HALF),
                (x2 + _EDGE_HALF, y2 + _EDGE_HALF),
                (x2 - _EDGE_HALF, y2 - _EDGE_HALF),
            )
            if _contains_odd_even(polygon, x, y):
                self.clicked_edge = index
                self.nodes[index].size = _SELECTED_SIZE
                self.nodes[neighbor].size = _SELECTED_SIZE
                return True
        return False

    def release(self) -> None:
        """End a selection, restoring the sizes of the selected nodes."""
        if self.clicked_node is not None:
            self.nodes[self.clicked_node].size = _NORMAL_SIZE
            self.clicked_node = None

        if self.clicked_edge is not None:
            start = self.nodes[self.clicked_edge]
            start.size = _NORMAL_SIZE
            if start.neighbors:
                end = start.neighbors[0]
                if end == self.clicked_edge and len(start.neighbors) > 1:
                    end = start.neighbors[1]
                self.nodes[end].size = _NORMAL_SIZE
            self.clicked_edge = None

    def drag(self, x: float, y: float) -> bool:
        """Pan all nodes with the pointer unless something is selected; return whether it panned."""
        if self.clicked_node is not None or self.clicked_edge is not None:
            return False
        if self.last_pos is None:
            self.last_pos = (x, y)
            return False
        dx = (x - self.last_pos[0]) / self.width
        dy = (y - self.last_pos[1]) / self.height
        for node in self.nodes:
            node.x += dx
            node.y += dy
        self.last_pos = (x, y)
        return True

    def node_color(self, index: int) -> Color:
        """Color to draw node ``index`` with."""
        if index == self.clicked_node:
            return MAGENTA
        color = self.nodes[index].color
        return color if color in _HIGHLIGHTS else GRAY

    def edge_color(self, index: int, neighbor: int) -> Color:
        """Color to draw the edge from node ``index`` to node ``neighbor`` with."""
        if self.clicked_edge is not None and self.clicked_edge in (index, neighbor):
            return MAGENTA
        ends = (self.nodes[index].color, self.nodes[neighbor].color)
        for color in _HIGHLIGHTS:
            if color in ends:
                return color
        return GRAY

    def edges(self) -> list[tuple[int, int]]:
        """Every adjacency entry as ``(index, neighbor)``, in drawing order."""
        return [
            (index, neighbor)
            for index, node in enumerate(self.nodes)
            for neighbor in node.neighbors
        ]