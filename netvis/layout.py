"""Layout algorithms and degree-based highlighting for node lists.

Every function works on a list of :class:`~netvis.model.Node` in place and
leaves coordinates relative to the canvas, within ``[0, 1]``.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from .model import DARK_GRAY, GREEN, ORANGE, RED, YELLOW, Node

__all__ = [
    "random_layout",
    "force_directed_layout",
    "circle_layout",
    "densest_nodes",
    "highlight_densest",
]

_STEP = 0.1
_START_TEMPERATURE = 1000.0
_MIN_TEMPERATURE = 1.0
_COOLING_RATE = 0.99

_CIRCLE_CENTER = 50.0
_CIRCLE_RADIUS = 48.0
_CANVAS = 100.0

_DENSE_COLORS = (RED, ORANGE, YELLOW, GREEN)


def random_layout(nodes: Sequence[Node], rng: random.Random | None = None) -> None:
    """Place every node uniformly at random and reset its color."""
    rng = rng or random.Random()
    for node in nodes:
        node.x = rng.random()
        node.y = rng.random()
        node.color = DARK_GRAY


def force_directed_layout(nodes: Sequence[Node], rng: random.Random | None = None) -> None:
    """Spring-embedder layout with simulated cooling, normalised to ``[0, 1]``."""
    rng = rng or random.Random()
    for node in nodes:
        node.x = rng.random() * _CANVAS
        node.y = rng.random() * _CANVAS
        node.color = DARK_GRAY
    if not nodes:
        return

    temperature = _START_TEMPERATURE
    while temperature > _MIN_TEMPERATURE:
        for i, a in enumerate(nodes):
            for b in nodes[i + 1:]:
                dx = a.x - b.x
                dy = a.y - b.y
                distance = math.hypot(dx, dy)
                if distance != 0.0:
                    repulsion = _STEP * _STEP / distance
                    a.x += dx / distance * repulsion
                    a.y += dy / distance * repulsion
                    b.x -= dx / distance * repulsion
                    b.y -= dy / distance * repulsion

        for a in nodes:
            for neighbor in a.neighbors:
                b = nodes[neighbor]
                dx = a.x - b.x
                dy = a.y - b.y
                attraction = dx * dx + dy * dy
                if attraction != 0.0:
                    attraction /= _STEP
                    a.x -= dx / attraction
                    a.y -= dy / attraction
                    b.x += dx / attraction
                    b.y += dy / attraction

        temperature *= _COOLING_RATE

    _normalise(nodes)


def _normalise(nodes: Sequence[Node]) -> None:
    min_x = min(node.x for node in nodes)
    max_x = max(node.x for node in nodes)
    min_y = min(node.y for node in nodes)
    max_y = max(node.y for node in nodes)
    span_x = max_x - min_x
    span_y = max_y - min_y
    for node in nodes:
        node.x = (node.x - min_x) / span_x if span_x else 0.0
        node.y = (node.y - min_y) / span_y if span_y else 0.0


def circle_layout(nodes: Sequence[Node]) -> None:
    """Spread the nodes evenly on a circle, the first one step past angle zero."""
    if not nodes:
        return
    step = 2 * math.pi / len(nodes)
    for number, node in enumerate(nodes, start=1):
        angle = step * number
        node.x = (_CIRCLE_CENTER + _CIRCLE_RADIUS * math.cos(angle)) / _CANVAS
        node.y = (_CIRCLE_CENTER + _CIRCLE_RADIUS * math.sin(angle)) / _CANVAS
        node.color = DARK_GRAY


def densest_nodes(nodes: Sequence[Node]) -> tuple[int, int, int, int]:
    """Indices of the four nodes of highest degree, densest first.

    Every slot starts at node 0 and is only taken over by a node of strictly
    higher degree, so slots may repeat when fewer nodes outrank node 0.
    """
    if not nodes:
        raise ValueError("cannot rank the nodes of an empty graph")
    top = [0, 0, 0, 0]
    for index, node in enumerate(nodes):
        degree = node.degree()
        for slot in range(4):
            if degree > nodes[top[slot]].degree():
                top[slot + 1:] = top[slot:3]
                top[slot] = index
                break
    return top[0], top[1], top[2], top[3]


def highlight_densest(nodes: Sequence[Node]) -> tuple[int, int, int, int]:
    """Color the four densest nodes red, orange, yellow and green; return them."""
    ranked = densest_nodes(nodes)
    for index, color in zip(ranked, _DENSE_COLORS):
        nodes[index].color = color
    return ranked