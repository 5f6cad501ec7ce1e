import math
import random

import pytest

from netvis.model import DARK_GRAY, ORANGE, RED
from netvis.session import LayoutKind, Session, build_nodes


def test_build_nodes_adjacency():
    nodes = build_nodes([(1, 2), (2, 3)])
    assert [n.neighbors for n in nodes] == [[1], [0, 2], [1]]


def test_build_nodes_count_is_largest_number():
    nodes = build_nodes([(1, 5)])
    assert len(nodes) == 5
    assert [n.degree() for n in nodes] == [1, 0, 0, 0, 1]


def test_build_nodes_empty():
    assert build_nodes([]) == []


def test_build_nodes_rejects_zero():
    with pytest.raises(ValueError):
        build_nodes([(0, 2)])


def test_load_links_publishes_copy():
    received = []
    session = Session(on_change=received.append)
    session.load_links([(1, 2)])
    assert len(received) == 1
    received[0][0].neighbors.append(7)
    assert session.nodes[0].neighbors == [1]


def test_load_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("1 2\n2 3\n3 1\n", encoding="utf-8")
    session = Session()
    session.load_file(path)
    assert [sorted(n.neighbors) for n in session.nodes] == [[1, 2], [0, 2], [0, 1]]


def test_circle_layout_on_circle():
    session = Session()
    session.load_links([(1, 2), (2, 3), (3, 4)])
    session.layout(LayoutKind.CIRCLE)
    for node in session.nodes:
        assert math.hypot(node.x - 0.5, node.y - 0.5) == pytest.approx(0.48)
        assert node.color == DARK_GRAY


def test_random_layout_is_seeded_and_bounded():
    first = Session(rng=random.Random(3))
    second = Session(rng=random.Random(3))
    for session in (first, second):
        session.load_links([(1, 2), (2, 3)])
        session.layout(1)
    a = [(n.x, n.y) for n in first.nodes]
    b = [(n.x, n.y) for n in second.nodes]
    assert a == b
    assert all(0.0 <= v <= 1.0 for pair in a for v in pair)


def test_force_directed_normalised():
    session = Session(rng=random.Random(1))
    session.load_links([(1, 2), (2, 3), (3, 4), (4, 1)])
    session.layout(LayoutKind.FORCE_DIRECTED)
    xs = [n.x for n in session.nodes]
    ys = [n.y for n in session.nodes]
    assert min(xs) == pytest.approx(0.0)
    assert max(xs) == pytest.approx(1.0)
    assert min(ys) == pytest.approx(0.0)
    assert max(ys) == pytest.approx(1.0)


def test_emphasize_keeps_positions_and_colors_densest():
    session = Session()
    session.load_links([(1, 2), (2, 3), (2, 4), (3, 4)])
    session.layout(LayoutKind.CIRCLE)
    before = [(n.x, n.y) for n in session.nodes]
    session.layout(None, emphasize_dense=True)
    nodes = session.nodes
    assert [(n.x, n.y) for n in nodes] == before
    assert nodes[1].color == RED
    assert nodes[2].color == ORANGE


def test_emphasize_on_empty_graph():
    received = []
    session = Session(on_change=received.append)
    session.layout(None, emphasize_dense=True)
    assert received == [[]]


def test_invalid_layout_kind():
    session = Session()
    with pytest.raises(ValueError):
        session.layout(9)