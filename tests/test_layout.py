import math

import pytest

from graph_api import generate, circular_layout
from graph_api.model import Graph


def square() -> Graph:
    g = Graph()
    g.add_nodes(["a", "b", "c", "d"])
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    return g


def distance(pos, center) -> float:
    return math.hypot(pos.x - center[0], pos.y - center[1])


def test_positions_evenly_spaced_starting_right_of_center():
    g = square()
    order = circular_layout(g, (0, 0), 10)

    assert order == ["a", "b", "c", "d"]
    assert g.has_layout()
    assert g.position_of("a") == pytest.approx((10.0, 0.0))
    assert g.position_of("b") == pytest.approx((0.0, 10.0), abs=1e-9)
    assert g.position_of("c") == pytest.approx((-10.0, 0.0), abs=1e-9)
    assert g.position_of("d") == pytest.approx((0.0, -10.0), abs=1e-9)


def test_every_node_positioned_on_circle():
    g = generate(24, 0.05)
    order = g.circular_layout([400, 400], 200)
    assert len(order) == g.node_count()
    for node in g.nodes():
        assert distance(g.position_of(node), (400, 400)) == pytest.approx(200)


def test_same_parameters_reuse_cache(monkeypatch):
    """A repeat call with equal center and radius does not store a new layout."""
    g = square()
    circular_layout(g, (5, 5), 3)
    first = g.positions()

    calls = []
    original = g.store_layout
    monkeypatch.setattr(g, "store_layout", lambda *args: calls.append(args) or original(*args))

    assert circular_layout(g, [5.0, 5.0], 3.0) == ["a", "b", "c", "d"]
    assert calls == []
    assert g.positions() == first


def test_different_radius_recomputes():
    g = square()
    circular_layout(g, (0, 0), 10)
    circular_layout(g, (0, 0), 25)
    for node in g.nodes():
        assert distance(g.position_of(node), (0, 0)) == pytest.approx(25)

    # and back again: positions reflect the most recent request
    circular_layout(g, (0, 0), 10)
    for node in g.nodes():
        assert distance(g.position_of(node), (0, 0)) == pytest.approx(10)


def test_different_center_recomputes():
    g = square()
    circular_layout(g, (0, 0), 10)
    circular_layout(g, (100, -50), 10)
    assert g.position_of("a") == pytest.approx((110.0, -50.0))


def test_nodes_added_after_layout_are_positioned_on_next_call():
    """A node added after layout forces a full recompute over the new node count."""
    g = square()
    circular_layout(g, (0, 0), 10)
    g.add_node("e")
    assert g.position_of("e") is None

    circular_layout(g, (0, 0), 10)
    assert g.position_of("e") is not None
    # five nodes now: b moved to 72 degrees
    angle = math.atan2(g.position_of("b").y, g.position_of("b").x)
    assert angle == pytest.approx(2 * math.pi / 5)


def test_inherited_positions_are_replaced_by_repeat_layout():
    """Inheriting positions invalidates the cache, so the same call lays out again."""
    parent = square()
    circular_layout(parent, (0, 0), 100)

    sub = Graph()
    sub.add_nodes(["a", "b"])
    circular_layout(sub, (50, 50), 1)
    sub.inherit_positions_from(parent)
    assert sub.layout_params() is None
    assert sub.position_of("b") == parent.position_of("b")

    assert circular_layout(sub, (50, 50), 1) == ["a", "b"]
    for node in sub.nodes():
        assert distance(sub.position_of(node), (50, 50)) == pytest.approx(1)


def test_empty_graph_creates_no_positions():
    g = Graph()
    assert circular_layout(g, (0, 0), 10) == []
    assert not g.has_layout()


@pytest.mark.parametrize(
    "center, radius",
    [
        ((0, 0), 0),
        ((0, 0), -5),
        ((0, 0), "10"),
        ((0, 0), float("nan")),
        ((0, 0), float("inf")),
        ((0,), 10),
        ((0, 0, 0), 10),
        ("ab", 10),
        (None, 10),
        ((0, float("nan")), 10),
        ((True, 0), 10),
        (("0", 0), 10),
    ],
)
def test_invalid_parameters_leave_graph_untouched(center, radius):
    g = square()
    assert circular_layout(g, center, radius) == []
    assert not g.has_layout()


def test_invalid_parameters_keep_previous_layout():
    g = square()
    circular_layout(g, (0, 0), 10)
    before = g.positions()
    assert circular_layout(g, (0, 0), -1) == []
    assert g.positions() == before
