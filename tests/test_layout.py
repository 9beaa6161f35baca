"""Tests for the radial layout engine."""

import math

import pytest

from scentgraph.catalog import CATALOG
from scentgraph.domain.graph import Graph, GraphLink, GraphNode
from scentgraph.domain.record import FormulationRecord
from scentgraph.errors import LayoutError
from scentgraph.graph.builder import CooccurrenceGraphBuilder
from scentgraph.graph.layout import RadialLayoutEngine, label_rotation, layout_radius


@pytest.mark.parametrize(
    "degrees,rotation,anchor",
    [
        (0, 0, "start"),
        (45, 45, "start"),
        (90, 90, "start"),
        (91, 271, "end"),
        (180, 360, "end"),
        (269, 449, "end"),
        (270, 270, "start"),
        (345, 345, "start"),
    ],
)
def test_label_rotation_keeps_text_upright(degrees, rotation, anchor):  # noqa
    assert label_rotation(degrees) == (rotation, anchor)


def test_every_catalog_note_gets_an_evenly_spaced_slot(layout_engine: RadialLayoutEngine) -> None:
    slots = layout_engine.layout(800, 800)
    order = CATALOG.ordered_ids()

    assert list(slots) == list(order)
    step = 2 * math.pi / len(order)
    for i, note_id in enumerate(order):
        assert slots[note_id].angle == pytest.approx(i * step)
        assert 0 <= slots[note_id].angle < 2 * math.pi


def test_slot_positions_sit_on_the_circle(layout_engine: RadialLayoutEngine) -> None:
    slots = layout_engine.layout(800, 600)
    radius = 600 / 2.6667

    iris = slots["iris"]
    assert (iris.x, iris.y) == pytest.approx((400 + radius, 300))
    cedar = slots["cedar"]  # half way round
    assert (cedar.x, cedar.y) == pytest.approx((400 - radius, 300), abs=1e-9)
    for slot in slots.values():
        assert math.hypot(slot.x - 400, slot.y - 300) == pytest.approx(radius)


def test_layout_is_recomputed_when_canvas_changes(layout_engine: RadialLayoutEngine) -> None:
    small = layout_engine.layout(500, 500)
    assert layout_engine.layout(500, 500) is small

    large = layout_engine.layout(800, 800)
    assert large["rose"].angle == small["rose"].angle
    assert large["rose"].x != small["rose"].x


def test_layout_keeps_slots_for_each_canvas_size(layout_engine: RadialLayoutEngine) -> None:
    overview = layout_engine.layout(800, 800)
    brand = layout_engine.layout(500, 500)

    assert layout_engine.layout(800, 800) is overview
    assert layout_engine.layout(500, 500) is brand


def test_layout_rejects_non_positive_canvas(layout_engine: RadialLayoutEngine) -> None:
    with pytest.raises(ValueError):
        layout_engine.layout(0, 800)


def test_note_angle_is_independent_of_brand_subgraph(
    builder: CooccurrenceGraphBuilder,
    layout_engine: RadialLayoutEngine,
    mixed_records: list[FormulationRecord],
) -> None:
    angles: dict[str, set[float]] = {}
    for brand in ("chanel", "dior", "gucci", None):
        graph = builder.build_graph(mixed_records, brand_filter=brand, weight_threshold=0)
        scene = layout_engine.position(graph, 500, 500, brand=brand)
        slots = layout_engine.layout(500, 500)
        for node in scene.nodes:
            assert (node.x, node.y) == (slots[node.id].x, slots[node.id].y)
            angles.setdefault(node.id, set()).add(slots[node.id].angle)

    assert "rose" in angles
    assert all(len(values) == 1 for values in angles.values())


def test_position_places_links_and_labels(
    builder: CooccurrenceGraphBuilder,
    layout_engine: RadialLayoutEngine,
    dior_records: list[FormulationRecord],
) -> None:
    graph = builder.build_graph(dior_records, brand_filter="dior", weight_threshold=22)
    scene = layout_engine.position(
        graph, 800, 800, brand="dior", weight_threshold=22, generation=7
    )
    slots = layout_engine.layout(800, 800)

    assert (scene.brand, scene.weight_threshold, scene.generation) == ("dior", 22, 7)
    assert len(scene.nodes) == len(scene.labels) == 3
    assert scene.max_weight == 23

    for link in scene.links:
        assert (link.x1, link.y1) == (slots[link.source].x, slots[link.source].y)
        assert (link.x2, link.y2) == (slots[link.target].x, slots[link.target].y)

    labels = {label.id: label for label in scene.labels}
    radius = layout_radius(800, 800)
    # rose sits at 45 degrees, lemon at 105 degrees
    rose = labels["rose"]
    assert rose.x == pytest.approx(400 + (radius + 20) * math.cos(math.radians(45)))
    assert rose.y == pytest.approx(400 + (radius + 20) * math.sin(math.radians(45)))
    assert (rose.rotation, rose.text_anchor) == (pytest.approx(45), "start")
    lemon = labels["lemon"]
    assert (lemon.rotation, lemon.text_anchor) == (pytest.approx(285), "end")


def test_empty_graph_yields_empty_scene(layout_engine: RadialLayoutEngine) -> None:
    scene = layout_engine.position(Graph(), 800, 800)
    assert scene.is_empty
    assert scene.nodes == scene.links == scene.labels == []


def test_note_missing_from_catalog_order_fails_fast() -> None:
    engine = RadialLayoutEngine(["rose", "lemon"])
    graph = Graph(
        nodes=[
            GraphNode(id="rose", season="Spring", color="#7DC352", connections=1),
            GraphNode(id="oud", season="Winter", color="#87CEEB", connections=1),
        ],
        links=[GraphLink(source="rose", target="oud", weight=1)],
    )
    with pytest.raises(LayoutError, match="oud"):
        engine.position(graph, 800, 800)
