"""Fixed circular placement of catalog notes and their labels."""

import math
from typing import Literal, Sequence

import numpy as np

from scentgraph.domain.graph import Graph
from scentgraph.domain.scene import (
    LabelPlacement,
    LayoutSlot,
    PositionedLink,
    PositionedNode,
    Scene,
)
from scentgraph.errors import LayoutError

# Leaves room around the circle for the rotated labels.
RADIUS_DIVISOR = 2.6667


def layout_radius(width: int, height: int) -> float:
    return min(width, height) / RADIUS_DIVISOR


def label_rotation(degrees: float) -> tuple[float, Literal["start", "end"]]:
    """Rotation and text anchor keeping a label upright.

    Labels on the left half of the circle, strictly between 90 and 270
    degrees, are flipped by 180 degrees and anchored at their end.

    Args:
        degrees: Angle of the label's slot in degrees

    Returns:
        Tuple of (rotation in degrees, text anchor)
    """
    if 90 < degrees < 270:
        return degrees + 180, "end"
    return degrees, "start"


class RadialLayoutEngine:
    """Assigns every catalog note a fixed slot on a circle.

    Slots come from the full catalog ordering, never from the graph being
    drawn, so a note keeps its angle across every brand's subgraph.
    """

    def __init__(self, catalog_order: Sequence[str], label_offset: float = 20.0):
        """Initialize the engine.

        Args:
            catalog_order: Every catalog note identifier in slot order
            label_offset: Distance between a node and its label anchor
        """
        self.catalog_order = tuple(catalog_order)
        self.label_offset = label_offset
        self._slots_by_size: dict[tuple[int, int], dict[str, LayoutSlot]] = {}

    def layout(self, width: int, height: int) -> dict[str, LayoutSlot]:
        """Compute the slot of every catalog note for a canvas size.

        Args:
            width: Drawing area width
            height: Drawing area height

        Returns:
            Mapping of note identifier to its slot
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        if (width, height) in self._slots_by_size:
            return self._slots_by_size[(width, height)]

        radius = layout_radius(width, height)
        count = len(self.catalog_order)
        angles = np.arange(count) * (2 * np.pi / count) if count else np.zeros(0)
        xs = width / 2 + radius * np.cos(angles)
        ys = height / 2 + radius * np.sin(angles)

        slots = {
            note_id: LayoutSlot(x=float(x), y=float(y), angle=float(angle))
            for note_id, x, y, angle in zip(self.catalog_order, xs, ys, angles)
        }
        self._slots_by_size[(width, height)] = slots
        return slots

    def place_label(
        self, note_id: str, slots: dict[str, LayoutSlot], radius: float
    ) -> LabelPlacement:
        """Place a note's label just outside the circle.

        Args:
            note_id: Note to label
            slots: Slots from layout()
            radius: Radius of the circle the slots sit on

        Returns:
            Label anchor point, rotation and text anchor
        """
        slot = self._slot(note_id, slots)
        label_radius = radius + self.label_offset
        rotation, anchor = label_rotation(math.degrees(slot.angle))
        return LabelPlacement(
            id=note_id,
            x=slot.x + (label_radius - radius) * math.cos(slot.angle),
            y=slot.y + (label_radius - radius) * math.sin(slot.angle),
            rotation=rotation,
            text_anchor=anchor,
        )

    def position(
        self,
        graph: Graph,
        width: int,
        height: int,
        *,
        brand: str | None = None,
        weight_threshold: int = 0,
        generation: int = 0,
    ) -> Scene:
        """Turn a graph into positioned nodes, links and labels.

        Args:
            graph: Filtered co-occurrence graph
            width: Drawing area width
            height: Drawing area height
            brand: Brand the graph was built for
            weight_threshold: Threshold the graph was filtered with
            generation: Generation stamp carried through to the scene

        Returns:
            Scene ready for a rendering sink, empty when the graph is empty

        Raises:
            LayoutError: If the graph holds a note missing from the catalog ordering
        """
        scene = Scene(
            brand=brand,
            width=width,
            height=height,
            weight_threshold=weight_threshold,
            generation=generation,
        )
        if graph.is_empty:
            return scene

        slots = self.layout(width, height)
        radius = layout_radius(width, height)

        for node in graph.nodes:
            slot = self._slot(node.id, slots)
            scene.nodes.append(
                PositionedNode(
                    id=node.id,
                    x=slot.x,
                    y=slot.y,
                    season=node.season,
                    color=node.color,
                    connections=node.connections,
                )
            )
            scene.labels.append(self.place_label(node.id, slots, radius))

        for link in graph.links:
            start = self._slot(link.source, slots)
            end = self._slot(link.target, slots)
            scene.links.append(
                PositionedLink(
                    source=link.source,
                    target=link.target,
                    weight=link.weight,
                    x1=start.x,
                    y1=start.y,
                    x2=end.x,
                    y2=end.y,
                )
            )

        return scene

    @staticmethod
    def _slot(note_id: str, slots: dict[str, LayoutSlot]) -> LayoutSlot:
        if note_id not in slots:
            raise LayoutError(f"Note not in catalog: {note_id!r}")
        return slots[note_id]
