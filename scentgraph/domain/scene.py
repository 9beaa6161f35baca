"""Positioned drawing primitives handed to a rendering sink."""

from typing import Literal

from pydantic import BaseModel

from scentgraph.domain.note import Season


class LayoutSlot(BaseModel):
    """Fixed position of a catalog note on the circle."""

    x: float
    y: float
    angle: float  # radians, in [0, 2π)


class PositionedNode(BaseModel):
    id: str
    x: float
    y: float
    season: Season
    color: str
    connections: int


class PositionedLink(BaseModel):
    source: str
    target: str
    weight: int
    x1: float
    y1: float
    x2: float
    y2: float


class LabelPlacement(BaseModel):
    id: str
    x: float
    y: float
    rotation: float  # degrees
    text_anchor: Literal["start", "end"]


class Scene(BaseModel):
    """Everything a sink needs to draw one radial graph.

    Attributes:
        brand: Brand the scene was built for, None for all brands
        width: Canvas width
        height: Canvas height
        weight_threshold: Threshold links had to exceed
        generation: Generation stamp of the build that produced the scene
        nodes: Positioned nodes
        links: Positioned links
        labels: Label placements, one per node
    """

    brand: str | None = None
    width: int
    height: int
    weight_threshold: int
    generation: int = 0
    nodes: list[PositionedNode] = []
    links: list[PositionedLink] = []
    labels: list[LabelPlacement] = []

    @property
    def is_empty(self) -> bool:
        return not self.nodes or not self.links

    @property
    def max_weight(self) -> int:
        return max((link.weight for link in self.links), default=1)
