"""Visual attributes derived from interaction state.

Hover, selection and highlight category live in the UI. They are passed in as
plain parameters and only change colors and emphasis, never the graph or
its layout.
"""

from pydantic import BaseModel

from scentgraph.catalog import NoteCatalog
from scentgraph.domain.note import HighlightCategory
from scentgraph.domain.scene import PositionedLink, PositionedNode, Scene

HIGHLIGHT_COLORS: dict[str, str] = {
    "top": "#5F156E",
    "middle": "#5B21A2",
    "base": "#7F4CD6",
}
DIMMED_NODE_COLOR = "#D3D3D3"
DEFAULT_LINK_COLOR = "#DFDFDF"
SELECTED_OUTLINE_COLOR = "#333"
DEFAULT_OUTLINE_COLOR = "#fff"


class InteractionState(BaseModel):
    """Interaction parameters fed back from the sink."""

    highlighted_note: str | None = None  # hovered node
    selected_note: str | None = None
    highlight_category: HighlightCategory = "none"


def toggle_selection(selected_note: str | None, clicked_note: str) -> str | None:
    """Selection after clicking a node; clicking the selected node clears it."""
    return None if clicked_note == selected_note else clicked_note


def link_width(weight: int, max_weight: int) -> float:
    return weight / max_weight * 4 + 1


def link_color(link: PositionedLink, scene: Scene, state: InteractionState) -> str:
    """Links touching the hovered node take its color."""
    hovered = state.highlighted_note
    if hovered and hovered in (link.source, link.target):
        for node in scene.nodes:
            if node.id == hovered:
                return node.color
    return DEFAULT_LINK_COLOR


def node_radius(node: PositionedNode, state: InteractionState) -> int:
    return 8 if node.id == state.highlighted_note else 6


def node_fill(node: PositionedNode, state: InteractionState, catalog: NoteCatalog) -> str:
    highlighted_notes = catalog.role_notes(state.highlight_category)
    if highlighted_notes:
        if node.id in highlighted_notes:
            return HIGHLIGHT_COLORS[state.highlight_category]
        return DIMMED_NODE_COLOR
    return node.color


def node_outline(node: PositionedNode, state: InteractionState) -> str:
    return SELECTED_OUTLINE_COLOR if node.id == state.selected_note else DEFAULT_OUTLINE_COLOR


def label_font_size(brand: str | None) -> str:
    # Brand views are drawn on smaller canvases than the all-brands overview.
    return "10px" if brand else "14px"
