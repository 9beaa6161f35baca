"""SVG rendering of positioned scenes."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from scentgraph.catalog import CATALOG, NoteCatalog
from scentgraph.domain.scene import Scene
from scentgraph.graph import styling
from scentgraph.graph.styling import InteractionState


class SvgRenderer:
    """Renders a Scene as a standalone SVG document."""

    def __init__(self, templates_dir: str | Path, catalog: NoteCatalog = CATALOG) -> None:
        """Initialize SvgRenderer.

        Args:
            templates_dir: Folder holding graph.svg.j2
            catalog: Catalog providing the highlight role groups
        """
        self.catalog = catalog
        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "svg", "j2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, scene: Scene, state: InteractionState | None = None) -> str:
        """Render a scene, styled for the given interaction state.

        Links are drawn first, then nodes, then labels. An empty scene
        renders as an empty canvas.
        """
        state = state or InteractionState()
        template = self._env.get_template("graph.svg.j2")
        return template.render(
            scene=scene,
            links=[
                {
                    "link": link,
                    "color": styling.link_color(link, scene, state),
                    "width": styling.link_width(link.weight, scene.max_weight),
                }
                for link in scene.links
            ],
            nodes=[
                {
                    "node": node,
                    "radius": styling.node_radius(node, state),
                    "fill": styling.node_fill(node, state, self.catalog),
                    "outline": styling.node_outline(node, state),
                }
                for node in scene.nodes
            ],
            labels=scene.labels,
            font_size=styling.label_font_size(scene.brand),
            empty=scene.is_empty,
        )
