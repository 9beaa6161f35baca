"""Endpoints returning HTML pages"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from scentgraph.api.endpoints import load_scene
from scentgraph.catalog import BRANDS
from scentgraph.config import settings
from scentgraph.domain.note import HighlightCategory
from scentgraph.graph.styling import InteractionState, toggle_selection
from scentgraph.pipeline import GraphService
from scentgraph.render.svg import SvgRenderer

HIGHLIGHT_BUTTONS = [
    ("top", "Top Note"),
    ("middle", "Middle Note"),
    ("base", "Base Note"),
    ("none", "Clear"),
]


def get_views_router(*, service: GraphService, renderer: SvgRenderer) -> APIRouter:
    router = APIRouter()

    templates = Jinja2Templates(directory=settings.templates_dir)

    @router.get("/", response_class=HTMLResponse)
    async def home(
        request: Request,
        highlight: HighlightCategory = "none",
        selected: str | None = None,
        clicked: str | None = None,
    ):
        if clicked:
            selected = toggle_selection(selected, clicked)
        state = InteractionState(selected_note=selected, highlight_category=highlight)

        overview = await load_scene(
            service, None, settings.overview_width, settings.overview_height
        )
        brand_graphs = []
        for brand in BRANDS:
            scene = await load_scene(service, brand, settings.brand_width, settings.brand_height)
            brand_graphs.append({"brand": brand, "svg": renderer.render(scene, state)})

        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "highlight": highlight,
                "selected": selected,
                "buttons": HIGHLIGHT_BUTTONS,
                "overview": {
                    "width": settings.overview_width,
                    "height": settings.overview_height,
                    "svg": renderer.render(overview, state),
                },
                "brand_graphs": brand_graphs,
                "brand_size": {"width": settings.brand_width, "height": settings.brand_height},
            },
        )

    return router
