from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response
from loguru import logger

from scentgraph.catalog import (
    ALL_BRANDS_THRESHOLD,
    BRAND_THRESHOLDS,
    BRANDS,
    DEFAULT_BRAND_THRESHOLD,
)
from scentgraph.config import settings
from scentgraph.domain.note import HighlightCategory
from scentgraph.domain.scene import Scene
from scentgraph.errors import LayoutError
from scentgraph.graph.styling import InteractionState
from scentgraph.pipeline import GraphService
from scentgraph.render.svg import SvgRenderer


async def load_scene(
    service: GraphService,
    brand: str | None,
    width: int,
    height: int,
    threshold: int | None = None,
) -> Scene:
    """Refresh a brand's scene, translating failures into HTTP errors."""
    try:
        return await service.scene_for(brand, width, height, threshold)
    except FileNotFoundError as e:
        logger.error(f"Record source unavailable: {e}")
        raise HTTPException(status_code=503, detail="Data source unavailable") from e
    except UnicodeDecodeError as e:
        logger.error(f"Record source is not valid UTF-8: {e}")
        raise HTTPException(status_code=503, detail="Data source unreadable") from e
    except LayoutError as e:
        logger.error(f"Layout failed for brand {brand!r}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error") from e


def _create_graph_endpoint(service: GraphService):
    """Create the graph scene endpoint handler."""

    async def get_graph(
        brand: str | None = None,
        width: int = Query(settings.overview_width, gt=0),
        height: int = Query(settings.overview_height, gt=0),
        threshold: int | None = Query(None, ge=0),
    ) -> Scene:
        return await load_scene(service, brand, width, height, threshold)

    return get_graph


def _create_graph_svg_endpoint(service: GraphService, renderer: SvgRenderer):
    """Create the rendered graph endpoint handler."""

    async def get_graph_svg(
        brand: str | None = None,
        width: int = Query(settings.overview_width, gt=0),
        height: int = Query(settings.overview_height, gt=0),
        highlight: HighlightCategory = "none",
        hovered: str | None = None,
        selected: str | None = None,
    ) -> Response:
        scene = await load_scene(service, brand, width, height)
        state = InteractionState(
            highlighted_note=hovered,
            selected_note=selected,
            highlight_category=highlight,
        )
        return Response(
            content=renderer.render(scene, state),
            media_type="image/svg+xml",
            headers={"Cache-Control": "no-cache"},
        )

    return get_graph_svg


def get_endpoints_router(*, service: GraphService, renderer: SvgRenderer) -> APIRouter:
    router = APIRouter()

    @router.get("/health")
    async def health_check():
        return {"status": "healthy"}

    @router.get("/api/brands")
    async def list_brands():
        return {
            "brands": [{"brand": brand, "threshold": BRAND_THRESHOLDS[brand]} for brand in BRANDS],
            "default_threshold": DEFAULT_BRAND_THRESHOLD,
            "all_brands_threshold": ALL_BRANDS_THRESHOLD,
        }

    router.get("/api/graph", response_model=Scene)(_create_graph_endpoint(service))
    router.get("/api/graph.svg")(_create_graph_svg_endpoint(service, renderer))

    return router
