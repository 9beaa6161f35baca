from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scentgraph.api.endpoints import get_endpoints_router
from scentgraph.api.views import get_views_router
from scentgraph.config import settings
from scentgraph.pipeline import GraphPipeline, GraphService
from scentgraph.render.svg import SvgRenderer
from scentgraph.sources.base import RecordSource


def create_app(
    *,
    source: RecordSource,
    pipeline: GraphPipeline | None = None,
) -> FastAPI:
    """Create FastAPI app."""
    app = FastAPI()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    service = GraphService(
        source=source,
        pipeline=pipeline or GraphPipeline.default(label_offset=settings.label_offset),
    )
    renderer = SvgRenderer(settings.templates_dir)

    app.include_router(router=get_endpoints_router(service=service, renderer=renderer))
    app.include_router(router=get_views_router(service=service, renderer=renderer))

    return app
