"""Generation-stamped recomputation of per-brand graph scenes."""

import asyncio
import logging
from typing import Iterable

from scentgraph.catalog import CATALOG, threshold_for_brand
from scentgraph.domain.record import FormulationRecord
from scentgraph.domain.scene import Scene
from scentgraph.graph.builder import CooccurrenceGraphBuilder
from scentgraph.graph.layout import RadialLayoutEngine
from scentgraph.sources.base import RecordSource

logger = logging.getLogger(__name__)


class GraphPipeline:
    """Runs records through the graph builder and the layout engine."""

    def __init__(self, builder: CooccurrenceGraphBuilder, layout_engine: RadialLayoutEngine):
        self.builder = builder
        self.layout_engine = layout_engine

    @classmethod
    def default(cls, label_offset: float = 20.0) -> "GraphPipeline":
        """Pipeline over the built-in note catalog."""
        return cls(
            builder=CooccurrenceGraphBuilder(CATALOG),
            layout_engine=RadialLayoutEngine(CATALOG.ordered_ids(), label_offset=label_offset),
        )

    def build_scene(
        self,
        records: Iterable[FormulationRecord],
        *,
        brand: str | None,
        width: int,
        height: int,
        weight_threshold: int | None = None,
        generation: int = 0,
    ) -> Scene:
        """Build and lay out the graph of one view.

        Args:
            records: Formulation records
            brand: Brand to restrict to, None for all brands
            width: Canvas width
            height: Canvas height
            weight_threshold: Overrides the brand's threshold when given
            generation: Generation stamp recorded on the scene

        Returns:
            Positioned scene, empty when no link survives the threshold
        """
        if weight_threshold is None:
            weight_threshold = threshold_for_brand(brand)
        graph = self.builder.build_graph(
            records, brand_filter=brand, weight_threshold=weight_threshold
        )
        return self.layout_engine.position(
            graph,
            width,
            height,
            brand=brand,
            weight_threshold=weight_threshold,
            generation=generation,
        )


class GraphView:
    """State of one brand's graph, updated last-write-wins.

    Every refresh takes a new generation. A result is only kept if its
    generation is still the latest when it is ready, so a slow fetch that
    finishes after a newer trigger cannot overwrite the newer scene.
    """

    def __init__(self, brand: str | None, source: RecordSource, pipeline: GraphPipeline):
        self.brand = brand
        self.source = source
        self.pipeline = pipeline
        self.scene: Scene | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Stamp a new computation and return its generation."""
        self._generation += 1
        return self._generation

    def commit(self, generation: int, scene: Scene) -> bool:
        """Store a scene unless a newer computation has started since.

        Args:
            generation: Generation returned by begin() for this computation
            scene: Result of the computation

        Returns:
            True if the scene was stored, False if it was stale and discarded
        """
        if generation != self._generation:
            logger.debug(
                f"Discarding stale scene for brand={self.brand!r}: "
                f"generation {generation}, latest {self._generation}"
            )
            return False
        self.scene = scene
        return True

    async def refresh(
        self, width: int, height: int, weight_threshold: int | None = None
    ) -> Scene:
        """Reload records and recompute the scene.

        The record fetch runs off the event loop. The built scene is stored
        only if no newer refresh started in the meantime.

        Args:
            width: Canvas width
            height: Canvas height
            weight_threshold: Overrides the brand's threshold when given

        Returns:
            The scene this refresh built, stored or not
        """
        generation = self.begin()
        records = await asyncio.to_thread(self.source.load)
        scene = self.pipeline.build_scene(
            records,
            brand=self.brand,
            width=width,
            height=height,
            weight_threshold=weight_threshold,
            generation=generation,
        )
        self.commit(generation, scene)
        return scene


class GraphService:
    """Keeps one independent GraphView per brand."""

    def __init__(self, source: RecordSource, pipeline: GraphPipeline):
        self.source = source
        self.pipeline = pipeline
        self._views: dict[str | None, GraphView] = {}

    def view(self, brand: str | None) -> GraphView:
        brand = brand or None
        if brand not in self._views:
            self._views[brand] = GraphView(brand, self.source, self.pipeline)
        return self._views[brand]

    async def scene_for(
        self,
        brand: str | None,
        width: int,
        height: int,
        weight_threshold: int | None = None,
    ) -> Scene:
        """Refresh a brand's view and return the latest scene matching the request.

        A newer refresh that already stored its scene wins only when it was
        built for the same canvas size and threshold.
        """
        view = self.view(brand)
        scene = await view.refresh(width, height, weight_threshold)
        latest = view.scene
        if (
            latest is not None
            and latest.generation > scene.generation
            and (latest.width, latest.height, latest.weight_threshold)
            == (scene.width, scene.height, scene.weight_threshold)
        ):
            return latest
        return scene
