"""Building note co-occurrence graphs from formulation records."""

import logging
from collections import Counter
from typing import Iterable

from scentgraph.catalog import NoteCatalog
from scentgraph.domain.graph import Graph, GraphLink, GraphNode
from scentgraph.domain.record import FormulationRecord

logger = logging.getLogger(__name__)


class CooccurrenceGraphBuilder:
    """Builds weighted, threshold-filtered note co-occurrence graphs."""

    def __init__(self, catalog: NoteCatalog):
        """Initialize the builder.

        Args:
            catalog: Catalog deciding which notes are recognised
        """
        self.catalog = catalog

    def build_graph(
        self,
        records: Iterable[FormulationRecord],
        brand_filter: str | None = None,
        weight_threshold: int = 0,
    ) -> Graph:
        """Build the co-occurrence graph for a set of records.

        Every pair of distinct notes in a record adds one to the weight of
        the link between them. Only links heavier than the threshold are kept,
        and only notes touched by a kept link.

        Args:
            records: Formulation records to aggregate
            brand_filter: Exact, case-sensitive brand to restrict to. None keeps every record.
            weight_threshold: Links need a weight strictly greater than this

        Returns:
            Graph with the surviving nodes and links, possibly empty
        """
        if brand_filter:
            records = [record for record in records if record.brand == brand_filter]

        # Pairs are stored in the orientation of their first occurrence.
        links_by_pair: dict[frozenset[str], GraphLink] = {}
        connections: Counter[str] = Counter()
        record_count = 0

        for record in records:
            record_count += 1
            notes = self._record_notes(record)
            for i, source in enumerate(notes):
                for target in notes[i + 1 :]:
                    key = frozenset((source, target))
                    link = links_by_pair.get(key)
                    if link is None:
                        links_by_pair[key] = GraphLink(source=source, target=target, weight=1)
                    else:
                        link.weight += 1
                    connections[source] += 1
                    connections[target] += 1

        links = [link for link in links_by_pair.values() if link.weight > weight_threshold]
        linked_ids = {note_id for link in links for note_id in (link.source, link.target)}
        nodes = [
            self._build_node(note_id, connections[note_id])
            for note_id in connections
            if note_id in linked_ids
        ]

        logger.debug(
            f"Built graph for brand={brand_filter!r} from {record_count} records: "
            f"{len(links_by_pair)} raw links, {len(links)} above {weight_threshold}, "
            f"{len(nodes)} nodes"
        )
        return Graph(nodes=nodes, links=links)

    def _record_notes(self, record: FormulationRecord) -> list[str]:
        """Catalog notes of a record, deduplicated in order of first appearance.

        Args:
            record: Record whose Top, Middle and Base columns are gathered

        Returns:
            Distinct recognised notes of the record
        """
        unique_notes = dict.fromkeys(record.notes())
        return [note for note in unique_notes if note in self.catalog]

    def _build_node(self, note_id: str, connections: int) -> GraphNode:
        note = self.catalog.get_note(note_id)
        return GraphNode(id=note.id, season=note.season, color=note.color, connections=connections)
