"""Co-occurrence graph domain models."""

from pydantic import BaseModel

from scentgraph.domain.note import Season


class GraphNode(BaseModel):
    """A note that survived link filtering.

    Attributes:
        id: Note identifier
        season: Season of the note
        color: Season display color
        connections: Number of pairwise co-occurrences the note took part in
    """

    id: str
    season: Season
    color: str
    connections: int = 0


class GraphLink(BaseModel):
    """An undirected co-occurrence between two notes."""

    source: str
    target: str
    weight: int = 1  # number of formulations containing both notes

    @property
    def key(self) -> frozenset[str]:
        return frozenset((self.source, self.target))

    def touches(self, note_id: str) -> bool:
        return note_id in (self.source, self.target)


class Graph(BaseModel):
    """Filtered co-occurrence graph for one view."""

    nodes: list[GraphNode] = []
    links: list[GraphLink] = []

    @property
    def is_empty(self) -> bool:
        return not self.nodes or not self.links

    def node_ids(self) -> set[str]:
        return {node.id for node in self.nodes}
