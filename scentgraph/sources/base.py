from typing import List, Protocol

from scentgraph.domain.record import FormulationRecord


class RecordSource(Protocol):
    """Protocol for providers of perfume formulation records."""

    def load(self) -> List[FormulationRecord]:
        """Load every parseable record."""
        ...
