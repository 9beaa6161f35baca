"""Formulation records read from a delimited text file."""

import csv
import logging
from pathlib import Path
from typing import List, Mapping

from pydantic import ValidationError

from scentgraph.domain.record import FormulationRecord
from scentgraph.errors import UnparseableRecordError
from scentgraph.sources.base import RecordSource

logger = logging.getLogger(__name__)


def parse_record(row: Mapping[str | None, str | list[str] | None]) -> FormulationRecord:
    """Turn one data row into a FormulationRecord.

    Args:
        row: Row as produced by csv.DictReader

    Returns:
        The parsed record

    Raises:
        UnparseableRecordError: If the row has no brand, carries more fields than
            the header, or holds values of the wrong type
    """
    if None in row:
        raise UnparseableRecordError(f"Row has more fields than the header: {row[None]!r}")
    try:
        return FormulationRecord.model_validate(row)
    except ValidationError as e:
        raise UnparseableRecordError(str(e)) from e


class CsvRecordSource(RecordSource):
    """Record source backed by a CSV file with Brand, Top, Middle and Base columns."""

    def __init__(self, filepath: str | Path, delimiter: str = ",") -> None:
        """Initialize CsvRecordSource.

        Args:
            filepath: Path to the CSV file. Read on every load() call.
            delimiter: Field delimiter
        """
        self._filepath = Path(filepath)
        self._delimiter = delimiter

    def load(self) -> List[FormulationRecord]:
        """Load every parseable record, skipping malformed rows."""
        if not self._filepath.exists():
            raise FileNotFoundError(f"Record file {self._filepath} not found")

        records = []
        skipped = 0
        with open(self._filepath, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f, delimiter=self._delimiter)
            for line_number, row in enumerate(reader, start=2):
                try:
                    records.append(parse_record(row))
                except UnparseableRecordError as e:
                    skipped += 1
                    logger.warning(f"Skipping row {line_number} of {self._filepath}: {e}")

        logger.info(f"Loaded {len(records)} records from {self._filepath} ({skipped} skipped)")
        return records
