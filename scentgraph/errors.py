"""Errors raised while loading records, building graphs and laying them out."""


class UnparseableRecordError(ValueError):
    """A data row could not be turned into a formulation record."""


class UnknownNoteError(KeyError):
    """A note identifier is not part of the note catalog."""

    def __init__(self, note_id: str):
        super().__init__(note_id)
        self.note_id = note_id

    def __str__(self) -> str:
        return f"Unknown note: {self.note_id!r}"


class LayoutError(RuntimeError):
    """A graph references a note that has no slot in the catalog ordering."""
