"""Formulation record domain models."""

from pydantic import BaseModel, Field, field_validator


class FormulationRecord(BaseModel):
    """One perfume from the source dataset.

    Attributes:
        brand: Brand identifier, compared case-sensitively
        top: Comma-separated top notes
        middle: Comma-separated middle notes
        base: Comma-separated base notes
    """

    brand: str = Field(alias="Brand")
    top: str = Field(default="", alias="Top")
    middle: str = Field(default="", alias="Middle")
    base: str = Field(default="", alias="Base")

    model_config = {"populate_by_name": True}

    @field_validator("top", "middle", "base", mode="before")
    @classmethod
    def empty_when_missing(cls, value: str | None) -> str:
        return "" if value is None else value

    def notes(self) -> list[str]:
        """Return every note of the Top, Middle and Base columns, trimmed and lowercased."""
        notes = []
        for column in (self.top, self.middle, self.base):
            for raw in column.split(","):
                note = raw.strip().lower()
                if note:
                    notes.append(note)
        return notes
