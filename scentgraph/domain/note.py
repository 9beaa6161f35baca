"""Note catalog domain models."""

from typing import Literal

from pydantic import BaseModel

Season = Literal["Spring", "Summer", "Autumn", "Winter"]
Role = Literal["top", "middle", "base"]
HighlightCategory = Literal["top", "middle", "base", "none"]


class Note(BaseModel):
    """Represents a recognised scent note.

    Attributes:
        id: Lowercase note name, e.g. "bergamot"
        season: Season the note is classified under
        color: Display color derived from the season
    """

    id: str
    season: Season
    color: str

    model_config = {"frozen": True}
