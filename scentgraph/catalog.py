"""Static reference data: recognised notes, their seasons and colors, brand thresholds."""

from types import MappingProxyType
from typing import Iterable, Mapping

from scentgraph.domain.note import HighlightCategory, Note, Role, Season
from scentgraph.errors import UnknownNoteError

SEASON_COLORS: Mapping[Season, str] = MappingProxyType(
    {
        "Spring": "#7DC352",
        "Summer": "#F45DA6",
        "Autumn": "#D2691E",
        "Winter": "#87CEEB",
    }
)

SEASON_ORDER: Mapping[Season, int] = MappingProxyType(
    {"Spring": 0, "Summer": 1, "Autumn": 2, "Winter": 3}
)

NOTE_SEASONS: Mapping[str, Season] = MappingProxyType(
    {
        "bergamot": "Summer",
        "aldehydes": "Winter",
        "neroli": "Spring",
        "mandarin orange": "Summer",
        "lemon": "Summer",
        "peach": "Autumn",
        "pink pepper": "Winter",
        "jasmine": "Summer",
        "rose": "Spring",
        "ylang-ylang": "Summer",
        "iris": "Spring",
        "orange blossom": "Spring",
        "tuberose": "Summer",
        "geranium": "Summer",
        "vetiver": "Autumn",
        "vanilla": "Winter",
        "sandalwood": "Winter",
        "musk": "Winter",
        "patchouli": "Autumn",
        "amber": "Autumn",
        "white musk": "Winter",
        "tonka bean": "Winter",
        "cedar": "Autumn",
        "oakmoss": "Autumn",
    }
)

# Role groups only drive highlight coloring, they are unrelated to seasons.
ROLE_GROUPS: Mapping[Role, tuple[str, ...]] = MappingProxyType(
    {
        "top": (
            "bergamot",
            "aldehydes",
            "neroli",
            "mandarin orange",
            "lemon",
            "peach",
            "pink pepper",
        ),
        "middle": (
            "jasmine",
            "rose",
            "ylang-ylang",
            "iris",
            "orange blossom",
            "tuberose",
            "geranium",
        ),
        "base": (
            "vetiver",
            "vanilla",
            "sandalwood",
            "musk",
            "patchouli",
            "amber",
            "white musk",
            "tonka bean",
            "cedar",
            "oakmoss",
        ),
    }
)

BRANDS: tuple[str, ...] = (
    "chanel",
    "dior",
    "yves-saint-laurent",
    "tom-ford",
    "jo-malone-london",
    "gucci",
)

BRAND_THRESHOLDS: Mapping[str, int] = MappingProxyType(
    {
        "chanel": 23,
        "dior": 22,
        "yves-saint-laurent": 21,
        "tom-ford": 8,
        "jo-malone-london": 5,
        "gucci": 11,
    }
)
DEFAULT_BRAND_THRESHOLD = 20
# Aggregate counts across every brand run much higher than single-brand counts.
ALL_BRANDS_THRESHOLD = 40


def threshold_for_brand(brand: str | None) -> int:
    """Return the link weight threshold for a brand view.

    Args:
        brand: Brand identifier, None or empty for the all-brands view

    Returns:
        The brand's threshold, the default for unlisted brands, or the
        all-brands threshold
    """
    if not brand:
        return ALL_BRANDS_THRESHOLD
    return BRAND_THRESHOLDS.get(brand, DEFAULT_BRAND_THRESHOLD)


class NoteCatalog:
    """Lookup and ordering over the set of recognised notes."""

    def __init__(
        self,
        note_seasons: Mapping[str, Season],
        role_groups: Mapping[Role, Iterable[str]] | None = None,
    ):
        """Initialize the catalog.

        Args:
            note_seasons: Mapping of note identifier to season
            role_groups: Mapping of role to the notes highlighted for it
        """
        self._notes = MappingProxyType(
            {
                note_id: Note(id=note_id, season=season, color=SEASON_COLORS[season])
                for note_id, season in note_seasons.items()
            }
        )
        self._role_groups = MappingProxyType(
            {role: tuple(notes) for role, notes in (role_groups or {}).items()}
        )
        self._ordered_ids = tuple(sorted(self._notes, key=self._sort_key))

    def _sort_key(self, note_id: str) -> tuple[int, str]:
        return SEASON_ORDER[self._notes[note_id].season], note_id

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    def __len__(self) -> int:
        return len(self._notes)

    def get_note(self, note_id: str) -> Note:
        """Get a catalog note by its identifier."""
        if note_id not in self._notes:
            raise UnknownNoteError(note_id)
        return self._notes[note_id]

    def get_season(self, note_id: str) -> Season:
        """Get the season of a catalog note."""
        return self.get_note(note_id).season

    def ordered_ids(self) -> tuple[str, ...]:
        """Note identifiers ordered by season rank, then by identifier.

        Notes of one season sit next to each other and the order does not
        depend on which notes a given dataset or brand contains.
        """
        return self._ordered_ids

    def role_notes(self, category: HighlightCategory) -> tuple[str, ...]:
        """Notes highlighted for a role category, empty for "none"."""
        if category == "none":
            return ()
        return self._role_groups.get(category, ())


CATALOG = NoteCatalog(NOTE_SEASONS, ROLE_GROUPS)
