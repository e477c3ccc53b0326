"""
Built-in houseplant species table.

Species are static reference data: loaded once at import, never mutated.
Lookups of unknown ids return None, never raise.
"""
from typing import Optional

from verdant.models.species import Species

# ── Fertilizing seasons ───────────────────────────────────────────────────────

GROWING_SEASON = frozenset({3, 4, 5, 6, 7, 8, 9})
LATE_SPRING_TO_SUMMER = frozenset({4, 5, 6, 7, 8})
SUCCULENT_SEASON = frozenset({4, 5, 6, 7})
YEAR_ROUND = frozenset(range(1, 13))


# ── Catalog ───────────────────────────────────────────────────────────────────

SPECIES_CATALOG: tuple[Species, ...] = (
    Species("monstera-deliciosa", "Monstera", "Monstera deliciosa",
            7, "moderate", 14, GROWING_SEASON, "high", "bright", 2,
            ("Wipe leaves monthly to keep pores clear.",
             "Give the aerial roots a moss pole to climb.")),
    Species("ficus-lyrata", "Fiddle-Leaf Fig", "Ficus lyrata",
            7, "moderate", 30, GROWING_SEASON, "medium", "bright", 2,
            ("Avoid moving it; leaf drop follows relocation.",)),
    Species("sansevieria-trifasciata", "Snake Plant", "Dracaena trifasciata",
            14, "little", 30, SUCCULENT_SEASON, "low", "low", 3,
            ("Let the soil dry out completely between waterings.",)),
    Species("epipremnum-aureum", "Golden Pothos", "Epipremnum aureum",
            7, "moderate", 30, GROWING_SEASON, "medium", "medium", 2,
            ("Trim leggy vines to encourage bushier growth.",)),
    Species("calathea-orbifolia", "Calathea", "Goeppertia orbifolia",
            4, "much", 14, LATE_SPRING_TO_SUMMER, "high", "medium", 2,
            ("Use filtered or rain water; tap water browns the leaf edges.",
             "Keep away from drafts.")),
    Species("zamioculcas-zamiifolia", "ZZ Plant", "Zamioculcas zamiifolia",
            14, "little", 60, SUCCULENT_SEASON, "low", "low", 3,
            ("Rhizomes store water; overwatering is the main risk.",)),
    Species("nephrolepis-exaltata", "Boston Fern", "Nephrolepis exaltata",
            3, "much", 30, GROWING_SEASON, "high", "medium", 1,
            ("Keep the soil evenly moist at all times.",)),
    Species("aloe-vera", "Aloe Vera", "Aloe barbadensis miller",
            21, "little", 60, SUCCULENT_SEASON, "low", "direct", 3,
            ("Water deeply, then wait until the pot is dry.",)),
    Species("spathiphyllum-wallisii", "Peace Lily", "Spathiphyllum wallisii",
            5, "moderate", 42, GROWING_SEASON, "high", "low", 2,
            ("Drooping leaves mean it is thirsty.",)),
    Species("chlorophytum-comosum", "Spider Plant", "Chlorophytum comosum",
            7, "moderate", 30, YEAR_ROUND, "medium", "medium", 2,
            ("Pot up the plantlets once they have roots.",)),
)

_BY_ID: dict[str, Species] = {s.id: s for s in SPECIES_CATALOG}


def get_species(species_id: str) -> Optional[Species]:
    return _BY_ID.get(species_id)


def species_table() -> dict[str, Species]:
    """Fresh id → Species mapping for the scheduling functions."""
    return dict(_BY_ID)
