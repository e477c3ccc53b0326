from datetime import datetime, timezone

from verdant.models.plant import Plant
from verdant.models.species import Species


def make_species(**overrides) -> Species:
    fields = dict(
        id="test-fern",
        common_name="Test Fern",
        botanical_name="Filix probatio",
        water_frequency_days=7,
        water_amount="moderate",
        fertilize_frequency_days=14,
        fertilize_months=frozenset({3, 4, 5, 6, 7, 8, 9}),
        humidity="low",
    )
    fields.update(overrides)
    return Species(**fields)


def make_plant(plant_id: int = 1, species_id: str = "test-fern", **overrides) -> Plant:
    fields = dict(
        id=plant_id,
        species_id=species_id,
        created_at=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
    )
    fields.update(overrides)
    return Plant(**fields)
