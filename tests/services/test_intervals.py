from datetime import date, datetime, timezone

import pytest

from verdant.services.intervals import effective_interval, last_performed, parse_day
from tests.factories import make_plant, make_species


def test_species_default_when_no_override(species):
    plant = make_plant()
    assert effective_interval(plant, species, "water") == 7
    assert effective_interval(plant, species, "fertilize") == 14


def test_override_takes_precedence_per_action(species):
    plant = make_plant(water_frequency_override=3)
    assert effective_interval(plant, species, "water") == 3
    # Fertilize is resolved independently
    assert effective_interval(plant, species, "fertilize") == 14

    plant = make_plant(fertilize_frequency_override=30)
    assert effective_interval(plant, species, "water") == 7
    assert effective_interval(plant, species, "fertilize") == 30


@pytest.mark.parametrize("bad", [0, -5, True, "4", 2.5])
def test_invalid_override_falls_back_to_species(species, bad):
    plant = make_plant(water_frequency_override=bad, fertilize_frequency_override=bad)
    assert effective_interval(plant, species, "water") == 7
    assert effective_interval(plant, species, "fertilize") == 14


def test_missing_species_returns_none():
    assert effective_interval(make_plant(water_frequency_override=3), None, "water") is None


def test_unknown_action_raises(species):
    with pytest.raises(ValueError):
        effective_interval(make_plant(), species, "repot")


def test_last_performed_falls_back_to_created_at():
    plant = make_plant(created_at=datetime(2024, 2, 10, 23, 30, tzinfo=timezone.utc))
    assert last_performed(plant, "water") == date(2024, 2, 10)
    assert last_performed(plant, "fertilize") == date(2024, 2, 10)

    plant = make_plant(last_watered=datetime(2024, 3, 1, 8, 0))
    assert last_performed(plant, "water") == date(2024, 3, 1)
    assert last_performed(plant, "fertilize") == date(2024, 1, 1)


def test_parse_day_accepts_dates_datetimes_and_iso_strings():
    assert parse_day(date(2024, 6, 1)) == date(2024, 6, 1)
    assert parse_day(datetime(2024, 6, 1, 9, 0)) == date(2024, 6, 1)
    assert parse_day("2024-06-01") == date(2024, 6, 1)
    assert parse_day("2024-06-01T09:00:00Z") == date(2024, 6, 1)


@pytest.mark.parametrize("bad", ["2024-13-01", "yesterday", "", None])
def test_parse_day_rejects_malformed_input(bad):
    with pytest.raises(ValueError):
        parse_day(bad)


def test_custom_species_values_are_used():
    species = make_species(water_frequency_days=21, fertilize_frequency_days=60)
    assert effective_interval(make_plant(), species, "water") == 21
    assert effective_interval(make_plant(), species, "fertilize") == 60
