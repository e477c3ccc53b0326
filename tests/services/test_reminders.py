import itertools
from datetime import date, datetime, timedelta, timezone

import pytest

from verdant.models.care import Reminder
from verdant.services.care_events import record_event
from verdant.services.reminders import (
    all_reminders,
    due_today,
    overdue,
    reminders_for_plant,
    select_due_today,
    select_overdue,
    select_upcoming,
    upcoming,
)
from tests.factories import make_plant, make_species

TODAY = date(2024, 6, 10)


def _water(reminders):
    return next(r for r in reminders if r.action == "water")


# ── reminders_for_plant ───────────────────────────────────────────────────────


def test_never_watered_plant_is_due_created_at_plus_interval(species):
    plant = make_plant(created_at=datetime(2024, 6, 5, 18, 0, tzinfo=timezone.utc))
    reminder = _water(reminders_for_plant(plant, species, TODAY))
    assert reminder.due_date == date(2024, 6, 12)
    assert reminder.completed is True


def test_due_today_is_not_completed(species):
    plant = make_plant(last_watered=datetime(2024, 6, 3, 7, 0))
    reminder = _water(reminders_for_plant(plant, species, TODAY))
    assert reminder.due_date == TODAY
    assert reminder.completed is False


def test_overdue_is_not_completed(species):
    plant = make_plant(last_watered=datetime(2024, 5, 1))
    reminder = _water(reminders_for_plant(plant, species, TODAY))
    assert reminder.due_date == date(2024, 5, 8)
    assert reminder.completed is False


def test_water_override_moves_due_date(species):
    plant = make_plant(last_watered=datetime(2024, 6, 8), water_frequency_override=3)
    assert _water(reminders_for_plant(plant, species, TODAY)).due_date == date(2024, 6, 11)


def test_fertilize_reminder_only_in_active_months(species):
    plant = make_plant(last_fertilized=datetime(2024, 1, 2))
    january = reminders_for_plant(plant, species, date(2024, 1, 20))
    assert [r.action for r in january] == ["water"]

    may = reminders_for_plant(plant, species, date(2024, 5, 20))
    fertilize = next(r for r in may if r.action == "fertilize")
    assert fertilize.due_date == date(2024, 1, 16)
    assert fertilize.completed is False


@pytest.mark.parametrize("last_fertilized", [None, datetime(2023, 12, 1), datetime(2024, 1, 30)])
def test_no_fertilize_reminders_in_january_regardless_of_history(last_fertilized):
    species = make_species(fertilize_months=frozenset({3, 4, 5, 6, 7, 8, 9}))
    plant = make_plant(last_fertilized=last_fertilized)
    for day in range(1, 32):
        reminders = reminders_for_plant(plant, species, date(2024, 1, day))
        assert all(r.action != "fertilize" for r in reminders)


def test_fertilize_falls_back_to_created_at(species):
    plant = make_plant(created_at=datetime(2024, 6, 1, tzinfo=timezone.utc))
    fertilize = next(r for r in reminders_for_plant(plant, species, TODAY) if r.action == "fertilize")
    assert fertilize.due_date == date(2024, 6, 15)


def test_missing_species_yields_no_reminders():
    assert reminders_for_plant(make_plant(), None, TODAY) == []


def test_record_then_remind_uses_new_watering_date(species):
    plant = make_plant(last_watered=datetime(2024, 5, 1))
    _, plant = record_event(plant, "water", datetime.fromisoformat("2024-06-01T09:00:00Z"))
    reminder = _water(reminders_for_plant(plant, species, "2024-06-01"))
    assert reminder.due_date == date(2024, 6, 8)
    assert reminder.due_key == "2024-06-08"
    assert reminder.completed is True


# ── all_reminders and views ───────────────────────────────────────────────────


def _collection():
    species = {"test-fern": make_species(), "cactus": make_species(id="cactus", water_frequency_days=21)}
    plants = [
        make_plant(1, last_watered=datetime(2024, 6, 12)),           # due 06-19
        make_plant(2, last_watered=datetime(2024, 6, 3)),            # due today
        make_plant(3, "cactus", last_watered=datetime(2024, 5, 1)),  # due 05-22, overdue
        make_plant(4, last_watered=datetime(2024, 6, 5)),            # due 06-12, upcoming
        make_plant(5, "missing-species"),
    ]
    return plants, species


def test_all_reminders_sorted_by_due_date_and_skips_unknown_species():
    plants, species = _collection()
    reminders = all_reminders(plants, species, TODAY)
    keys = [r.due_key for r in reminders]
    assert keys == sorted(keys)
    assert 5 not in {r.plant_id for r in reminders}
    # June is a fertilizing month: water + fertilize for each of the four plants
    assert len(reminders) == 8


def test_all_reminders_is_idempotent():
    plants, species = _collection()
    assert all_reminders(plants, species, TODAY) == all_reminders(plants, species, TODAY)


def test_views_pick_the_right_plants():
    plants, species = _collection()
    assert {(r.plant_id, r.action) for r in due_today(plants, species, TODAY)} == {(2, "water")}
    assert (3, "water") in {(r.plant_id, r.action) for r in overdue(plants, species, TODAY)}
    assert {(r.plant_id, r.action) for r in upcoming(plants, species, TODAY, 7)} >= {(4, "water")}
    assert (1, "water") not in {(r.plant_id, r.action) for r in upcoming(plants, species, TODAY, 7)}
    assert (1, "water") in {(r.plant_id, r.action) for r in upcoming(plants, species, TODAY, 10)}


def test_upcoming_window_is_exclusive_at_both_ends():
    reminders = [
        Reminder(1, "water", TODAY, False),
        Reminder(2, "water", TODAY + timedelta(days=1), True),
        Reminder(3, "water", TODAY + timedelta(days=6), True),
        Reminder(4, "water", TODAY + timedelta(days=7), True),
    ]
    assert [r.plant_id for r in select_upcoming(reminders, TODAY, 7)] == [2, 3]


def test_malformed_today_fails_the_whole_query():
    plants, species = _collection()
    with pytest.raises(ValueError):
        all_reminders(plants, species, "2024-02-30")
    with pytest.raises(ValueError):
        overdue(plants, species, "not-a-date")


# ── Partition property ────────────────────────────────────────────────────────


def test_views_are_pairwise_disjoint_for_any_reminder_set():
    reminders = [
        Reminder(i, action, TODAY + timedelta(days=offset), completed)
        for i, (offset, action, completed) in enumerate(
            itertools.product(range(-10, 15), ("water", "fertilize"), (True, False))
        )
    ]
    for window in (1, 3, 7, 30):
        sets = [
            set(select_overdue(reminders, TODAY)),
            set(select_due_today(reminders, TODAY)),
            set(select_upcoming(reminders, TODAY, window)),
        ]
        for a, b in itertools.combinations(sets, 2):
            assert a.isdisjoint(b)


def test_generated_reminders_fall_in_exactly_one_view():
    species = {"test-fern": make_species()}
    plants = [
        make_plant(i, last_watered=datetime(2024, 5, 20) + timedelta(days=i))
        for i in range(30)
    ]
    window = 7
    reminders = all_reminders(plants, species, TODAY)
    views = [
        select_overdue(reminders, TODAY),
        select_due_today(reminders, TODAY),
        select_upcoming(reminders, TODAY, window),
    ]
    horizon = TODAY + timedelta(days=window)
    for reminder in reminders:
        hits = sum(reminder in view for view in views)
        if reminder.due_date < horizon:
            assert hits == 1, reminder
        else:
            assert hits == 0, reminder
