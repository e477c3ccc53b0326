from datetime import datetime, timezone

import pytest

from verdant.services.care_events import record_event
from tests.factories import make_plant

PERFORMED = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("action,field", [
    ("water", "last_watered"),
    ("fertilize", "last_fertilized"),
    ("repot", "last_repotted"),
])
def test_tracked_actions_update_last_performed(action, field):
    plant = make_plant()
    event, updated = record_event(plant, action, PERFORMED, notes="done")
    assert getattr(updated, field) == PERFORMED
    assert event.plant_id == plant.id
    assert event.action == action
    assert event.performed_at == PERFORMED
    assert event.notes == "done"
    # Original record is untouched
    assert getattr(plant, field) is None


@pytest.mark.parametrize("action", ["prune", "mist", "rotate", "other"])
def test_log_only_actions_leave_plant_unchanged(action):
    plant = make_plant(last_watered=datetime(2024, 5, 1))
    event, updated = record_event(plant, action, PERFORMED)
    assert updated == plant
    assert event.action == action


def test_later_event_overwrites_earlier_stamp():
    plant = make_plant()
    _, plant = record_event(plant, "water", datetime(2024, 6, 1))
    _, plant = record_event(plant, "water", datetime(2024, 6, 9))
    assert plant.last_watered == datetime(2024, 6, 9)
