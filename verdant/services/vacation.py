"""
Vacation care planning.

generate_tasks expands each plant's recurring care into dated tasks for every
day of [start_date, end_date]. A task lands on every day index i with
i = days_since (mod interval), where days_since counts from the last performed
(or creation) day to the trip start. That phase differs from the reminder
generator's "last performed + interval" unless days_since is a multiple of
the interval.

Fertilizing is gated once, by the month of `today` (the day the plan is
generated), not per task date. A trip that crosses into a non-fertilizing
month keeps the gating decision made at generation.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Optional

from verdant.models.plant import Plant
from verdant.models.species import Species
from verdant.models.vacation import VacationTask
from verdant.services.intervals import DayLike, effective_interval, last_performed, parse_day
from verdant.services.reminders import SpeciesTable

logger = logging.getLogger(__name__)

MIST_EVERY_DAYS = 2

WATER_AMOUNT_LABELS: dict[str, str] = {
    "little": "a little water",
    "moderate": "a moderate amount of water",
    "much": "plenty of water",
}


def plant_display_name(plant: Plant, species: Optional[Species]) -> str:
    if plant.nickname:
        return plant.nickname
    if species is not None:
        return species.common_name
    return "Plant"


def _first_offset(days_since: int, interval: int) -> int:
    """Phase shift such that (i + offset) % interval == 0 exactly when i = days_since (mod interval)."""
    return interval - (days_since % interval)


def _tasks_for_plant(
    plant: Plant,
    species: Species,
    start: date,
    trip_days: int,
    fertilize_active: bool,
) -> list[VacationTask]:
    name = plant_display_name(plant, species)
    amount = WATER_AMOUNT_LABELS.get(species.water_amount, "water")

    water_interval = effective_interval(plant, species, "water")
    water_since = (start - last_performed(plant, "water")).days
    water_offset = _first_offset(water_since, water_interval)

    fertilize_interval = effective_interval(plant, species, "fertilize")
    fertilize_active = fertilize_active and fertilize_interval > 0
    if fertilize_active:
        fertilize_since = (start - last_performed(plant, "fertilize")).days
        fertilize_offset = _first_offset(fertilize_since, fertilize_interval)

    tasks: list[VacationTask] = []
    for i in range(trip_days + 1):
        day = start + timedelta(days=i)

        # An overdue plant is always watered on the first day
        if (i + water_offset) % water_interval == 0 or (i == 0 and water_since >= water_interval):
            tasks.append(VacationTask(
                plant_id=plant.id,
                task_date=day,
                task_type="water",
                instructions=f"Water {name} ({amount})",
            ))

        if fertilize_active and (i + fertilize_offset) % fertilize_interval == 0:
            tasks.append(VacationTask(
                plant_id=plant.id,
                task_date=day,
                task_type="fertilize",
                instructions=f"Fertilize {name}",
            ))

        if species.humidity == "high" and i % MIST_EVERY_DAYS == 0:
            tasks.append(VacationTask(
                plant_id=plant.id,
                task_date=day,
                task_type="mist",
                instructions=f"Mist {name} (needs high humidity)",
            ))

    return tasks


def generate_tasks(
    plants: Iterable[Plant],
    species_table: SpeciesTable,
    start_date: DayLike,
    end_date: DayLike,
    today: DayLike,
) -> list[VacationTask]:
    """
    Returns one task per (plant, day, action) where the cadence lands inside
    the inclusive trip window, sorted by ISO task date.

    Plants without a resolvable species are skipped. An empty collection or an
    end date before the start date yields an empty list.
    """
    start = parse_day(start_date)
    end = parse_day(end_date)
    month = parse_day(today).month
    trip_days = (end - start).days
    if trip_days < 0:
        return []

    tasks: list[VacationTask] = []
    for plant in plants:
        species = species_table.get(plant.species_id)
        if species is None:
            logger.debug("generate_tasks: plant %d has unknown species %r, skipping",
                         plant.id, plant.species_id)
            continue
        tasks.extend(_tasks_for_plant(
            plant, species, start, trip_days, month in species.fertilize_months
        ))

    return sorted(tasks, key=lambda t: t.task_date.isoformat())


# ── Plan maintenance ──────────────────────────────────────────────────────────


def auto_assign(tasks: list[VacationTask], helper_ids: list[int]) -> None:
    """Distribute tasks round-robin over helpers, in task order."""
    if not helper_ids:
        return
    for index, task in enumerate(tasks):
        task.helper_id = helper_ids[index % len(helper_ids)]


def unassign_helper(tasks: list[VacationTask], helper_id: int) -> None:
    for task in tasks:
        if task.helper_id == helper_id:
            task.helper_id = None
