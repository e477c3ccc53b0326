"""
Care reminder generation.

reminders_for_plant: next water/fertilize due dates for one plant
all_reminders:       every plant's reminders, sorted by ISO due date
overdue, due_today, upcoming: views over all_reminders

Reminders are recomputed from plant + species + today on every call; nothing
here reads the clock. Plants whose species cannot be resolved are skipped.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Mapping, Optional

from verdant.models.care import Reminder
from verdant.models.plant import Plant
from verdant.models.species import Species
from verdant.services.intervals import DayLike, effective_interval, last_performed, parse_day

logger = logging.getLogger(__name__)

SpeciesTable = Mapping[str, Species]


def _reminder(plant: Plant, species: Species, action, today: date) -> Reminder:
    interval = effective_interval(plant, species, action)
    due = last_performed(plant, action) + timedelta(days=interval)
    # Due today counts as overdue, so only a future due date is "completed"
    return Reminder(plant_id=plant.id, action=action, due_date=due, completed=due > today)


def reminders_for_plant(
    plant: Plant, species: Optional[Species], today: DayLike
) -> list[Reminder]:
    """
    Returns 0–2 reminders: water always, fertilize only when today's month is
    one of the species' fertilizing months. Repotting is not reminded.
    """
    if species is None:
        return []
    today = parse_day(today)

    reminders = [_reminder(plant, species, "water", today)]
    if today.month in species.fertilize_months:
        reminders.append(_reminder(plant, species, "fertilize", today))
    return reminders


def all_reminders(
    plants: Iterable[Plant], species_table: SpeciesTable, today: DayLike
) -> list[Reminder]:
    today = parse_day(today)
    reminders: list[Reminder] = []
    for plant in plants:
        species = species_table.get(plant.species_id)
        if species is None:
            logger.debug("all_reminders: plant %d has unknown species %r, skipping",
                         plant.id, plant.species_id)
            continue
        reminders.extend(reminders_for_plant(plant, species, today))
    return sorted(reminders, key=lambda r: r.due_key)


# ── Filters over an arbitrary reminder list ───────────────────────────────────


def select_overdue(reminders: Iterable[Reminder], today: DayLike) -> list[Reminder]:
    key = parse_day(today).isoformat()
    return [r for r in reminders if r.due_key < key and not r.completed]


def select_due_today(reminders: Iterable[Reminder], today: DayLike) -> list[Reminder]:
    key = parse_day(today).isoformat()
    return [r for r in reminders if r.due_key == key]


def select_upcoming(
    reminders: Iterable[Reminder], today: DayLike, window_days: int = 7
) -> list[Reminder]:
    today = parse_day(today)
    start = today.isoformat()
    end = (today + timedelta(days=window_days)).isoformat()
    return [r for r in reminders if start < r.due_key < end]


# ── Views over a plant collection ─────────────────────────────────────────────


def overdue(plants: Iterable[Plant], species_table: SpeciesTable, today: DayLike) -> list[Reminder]:
    return select_overdue(all_reminders(plants, species_table, today), today)


def due_today(plants: Iterable[Plant], species_table: SpeciesTable, today: DayLike) -> list[Reminder]:
    return select_due_today(all_reminders(plants, species_table, today), today)


def upcoming(
    plants: Iterable[Plant],
    species_table: SpeciesTable,
    today: DayLike,
    window_days: int = 7,
) -> list[Reminder]:
    return select_upcoming(all_reminders(plants, species_table, today), today, window_days)
