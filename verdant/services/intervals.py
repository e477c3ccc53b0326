"""
Cadence resolution and calendar-day helpers shared by the reminder and
vacation planners.

All scheduling arithmetic is done on calendar days. Timestamps are reduced
to their date before any subtraction so a plant watered at 23:59 counts the
same as one watered at 00:01.
"""
from datetime import date, datetime, timezone
from typing import Literal, Optional, Union

from verdant.models.plant import Plant
from verdant.models.species import Species

IntervalAction = Literal["water", "fertilize"]

DayLike = Union[date, datetime, str]


def parse_day(value: DayLike) -> date:
    """
    Reduce a date, datetime or ISO 8601 string to a calendar date.

    Raises ValueError for unparseable strings.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    raise ValueError(f"Not a date: {value!r}")


def utc_today() -> date:
    """Current calendar day on the UTC clock, the same clock that stamps created_at."""
    return datetime.now(timezone.utc).date()


def _positive_int(value) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def effective_interval(
    plant: Plant, species: Optional[Species], action: IntervalAction
) -> Optional[int]:
    """Override if positive, otherwise the species default. None when species is missing."""
    if species is None:
        return None
    if action == "water":
        override = _positive_int(plant.water_frequency_override)
        return override if override is not None else species.water_frequency_days
    if action == "fertilize":
        override = _positive_int(plant.fertilize_frequency_override)
        return override if override is not None else species.fertilize_frequency_days
    raise ValueError(f"No interval for action {action!r}")


def last_performed(plant: Plant, action: IntervalAction) -> date:
    """Calendar day the action last happened, falling back to the plant's creation."""
    stamp = plant.last_watered if action == "water" else plant.last_fertilized
    return parse_day(stamp if stamp is not None else plant.created_at)
