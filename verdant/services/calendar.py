"""
Calendar and email rendering for vacation plans.

Builds iCalendar (RFC 5545) files and Google Calendar links from vacation
tasks, plus the plain-text task summary mailed to helpers.
"""
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Iterable, Mapping, Optional
from urllib.parse import urlencode

from verdant.models.plant import Plant
from verdant.models.vacation import VacationPlan, VacationTask
from verdant.services.reminders import SpeciesTable
from verdant.services.vacation import plant_display_name

TASK_LABELS: dict[str, str] = {
    "water": "Water",
    "fertilize": "Fertilize",
    "mist": "Mist",
}

TASK_START = time(9, 0)
TASK_END = time(9, 30)

PRODID = "-//Verdant//Vacation Care Plan//EN"


@dataclass
class CalendarEvent:
    title: str
    description: str
    start: datetime
    end: datetime
    location: Optional[str] = None


def _ics_stamp(value: datetime) -> str:
    return value.strftime("%Y%m%dT%H%M%S")


def escape_ics(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace(",", "\\,").replace(";", "\\;")
    return escaped.replace("\n", "\\n")


def tasks_to_events(
    tasks: Iterable[VacationTask],
    plants: Mapping[int, Plant],
    species_table: SpeciesTable,
) -> list[CalendarEvent]:
    events = []
    for task in tasks:
        plant = plants.get(task.plant_id)
        species = species_table.get(plant.species_id) if plant is not None else None
        name = plant_display_name(plant, species) if plant is not None else "Plant"
        label = TASK_LABELS.get(task.task_type, task.task_type)
        events.append(CalendarEvent(
            title=f"{label}: {name}",
            description=task.instructions or f"Please {label.lower()} {name}",
            start=datetime.combine(task.task_date, TASK_START),
            end=datetime.combine(task.task_date, TASK_END),
        ))
    return events


def build_ics_event(event: CalendarEvent, stamp: Optional[datetime] = None) -> str:
    stamp = stamp or datetime.now(timezone.utc)
    lines = [
        "BEGIN:VEVENT",
        f"DTSTART:{_ics_stamp(event.start)}",
        f"DTEND:{_ics_stamp(event.end)}",
        f"SUMMARY:{escape_ics(event.title)}",
        f"DESCRIPTION:{escape_ics(event.description)}",
    ]
    if event.location:
        lines.append(f"LOCATION:{escape_ics(event.location)}")
    lines += [
        f"UID:{uuid.uuid4().hex}@verdant",
        f"DTSTAMP:{_ics_stamp(stamp)}",
        "END:VEVENT",
    ]
    return "\r\n".join(lines)


def build_ics_calendar(events: Iterable[CalendarEvent], name: str = "Plant care plan") -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        f"X-WR-CALNAME:{escape_ics(name)}",
    ]
    lines.extend(build_ics_event(e) for e in events)
    lines.append("END:VCALENDAR")
    return "\r\n".join(lines)


def google_calendar_url(event: CalendarEvent) -> str:
    params = {
        "action": "TEMPLATE",
        "text": event.title,
        "details": event.description,
        "dates": f"{_ics_stamp(event.start)}/{_ics_stamp(event.end)}",
    }
    if event.location:
        params["location"] = event.location
    return f"https://calendar.google.com/calendar/render?{urlencode(params)}"


def _long_date(day: date) -> str:
    return f"{day:%B} {day.day}, {day.year}"


def build_helper_email(
    helper_name: str,
    owner_name: str,
    plan: VacationPlan,
    tasks: Iterable[VacationTask],
    plants: Mapping[int, Plant],
    species_table: SpeciesTable,
) -> str:
    by_day: dict[date, list[VacationTask]] = {}
    for task in tasks:
        by_day.setdefault(task.task_date, []).append(task)

    lines = [
        f"Hi {helper_name},",
        "",
        f"{owner_name} has asked you to look after their plants.",
        f"Period: {_long_date(plan.start_date)} to {_long_date(plan.end_date)}",
        "",
        "=== CARE PLAN ===",
        "",
    ]

    for day in sorted(by_day):
        lines.append(f"{day:%A, %B} {day.day}")
        for task in by_day[day]:
            plant = plants.get(task.plant_id)
            species = species_table.get(plant.species_id) if plant is not None else None
            name = plant_display_name(plant, species) if plant is not None else "Plant"
            line = f"  - {TASK_LABELS.get(task.task_type, task.task_type)} {name}"
            if task.instructions:
                line += f": {task.instructions}"
            lines.append(line)
        lines.append("")

    lines.append("Thank you for your help!")
    return "\n".join(lines)
