#!/usr/bin/env python3
"""
One-off script to print the vacation care tasks for a plant collection.

Usage:
    python scripts/run_vacation_plan.py plants.json 2024-07-01 2024-07-14
    python scripts/run_vacation_plan.py plants.json 2024-07-01 2024-07-14 --ics plan.ics

plants.json holds a list of plant objects in the same shape the API accepts
on POST /api/v1/plants (species_id, nickname, last_watered, ...).
"""
import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from verdant.schemas.plant import PlantCreate
from verdant.services.calendar import build_ics_calendar, tasks_to_events
from verdant.services.species_catalog import species_table
from verdant.services.store import PlantStore
from verdant.services.intervals import utc_today
from verdant.services.vacation import generate_tasks

parser = argparse.ArgumentParser(description="Vacation care task planner")
parser.add_argument("plants", type=Path, help="JSON file with a list of plants")
parser.add_argument("start", type=date.fromisoformat, help="First day away (YYYY-MM-DD)")
parser.add_argument("end", type=date.fromisoformat, help="Last day away (YYYY-MM-DD)")
parser.add_argument("--today", type=date.fromisoformat, default=None,
                    help="Generation date for fertilizer gating (default: today, UTC)")
parser.add_argument("--ics", type=Path, default=None, help="Also write an iCalendar file")


def main() -> None:
    args = parser.parse_args()
    store = PlantStore()
    for raw in json.loads(args.plants.read_text()):
        data = PlantCreate.model_validate(raw)
        fields = data.model_dump(exclude={"species_id", "created_at"})
        store.add_plant(data.species_id, created_at=data.created_at, **fields)

    species = species_table()
    tasks = generate_tasks(store.snapshot(), species, args.start, args.end, args.today or utc_today())
    plants = store.plants_by_id()

    print(f"{len(tasks)} tasks from {args.start} to {args.end}\n")
    for task in tasks:
        print(f"{task.task_date.isoformat()}  {task.task_type:<9}  {task.instructions}")

    if args.ics:
        args.ics.write_text(build_ics_calendar(tasks_to_events(tasks, plants, species)))
        print(f"\nCalendar written to {args.ics}")


if __name__ == "__main__":
    main()
