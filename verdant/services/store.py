"""
In-memory plant collection.

Holds the household's apartments and rooms, its plants, the care event log
and vacation plans. An apartment owns its rooms and a room owns the plants
placed in it: deleting either removes everything beneath it.
Plant records are frozen; every write swaps in a new record under the lock,
so readers observe either the old or the new plant, never a partial update.
Lookups of unknown ids return None; callers decide how to report it.
"""
import itertools
import logging
import threading
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Optional

from verdant.models.care import CareAction, CareEvent
from verdant.models.home import Apartment, Room
from verdant.models.plant import Plant
from verdant.models.vacation import VacationHelper, VacationPlan, VacationTask
from verdant.services import care_events, vacation

logger = logging.getLogger(__name__)


class PlantStore:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._apartments: dict[int, Apartment] = {}
        self._rooms: dict[int, Room] = {}
        self._plants: dict[int, Plant] = {}
        self._events: list[CareEvent] = []
        self._plans: dict[int, VacationPlan] = {}
        self._apartment_ids = itertools.count(1)
        self._room_ids = itertools.count(1)
        self._plant_ids = itertools.count(1)
        self._event_ids = itertools.count(1)
        self._plan_ids = itertools.count(1)
        self._helper_ids = itertools.count(1)
        self._task_ids = itertools.count(1)

    # ── Apartments & rooms ────────────────────────────────────────────────────

    def list_apartments(self) -> list[Apartment]:
        with self._lock:
            return list(self._apartments.values())

    def get_apartment(self, apartment_id: int) -> Optional[Apartment]:
        with self._lock:
            return self._apartments.get(apartment_id)

    def add_apartment(self, name: str, address: str = "") -> Apartment:
        with self._lock:
            apartment = Apartment(
                id=next(self._apartment_ids),
                name=name,
                address=address,
                created_at=datetime.now(timezone.utc),
            )
            self._apartments[apartment.id] = apartment
        logger.info("add_apartment: added apartment %d '%s'", apartment.id, name)
        return apartment

    def update_apartment(self, apartment_id: int, **changes) -> Optional[Apartment]:
        with self._lock:
            apartment = self._apartments.get(apartment_id)
            if apartment is None:
                return None
            updated = replace(apartment, **changes)
            self._apartments[apartment_id] = updated
            return updated

    def delete_apartment(self, apartment_id: int) -> bool:
        """Remove an apartment together with its rooms and the plants in them."""
        with self._lock:
            if self._apartments.pop(apartment_id, None) is None:
                return False
            room_ids = [r.id for r in self._rooms.values() if r.apartment_id == apartment_id]
            removed = sum(self._delete_room_locked(room_id) for room_id in room_ids)
        logger.info("delete_apartment: apartment %d removed with %d rooms, %d plants",
                    apartment_id, len(room_ids), removed)
        return True

    def list_rooms(self, apartment_id: Optional[int] = None) -> list[Room]:
        with self._lock:
            if apartment_id is None:
                return list(self._rooms.values())
            return [r for r in self._rooms.values() if r.apartment_id == apartment_id]

    def get_room(self, room_id: int) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(room_id)

    def add_room(self, apartment_id: int, name: str, **fields) -> Optional[Room]:
        """None if the apartment is unknown."""
        with self._lock:
            if apartment_id not in self._apartments:
                return None
            room = Room(id=next(self._room_ids), apartment_id=apartment_id, name=name, **fields)
            self._rooms[room.id] = room
        logger.info("add_room: added room %d to apartment %d", room.id, apartment_id)
        return room

    def update_room(self, room_id: int, **changes) -> Optional[Room]:
        with self._lock:
            room = self._rooms.get(room_id)
            if room is None:
                return None
            updated = replace(room, **changes)
            self._rooms[room_id] = updated
            return updated

    def delete_room(self, room_id: int) -> bool:
        """Remove a room and the plants placed in it."""
        with self._lock:
            if room_id not in self._rooms:
                return False
            removed = self._delete_room_locked(room_id)
        logger.info("delete_room: room %d removed with %d plants", room_id, removed)
        return True

    def _delete_room_locked(self, room_id: int) -> int:
        del self._rooms[room_id]
        plant_ids = [p.id for p in self._plants.values() if p.room_id == room_id]
        for plant_id in plant_ids:
            del self._plants[plant_id]
        return len(plant_ids)

    # ── Plants ────────────────────────────────────────────────────────────────

    def snapshot(self) -> tuple[Plant, ...]:
        """Consistent copy of the collection for scheduling reads."""
        with self._lock:
            return tuple(self._plants.values())

    def list_plants(self) -> list[Plant]:
        return list(self.snapshot())

    def plants_by_id(self) -> dict[int, Plant]:
        with self._lock:
            return dict(self._plants)

    def get_plant(self, plant_id: int) -> Optional[Plant]:
        with self._lock:
            return self._plants.get(plant_id)

    def add_plant(self, species_id: str, created_at: Optional[datetime] = None, **fields) -> Plant:
        with self._lock:
            plant = Plant(
                id=next(self._plant_ids),
                species_id=species_id,
                created_at=created_at or datetime.now(timezone.utc),
                **fields,
            )
            self._plants[plant.id] = plant
        logger.info("add_plant: added plant %d (%s)", plant.id, species_id)
        return plant

    def update_plant(self, plant_id: int, **changes) -> Optional[Plant]:
        with self._lock:
            plant = self._plants.get(plant_id)
            if plant is None:
                return None
            updated = replace(plant, **changes)
            self._plants[plant_id] = updated
            return updated

    def delete_plant(self, plant_id: int) -> bool:
        with self._lock:
            return self._plants.pop(plant_id, None) is not None

    # ── Care events ───────────────────────────────────────────────────────────

    def record_event(
        self,
        plant_id: int,
        action: CareAction,
        performed_at: datetime,
        notes: str = "",
    ) -> Optional[tuple[CareEvent, Plant]]:
        """Append a care event and update the plant's last-performed stamp. None if the plant is unknown."""
        with self._lock:
            plant = self._plants.get(plant_id)
            if plant is None:
                logger.warning("record_event: plant %d not found", plant_id)
                return None
            event, updated = care_events.record_event(
                plant, action, performed_at, notes, event_id=next(self._event_ids)
            )
            self._events.append(event)
            self._plants[plant_id] = updated
        logger.info("record_event: %s recorded for plant %d", action, plant_id)
        return event, updated

    def list_events(self, plant_id: Optional[int] = None) -> list[CareEvent]:
        with self._lock:
            if plant_id is None:
                return list(self._events)
            return [e for e in self._events if e.plant_id == plant_id]

    # ── Vacation plans ────────────────────────────────────────────────────────

    def create_plan(
        self,
        name: str,
        start_date: date,
        end_date: date,
        tasks: list[VacationTask],
        notes: str = "",
    ) -> VacationPlan:
        with self._lock:
            plan = VacationPlan(
                id=next(self._plan_ids),
                name=name,
                start_date=start_date,
                end_date=end_date,
                notes=notes,
                created_at=datetime.now(timezone.utc),
            )
            for task in tasks:
                task.id = next(self._task_ids)
                task.plan_id = plan.id
            plan.tasks = list(tasks)
            self._plans[plan.id] = plan
        logger.info("create_plan: plan %d '%s' created with %d tasks", plan.id, name, len(tasks))
        return plan

    def list_plans(self) -> list[VacationPlan]:
        with self._lock:
            return sorted(self._plans.values(), key=lambda p: p.start_date.isoformat())

    def get_plan(self, plan_id: int) -> Optional[VacationPlan]:
        with self._lock:
            return self._plans.get(plan_id)

    def delete_plan(self, plan_id: int) -> bool:
        with self._lock:
            return self._plans.pop(plan_id, None) is not None

    def add_helper(self, plan_id: int, name: str, email: str) -> Optional[VacationHelper]:
        with self._lock:
            plan = self._plans.get(plan_id)
            if plan is None:
                return None
            helper = VacationHelper(
                id=next(self._helper_ids),
                plan_id=plan_id,
                name=name,
                email=email,
                invited_at=datetime.now(timezone.utc),
            )
            plan.helpers.append(helper)
            return helper

    def get_helper(self, plan_id: int, helper_id: int) -> Optional[VacationHelper]:
        with self._lock:
            plan = self._plans.get(plan_id)
            if plan is None:
                return None
            return next((h for h in plan.helpers if h.id == helper_id), None)

    def remove_helper(self, plan_id: int, helper_id: int) -> bool:
        """Drop a helper and unassign their tasks."""
        with self._lock:
            plan = self._plans.get(plan_id)
            if plan is None:
                return False
            remaining = [h for h in plan.helpers if h.id != helper_id]
            if len(remaining) == len(plan.helpers):
                return False
            plan.helpers = remaining
            vacation.unassign_helper(plan.tasks, helper_id)
            return True

    def mark_calendar_exported(self, plan_id: int, helper_id: int) -> bool:
        with self._lock:
            helper = self.get_helper(plan_id, helper_id)
            if helper is None:
                return False
            helper.calendar_exported = True
            return True

    def get_task(self, plan_id: int, task_id: int) -> Optional[VacationTask]:
        with self._lock:
            plan = self._plans.get(plan_id)
            if plan is None:
                return None
            return next((t for t in plan.tasks if t.id == task_id), None)

    def update_task(self, plan_id: int, task_id: int, **changes) -> Optional[VacationTask]:
        with self._lock:
            task = self.get_task(plan_id, task_id)
            if task is None:
                return None
            for field, value in changes.items():
                setattr(task, field, value)
            return task

    def auto_assign(self, plan_id: int) -> Optional[VacationPlan]:
        with self._lock:
            plan = self._plans.get(plan_id)
            if plan is None:
                return None
            vacation.auto_assign(plan.tasks, [h.id for h in plan.helpers])
            return plan


_store = PlantStore()


def get_store() -> PlantStore:
    return _store
