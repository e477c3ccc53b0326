from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from verdant.core.deps import SpeciesLookup, Store
from verdant.models.plant import Plant
from verdant.schemas.care import CareEventCreate, CareEventRead, ReminderRead
from verdant.schemas.plant import PlantCreate, PlantRead, PlantUpdate
from verdant.services.intervals import utc_today
from verdant.services.reminders import reminders_for_plant
from verdant.services.store import PlantStore

router = APIRouter(prefix="/plants", tags=["plants"])
care_events_router = APIRouter(prefix="/care-events", tags=["care-events"])


# ── Helpers ────────────────────────────────────────────────────────────────────


def _get_plant_or_404(store: PlantStore, plant_id: int) -> Plant:
    plant = store.get_plant(plant_id)
    if plant is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


def _check_species(species: SpeciesLookup, species_id: str) -> None:
    if species_id not in species:
        raise HTTPException(status_code=400, detail=f"Unknown species '{species_id}'")


def _check_room(store: PlantStore, room_id: Optional[int]) -> None:
    if room_id is not None and store.get_room(room_id) is None:
        raise HTTPException(status_code=400, detail=f"Unknown room {room_id}")


# ── Plant endpoints ────────────────────────────────────────────────────────────


@router.get("", response_model=list[PlantRead])
async def list_plants(store: Store):
    return store.list_plants()


@router.post("", response_model=PlantRead, status_code=status.HTTP_201_CREATED)
async def create_plant(data: PlantCreate, store: Store, species: SpeciesLookup):
    _check_species(species, data.species_id)
    _check_room(store, data.room_id)
    fields = data.model_dump(exclude={"species_id", "created_at"})
    return store.add_plant(data.species_id, created_at=data.created_at, **fields)


@router.get("/{plant_id}", response_model=PlantRead)
async def get_plant(plant_id: int, store: Store):
    return _get_plant_or_404(store, plant_id)


@router.patch("/{plant_id}", response_model=PlantRead)
async def update_plant(plant_id: int, data: PlantUpdate, store: Store, species: SpeciesLookup):
    _get_plant_or_404(store, plant_id)
    changes = data.model_dump(exclude_unset=True)
    if "species_id" in changes:
        if changes["species_id"] is None:
            raise HTTPException(status_code=400, detail="species_id cannot be cleared")
        _check_species(species, changes["species_id"])
    if "room_id" in changes:
        _check_room(store, changes["room_id"])
    for field in ("nickname", "notes", "health_status"):
        if field in changes and changes[field] is None:
            del changes[field]
    plant = store.update_plant(plant_id, **changes)
    if plant is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    return plant


@router.delete("/{plant_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plant(plant_id: int, store: Store):
    if not store.delete_plant(plant_id):
        raise HTTPException(status_code=404, detail="Plant not found")


@router.get("/{plant_id}/reminders", response_model=list[ReminderRead])
async def plant_reminders(
    plant_id: int,
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description="ISO date; defaults to the current UTC date"),
):
    plant = _get_plant_or_404(store, plant_id)
    return reminders_for_plant(plant, species.get(plant.species_id), today or utc_today())


# ── Care event endpoints ───────────────────────────────────────────────────────


@router.post(
    "/{plant_id}/care-events", response_model=CareEventRead, status_code=status.HTTP_201_CREATED
)
async def record_care_event(plant_id: int, data: CareEventCreate, store: Store):
    performed_at = data.performed_at or datetime.now(timezone.utc)
    result = store.record_event(plant_id, data.action, performed_at, data.notes)
    if result is None:
        raise HTTPException(status_code=404, detail="Plant not found")
    event, _ = result
    return event


@care_events_router.get("", response_model=list[CareEventRead])
async def list_care_events(store: Store, plant_id: Optional[int] = Query(None)):
    return store.list_events(plant_id)
