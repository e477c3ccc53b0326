from fastapi import APIRouter, HTTPException, status

from verdant.core.deps import Store
from verdant.models.home import Apartment, Room
from verdant.schemas.home import (
    ApartmentCreate,
    ApartmentRead,
    ApartmentUpdate,
    RoomCreate,
    RoomRead,
    RoomUpdate,
)
from verdant.schemas.plant import PlantRead
from verdant.services.store import PlantStore

router = APIRouter(prefix="/apartments", tags=["apartments"])
rooms_router = APIRouter(prefix="/rooms", tags=["rooms"])


# ── Apartments ─────────────────────────────────────────────────────────────────


@router.get("", response_model=list[ApartmentRead])
async def list_apartments(store: Store):
    return store.list_apartments()


@router.post("", response_model=ApartmentRead, status_code=status.HTTP_201_CREATED)
async def create_apartment(data: ApartmentCreate, store: Store):
    return store.add_apartment(data.name.strip(), data.address.strip())


@router.get("/{apartment_id}", response_model=ApartmentRead)
async def get_apartment(apartment_id: int, store: Store):
    return _get_apartment_or_404(store, apartment_id)


@router.patch("/{apartment_id}", response_model=ApartmentRead)
async def update_apartment(apartment_id: int, data: ApartmentUpdate, store: Store):
    _get_apartment_or_404(store, apartment_id)
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    return store.update_apartment(apartment_id, **changes)


@router.delete("/{apartment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_apartment(apartment_id: int, store: Store):
    if not store.delete_apartment(apartment_id):
        raise HTTPException(status_code=404, detail="Apartment not found")


@router.get("/{apartment_id}/rooms", response_model=list[RoomRead])
async def list_rooms(apartment_id: int, store: Store):
    _get_apartment_or_404(store, apartment_id)
    return store.list_rooms(apartment_id)


@router.post("/{apartment_id}/rooms", response_model=RoomRead, status_code=status.HTTP_201_CREATED)
async def create_room(apartment_id: int, data: RoomCreate, store: Store):
    fields = data.model_dump(exclude={"name"})
    room = store.add_room(apartment_id, data.name.strip(), **fields)
    if room is None:
        raise HTTPException(status_code=404, detail="Apartment not found")
    return room


# ── Room routes (prefix /rooms) ───────────────────────────────────────────────


@rooms_router.get("/{room_id}", response_model=RoomRead)
async def get_room(room_id: int, store: Store):
    return _get_room_or_404(store, room_id)


@rooms_router.patch("/{room_id}", response_model=RoomRead)
async def update_room(room_id: int, data: RoomUpdate, store: Store):
    _get_room_or_404(store, room_id)
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    return store.update_room(room_id, **changes)


@rooms_router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(room_id: int, store: Store):
    if not store.delete_room(room_id):
        raise HTTPException(status_code=404, detail="Room not found")


@rooms_router.get("/{room_id}/plants", response_model=list[PlantRead])
async def list_room_plants(room_id: int, store: Store):
    _get_room_or_404(store, room_id)
    return [p for p in store.list_plants() if p.room_id == room_id]


# ── Helpers ───────────────────────────────────────────────────────────────────


def _get_apartment_or_404(store: PlantStore, apartment_id: int) -> Apartment:
    apartment = store.get_apartment(apartment_id)
    if apartment is None:
        raise HTTPException(status_code=404, detail="Apartment not found")
    return apartment


def _get_room_or_404(store: PlantStore, room_id: int) -> Room:
    room = store.get_room(room_id)
    if room is None:
        raise HTTPException(status_code=404, detail="Room not found")
    return room
