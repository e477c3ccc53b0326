from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

LightLevel = Literal["low", "medium", "bright", "direct"]
WindowDirection = Literal["north", "east", "south", "west", "none"]


class ApartmentCreate(BaseModel):
    name: str
    address: str = ""


class ApartmentUpdate(BaseModel):
    name: Optional[str] = None
    address: Optional[str] = None


class ApartmentRead(BaseModel):
    id: int
    name: str
    address: str
    created_at: datetime

    model_config = {"from_attributes": True}


class RoomCreate(BaseModel):
    name: str
    light_level: LightLevel = "medium"
    window_direction: WindowDirection = "none"
    notes: str = ""


class RoomUpdate(BaseModel):
    name: Optional[str] = None
    light_level: Optional[LightLevel] = None
    window_direction: Optional[WindowDirection] = None
    notes: Optional[str] = None


class RoomRead(BaseModel):
    id: int
    apartment_id: int
    name: str
    light_level: str
    window_direction: str
    notes: str

    model_config = {"from_attributes": True}
