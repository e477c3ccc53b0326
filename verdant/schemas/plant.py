from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


class PlantCreate(BaseModel):
    species_id: str
    room_id: Optional[int] = None
    nickname: str = ""
    notes: str = ""
    health_status: Literal["thriving", "good", "fair", "poor"] = "good"
    created_at: Optional[datetime] = None
    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    last_repotted: Optional[datetime] = None
    water_frequency_override: Optional[int] = None
    fertilize_frequency_override: Optional[int] = None


class PlantUpdate(BaseModel):
    species_id: Optional[str] = None
    room_id: Optional[int] = None
    nickname: Optional[str] = None
    notes: Optional[str] = None
    health_status: Optional[Literal["thriving", "good", "fair", "poor"]] = None
    water_frequency_override: Optional[int] = None
    fertilize_frequency_override: Optional[int] = None


class PlantRead(BaseModel):
    id: int
    species_id: str
    room_id: Optional[int]
    nickname: str
    notes: str
    health_status: str
    created_at: datetime
    last_watered: Optional[datetime]
    last_fertilized: Optional[datetime]
    last_repotted: Optional[datetime]
    water_frequency_override: Optional[int]
    fertilize_frequency_override: Optional[int]

    model_config = {"from_attributes": True}
