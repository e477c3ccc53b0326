from dataclasses import dataclass
from datetime import datetime
from typing import Literal

LightLevel = Literal["low", "medium", "bright", "direct"]
WindowDirection = Literal["north", "east", "south", "west", "none"]


@dataclass(frozen=True)
class Apartment:
    id: int
    name: str
    created_at: datetime
    address: str = ""


@dataclass(frozen=True)
class Room:
    id: int
    apartment_id: int
    name: str
    light_level: LightLevel = "medium"
    window_direction: WindowDirection = "none"
    notes: str = ""
