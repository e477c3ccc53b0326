from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

HealthStatus = Literal["thriving", "good", "fair", "poor"]


@dataclass(frozen=True)
class Plant:
    id: int
    species_id: str
    created_at: datetime
    nickname: str = ""
    notes: str = ""
    health_status: HealthStatus = "good"
    room_id: Optional[int] = None

    last_watered: Optional[datetime] = None
    last_fertilized: Optional[datetime] = None
    last_repotted: Optional[datetime] = None

    # Per-plant cadence overrides (days); species default applies when unset
    water_frequency_override: Optional[int] = None
    fertilize_frequency_override: Optional[int] = None
