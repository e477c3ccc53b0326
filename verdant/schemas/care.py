from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel


class CareEventCreate(BaseModel):
    action: Literal["water", "fertilize", "repot", "prune", "mist", "rotate", "other"]
    performed_at: Optional[datetime] = None
    notes: str = ""


class CareEventRead(BaseModel):
    id: int
    plant_id: int
    action: str
    performed_at: datetime
    notes: str

    model_config = {"from_attributes": True}


class ReminderRead(BaseModel):
    plant_id: int
    action: Literal["water", "fertilize"]
    due_date: date
    completed: bool

    model_config = {"from_attributes": True}
