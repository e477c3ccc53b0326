from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal

CareAction = Literal["water", "fertilize", "repot", "prune", "mist", "rotate", "other"]
ReminderAction = Literal["water", "fertilize"]


@dataclass(frozen=True)
class CareEvent:
    id: int
    plant_id: int
    action: CareAction
    performed_at: datetime
    notes: str = ""


@dataclass(frozen=True)
class Reminder:
    plant_id: int
    action: ReminderAction
    due_date: date
    completed: bool

    @property
    def due_key(self) -> str:
        return self.due_date.isoformat()
