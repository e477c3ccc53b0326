from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal, Optional

TaskType = Literal["water", "fertilize", "mist"]


@dataclass
class VacationTask:
    plant_id: int
    task_date: date
    task_type: TaskType
    instructions: str
    id: int = 0
    plan_id: Optional[int] = None
    helper_id: Optional[int] = None
    completed: bool = False


@dataclass
class VacationHelper:
    id: int
    plan_id: int
    name: str
    email: str
    invited_at: datetime
    accepted: Optional[bool] = None
    calendar_exported: bool = False


@dataclass
class VacationPlan:
    id: int
    name: str
    start_date: date
    end_date: date
    created_at: datetime
    notes: str = ""
    helpers: list[VacationHelper] = field(default_factory=list)
    tasks: list[VacationTask] = field(default_factory=list)
