from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, model_validator


class VacationPlanCreate(BaseModel):
    name: str
    start_date: date
    end_date: date
    notes: str = ""

    @model_validator(mode="after")
    def check_dates(self) -> "VacationPlanCreate":
        if not self.name.strip():
            raise ValueError("name must not be blank")
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        return self


class VacationTaskRead(BaseModel):
    id: int
    plan_id: Optional[int]
    plant_id: int
    helper_id: Optional[int]
    task_date: date
    task_type: Literal["water", "fertilize", "mist"]
    instructions: str
    completed: bool

    model_config = {"from_attributes": True}


class VacationTaskUpdate(BaseModel):
    helper_id: Optional[int] = None
    completed: Optional[bool] = None


class VacationHelperCreate(BaseModel):
    name: str
    email: EmailStr


class VacationHelperRead(BaseModel):
    id: int
    plan_id: int
    name: str
    email: str
    invited_at: datetime
    accepted: Optional[bool]
    calendar_exported: bool

    model_config = {"from_attributes": True}


class VacationPlanRead(BaseModel):
    id: int
    name: str
    start_date: date
    end_date: date
    notes: str
    created_at: datetime
    helpers: list[VacationHelperRead] = []
    tasks: list[VacationTaskRead] = []

    model_config = {"from_attributes": True}


class HelperNotification(BaseModel):
    helper_id: int
    sent: bool
    task_count: int


class GoogleCalendarLink(BaseModel):
    task_id: int
    task_date: date
    title: str
    url: str
