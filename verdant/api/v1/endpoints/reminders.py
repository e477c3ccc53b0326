from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from verdant.core.config import settings
from verdant.core.deps import SpeciesLookup, Store
from verdant.schemas.care import ReminderRead
from verdant.services import reminders
from verdant.services.intervals import utc_today

router = APIRouter(prefix="/reminders", tags=["reminders"])

TODAY_DESCRIPTION = "ISO date; defaults to the current UTC date"


@router.get("", response_model=list[ReminderRead])
async def list_reminders(
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
):
    return reminders.all_reminders(store.snapshot(), species, today or utc_today())


@router.get("/overdue", response_model=list[ReminderRead])
async def overdue_reminders(
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
):
    return reminders.overdue(store.snapshot(), species, today or utc_today())


@router.get("/today", response_model=list[ReminderRead])
async def todays_reminders(
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
):
    return reminders.due_today(store.snapshot(), species, today or utc_today())


@router.get("/upcoming", response_model=list[ReminderRead])
async def upcoming_reminders(
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
    days: Optional[int] = Query(None, ge=1, le=365, description="Window length in days"),
):
    window = days or settings.REMINDER_WINDOW_DAYS
    return reminders.upcoming(store.snapshot(), species, today or utc_today(), window)
