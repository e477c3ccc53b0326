import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Response, status

from verdant.core.config import settings
from verdant.core.deps import SpeciesLookup, Store
from verdant.models.vacation import VacationPlan, VacationTask
from verdant.schemas.vacation import (
    GoogleCalendarLink,
    HelperNotification,
    VacationHelperCreate,
    VacationHelperRead,
    VacationPlanCreate,
    VacationPlanRead,
    VacationTaskRead,
    VacationTaskUpdate,
)
from verdant.services.calendar import (
    build_helper_email,
    build_ics_calendar,
    google_calendar_url,
    tasks_to_events,
)
from verdant.services.email import send_email
from verdant.services.intervals import utc_today
from verdant.services.store import PlantStore
from verdant.services.vacation import generate_tasks

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/vacation-plans", tags=["vacation-plans"])

TODAY_DESCRIPTION = "Generation date; its month gates fertilizing. Defaults to the current UTC date"


# ── Helpers ────────────────────────────────────────────────────────────────────


def _get_plan_or_404(store: PlantStore, plan_id: int) -> VacationPlan:
    plan = store.get_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Vacation plan not found")
    return plan


def _slug(name: str) -> str:
    return "-".join(name.lower().split()) or "plan"


def _tasks_for_export(store: PlantStore, plan: VacationPlan, helper_id: Optional[int]) -> list[VacationTask]:
    tasks = plan.tasks
    if helper_id is not None:
        if store.get_helper(plan.id, helper_id) is None:
            raise HTTPException(status_code=404, detail="Helper not found")
        tasks = [t for t in tasks if t.helper_id == helper_id]
    if not tasks:
        raise HTTPException(status_code=400, detail="No tasks to export")
    return tasks


# ── Plan endpoints ─────────────────────────────────────────────────────────────


@router.get("", response_model=list[VacationPlanRead])
async def list_plans(store: Store):
    return store.list_plans()


@router.post("/preview", response_model=list[VacationTaskRead])
async def preview_plan(
    data: VacationPlanCreate,
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
):
    return generate_tasks(
        store.snapshot(), species, data.start_date, data.end_date, today or utc_today()
    )


@router.post("", response_model=VacationPlanRead, status_code=status.HTTP_201_CREATED)
async def create_plan(
    data: VacationPlanCreate,
    store: Store,
    species: SpeciesLookup,
    today: Optional[date] = Query(None, description=TODAY_DESCRIPTION),
):
    tasks = generate_tasks(
        store.snapshot(), species, data.start_date, data.end_date, today or utc_today()
    )
    return store.create_plan(
        data.name.strip(), data.start_date, data.end_date, tasks, notes=data.notes.strip()
    )


@router.get("/{plan_id}", response_model=VacationPlanRead)
async def get_plan(plan_id: int, store: Store):
    return _get_plan_or_404(store, plan_id)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(plan_id: int, store: Store):
    if not store.delete_plan(plan_id):
        raise HTTPException(status_code=404, detail="Vacation plan not found")


# ── Helpers (people) ───────────────────────────────────────────────────────────


@router.post(
    "/{plan_id}/helpers", response_model=VacationHelperRead, status_code=status.HTTP_201_CREATED
)
async def add_helper(plan_id: int, data: VacationHelperCreate, store: Store):
    helper = store.add_helper(plan_id, data.name.strip(), str(data.email))
    if helper is None:
        raise HTTPException(status_code=404, detail="Vacation plan not found")
    return helper


@router.delete("/{plan_id}/helpers/{helper_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_helper(plan_id: int, helper_id: int, store: Store):
    _get_plan_or_404(store, plan_id)
    if not store.remove_helper(plan_id, helper_id):
        raise HTTPException(status_code=404, detail="Helper not found")


@router.post("/{plan_id}/auto-assign", response_model=VacationPlanRead)
async def auto_assign_tasks(plan_id: int, store: Store):
    plan = _get_plan_or_404(store, plan_id)
    if not plan.helpers:
        raise HTTPException(status_code=400, detail="Add a helper before assigning tasks")
    return store.auto_assign(plan_id)


@router.post("/{plan_id}/helpers/{helper_id}/notify", response_model=HelperNotification)
async def notify_helper(plan_id: int, helper_id: int, store: Store, species: SpeciesLookup):
    plan = _get_plan_or_404(store, plan_id)
    helper = store.get_helper(plan_id, helper_id)
    if helper is None:
        raise HTTPException(status_code=404, detail="Helper not found")

    # Unassigned helpers receive the whole plan
    tasks = [t for t in plan.tasks if t.helper_id == helper.id] or plan.tasks
    body = build_helper_email(
        helper.name, settings.OWNER_NAME, plan, tasks, store.plants_by_id(), species
    )
    sent = await send_email(helper.email, f"Plant care while I'm away: {plan.name}", body)
    logger.info("notify_helper: plan %d helper %d sent=%s (%d tasks)",
                plan_id, helper_id, sent, len(tasks))
    return HelperNotification(helper_id=helper.id, sent=sent, task_count=len(tasks))


# ── Tasks ──────────────────────────────────────────────────────────────────────


@router.patch("/{plan_id}/tasks/{task_id}", response_model=VacationTaskRead)
async def update_task(plan_id: int, task_id: int, data: VacationTaskUpdate, store: Store):
    plan = _get_plan_or_404(store, plan_id)
    changes = data.model_dump(exclude_unset=True)
    if changes.get("helper_id") is not None and all(h.id != changes["helper_id"] for h in plan.helpers):
        raise HTTPException(status_code=400, detail="Helper is not part of this plan")
    if "completed" in changes and changes["completed"] is None:
        del changes["completed"]
    task = store.update_task(plan_id, task_id, **changes)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


@router.get("/{plan_id}/calendar.ics")
async def export_calendar(
    plan_id: int,
    store: Store,
    species: SpeciesLookup,
    helper_id: Optional[int] = Query(None, description="Only tasks assigned to this helper"),
):
    plan = _get_plan_or_404(store, plan_id)
    tasks = _tasks_for_export(store, plan, helper_id)

    events = tasks_to_events(tasks, store.plants_by_id(), species)
    content = build_ics_calendar(events, name=plan.name)
    if helper_id is not None:
        store.mark_calendar_exported(plan_id, helper_id)
    return Response(
        content=content,
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="vacation-plan-{_slug(plan.name)}.ics"'},
    )


@router.get("/{plan_id}/google-calendar", response_model=list[GoogleCalendarLink])
async def google_calendar_links(
    plan_id: int,
    store: Store,
    species: SpeciesLookup,
    helper_id: Optional[int] = Query(None, description="Only tasks assigned to this helper"),
):
    plan = _get_plan_or_404(store, plan_id)
    tasks = _tasks_for_export(store, plan, helper_id)
    events = tasks_to_events(tasks, store.plants_by_id(), species)
    return [
        GoogleCalendarLink(
            task_id=task.id, task_date=task.task_date, title=event.title, url=google_calendar_url(event)
        )
        for task, event in zip(tasks, events)
    ]
