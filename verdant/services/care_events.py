from dataclasses import replace
from datetime import datetime

from verdant.models.care import CareAction, CareEvent
from verdant.models.plant import Plant

# Actions that move a "last performed" timestamp; others are log-only
_LAST_PERFORMED_FIELD: dict[str, str] = {
    "water": "last_watered",
    "fertilize": "last_fertilized",
    "repot": "last_repotted",
}


def record_event(
    plant: Plant,
    action: CareAction,
    performed_at: datetime,
    notes: str = "",
    event_id: int = 0,
) -> tuple[CareEvent, Plant]:
    """Build the care event and the plant as it looks after the action. Never mutates `plant`."""
    event = CareEvent(
        id=event_id,
        plant_id=plant.id,
        action=action,
        performed_at=performed_at,
        notes=notes,
    )
    field_name = _LAST_PERFORMED_FIELD.get(action)
    if field_name is None:
        return event, plant
    return event, replace(plant, **{field_name: performed_at})
