from verdant.models.species import Species
from verdant.models.home import Apartment, Room
from verdant.models.plant import Plant
from verdant.models.care import CareEvent, Reminder
from verdant.models.vacation import VacationHelper, VacationPlan, VacationTask

__all__ = [
    "Species",
    "Apartment",
    "Room",
    "Plant",
    "CareEvent",
    "Reminder",
    "VacationHelper",
    "VacationPlan",
    "VacationTask",
]
