from fastapi import APIRouter

from verdant.api.v1.endpoints import apartments, plants, reminders, species, vacation

api_router = APIRouter()

api_router.include_router(species.router)
api_router.include_router(apartments.router)
api_router.include_router(apartments.rooms_router)
api_router.include_router(plants.router)
api_router.include_router(plants.care_events_router)
api_router.include_router(reminders.router)
api_router.include_router(vacation.router)
