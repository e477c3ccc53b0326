from typing import Annotated

from fastapi import Depends

from verdant.services.reminders import SpeciesTable
from verdant.services.species_catalog import species_table
from verdant.services.store import PlantStore, get_store


def get_species_table() -> SpeciesTable:
    return species_table()


Store = Annotated[PlantStore, Depends(get_store)]
SpeciesLookup = Annotated[SpeciesTable, Depends(get_species_table)]
