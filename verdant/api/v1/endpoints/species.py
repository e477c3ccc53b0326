from fastapi import APIRouter, HTTPException

from verdant.schemas.species import SpeciesRead
from verdant.services.species_catalog import SPECIES_CATALOG, get_species

router = APIRouter(prefix="/species", tags=["species"])


@router.get("", response_model=list[SpeciesRead])
async def list_species():
    return sorted(SPECIES_CATALOG, key=lambda s: s.common_name)


@router.get("/{species_id}", response_model=SpeciesRead)
async def get_species_detail(species_id: str):
    species = get_species(species_id)
    if species is None:
        raise HTTPException(status_code=404, detail="Species not found")
    return species
