"""
Breed lookup endpoint.

Returns a single example breed: a cat breed when the body asks for one,
a dog breed otherwise.
"""

from typing import Dict

from fastapi import APIRouter

from pet_store_api.app.schemas.breed import BreedQuery

router = APIRouter()

CAT_BREED = "Sphynx"
DOG_BREED = "Labrador"


@router.post("")
async def get_breeds(query: BreedQuery) -> Dict[str, str]:
    if query.catBreed:
        return {"catBreed": CAT_BREED}
    return {"dogBreed": DOG_BREED}
