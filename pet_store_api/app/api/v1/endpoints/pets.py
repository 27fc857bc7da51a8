"""
Pet endpoints for API v1.

CRUD over the in‑memory pet collection.  Every failure is answered
with HTTP 400 and a ``{"error": "Bad Request", "message": ...}`` body;
the service layer raises ``BadRequestError`` and the application's
exception handler renders it.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Query, Request, Response, status

from pet_store_api.app.core.config import settings
from pet_store_api.app.core.query import bracket_values
from pet_store_api.app.schemas.pet import PetRead, PetWrite
from pet_store_api.app.services.pet_service import PetService

router = APIRouter()


@router.get("", response_model=List[PetRead])
async def list_pets(
    request: Request,
    tags: Optional[List[str]] = Query(None),
    limit: Optional[int] = Query(None, ge=0),
) -> List[PetRead]:
    """Return all pets, optionally filtered.

    - **tags** — keep only pets whose tag is one of these.  Accepts
      ``tags=a&tags=b`` as well as ``tags[0]=a`` / ``tags[]=a``.
    - **limit** — return at most this many pets.
    """
    bracketed = bracket_values(request.query_params.multi_items(), "tags", settings.query_max_depth)
    # Empty values mean "no filter", not "pets with an empty tag".
    wanted = [tag for tag in (tags or []) + bracketed if tag]
    return await PetService.list_pets(tags=wanted, limit=limit)


@router.post("", response_model=PetRead)
async def add_pet(pet: Optional[PetWrite] = Body(None)) -> PetRead:
    """Create a pet.  ``name`` is required, ``tag`` defaults to ``""``."""
    return await PetService.create_pet(pet)


@router.get("/{pet_id}", response_model=PetRead)
async def get_pet(pet_id: int) -> PetRead:
    return await PetService.get_pet(pet_id)


@router.put("/{pet_id}", response_model=PetRead)
async def update_pet(pet_id: int, pet: Optional[PetWrite] = Body(None)) -> PetRead:
    """Replace the name and tag of an existing pet."""
    return await PetService.update_pet(pet_id, pet)


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_pet(pet_id: int) -> Response:
    await PetService.delete_pet(pet_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
