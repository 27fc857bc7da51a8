"""
Business logic for pets.

``PetService`` implements list, get, create, update and delete over
the in‑memory ``PetStore``.  Records are looked up by id equality.
Operations that cannot be carried out raise ``BadRequestError`` with
the message and context keys included in the 400 response body.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from pet_store_api.app.core.errors import BadRequestError
from pet_store_api.app.core.store import get_store
from pet_store_api.app.schemas.pet import PetRead, PetWrite

logger = logging.getLogger(__name__)

PET_NOT_FOUND = "Pet not found"
PET_NAME_REQUIRED = "Pet should have name"


class PetService:
    """Service for managing the pet collection."""

    @classmethod
    async def list_pets(
        cls,
        tags: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
    ) -> List[PetRead]:
        """Return pets in insertion order.

        When ``tags`` is non-empty only pets whose tag is one of them are
        returned.  ``limit`` caps the number of results; ``None`` means
        no cap.
        """
        pets = get_store().all()
        if tags:
            wanted = set(tags)
            pets = [pet for pet in pets if pet.get("tag") in wanted]
        if limit is not None:
            pets = pets[:limit]
        return [PetRead(**pet) for pet in pets]

    @classmethod
    async def get_pet(cls, pet_id: int) -> PetRead:
        pet = get_store().find(pet_id)
        if pet is None:
            raise BadRequestError(PET_NOT_FOUND, id=pet_id)
        return PetRead(**pet)

    @classmethod
    async def create_pet(cls, data: Optional[PetWrite]) -> PetRead:
        """Append a new pet and return it.

        The name is required; the tag defaults to an empty string.
        """
        name = cls._require_name(data)
        store = get_store()
        pet = store.append({"id": store.next_id(), "name": name, "tag": data.tag or ""})
        logger.info("Created pet %s (%s)", pet["id"], pet["name"])
        return PetRead(**pet)

    @classmethod
    async def update_pet(cls, pet_id: int, data: Optional[PetWrite]) -> PetRead:
        """Overwrite the name and tag of an existing pet.

        The name is validated before the lookup, so a nameless body is
        rejected even for an unknown id.  A missing tag resets it to an
        empty string.
        """
        name = cls._require_name(data)
        pet = get_store().find(pet_id)
        if pet is None:
            raise BadRequestError(PET_NOT_FOUND, id=pet_id)
        pet["name"] = name
        pet["tag"] = data.tag or ""
        logger.info("Updated pet %s", pet_id)
        return PetRead(**pet)

    @classmethod
    async def delete_pet(cls, pet_id: int) -> None:
        if not get_store().remove(pet_id):
            raise BadRequestError(PET_NOT_FOUND, id=pet_id)
        logger.info("Deleted pet %s", pet_id)

    @staticmethod
    def _require_name(data: Optional[PetWrite]) -> str:
        if data is None or not data.name:
            body: Dict[str, Any] = data.model_dump(exclude_none=True) if data is not None else {}
            raise BadRequestError(PET_NAME_REQUIRED, body=body)
        return data.name
