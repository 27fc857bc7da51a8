"""
Top‑level router for version 1 of the API.

Aggregates the pet CRUD routes and the demonstration routes.  When a
new endpoint module is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import breeds, misc, pets

router = APIRouter()

router.include_router(pets.router, prefix="/pets", tags=["pets"])
router.include_router(breeds.router, prefix="/breeds", tags=["breeds"])
# The misc routes live at the root (``/nestedReferenceInParameter``,
# ``/no-response-schema``, ``/health``) so they take no prefix.
router.include_router(misc.router, tags=["misc"])
