"""
Miscellaneous endpoints: nested query parameters, a response without a
declared schema, and a liveness probe.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pet_store_api.app.core.query import nested_query
from pet_store_api.app.services.doll_service import describe_dolls

router = APIRouter()


@router.get("/nestedReferenceInParameter", response_class=PlainTextResponse)
async def nested_reference_in_parameter(query: Dict[str, Any] = Depends(nested_query)) -> str:
    """List the names of a chain of nested dolls.

    Pass the doll in bracket notation, e.g.
    ``?russianDoll[name]=big&russianDoll[nestedDoll][name]=small``, or
    as a JSON object string.  Responds with
    ``Nested dolls name: big,small``.
    """
    return describe_dolls(query.get("russianDoll"))


@router.get("/no-response-schema")
async def no_response_schema():
    return {
        "name": "Pikachu",
        "branch": "ECE",
        "language": "C++",
        "particles": 498,
        "float": 10.5,
    }


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
