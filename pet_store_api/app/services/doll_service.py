"""
Traversal of nested "russian doll" objects.

A doll is a mapping with an optional ``name`` and an optional
``nestedDoll`` holding the next doll.  ``collect_names`` walks the
chain recursively, outermost doll first.
"""

import json
from typing import Any, Dict, List, Optional

from pet_store_api.app.core.errors import BadRequestError


def collect_names(doll: Dict[str, Any], names: Optional[List[str]] = None) -> List[str]:
    """Return the ``name`` of every doll in the chain starting at ``doll``."""
    if names is None:
        names = []
    if doll.get("name"):
        names.append(str(doll["name"]))
    nested = doll.get("nestedDoll")
    if isinstance(nested, dict):
        collect_names(nested, names)
    return names


def load_doll(raw: Any) -> Dict[str, Any]:
    """Coerce a query value into a doll mapping.

    Bracket‑decoded parameters arrive as dicts already; a plain value
    is accepted when it is a JSON object.
    """
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except (ValueError, RecursionError):
            decoded = None
        if isinstance(decoded, dict):
            return decoded
    if raw is None:
        raise BadRequestError("russianDoll parameter is required")
    raise BadRequestError("russianDoll must be an object", russianDoll=raw)


def describe_dolls(raw: Any) -> str:
    return f"Nested dolls name: {','.join(collect_names(load_doll(raw)))}"
