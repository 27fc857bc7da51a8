"""
In‑memory storage for pet records.

The store is a process‑wide ordered list of plain dicts, seeded at
application start by ``init_store`` and mutated in place by the
service layer.  Nothing is persisted; restarting the process restores
the seed records.  Access is not synchronised, which is acceptable for
a single‑process demo server.

Ids come from a counter that only ever grows, so deleting a record
never lets a later insert reuse its id.
"""

import copy
import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

SEED_PETS: List[Dict[str, Any]] = [
    {"id": 1, "name": "cat", "tag": "cute"},
    {"id": 2, "name": "dog", "tag": "gentle"},
    {"id": 3, "name": "wolf", "tag": "dangerous"},
]


class PetStore:
    """Ordered collection of pet records keyed by ``id``."""

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None) -> None:
        self.records: List[Dict[str, Any]] = []
        self._last_id = 0
        for record in records or []:
            self.records.append(dict(record))
            self._last_id = max(self._last_id, int(record["id"]))

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id

    def all(self) -> List[Dict[str, Any]]:
        return list(self.records)

    def find(self, pet_id: int) -> Optional[Dict[str, Any]]:
        for record in self.records:
            if record["id"] == pet_id:
                return record
        return None

    def append(self, record: Dict[str, Any]) -> Dict[str, Any]:
        self.records.append(record)
        return record

    def remove(self, pet_id: int) -> bool:
        for index, record in enumerate(self.records):
            if record["id"] == pet_id:
                del self.records[index]
                return True
        return False

    def __len__(self) -> int:
        return len(self.records)


_store = PetStore(copy.deepcopy(SEED_PETS))


def init_store() -> PetStore:
    """Reset the store to the seed records and return it.

    Called on application startup; tests call it directly to get a
    clean collection before each case.
    """
    global _store
    _store = PetStore(copy.deepcopy(SEED_PETS))
    logger.info("Pet store initialised with %d seed records", len(_store))
    return _store


def get_store() -> PetStore:
    """Return the process‑wide pet store."""
    return _store
