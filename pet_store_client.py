"""Pet Store API client.

A small wrapper around the pet REST API.  If an OpenAPI document is
available the client reads it to discover the pet paths; otherwise it
falls back to the conventional ``/pets`` and ``/pets/{id}`` routes.
The client uses the ``requests`` library internally.

High‑level methods:

* :meth:`PetStoreAPI.list_pets` – list pets, optionally by tag and limit.
* :meth:`PetStoreAPI.get_pet` – fetch a single pet.
* :meth:`PetStoreAPI.add_pet` – create a pet.
* :meth:`PetStoreAPI.update_pet` – replace a pet's name and tag.
* :meth:`PetStoreAPI.delete_pet` – remove a pet.
* :meth:`PetStoreAPI.nested_dolls` – call the nested parameter demo.

Every method returns a ``(data, error)`` tuple.  ``error`` is ``None``
on success and otherwise a dict with ``status_code`` and ``message``.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]

_PATH_PARAM = re.compile(r"\{[^{}]*\}")


@dataclass
class ApiEndpoint:
    """A discovered API endpoint.

    Attributes:
        path: The URI template, e.g. ``/pets`` or ``/pets/{id}``.
        method: The HTTP method in upper case.
    """

    path: str
    method: str

    @property
    def has_id(self) -> bool:
        return "{" in self.path


def encode_query(value: Any, key: str) -> List[Tuple[str, str]]:
    """Flatten ``value`` into bracket‑notation query pairs.

    ``{"name": "a", "nestedDoll": {"name": "b"}}`` under ``russianDoll``
    becomes ``russianDoll[name]=a&russianDoll[nestedDoll][name]=b``;
    list items are indexed as ``key[0]``, ``key[1]`` and so on.
    """
    if isinstance(value, dict):
        pairs: List[Tuple[str, str]] = []
        for sub_key, sub_value in value.items():
            pairs.extend(encode_query(sub_value, f"{key}[{sub_key}]"))
        return pairs
    if isinstance(value, (list, tuple)):
        pairs = []
        for index, item in enumerate(value):
            pairs.extend(encode_query(item, f"{key}[{index}]"))
        return pairs
    if isinstance(value, bool):
        return [(key, "true" if value else "false")]
    if value is None:
        return []
    return [(key, str(value))]


class PetStoreAPI:
    """Client for the pet store API."""

    _PET_TAGS = {"pet", "pets"}

    _DEFAULT_ENDPOINTS = [
        ("GET", "/pets"),
        ("POST", "/pets"),
        ("GET", "/pets/{id}"),
        ("PUT", "/pets/{id}"),
        ("DELETE", "/pets/{id}"),
    ]

    def __init__(
        self,
        *,
        base_url: str = "http://127.0.0.1:3000",
        openapi_path: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API.
            openapi_path: Optional path to an OpenAPI JSON document
                used to discover the pet endpoints.
            session: Optional requests session; one is created if
                omitted.
            timeout: Per‑request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.spec: Dict[str, Any] = {}
        self.endpoints: List[ApiEndpoint] = []
        if openapi_path and os.path.exists(openapi_path):
            try:
                with open(openapi_path, "r", encoding="utf-8") as f:
                    self.spec = json.load(f)
                self._discover_endpoints()
            except (OSError, ValueError) as e:
                logger.warning(
                    "Failed to load OpenAPI document %s: %s. Falling back to defaults.",
                    openapi_path,
                    e,
                )
        if not self.endpoints:
            self.endpoints = [ApiEndpoint(path=path, method=method) for method, path in self._DEFAULT_ENDPOINTS]

    # ------------------------------------------------------------------
    # OpenAPI discovery
    # ------------------------------------------------------------------
    def _discover_endpoints(self) -> None:
        """Record the operations tagged ``pets`` (or living under ``/pets``).

        Path parameters are normalised to ``{id}`` so that the
        high‑level methods can substitute the pet id.
        """
        paths = self.spec.get("paths") if isinstance(self.spec, dict) else None
        if not isinstance(paths, dict):
            logger.warning("OpenAPI document has no usable \"paths\" object")
            return
        for path, methods in paths.items():
            if not isinstance(methods, dict):
                continue
            for method_lower, op in methods.items():
                if not isinstance(op, dict):
                    continue
                raw_tags = op.get("tags")
                if not isinstance(raw_tags, list):
                    raw_tags = []
                tags = {t.lower() for t in raw_tags if isinstance(t, str)}
                if not (tags & self._PET_TAGS or path.rstrip("/").startswith("/pets")):
                    continue
                normalised = _PATH_PARAM.sub("{id}", path, count=1)
                self.endpoints.append(ApiEndpoint(path=normalised, method=method_lower.upper()))

    def _pick_endpoint(self, method: str, has_id: bool) -> Optional[ApiEndpoint]:
        for ep in self.endpoints:
            if ep.method == method and ep.has_id == has_id:
                return ep
        return None

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Any = None, json_body: Any = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            ``(data, None)`` on success where ``data`` is the decoded
            JSON body, the response text for non‑JSON bodies, or
            ``None`` for an empty body.  ``(None, error)`` on failure.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError:
            return response.text, None

    def _call(
        self, method: str, has_id: bool, pet_id: Any = None, **kwargs: Any
    ) -> Tuple[Optional[Any], Optional[Error]]:
        ep = self._pick_endpoint(method, has_id)
        if ep is None:
            logger.warning("No endpoint available for %s pets (has_id=%s)", method, has_id)
            return None, {"status_code": None, "message": f"No endpoint for {method} pets"}
        path = ep.path.replace("{id}", str(pet_id)) if has_id else ep.path
        return self._request(ep.method, path, **kwargs)

    # ------------------------------------------------------------------
    # Pet operations
    # ------------------------------------------------------------------
    def list_pets(
        self, tags: Optional[Sequence[str]] = None, limit: Optional[int] = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve pets, optionally filtered by tag and capped by ``limit``."""
        params: List[Tuple[str, str]] = []
        for tag in tags or []:
            params.append(("tags", tag))
        if limit is not None:
            params.append(("limit", str(limit)))
        data, error = self._call("GET", False, params=params or None)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_pet(self, pet_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("GET", True, pet_id)

    def add_pet(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a pet.  ``payload`` must contain ``name``."""
        return self._call("POST", False, json_body=payload)

    def update_pet(self, pet_id: Any, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("PUT", True, pet_id, json_body=payload)

    def delete_pet(self, pet_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a pet.  Returns ``(True, None)`` when the server accepted it."""
        _, error = self._call("DELETE", True, pet_id)
        if error:
            return False, error
        return True, None

    def nested_dolls(self, doll: Dict[str, Any]) -> Tuple[Optional[str], Optional[Error]]:
        """Send ``doll`` to the nested parameter endpoint and return its text."""
        return self._request(
            "GET", "/nestedReferenceInParameter", params=encode_query(doll, "russianDoll")
        )
