"""Tests for the ``requests`` based API client, using a mocked session."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from pet_store_client import PetStoreAPI, encode_query


def make_response(status_code=200, body=None, text=None):
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
    response.url = "http://testserver"
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return PetStoreAPI(base_url="http://pets.local/", session=session)


def test_encode_query_nested():
    doll = {"name": "a", "nestedDoll": {"name": "b"}}

    assert encode_query(doll, "russianDoll") == [
        ("russianDoll[name]", "a"),
        ("russianDoll[nestedDoll][name]", "b"),
    ]


def test_encode_query_lists_and_scalars():
    assert encode_query(["x", "y"], "tags") == [("tags[0]", "x"), ("tags[1]", "y")]
    assert encode_query(True, "flag") == [("flag", "true")]
    assert encode_query(None, "skip") == []


def test_list_pets_sends_filters(api, session):
    session.request.return_value = make_response(body=[{"id": 1, "name": "cat", "tag": "cute"}])

    pets, error = api.list_pets(tags=["cute"], limit=1)

    assert error is None
    assert pets == [{"id": 1, "name": "cat", "tag": "cute"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://pets.local/pets"
    assert kwargs["params"] == [("tags", "cute"), ("limit", "1")]


def test_get_pet_substitutes_id(api, session):
    session.request.return_value = make_response(body={"id": 2, "name": "dog", "tag": "gentle"})

    pet, error = api.get_pet(2)

    assert error is None
    assert pet["name"] == "dog"
    assert session.request.call_args.kwargs["url"] == "http://pets.local/pets/2"


def test_bad_request_is_returned_as_error(api, session):
    session.request.return_value = make_response(
        status_code=400, body={"error": "Bad Request", "message": "Pet not found", "id": 9}
    )

    pet, error = api.get_pet(9)

    assert pet is None
    assert error == {"status_code": 400, "message": "Pet not found"}


def test_add_and_update_send_json(api, session):
    session.request.return_value = make_response(body={"id": 4, "name": "fox", "tag": ""})

    api.add_pet({"name": "fox"})
    assert session.request.call_args.kwargs["json"] == {"name": "fox"}
    assert session.request.call_args.kwargs["method"] == "POST"

    api.update_pet(4, {"name": "fox", "tag": "red"})
    assert session.request.call_args.kwargs["method"] == "PUT"
    assert session.request.call_args.kwargs["url"] == "http://pets.local/pets/4"


def test_delete_with_empty_body(api, session):
    session.request.return_value = make_response(status_code=204)

    assert api.delete_pet(1) == (True, None)
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_connection_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")

    pets, error = api.list_pets()

    assert pets == []
    assert error == {"status_code": None, "message": "refused"}


def test_nested_dolls_returns_text(api, session):
    session.request.return_value = make_response(text="Nested dolls name: a,b")

    text, error = api.nested_dolls({"name": "a", "nestedDoll": {"name": "b"}})

    assert error is None
    assert text == "Nested dolls name: a,b"
    assert session.request.call_args.kwargs["params"] == [
        ("russianDoll[name]", "a"),
        ("russianDoll[nestedDoll][name]", "b"),
    ]


def test_endpoints_discovered_from_openapi(tmp_path, session):
    spec = {
        "paths": {
            "/v2/animals": {"get": {"tags": ["pets"], "operationId": "findPets"}},
            "/v2/animals/{petId}": {"get": {"tags": ["pets"], "operationId": "findPetById"}},
            "/other": {"get": {"tags": ["misc"]}},
        }
    }
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(spec), encoding="utf-8")
    session.request.return_value = make_response(body={"id": 3})

    api = PetStoreAPI(base_url="http://pets.local", openapi_path=str(path), session=session)
    api.get_pet(3)

    assert [(ep.method, ep.path) for ep in api.endpoints] == [("GET", "/v2/animals"), ("GET", "/v2/animals/{id}")]
    assert session.request.call_args.kwargs["url"] == "http://pets.local/v2/animals/3"


def test_missing_endpoint_is_reported(tmp_path, session):
    spec = {"paths": {"/pets": {"get": {"tags": ["pets"]}}}}
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(spec), encoding="utf-8")

    api = PetStoreAPI(openapi_path=str(path), session=session)
    ok, error = api.delete_pet(1)

    assert ok is False
    assert error["status_code"] is None
    session.request.assert_not_called()


def test_unreadable_openapi_falls_back_to_defaults(tmp_path, session):
    path = tmp_path / "openapi.json"
    path.write_text("{broken", encoding="utf-8")

    api = PetStoreAPI(openapi_path=str(path), session=session)

    assert ("DELETE", "/pets/{id}") in [(ep.method, ep.path) for ep in api.endpoints]


@pytest.mark.parametrize(
    "document",
    [
        [1, 2],
        {"paths": None},
        {"paths": {"/animals": {"get": {"tags": [None, 3, "misc"]}}}},
    ],
)
def test_wrongly_shaped_openapi_falls_back_to_defaults(tmp_path, session, document):
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps(document), encoding="utf-8")

    api = PetStoreAPI(openapi_path=str(path), session=session)

    assert ("GET", "/pets") in [(ep.method, ep.path) for ep in api.endpoints]
    assert ("DELETE", "/pets/{id}") in [(ep.method, ep.path) for ep in api.endpoints]


def test_null_tags_do_not_stop_discovery(tmp_path, session):
    path = tmp_path / "openapi.json"
    path.write_text(json.dumps({"paths": {"/pets": {"get": {"tags": None}}}}), encoding="utf-8")

    api = PetStoreAPI(openapi_path=str(path), session=session)

    assert [(ep.method, ep.path) for ep in api.endpoints] == [("GET", "/pets")]
