import json
from unittest import mock

import pytest
import requests

from pets_client import PetsAPI


def make_response(status_code, payload=None):
    response = requests.Response()
    response.status_code = status_code
    response.url = "http://test/api/v1/pets/"
    if payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = b""
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def api(session):
    return PetsAPI(base_url="http://test/", api_key="secret", session=session)


def test_list_pets_sends_filters(api, session):
    session.request.return_value = make_response(200, [{"id": 1, "name": "Toto"}])
    pets, error = api.list_pets(columns=["id", "name"], gender=1, sort="name")
    assert error is None
    assert pets == [{"id": 1, "name": "Toto"}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://test/api/v1/pets/"
    assert kwargs["params"] == {"columns": "id,name", "gender": 1, "sort": "name"}
    assert kwargs["headers"] == {"Authorization": "Bearer secret"}


def test_create_pet_returns_created_pet(api, session):
    pet = {"id": 4, "name": "Rex", "breed": None, "gender": 0, "weight": 0, "uri": "content://x/pets/4"}
    session.request.return_value = make_response(201, pet)
    data, error = api.create_pet({"name": "Rex", "gender": 0})
    assert error is None
    assert data == pet
    assert session.request.call_args.kwargs["json"] == {"name": "Rex", "gender": 0}


def test_provider_failure_is_returned_as_error(api, session):
    session.request.return_value = make_response(
        400, {"detail": {"code": "missing_required_field", "message": "Pet requires a name"}}
    )
    data, error = api.create_pet({"gender": 1})
    assert data is None
    assert error == {"status_code": 400, "code": "missing_required_field", "message": "Pet requires a name"}


def test_plain_http_error_detail(api, session):
    session.request.return_value = make_response(404, {"detail": "Pet not found"})
    data, error = api.get_pet(9)
    assert data is None
    assert error["status_code"] == 404
    assert error["code"] is None
    assert error["message"] == "Pet not found"


def test_network_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    count, error = api.delete_pet(1)
    assert count == 0
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_counts_from_write_results(api, session):
    session.request.return_value = make_response(200, {"uri": "u", "updated": 1})
    assert api.update_pet(3, {"weight": 5}) == (1, None)
    assert session.request.call_args.kwargs["method"] == "PATCH"

    session.request.return_value = make_response(200, {"uri": "u", "deleted": 2})
    assert api.delete_all_pets() == (2, None)


def test_resolve_passes_uri(api, session):
    info = {"uri": "content://com.example.android.pets/pets", "kind": "collection", "id": None, "type": "t"}
    session.request.return_value = make_response(200, info)
    assert api.resolve(info["uri"]) == (info, None)
    assert session.request.call_args.kwargs["params"] == {"uri": info["uri"]}
