from pets_api.app.core import contract

BASE = "/api/v1/pets"


def create(client, **values):
    resp = client.post(f"{BASE}/", json=values)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_and_get_pet(client, toto):
    pet = create(client, **toto)
    assert pet["name"] == "Toto"
    assert pet["uri"] == contract.item_uri(pet["id"])

    resp = client.get(f"{BASE}/{pet['id']}")
    assert resp.status_code == 200
    assert resp.json() == pet


def test_create_pet_defaults(client):
    pet = create(client, name="Rex", gender=0)
    assert pet["breed"] is None
    assert pet["weight"] == 0


def test_create_pet_validation_errors(client):
    resp = client.post(f"{BASE}/", json={"gender": 1})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "missing_required_field"

    resp = client.post(f"{BASE}/", json={"name": "Rex", "gender": 4})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "invalid_field_value"

    resp = client.post(f"{BASE}/", json={"name": "Rex", "gender": 1, "weight": -1})
    assert resp.status_code == 400

    assert client.get(f"{BASE}/").json() == []


def test_get_missing_and_malformed_pet(client):
    assert client.get(f"{BASE}/41").status_code == 404
    resp = client.get(f"{BASE}/abc")
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "malformed_identifier"


def test_list_pets_with_filters(client):
    create(client, name="Rex", breed="Boxer", gender=1, weight=30)
    create(client, name="Luna", breed="Boxer", gender=2, weight=25)
    create(client, name="Toto", breed="Terrier", gender=1, weight=7)

    names = [p["name"] for p in client.get(f"{BASE}/", params={"sort": "name"}).json()]
    assert names == ["Luna", "Rex", "Toto"]

    boxers = client.get(f"{BASE}/", params={"breed": "Boxer", "sort": "weight desc"}).json()
    assert [p["name"] for p in boxers] == ["Rex", "Luna"]

    males = client.get(f"{BASE}/", params={"gender": 1, "columns": "id,name"}).json()
    assert {p["name"] for p in males} == {"Rex", "Toto"}
    assert set(males[0]) == {"id", "name", "uri"}


def test_list_pets_rejects_unknown_columns(client):
    resp = client.get(f"{BASE}/", params={"columns": "name,owner"})
    assert resp.status_code == 400


def test_update_pet(client, toto):
    pet = create(client, **toto)
    resp = client.patch(f"{BASE}/{pet['id']}", json={"weight": 8})
    assert resp.status_code == 200
    assert resp.json() == {"uri": pet["uri"], "updated": 1}
    assert client.get(f"{BASE}/{pet['id']}").json()["weight"] == 8

    resp = client.patch(f"{BASE}/{pet['id']}", json={})
    assert resp.json()["updated"] == 0

    resp = client.patch(f"{BASE}/{pet['id']}", json={"name": None})
    assert resp.status_code == 400


def test_delete_pet(client, toto):
    pet = create(client, **toto)
    assert client.delete(f"{BASE}/{pet['id']}").json()["deleted"] == 1
    assert client.delete(f"{BASE}/{pet['id']}").json()["deleted"] == 0


def test_catalog_actions(client):
    resp = client.post(f"{BASE}/dummy")
    assert resp.status_code == 201
    assert resp.json()["name"] == "Toto"
    client.post(f"{BASE}/dummy")

    resp = client.delete(f"{BASE}/")
    assert resp.json() == {"uri": contract.CONTENT_URI, "deleted": 2}
    assert client.get(f"{BASE}/").json() == []


def test_resolve_content_uri(client):
    resp = client.get("/api/v1/content/", params={"uri": contract.item_uri(3)})
    assert resp.status_code == 200
    assert resp.json() == {
        "uri": contract.item_uri(3),
        "kind": "item",
        "id": 3,
        "type": contract.CONTENT_ITEM_TYPE,
    }

    resp = client.get("/api/v1/content/", params={"uri": contract.CONTENT_URI})
    assert resp.json()["kind"] == "collection"
    assert resp.json()["type"] == contract.CONTENT_LIST_TYPE

    resp = client.get("/api/v1/content/", params={"uri": "content://elsewhere/things"})
    assert resp.status_code == 404
    assert resp.json()["detail"]["code"] == "unsupported_resource"


def test_create_pet_with_oversized_weight_is_rejected(client):
    resp = client.post(f"{BASE}/", json={"name": "Big", "gender": 1, "weight": 2**63})
    assert resp.status_code == 400
    assert resp.json()["detail"]["code"] == "invalid_field_value"
    assert client.get(f"{BASE}/").json() == []


def test_create_pet_rejects_boolean_gender(client):
    resp = client.post(f"{BASE}/", json={"name": "B", "gender": True})
    assert resp.status_code == 422
    assert client.get(f"{BASE}/").json() == []
