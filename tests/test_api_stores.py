from unittest.mock import MagicMock

from maventoys.api.deps import get_store_service
from maventoys.main import app
from maventoys.services import StoreService


def create_store(client, name, active=True, city="Guadalajara", location="Downtown"):
    response = client.post("/stores", json={
        "name": name,
        "city": city,
        "location": location,
        "openDate": "2012-06-01",
        "active": active,
    })
    assert response.status_code == 201
    return response.json()["data"]


def test_root_and_health(client):
    assert client.get("/").json() == {"message": "Welcome to Maven Toys API"}
    assert client.get("/health").json() == {"status": "ok"}


def test_create_store_uses_camel_case(client):
    data = create_store(client, "Maven Toys Leon 1")
    assert data["id"] is not None
    assert data["openDate"] == "2012-06-01"
    assert "open_date" not in data


def test_active_list_and_paged_list(client):
    create_store(client, "Maven Toys Leon 1")
    create_store(client, "Maven Toys Leon 2")
    create_store(client, "Maven Toys Leon 3", active=False)

    active = client.get("/stores").json()
    assert active["message"] == "Active store details fetched successfully"
    assert len(active["data"]) == 2

    page = client.get("/stores/paged").json()["data"]
    assert page["totalElements"] == 3
    assert page["numberOfElements"] == 3
    assert page["size"] == 10


def test_page_past_the_end_is_empty(client):
    for n in range(3):
        create_store(client, f"Maven Toys Merida {n}")

    page = client.get("/stores/paged", params={"page": 5, "size": 10}).json()["data"]

    assert page["content"] == []
    assert page["totalElements"] == 3
    assert page["totalPages"] == 1
    assert page["number"] == 5


def test_paged_filters_and_limit_alias(client):
    create_store(client, "Maven Toys Hermosillo 1", location="Airport")
    create_store(client, "Maven Toys Cuernavaca 1", location="Downtown")

    page = client.get("/stores/paged", params={"name": "HERMOSILLO", "limit": 1}).json()["data"]

    assert page["size"] == 1
    assert [store["name"] for store in page["content"]] == ["Maven Toys Hermosillo 1"]


def test_unknown_store_returns_not_found_envelope(client):
    response = client.get("/stores/999")
    assert response.status_code == 404
    assert response.json() == {
        "message": "Entity not found",
        "data": {"message": "Store not found with ID: 999"},
    }


def test_invalid_store_is_rejected(client):
    response = client.post("/stores", json={"name": "", "city": "Leon", "location": "Downtown"})
    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid request"
    assert body["data"]["errors"]


def test_patch_and_put_keep_unsent_fields(client):
    store = create_store(client, "Maven Toys Leon 1")

    patched = client.patch(f"/stores/{store['id']}", json={"name": "Maven Toys Leon Centro"}).json()
    assert patched["data"]["name"] == "Maven Toys Leon Centro"
    assert patched["data"]["city"] == "Guadalajara"

    updated = client.put(f"/stores/{store['id']}", json={"location": "Residential"}).json()
    assert updated["data"]["name"] == "Maven Toys Leon Centro"
    assert updated["data"]["location"] == "Residential"


def test_total_sales_of_store_without_sales(client):
    store = create_store(client, "Maven Toys Leon 1")
    response = client.get(f"/stores/{store['id']}/totalSales")
    assert response.status_code == 200
    assert response.json()["data"] == 0.0


def test_store_without_sales_has_no_sales_list(client):
    store = create_store(client, "Maven Toys Leon 1")
    assert client.get(f"/stores/{store['id']}/sales").status_code == 404


def test_page_size_is_bounded(client):
    assert client.get("/stores/paged", params={"size": 0}).status_code == 400
    assert client.get("/stores/paged", params={"page": -1}).status_code == 400


def test_far_page_is_empty_with_real_total(client):
    create_store(client, "Maven Toys Leon 1")

    response = client.get("/stores/paged", params={"page": 10**18, "size": 10})

    assert response.status_code == 200
    page = response.json()["data"]
    assert page["content"] == []
    assert page["totalElements"] == 1
    assert page["numberOfElements"] == 0


def test_patch_rejects_blank_required_text(client):
    store = create_store(client, "Maven Toys Leon 1", city="Leon")

    response = client.patch(f"/stores/{store['id']}", json={"city": "", "location": ""})
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request"

    unchanged = client.get(f"/stores/{store['id']}").json()["data"]
    assert unchanged["city"] == "Leon"
    assert unchanged["location"] == "Downtown"


def test_unexpected_failure_returns_error_envelope(client):
    store_repo = MagicMock()
    store_repo.find_active.side_effect = RuntimeError("connection lost")
    app.dependency_overrides[get_store_service] = lambda: StoreService(store_repo, MagicMock(), MagicMock())

    response = client.get("/stores")

    assert response.status_code == 500
    assert response.json() == {
        "message": "Unexpected error",
        "data": {"message": "Error fetching all active stores"},
    }
    assert "connection lost" not in response.text
