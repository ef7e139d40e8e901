from datetime import date

import pytest


def post_sale(client, catalog, lines=None, **extra):
    body = {
        "storeId": catalog["store"],
        "employeeId": catalog["employee"],
        "products": lines if lines is not None else [
            {"productId": catalog["lego"], "quantity": 2, "discount": 10},
            {"productId": catalog["yoyo"], "quantity": 1},
        ],
    }
    body.update(extra)
    return client.post("/sales", json=body)


def test_create_sale(client, catalog):
    response = post_sale(client, catalog, date="2023-03-15")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Sale created successfully"
    assert body["data"]["total"] == pytest.approx(23.0)
    assert body["data"]["date"] == "2023-03-15"
    assert len(body["data"]["products"]) == 2

    sale_id = body["data"]["id"]
    fetched = client.get(f"/sales/{sale_id}").json()["data"]
    assert fetched["total"] == pytest.approx(23.0)


def test_client_total_is_ignored(client, catalog):
    response = post_sale(client, catalog, total=1.0)
    assert response.json()["data"]["total"] == pytest.approx(23.0)


def test_sale_with_unknown_product_is_not_stored(client, catalog):
    response = post_sale(client, catalog, lines=[{"productId": 999, "quantity": 1}])

    assert response.status_code == 404
    assert response.json()["data"]["message"] == "Product with ID 999 not found."
    assert client.get("/sales").json()["data"]["totalElements"] == 0


def test_sale_needs_at_least_one_line(client, catalog):
    assert post_sale(client, catalog, lines=[]).status_code == 400


def test_sale_line_quantity_must_be_positive(client, catalog):
    response = post_sale(client, catalog, lines=[{"productId": catalog["lego"], "quantity": 0}])
    assert response.status_code == 400


def test_sales_by_date_range(client, catalog):
    post_sale(client, catalog, date="2023-01-10")
    post_sale(client, catalog, date="2023-02-10")

    response = client.get("/sales/byDateRange", params={"startDate": "2023-01-01", "endDate": "2023-01-31"})
    assert response.status_code == 200
    assert [sale["date"] for sale in response.json()["data"]] == ["2023-01-10"]


def test_reversed_date_range_is_rejected(client, catalog):
    response = client.get("/sales/byDateRange", params={"startDate": "2023-02-01", "endDate": "2023-01-01"})
    assert response.status_code == 400
    assert response.json() == {
        "message": "Invalid request",
        "data": {"message": "Start date 2023-02-01 is after end date 2023-01-01"},
    }


def test_sales_are_paged_and_filtered(client, catalog):
    for _ in range(3):
        post_sale(client, catalog)

    page = client.get("/sales", params={"page": 1, "size": 2}).json()["data"]
    assert page["totalElements"] == 3
    assert page["numberOfElements"] == 1

    filtered = client.get("/sales/paged", params={"storeId": catalog["store"]}).json()["data"]
    assert filtered["totalElements"] == 3
    assert client.get("/sales/paged", params={"employeeId": 999}).json()["data"]["totalElements"] == 0


def test_patch_sale_keeps_total(client, catalog):
    sale = post_sale(client, catalog).json()["data"]

    response = client.patch(f"/sales/{sale['id']}", json={"date": "2024-12-24", "total": 0})

    assert response.status_code == 200
    assert response.json()["data"]["date"] == "2024-12-24"
    assert response.json()["data"]["total"] == pytest.approx(23.0)


def test_default_sale_date_is_today(client, catalog):
    sale = post_sale(client, catalog).json()["data"]
    assert sale["date"] == date.today().isoformat()


def test_store_and_employee_views_of_a_sale(client, catalog):
    post_sale(client, catalog)

    assert client.get(f"/stores/{catalog['store']}/totalSales").json()["data"] == pytest.approx(23.0)
    assert len(client.get(f"/stores/{catalog['store']}/sales").json()["data"]) == 1
    assert len(client.get(f"/employees/{catalog['employee']}/sales").json()["data"]) == 1


def test_reports(client, catalog):
    post_sale(client, catalog)

    stores = client.get("/stores/sales").json()["data"]
    assert stores[0]["id"] == catalog["store"]
    assert stores[0]["totalSales"] == pytest.approx(23.0)

    sellers = client.get("/employees/top-sellers").json()["data"]
    assert sellers[0]["numberOfSales"] == 1

    categories = client.get("/categories/sales").json()["data"]
    assert categories[0]["totalSales"] == pytest.approx(23.0)

    best = client.get("/products/category/best-sellers", params={"categoryId": catalog["category"]}).json()["data"]
    assert best[0]["id"] == catalog["lego"]
