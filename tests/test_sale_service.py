from datetime import date

import pytest
from sqlmodel import func, select

from maventoys.exceptions import IdNotFound, InvalidRequest
from maventoys.models import Invoice, Sale
from maventoys.repositories import EmployeeRepository, ProductRepository, SaleRepository, StoreRepository
from maventoys.schemas import InvoiceLineCreate, SaleCreate
from maventoys.services import SaleService
from maventoys.services.sale_service import discounted_amount, sale_total


@pytest.fixture
def service(session):
    return SaleService(
        SaleRepository(session),
        StoreRepository(session),
        EmployeeRepository(session),
        ProductRepository(session),
    )


def count_rows(session, model):
    return session.exec(select(func.count()).select_from(model)).one()


def test_discounted_amount():
    assert discounted_amount(20.0, 10) == pytest.approx(18.0)
    assert discounted_amount(5.0, 0) == pytest.approx(5.0)
    assert discounted_amount(5.0, 100) == pytest.approx(0.0)


def test_sale_total_sums_discounted_lines():
    invoices = [Invoice(quantity=2, subtotal=20.0, discount=10), Invoice(quantity=1, subtotal=5.0, discount=0)]
    assert sale_total(invoices) == pytest.approx(23.0)


@pytest.mark.parametrize("reverse", [False, True])
def test_create_computes_total_in_any_line_order(service, catalog, reverse):
    lines = [
        InvoiceLineCreate(product_id=catalog["lego"], quantity=2, discount=10),
        InvoiceLineCreate(product_id=catalog["yoyo"], quantity=1),
    ]
    if reverse:
        lines.reverse()
    dto = SaleCreate(store_id=catalog["store"], employee_id=catalog["employee"], products=lines)

    response = service.create(dto)

    assert response.message == "Sale created successfully"
    assert response.data.total == pytest.approx(23.0)
    assert response.data.date is not None
    assert sorted(line.subtotal for line in response.data.products) == [5.0, 20.0]
    assert all(line.id is not None for line in response.data.products)


def test_unknown_product_persists_nothing(service, session, catalog):
    dto = SaleCreate(
        store_id=catalog["store"],
        employee_id=catalog["employee"],
        products=[
            InvoiceLineCreate(product_id=catalog["lego"], quantity=1),
            InvoiceLineCreate(product_id=999, quantity=1),
        ],
    )

    with pytest.raises(IdNotFound) as excinfo:
        service.create(dto)

    assert "999" in excinfo.value.message
    assert count_rows(session, Sale) == 0
    assert count_rows(session, Invoice) == 0


def test_unknown_store_is_rejected(service, catalog):
    dto = SaleCreate(store_id=999, employee_id=catalog["employee"],
                     products=[InvoiceLineCreate(product_id=catalog["lego"], quantity=1)])
    with pytest.raises(IdNotFound):
        service.create(dto)


def test_failed_child_write_rolls_back_parent(session, catalog):
    repo = SaleRepository(session)

    def broken_link(sale, invoice):
        raise RuntimeError("link failed")

    sale = Sale(store_id=catalog["store"], employee_id=catalog["employee"], total=10.0)
    with pytest.raises(RuntimeError):
        repo.save_with_children(sale, [Invoice(product_id=catalog["lego"], quantity=1, subtotal=10.0)],
                                broken_link)

    assert count_rows(session, Sale) == 0
    assert count_rows(session, Invoice) == 0


def test_reversed_date_range_is_invalid(service):
    with pytest.raises(InvalidRequest):
        service.between_dates(date(2023, 2, 1), date(2023, 1, 1))
