from typing import Iterable

from pydantic import BaseModel
from sqlmodel import SQLModel

from maventoys.models import Category, Employee, Invoice, Product, Sale, Store
from maventoys.schemas import (
    CategoryRead,
    EmployeeRead,
    InvoiceRead,
    Page,
    ProductRead,
    SaleRead,
    StoreRead,
)
from maventoys.repositories import PageResult


def apply_patch(entity: SQLModel, dto: BaseModel, exclude: Iterable[str] = ()) -> SQLModel:
    """Copy the non-null fields of ``dto`` onto ``entity``.

    ``id`` is never copied; nulls never overwrite existing values.
    """
    skipped = set(exclude) | {"id"}
    for field_name, value in dto.model_dump(exclude_none=True).items():
        if field_name in skipped:
            continue
        setattr(entity, field_name, value)
    return entity


def to_page(result: PageResult) -> Page:
    return Page(
        content=result.items,
        total_elements=result.total_elements,
        total_pages=result.total_pages,
        number=result.page,
        size=result.size,
        number_of_elements=len(result.items),
    )


def store_to_dto(store: Store) -> StoreRead:
    return StoreRead(
        id=store.id,
        name=store.name,
        city=store.city,
        location=store.location,
        open_date=store.open_date,
        active=store.active,
    )


def employee_to_dto(employee: Employee) -> EmployeeRead:
    return EmployeeRead(
        id=employee.id,
        first_name=employee.first_name,
        last_name=employee.last_name,
        hire_date=employee.hire_date,
        birth_date=employee.birth_date,
        gender=employee.gender,
        active=employee.active,
        store_id=employee.store_id,
    )


def category_to_dto(category: Category) -> CategoryRead:
    return CategoryRead(id=category.id, name=category.name, active=category.active)


def product_to_dto(product: Product) -> ProductRead:
    stock = None
    if product.inventory:
        stock = sum(row.stock_on_hand for row in product.inventory)
    return ProductRead(
        id=product.id,
        name=product.name,
        cost=product.cost,
        price=product.price,
        category_id=product.category_id,
        active=product.active,
        creation_date=product.creation_date,
        stock_on_hand=stock,
    )


def invoice_to_dto(invoice: Invoice) -> InvoiceRead:
    return InvoiceRead(
        id=invoice.id,
        product_id=invoice.product_id,
        quantity=invoice.quantity,
        discount=invoice.discount,
        subtotal=invoice.subtotal,
        status=invoice.status,
    )


def sale_to_dto(sale: Sale) -> SaleRead:
    return SaleRead(
        id=sale.id,
        store_id=sale.store_id,
        employee_id=sale.employee_id,
        total=sale.total,
        date=sale.date,
        products=[invoice_to_dto(invoice) for invoice in sale.invoices],
    )
