"""Per-request wiring: one session, repositories over it, services over those."""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Query
from sqlmodel import Session

from maventoys.core.config import settings
from maventoys.database import get_session
from maventoys.repositories import (
    CategoryRepository,
    EmployeeRepository,
    InventoryRepository,
    ProductRepository,
    SaleRepository,
    StoreRepository,
)
from maventoys.services import (
    CategoryService,
    EmployeeService,
    ProductService,
    SaleService,
    StoreService,
)


@dataclass
class PageParams:
    page: int
    size: int


def get_page_params(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
    limit: Optional[int] = Query(None, ge=1, le=settings.MAX_PAGE_SIZE),
) -> PageParams:
    # `limit` is accepted as an alias of `size`
    return PageParams(page=page, size=size or limit or settings.DEFAULT_PAGE_SIZE)


def get_store_service(session: Session = Depends(get_session)) -> StoreService:
    return StoreService(StoreRepository(session), EmployeeRepository(session), SaleRepository(session))


def get_employee_service(session: Session = Depends(get_session)) -> EmployeeService:
    return EmployeeService(EmployeeRepository(session), StoreRepository(session), SaleRepository(session))


def get_category_service(session: Session = Depends(get_session)) -> CategoryService:
    return CategoryService(CategoryRepository(session), ProductRepository(session))


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(ProductRepository(session), CategoryRepository(session), InventoryRepository(session))


def get_sale_service(session: Session = Depends(get_session)) -> SaleService:
    return SaleService(
        SaleRepository(session),
        StoreRepository(session),
        EmployeeRepository(session),
        ProductRepository(session),
    )
