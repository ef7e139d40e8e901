"""Sales: creation of a sale with its invoice lines, and sale queries.

A sale's money fields are computed here, never taken from the client. Each
line snapshots ``quantity * price`` as its subtotal, and the sale total is
the sum of every line after that line's own percentage discount.
"""
import logging
from datetime import date
from typing import Iterable, List, Optional

from maventoys.exceptions import InvalidRequest
from maventoys.mappers import apply_patch, sale_to_dto, to_page
from maventoys.models import Invoice, Product, Sale
from maventoys.repositories import (
    EmployeeRepository,
    ProductRepository,
    SaleRepository,
    StoreRepository,
)
from maventoys.schemas import ApiResponse, Page, SaleCreate, SaleRead, SaleUpdate
from maventoys.specs import sale_spec

from .base import require, service_operation

logger = logging.getLogger(__name__)

HUNDRED_PERCENT = 100


def line_subtotal(product: Product, quantity: int) -> float:
    return quantity * product.price


def discounted_amount(subtotal: float, discount: int) -> float:
    return subtotal - subtotal * discount / HUNDRED_PERCENT


def sale_total(invoices: Iterable[Invoice]) -> float:
    return sum(discounted_amount(invoice.subtotal, invoice.discount) for invoice in invoices)


class SaleService:
    def __init__(self, sale_repo: SaleRepository, store_repo: StoreRepository,
                 employee_repo: EmployeeRepository, product_repo: ProductRepository):
        self.sale_repo = sale_repo
        self.store_repo = store_repo
        self.employee_repo = employee_repo
        self.product_repo = product_repo

    def _fetch_product(self, product_id: int) -> Product:
        return require(self.product_repo.get(product_id), f"Product with ID {product_id} not found.")

    def new_invoice(self, product: Product, quantity: int, discount: int) -> Invoice:
        return Invoice(
            product_id=product.id,
            quantity=quantity,
            discount=discount,
            subtotal=line_subtotal(product, quantity),
        )

    def build_invoices(self, dto: SaleCreate) -> List[Invoice]:
        invoices = []
        for line in dto.products:
            product = self._fetch_product(line.product_id)
            invoices.append(self.new_invoice(product, line.quantity, line.discount))
        return invoices

    @service_operation("Error creating sale")
    def create(self, dto: SaleCreate) -> ApiResponse[SaleRead]:
        require(self.store_repo.get(dto.store_id), f"Store with ID {dto.store_id} not found.")
        require(self.employee_repo.get(dto.employee_id), f"Employee with ID {dto.employee_id} not found.")

        invoices = self.build_invoices(dto)
        sale = Sale(
            store_id=dto.store_id,
            employee_id=dto.employee_id,
            date=dto.date or date.today(),
            total=sale_total(invoices),
        )
        sale = self.sale_repo.save_sale(sale, invoices)
        logger.info("Created sale %s with %d lines, total %.2f", sale.id, len(invoices), sale.total)
        return ApiResponse(message="Sale created successfully", data=sale_to_dto(sale))

    @service_operation("Error fetching all sales")
    def list_all(self, page: int, size: int) -> ApiResponse[Page[SaleRead]]:
        result = self.sale_repo.find_all_paged(page, size)
        return ApiResponse(message="All sales fetched successfully", data=to_page(result.map(sale_to_dto)))

    @service_operation("A problem was encountered while retrieving the sale")
    def get_by_id(self, id: int) -> ApiResponse[SaleRead]:
        sale = require(self.sale_repo.get(id), f"Sale with ID {id} not found.")
        return ApiResponse(message="Sale details fetched successfully", data=sale_to_dto(sale))

    @service_operation("Error updating sale")
    def patch(self, id: int, dto: SaleUpdate) -> ApiResponse[SaleRead]:
        """Update the date and the store/employee references.

        The total and the invoice lines are derived data and stay untouched.
        """
        sale = require(self.sale_repo.get(id), f"Sale not found with ID: {id}")
        apply_patch(sale, dto, exclude=("store_id", "employee_id"))
        if dto.store_id is not None:
            store = require(self.store_repo.get(dto.store_id), f"Store with ID {dto.store_id} not found.")
            sale.store_id = store.id
        if dto.employee_id is not None:
            employee = require(self.employee_repo.get(dto.employee_id),
                               f"Employee with ID {dto.employee_id} not found.")
            sale.employee_id = employee.id
        sale = self.sale_repo.save(sale)
        return ApiResponse(message="Sale updated successfully", data=sale_to_dto(sale))

    @service_operation("Error fetching sales by date range")
    def between_dates(self, start_date: date, end_date: date) -> ApiResponse[List[SaleRead]]:
        if start_date > end_date:
            raise InvalidRequest(f"Start date {start_date} is after end date {end_date}")
        sales = [sale_to_dto(s) for s in self.sale_repo.find_between(start_date, end_date)]
        return ApiResponse(message="Sale fetched successfully", data=sales)

    @service_operation("Error finding all sales")
    def list_paged(self, page: int, size: int, id: Optional[int] = None, store_id: Optional[int] = None,
                   employee_id: Optional[int] = None) -> ApiResponse[Page[SaleRead]]:
        result = self.sale_repo.find_page(sale_spec(id, store_id, employee_id), page, size)
        return ApiResponse(message="All sales retrieved successfully", data=to_page(result.map(sale_to_dto)))
