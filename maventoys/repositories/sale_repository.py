from datetime import date
from typing import List

from sqlmodel import func, select

from maventoys.models import Invoice, Sale

from .base import PageResult, SQLModelRepository


class SaleRepository(SQLModelRepository[Sale]):
    model = Sale

    def save_sale(self, sale: Sale, invoices: List[Invoice]) -> Sale:
        def link(parent: Sale, invoice: Invoice):
            invoice.sale_id = parent.id

        return self.save_with_children(sale, invoices, link)

    def find_by_store(self, store_id: int) -> List[Sale]:
        query = select(Sale).where(Sale.store_id == store_id).order_by(Sale.id)
        return list(self.session.exec(query).all())

    def find_by_employee(self, employee_id: int) -> List[Sale]:
        query = select(Sale).where(Sale.employee_id == employee_id).order_by(Sale.id)
        return list(self.session.exec(query).all())

    def find_between(self, start_date: date, end_date: date) -> List[Sale]:
        query = (
            select(Sale)
            .where(Sale.date >= start_date, Sale.date <= end_date)
            .order_by(Sale.date, Sale.id)
        )
        return list(self.session.exec(query).all())

    def total_by_store(self, store_id: int) -> float:
        query = select(func.sum(Sale.total)).where(Sale.store_id == store_id)
        total = self.session.exec(query).one()
        return float(total) if total is not None else 0.0

    def find_all_paged(self, page: int, size: int) -> PageResult[Sale]:
        return self.find_page(None, page, size)
