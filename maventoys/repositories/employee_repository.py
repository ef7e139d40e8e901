from typing import List, Tuple

from sqlalchemy.orm import selectinload
from sqlmodel import func, select

from maventoys.models import Employee, Sale

from .base import SQLModelRepository, to_rows


class EmployeeRepository(SQLModelRepository[Employee]):
    model = Employee

    def find_active(self) -> List[Employee]:
        query = (
            select(Employee)
            .where(Employee.active == True)  # noqa: E712
            .options(selectinload(Employee.store))
            .order_by(Employee.id)
        )
        return list(self.session.exec(query).all())

    def find_by_store(self, store_id: int) -> List[Employee]:
        query = select(Employee).where(Employee.store_id == store_id).order_by(Employee.id)
        return list(self.session.exec(query).all())

    def top_sellers(self, limit: int = 5) -> List[Tuple[int, str, str, int, int]]:
        """(id, first_name, last_name, store_id, number_of_sales), most sales first."""
        number_of_sales = func.count(Sale.id)
        query = (
            select(
                Employee.id,
                Employee.first_name,
                Employee.last_name,
                Employee.store_id,
                number_of_sales.label("number_of_sales"),
            )
            .join(Sale, Sale.employee_id == Employee.id)
            .group_by(Employee.id, Employee.first_name, Employee.last_name, Employee.store_id)
            .order_by(number_of_sales.desc())
            .limit(limit)
        )
        return to_rows(self.session.exec(query).all())
