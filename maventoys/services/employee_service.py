from typing import List, Optional

from maventoys.exceptions import IdNotFound
from maventoys.mappers import apply_patch, employee_to_dto, sale_to_dto, to_page
from maventoys.models import Employee
from maventoys.repositories import EmployeeRepository, SaleRepository, StoreRepository
from maventoys.schemas import (
    ApiResponse,
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    Page,
    SaleRead,
)
from maventoys.specs import employee_spec

from .base import require, service_operation


class EmployeeService:
    def __init__(self, employee_repo: EmployeeRepository, store_repo: StoreRepository,
                 sale_repo: SaleRepository):
        self.employee_repo = employee_repo
        self.store_repo = store_repo
        self.sale_repo = sale_repo

    def _resolve_store(self, employee: Employee, store_id: Optional[int]):
        if store_id is None:
            return
        store = require(self.store_repo.get(store_id), f"Store not found for the given ID: {store_id}")
        employee.store_id = store.id

    @service_operation("Error fetching all active employees")
    def list_active(self) -> ApiResponse[List[EmployeeRead]]:
        employees = [employee_to_dto(e) for e in self.employee_repo.find_active()]
        return ApiResponse(message="Employees retrieved successfully", data=employees)

    @service_operation("A problem was encountered while retrieving employees")
    def get_by_id(self, id: int) -> ApiResponse[EmployeeRead]:
        employee = require(self.employee_repo.get(id), f"Employee not found with ID: {id}")
        return ApiResponse(message="Employee details fetched successfully", data=employee_to_dto(employee))

    @service_operation("Error creating employee")
    def create(self, dto: EmployeeCreate) -> ApiResponse[EmployeeRead]:
        employee = Employee(**dto.model_dump(exclude={"store_id"}))
        self._resolve_store(employee, dto.store_id)
        employee = self.employee_repo.save(employee)
        return ApiResponse(message="Employee created successfully", data=employee_to_dto(employee))

    @service_operation("Error updating employee")
    def patch(self, id: int, dto: EmployeeUpdate) -> ApiResponse[EmployeeRead]:
        employee = require(self.employee_repo.get(id), f"Employee not found for the given ID: {id}")
        apply_patch(employee, dto, exclude=("store_id",))
        # an unknown store must not be assigned
        self._resolve_store(employee, dto.store_id)
        employee = self.employee_repo.save(employee)
        return ApiResponse(message="Employee updated successfully", data=employee_to_dto(employee))

    def update(self, id: int, dto: EmployeeUpdate) -> ApiResponse[EmployeeRead]:
        return self.patch(id, dto)

    @service_operation("Error fetching sales")
    def sales_for_employee(self, employee_id: int) -> ApiResponse[List[SaleRead]]:
        sales = self.sale_repo.find_by_employee(employee_id)
        if not sales:
            raise IdNotFound(f"No sales found for employee ID {employee_id}")
        return ApiResponse(message="Sale fetched successfully", data=[sale_to_dto(s) for s in sales])

    @service_operation("Error fetching active employees")
    def list_paged(self, page: int, size: int, id: Optional[int] = None, first_name: Optional[str] = None,
                   last_name: Optional[str] = None) -> ApiResponse[Page[EmployeeRead]]:
        result = self.employee_repo.find_page(employee_spec(id, first_name, last_name), page, size)
        return ApiResponse(message="Active employees fetched successfully",
                           data=to_page(result.map(employee_to_dto)))

    @service_operation("Error fetching top sellers")
    def top_sellers(self) -> ApiResponse[List[EmployeeRead]]:
        sellers = [
            EmployeeRead(id=id, first_name=first_name, last_name=last_name, store_id=store_id,
                         number_of_sales=int(number_of_sales))
            for id, first_name, last_name, store_id, number_of_sales in self.employee_repo.top_sellers()
        ]
        return ApiResponse(message="Top sellers retrieved successfully", data=sellers)
