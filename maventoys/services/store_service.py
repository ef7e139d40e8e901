from typing import List, Optional

from maventoys.exceptions import IdNotFound
from maventoys.mappers import apply_patch, employee_to_dto, sale_to_dto, store_to_dto, to_page
from maventoys.models import Store
from maventoys.repositories import EmployeeRepository, SaleRepository, StoreRepository
from maventoys.schemas import (
    ApiResponse,
    EmployeeRead,
    Page,
    SaleRead,
    StoreCreate,
    StoreRead,
    StoreUpdate,
)
from maventoys.specs import store_spec

from .base import require, service_operation

# open_date is fixed at creation
STORE_PATCH_EXCLUDE = ("id", "open_date")


class StoreService:
    def __init__(self, store_repo: StoreRepository, employee_repo: EmployeeRepository,
                 sale_repo: SaleRepository):
        self.store_repo = store_repo
        self.employee_repo = employee_repo
        self.sale_repo = sale_repo

    @service_operation("Error fetching all active stores")
    def list_active(self) -> ApiResponse[List[StoreRead]]:
        stores = [store_to_dto(store) for store in self.store_repo.find_active()]
        return ApiResponse(message="Active store details fetched successfully", data=stores)

    @service_operation("A problem was encountered while retrieving the store")
    def get_by_id(self, id: int) -> ApiResponse[StoreRead]:
        store = require(self.store_repo.get(id), f"Store not found with ID: {id}")
        return ApiResponse(message="Store details fetched successfully", data=store_to_dto(store))

    @service_operation("Error creating store")
    def create(self, dto: StoreCreate) -> ApiResponse[StoreRead]:
        store = self.store_repo.save(Store(**dto.model_dump()))
        return ApiResponse(message="Store created successfully", data=store_to_dto(store))

    @service_operation("Error updating store")
    def patch(self, id: int, dto: StoreUpdate) -> ApiResponse[StoreRead]:
        store = require(self.store_repo.get(id), f"Store not found with ID: {id}")
        apply_patch(store, dto, exclude=STORE_PATCH_EXCLUDE)
        store = self.store_repo.save(store)
        return ApiResponse(message="Store updated successfully", data=store_to_dto(store))

    def update(self, id: int, dto: StoreUpdate) -> ApiResponse[StoreRead]:
        # PUT keeps the null-ignoring copy of PATCH
        return self.patch(id, dto)

    @service_operation("Error finding employees for store")
    def employees_for_store(self, store_id: int) -> ApiResponse[List[EmployeeRead]]:
        employees = [employee_to_dto(e) for e in self.employee_repo.find_by_store(store_id)]
        return ApiResponse(message="Employees found successfully", data=employees)

    @service_operation("Error finding sales")
    def sales_for_store(self, store_id: int) -> ApiResponse[List[SaleRead]]:
        sales = self.sale_repo.find_by_store(store_id)
        if not sales:
            raise IdNotFound(f"No sales found for store ID: {store_id}")
        return ApiResponse(message="Sale found successfully", data=[sale_to_dto(s) for s in sales])

    @service_operation("Error calculating total sales")
    def total_sales(self, store_id: int) -> ApiResponse[float]:
        total = self.sale_repo.total_by_store(store_id)
        return ApiResponse(message="Total sales calculated successfully", data=total)

    @service_operation("Error finding filtered stores")
    def list_paged(self, page: int, size: int, id: Optional[int] = None, name: Optional[str] = None,
                   location: Optional[str] = None) -> ApiResponse[Page[StoreRead]]:
        result = self.store_repo.find_page(store_spec(id, name, location), page, size)
        return ApiResponse(message="Filtered stores retrieved successfully",
                           data=to_page(result.map(store_to_dto)))

    @service_operation("Error fetching top selling stores")
    def top_sellers(self) -> ApiResponse[List[StoreRead]]:
        stores = [
            StoreRead(id=id, name=name, total_sales=float(total))
            for id, name, total in self.store_repo.top_sellers()
        ]
        return ApiResponse(message="Top selling stores retrieved successfully", data=stores)
