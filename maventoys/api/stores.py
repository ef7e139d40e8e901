from typing import List, Optional

from fastapi import APIRouter, Depends, status

from maventoys.cache import cache
from maventoys.schemas import ApiResponse, EmployeeRead, Page, SaleRead, StoreCreate, StoreRead, StoreUpdate
from maventoys.services import StoreService

from .deps import PageParams, get_page_params, get_store_service

router = APIRouter()


@router.get("", response_model=ApiResponse[List[StoreRead]])
def get_active_stores(service: StoreService = Depends(get_store_service)):
    return service.list_active()


@router.get("/paged", response_model=ApiResponse[Page[StoreRead]])
def get_stores_paged(
    id: Optional[int] = None,
    name: Optional[str] = None,
    location: Optional[str] = None,
    paging: PageParams = Depends(get_page_params),
    service: StoreService = Depends(get_store_service),
):
    return service.list_paged(paging.page, paging.size, id=id, name=name, location=location)


@router.get("/sales", response_model=ApiResponse[List[StoreRead]])
@cache()
def get_store_sales(service: StoreService = Depends(get_store_service)):
    return service.top_sellers()


@router.get("/{store_id}", response_model=ApiResponse[StoreRead])
def get_store(store_id: int, service: StoreService = Depends(get_store_service)):
    return service.get_by_id(store_id)


@router.post("", response_model=ApiResponse[StoreRead], status_code=status.HTTP_201_CREATED)
def create_store(store: StoreCreate, service: StoreService = Depends(get_store_service)):
    return service.create(store)


@router.patch("/{store_id}", response_model=ApiResponse[StoreRead])
def patch_store(store_id: int, store_data: StoreUpdate, service: StoreService = Depends(get_store_service)):
    return service.patch(store_id, store_data)


@router.put("/{store_id}", response_model=ApiResponse[StoreRead])
def update_store(store_id: int, store_data: StoreUpdate, service: StoreService = Depends(get_store_service)):
    return service.update(store_id, store_data)


@router.get("/{store_id}/employees", response_model=ApiResponse[List[EmployeeRead]])
def get_store_employees(store_id: int, service: StoreService = Depends(get_store_service)):
    return service.employees_for_store(store_id)


@router.get("/{store_id}/sales", response_model=ApiResponse[List[SaleRead]])
def get_store_sales_list(store_id: int, service: StoreService = Depends(get_store_service)):
    return service.sales_for_store(store_id)


@router.get("/{store_id}/totalSales", response_model=ApiResponse[float])
def get_total_sales(store_id: int, service: StoreService = Depends(get_store_service)):
    return service.total_sales(store_id)
