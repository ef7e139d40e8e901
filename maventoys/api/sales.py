from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from maventoys.core import limiter
from maventoys.core.config import settings
from maventoys.schemas import ApiResponse, Page, SaleCreate, SaleRead, SaleUpdate
from maventoys.services import SaleService

from .deps import PageParams, get_page_params, get_sale_service

router = APIRouter()


@router.get("", response_model=ApiResponse[Page[SaleRead]])
def get_all_sales(
    paging: PageParams = Depends(get_page_params),
    service: SaleService = Depends(get_sale_service),
):
    return service.list_all(paging.page, paging.size)


@router.get("/paged", response_model=ApiResponse[Page[SaleRead]])
def get_sales_paged(
    id: Optional[int] = None,
    store_id: Optional[int] = Query(None, alias="storeId"),
    employee_id: Optional[int] = Query(None, alias="employeeId"),
    paging: PageParams = Depends(get_page_params),
    service: SaleService = Depends(get_sale_service),
):
    return service.list_paged(paging.page, paging.size, id=id, store_id=store_id, employee_id=employee_id)


@router.get("/byDateRange", response_model=ApiResponse[List[SaleRead]])
def get_sales_by_date_range(
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    service: SaleService = Depends(get_sale_service),
):
    return service.between_dates(start_date, end_date)


@router.get("/{sale_id}", response_model=ApiResponse[SaleRead])
def get_sale(sale_id: int, service: SaleService = Depends(get_sale_service)):
    return service.get_by_id(sale_id)


@router.post("", response_model=ApiResponse[SaleRead], status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def create_sale(request: Request, sale: SaleCreate, service: SaleService = Depends(get_sale_service)):
    return service.create(sale)


@router.patch("/{sale_id}", response_model=ApiResponse[SaleRead])
def patch_sale(sale_id: int, sale_data: SaleUpdate, service: SaleService = Depends(get_sale_service)):
    return service.patch(sale_id, sale_data)
