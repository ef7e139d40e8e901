from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from maventoys.cache import cache
from maventoys.schemas import ApiResponse, EmployeeCreate, EmployeeRead, EmployeeUpdate, Page, SaleRead
from maventoys.services import EmployeeService

from .deps import PageParams, get_employee_service, get_page_params

router = APIRouter()


@router.get("", response_model=ApiResponse[List[EmployeeRead]])
def get_active_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.list_active()


@router.get("/paged", response_model=ApiResponse[Page[EmployeeRead]])
def get_employees_paged(
    id: Optional[int] = None,
    first_name: Optional[str] = Query(None, alias="firstName"),
    last_name: Optional[str] = Query(None, alias="lastName"),
    paging: PageParams = Depends(get_page_params),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.list_paged(paging.page, paging.size, id=id, first_name=first_name, last_name=last_name)


@router.get("/top-sellers", response_model=ApiResponse[List[EmployeeRead]])
@cache()
def get_top_sellers(service: EmployeeService = Depends(get_employee_service)):
    return service.top_sellers()


@router.get("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def get_employee(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return service.get_by_id(employee_id)


@router.post("", response_model=ApiResponse[EmployeeRead], status_code=status.HTTP_201_CREATED)
def create_employee(employee: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    return service.create(employee)


@router.patch("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def patch_employee(employee_id: int, employee_data: EmployeeUpdate,
                   service: EmployeeService = Depends(get_employee_service)):
    return service.patch(employee_id, employee_data)


@router.put("/{employee_id}", response_model=ApiResponse[EmployeeRead])
def update_employee(employee_id: int, employee_data: EmployeeUpdate,
                    service: EmployeeService = Depends(get_employee_service)):
    return service.update(employee_id, employee_data)


@router.get("/{employee_id}/sales", response_model=ApiResponse[List[SaleRead]])
def get_employee_sales(employee_id: int, service: EmployeeService = Depends(get_employee_service)):
    return service.sales_for_employee(employee_id)
