from typing import List, Optional

from fastapi import APIRouter, Depends, status

from maventoys.cache import cache
from maventoys.schemas import ApiResponse, CategoryCreate, CategoryRead, CategoryUpdate, Page, ProductRead
from maventoys.services import CategoryService

from .deps import PageParams, get_category_service, get_page_params

router = APIRouter()


@router.get("", response_model=ApiResponse[List[CategoryRead]])
def get_active_categories(service: CategoryService = Depends(get_category_service)):
    return service.list_active()


@router.get("/paged", response_model=ApiResponse[Page[CategoryRead]])
def get_categories_paged(
    id: Optional[int] = None,
    name: Optional[str] = None,
    paging: PageParams = Depends(get_page_params),
    service: CategoryService = Depends(get_category_service),
):
    return service.list_paged(paging.page, paging.size, id=id, name=name)


@router.get("/sales", response_model=ApiResponse[List[CategoryRead]])
@cache()
def get_category_sales(service: CategoryService = Depends(get_category_service)):
    return service.category_sales()


@router.get("/{category_id}", response_model=ApiResponse[CategoryRead])
def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    return service.get_by_id(category_id)


@router.post("", response_model=ApiResponse[CategoryRead], status_code=status.HTTP_201_CREATED)
def create_category(category: CategoryCreate, service: CategoryService = Depends(get_category_service)):
    return service.create(category)


@router.patch("/{category_id}", response_model=ApiResponse[CategoryRead])
def patch_category(category_id: int, category_data: CategoryUpdate,
                   service: CategoryService = Depends(get_category_service)):
    return service.patch(category_id, category_data)


@router.get("/{category_id}/products", response_model=ApiResponse[List[ProductRead]])
def get_category_products(category_id: int, service: CategoryService = Depends(get_category_service)):
    return service.products_for_category(category_id)
