from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from maventoys.cache import cache
from maventoys.core import limiter
from maventoys.core.config import settings
from maventoys.schemas import (
    ApiResponse,
    Page,
    ProductCreate,
    ProductRead,
    ProductUpdate,
    SaleRead,
    StockResponse,
)
from maventoys.services import ProductService

from .deps import PageParams, get_page_params, get_product_service

router = APIRouter()


@router.get("", response_model=ApiResponse[List[ProductRead]])
def get_active_products(service: ProductService = Depends(get_product_service)):
    return service.list_active()


@router.get("/paged", response_model=ApiResponse[Page[ProductRead]])
def get_products_paged(
    id: Optional[int] = None,
    name: Optional[str] = None,
    paging: PageParams = Depends(get_page_params),
    service: ProductService = Depends(get_product_service),
):
    return service.list_paged(paging.page, paging.size, id=id, name=name)


@router.get("/category/best-sellers", response_model=ApiResponse[List[ProductRead]])
@cache()
def get_best_sellers_by_category(
    category_id: int = Query(..., alias="categoryId"),
    service: ProductService = Depends(get_product_service),
):
    return service.best_sellers_by_category(category_id)


@router.get("/{product_id}", response_model=ApiResponse[ProductRead])
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.get_by_id(product_id)


@router.post("", response_model=ApiResponse[ProductRead], status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def create_product(
    request: Request,
    product: ProductCreate,
    initial_stock: int = Query(1, ge=0, alias="initialStock"),
    service: ProductService = Depends(get_product_service),
):
    return service.create(product, initial_stock=initial_stock)


@router.patch("/{product_id}", response_model=ApiResponse[ProductRead])
def patch_product(product_id: int, product_data: ProductUpdate,
                  service: ProductService = Depends(get_product_service)):
    return service.patch(product_id, product_data)


@router.put("/{product_id}", response_model=ApiResponse[ProductRead])
def update_product(product_id: int, product_data: ProductUpdate,
                   service: ProductService = Depends(get_product_service)):
    return service.update(product_id, product_data)


@router.get("/{product_id}/stock", response_model=ApiResponse[StockResponse])
def get_product_stock(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.stock(product_id)


@router.get("/{product_id}/sales", response_model=ApiResponse[List[SaleRead]])
def get_product_sales(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.sales_for_product(product_id)


@router.get("/{product_id}/price-history", response_model=ApiResponse[List[ProductRead]])
def get_price_history(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.price_history(product_id)
