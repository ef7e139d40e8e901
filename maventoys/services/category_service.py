from typing import List, Optional

from maventoys.exceptions import IdNotFound
from maventoys.mappers import apply_patch, category_to_dto, product_to_dto, to_page
from maventoys.models import Category
from maventoys.repositories import CategoryRepository, ProductRepository
from maventoys.schemas import (
    ApiResponse,
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    Page,
    ProductRead,
)
from maventoys.specs import category_spec

from .base import require, service_operation


class CategoryService:
    def __init__(self, category_repo: CategoryRepository, product_repo: ProductRepository):
        self.category_repo = category_repo
        self.product_repo = product_repo

    @service_operation("Error finding all active categories")
    def list_active(self) -> ApiResponse[List[CategoryRead]]:
        categories = [category_to_dto(c) for c in self.category_repo.find_active()]
        return ApiResponse(message="Categories retrieved successfully", data=categories)

    @service_operation("Error creating category")
    def create(self, dto: CategoryCreate) -> ApiResponse[CategoryRead]:
        category = self.category_repo.save(Category(**dto.model_dump()))
        return ApiResponse(message="Category created successfully", data=category_to_dto(category))

    @service_operation("Error finding category by ID")
    def get_by_id(self, id: int) -> ApiResponse[CategoryRead]:
        category = require(self.category_repo.get(id), f"Category not found with the ID: {id}")
        return ApiResponse(message="Category details fetched successfully", data=category_to_dto(category))

    @service_operation("Error updating category")
    def patch(self, id: int, dto: CategoryUpdate) -> ApiResponse[CategoryRead]:
        category = require(self.category_repo.get(id), f"Category not found with the ID: {id}")
        apply_patch(category, dto)
        category = self.category_repo.save(category)
        return ApiResponse(message="Category updated successfully", data=category_to_dto(category))

    @service_operation("Error finding products by category ID")
    def products_for_category(self, category_id: int) -> ApiResponse[List[ProductRead]]:
        products = self.product_repo.find_by_category(category_id)
        if not products:
            raise IdNotFound(f"No products found for category ID: {category_id}")
        return ApiResponse(message="Products data for the category retrieved successfully",
                           data=[product_to_dto(p) for p in products])

    @service_operation("Error finding all categories")
    def list_paged(self, page: int, size: int, id: Optional[int] = None,
                   name: Optional[str] = None) -> ApiResponse[Page[CategoryRead]]:
        result = self.category_repo.find_page(category_spec(id, name), page, size)
        return ApiResponse(message="All categories retrieved successfully",
                           data=to_page(result.map(category_to_dto)))

    @service_operation("Error calculating category sales")
    def category_sales(self) -> ApiResponse[List[CategoryRead]]:
        categories = [
            CategoryRead(id=id, name=name, total_sales=float(total))
            for id, name, total in self.category_repo.category_sales()
        ]
        return ApiResponse(message="Category sales retrieved successfully", data=categories)
