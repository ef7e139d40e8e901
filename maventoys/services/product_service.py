from datetime import date
from typing import List, Optional

from maventoys.exceptions import IdNotFound
from maventoys.mappers import apply_patch, product_to_dto, sale_to_dto, to_page
from maventoys.models import Inventory, Product
from maventoys.repositories import CategoryRepository, InventoryRepository, ProductRepository
from maventoys.schemas import (
    ApiResponse,
    Page,
    ProductCreate,
    ProductRead,
    ProductUpdate,
    SaleRead,
    StockResponse,
)
from maventoys.specs import product_spec

from .base import require, service_operation

# creation_date is set once, category_id is resolved instead of copied
PRODUCT_PATCH_EXCLUDE = ("id", "creation_date", "category_id")


class ProductService:
    def __init__(self, product_repo: ProductRepository, category_repo: CategoryRepository,
                 inventory_repo: InventoryRepository):
        self.product_repo = product_repo
        self.category_repo = category_repo
        self.inventory_repo = inventory_repo

    def _resolve_category(self, product: Product, category_id: Optional[int]):
        if category_id is None:
            return
        category = require(self.category_repo.get(category_id),
                           f"Category not found with ID: {category_id}")
        product.category_id = category.id

    @service_operation("Error fetching all active products")
    def list_active(self) -> ApiResponse[List[ProductRead]]:
        products = [product_to_dto(p) for p in self.product_repo.find_active()]
        return ApiResponse(message="Active products retrieved successfully", data=products)

    @service_operation("A problem was encountered while retrieving the product")
    def get_by_id(self, id: int) -> ApiResponse[ProductRead]:
        product = require(self.product_repo.get(id), f"Product not found with ID: {id}")
        return ApiResponse(message="Product details fetched successfully", data=product_to_dto(product))

    @service_operation("Error creating product")
    def create(self, dto: ProductCreate, initial_stock: int = 1) -> ApiResponse[ProductRead]:
        """Create a product and its single inventory row in one transaction."""
        product = Product(**dto.model_dump(exclude={"category_id"}), creation_date=date.today())
        self._resolve_category(product, dto.category_id)
        product = self.product_repo.save_with_inventory(product, Inventory(stock_on_hand=initial_stock))
        return ApiResponse(message="Product created successfully", data=product_to_dto(product))

    @service_operation("Error updating product")
    def patch(self, id: int, dto: ProductUpdate) -> ApiResponse[ProductRead]:
        product = require(self.product_repo.get(id), f"Product not found for the given ID: {id}")
        apply_patch(product, dto, exclude=PRODUCT_PATCH_EXCLUDE)
        self._resolve_category(product, dto.category_id)
        product = self.product_repo.save(product)
        return ApiResponse(message="Product updated successfully", data=product_to_dto(product))

    def update(self, id: int, dto: ProductUpdate) -> ApiResponse[ProductRead]:
        response = self.patch(id, dto)
        response.message = "Product details updated successfully"
        return response

    @service_operation("Error fetching stock")
    def stock(self, product_id: int) -> ApiResponse[StockResponse]:
        require(self.product_repo.get(product_id), f"Product ID not found: {product_id}")
        stock = self.inventory_repo.stock_for_product(product_id)
        return ApiResponse(message="Stock fetched successfully", data=StockResponse(stock=stock))

    @service_operation("Error retrieving sales data")
    def sales_for_product(self, product_id: int) -> ApiResponse[List[SaleRead]]:
        sales = self.product_repo.sales_for_product(product_id)
        if not sales:
            raise IdNotFound(f"No sales found for product ID: {product_id}")
        return ApiResponse(message="Sale data for product retrieved successfully",
                           data=[sale_to_dto(s) for s in sales])

    @service_operation("Error retrieving price history")
    def price_history(self, product_id: int) -> ApiResponse[List[ProductRead]]:
        """Every product row sharing this product's name, newest first."""
        product = require(self.product_repo.get(product_id), f"Product with ID: {product_id} not found.")
        history = [product_to_dto(p) for p in self.product_repo.find_by_name(product.name)]
        return ApiResponse(message="Price history retrieved successfully", data=history)

    @service_operation("Error retrieving paged products")
    def list_paged(self, page: int, size: int, id: Optional[int] = None,
                   name: Optional[str] = None) -> ApiResponse[Page[ProductRead]]:
        result = self.product_repo.find_page(product_spec(id, name), page, size)
        return ApiResponse(message="Paged products retrieved successfully",
                           data=to_page(result.map(product_to_dto)))

    @service_operation("Error retrieving best sellers")
    def best_sellers_by_category(self, category_id: int) -> ApiResponse[List[ProductRead]]:
        products = [product_to_dto(p) for p in self.product_repo.best_sellers_by_category(category_id)]
        return ApiResponse(message="Best sellers retrieved successfully", data=products)
