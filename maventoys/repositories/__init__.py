from .base import PageResult, SQLModelRepository
from .employee_repository import EmployeeRepository
from .product_repository import CategoryRepository, InventoryRepository, ProductRepository
from .sale_repository import SaleRepository
from .store_repository import StoreRepository
