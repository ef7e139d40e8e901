from .category_service import CategoryService
from .employee_service import EmployeeService
from .product_service import ProductService
from .sale_service import SaleService
from .store_service import StoreService
