from .base import ApiResponse, CamelModel, Page
from .employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from .product import (
    CategoryCreate,
    CategoryRead,
    CategoryUpdate,
    ProductCreate,
    ProductRead,
    ProductUpdate,
    StockResponse,
)
from .sale import InvoiceLineCreate, InvoiceRead, SaleCreate, SaleRead, SaleUpdate
from .store import StoreCreate, StoreRead, StoreUpdate
