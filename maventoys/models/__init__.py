from .employee import Employee
from .product import Category, Inventory, Product
from .sale import Invoice, Sale
from .store import Store

__all__ = [
    "Category",
    "Employee",
    "Inventory",
    "Invoice",
    "Product",
    "Sale",
    "Store",
]
