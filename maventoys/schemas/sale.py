import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class InvoiceLineCreate(CamelModel):
    product_id: int
    quantity: int = Field(gt=0)
    discount: int = Field(default=0, ge=0, le=100)


class InvoiceRead(CamelModel):
    id: Optional[int] = None
    product_id: Optional[int] = None
    quantity: int
    discount: int
    subtotal: float
    status: Optional[bool] = None


class SaleCreate(CamelModel):
    store_id: int
    employee_id: int
    date: Optional[datetime.date] = None
    products: List[InvoiceLineCreate] = Field(min_length=1)


class SaleUpdate(CamelModel):
    store_id: Optional[int] = None
    employee_id: Optional[int] = None
    date: Optional[datetime.date] = None


class SaleRead(CamelModel):
    id: int
    store_id: Optional[int] = None
    employee_id: Optional[int] = None
    total: float
    date: Optional[datetime.date] = None
    products: List[InvoiceRead] = []
