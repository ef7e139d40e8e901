from datetime import date
from typing import Optional

from pydantic import Field

from .base import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1)
    active: bool = True


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    active: Optional[bool] = None


class CategoryRead(CamelModel):
    id: int
    name: Optional[str] = None
    active: Optional[bool] = None
    total_sales: Optional[float] = None


class ProductCreate(CamelModel):
    name: str = Field(min_length=1)
    cost: float = Field(ge=0)
    price: float = Field(ge=0)
    category_id: int
    active: bool = True


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    cost: Optional[float] = Field(default=None, ge=0)
    price: Optional[float] = Field(default=None, ge=0)
    category_id: Optional[int] = None
    active: Optional[bool] = None
    creation_date: Optional[date] = None


class ProductRead(CamelModel):
    id: int
    name: Optional[str] = None
    cost: Optional[float] = None
    price: Optional[float] = None
    category_id: Optional[int] = None
    active: Optional[bool] = None
    creation_date: Optional[date] = None
    stock_on_hand: Optional[int] = None


class StockResponse(CamelModel):
    stock: Optional[int] = None
