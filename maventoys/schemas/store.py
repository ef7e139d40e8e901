from datetime import date
from typing import Optional

from pydantic import Field

from .base import CamelModel


class StoreCreate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1)
    location: str = Field(min_length=1)
    open_date: Optional[date] = None
    active: bool = True


class StoreUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    city: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    open_date: Optional[date] = None
    active: Optional[bool] = None


class StoreRead(CamelModel):
    id: int
    name: Optional[str] = None
    city: Optional[str] = None
    location: Optional[str] = None
    open_date: Optional[date] = None
    active: Optional[bool] = None
    total_sales: Optional[float] = None
