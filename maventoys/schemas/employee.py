from datetime import date
from typing import Optional

from pydantic import Field

from .base import CamelModel


class EmployeeCreate(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    hire_date: Optional[date] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    active: bool = True
    store_id: Optional[int] = None


class EmployeeUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    hire_date: Optional[date] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    active: Optional[bool] = None
    store_id: Optional[int] = None


class EmployeeRead(CamelModel):
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    hire_date: Optional[date] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    active: Optional[bool] = None
    store_id: Optional[int] = None
    number_of_sales: Optional[int] = None
