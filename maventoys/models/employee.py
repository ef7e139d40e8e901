from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .sale import Sale
    from .store import Store


class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(index=True)
    last_name: str = Field(index=True)
    hire_date: Optional[date] = None
    birth_date: Optional[date] = None
    gender: Optional[str] = None
    active: bool = Field(default=True)
    store_id: Optional[int] = Field(default=None, foreign_key="stores.id")

    # Relationships
    store: Optional["Store"] = Relationship(back_populates="employees")
    sales: List["Sale"] = Relationship(back_populates="employee")
