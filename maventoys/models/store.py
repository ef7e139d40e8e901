from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .employee import Employee
    from .sale import Sale

MAX_NAME_LENGTH = 100


class Store(SQLModel, table=True):
    __tablename__ = "stores"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=MAX_NAME_LENGTH, index=True)
    city: str
    location: str
    open_date: Optional[date] = None
    active: bool = Field(default=True)

    # Relationships
    sales: List["Sale"] = Relationship(back_populates="store")
    employees: List["Employee"] = Relationship(back_populates="store")
