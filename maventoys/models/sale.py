import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .employee import Employee
    from .product import Product
    from .store import Store


class Sale(SQLModel, table=True):
    __tablename__ = "sales"

    id: Optional[int] = Field(default=None, primary_key=True)
    store_id: Optional[int] = Field(default=None, foreign_key="stores.id", index=True)
    employee_id: Optional[int] = Field(default=None, foreign_key="employees.id", index=True)
    total: float = Field(default=0.0)
    date: Optional[datetime.date] = Field(default=None, index=True)

    # Relationships
    store: Optional["Store"] = Relationship(back_populates="sales")
    employee: Optional["Employee"] = Relationship(back_populates="sales")
    invoices: List["Invoice"] = Relationship(
        back_populates="sale",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class Invoice(SQLModel, table=True):
    """One product line of a sale."""

    __tablename__ = "invoices"

    id: Optional[int] = Field(default=None, primary_key=True)
    sale_id: Optional[int] = Field(default=None, foreign_key="sales.id", index=True)
    product_id: Optional[int] = Field(default=None, foreign_key="products.id", index=True)
    quantity: int = Field(gt=0)
    subtotal: float = Field(default=0.0)  # quantity * product price at sale time
    discount: int = Field(default=0, ge=0, le=100)  # percentage
    status: Optional[bool] = None

    # Relationships
    sale: Optional[Sale] = Relationship(back_populates="invoices")
    product: Optional["Product"] = Relationship(back_populates="invoices")
