from datetime import date
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .sale import Invoice


class Category(SQLModel, table=True):
    __tablename__ = "categories"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    active: bool = Field(default=True)

    # Relationships
    products: List["Product"] = Relationship(back_populates="category")


class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    cost: float = Field(default=0.0, ge=0)
    price: float = Field(default=0.0, ge=0)
    category_id: Optional[int] = Field(default=None, foreign_key="categories.id")
    creation_date: Optional[date] = None
    active: bool = Field(default=True)

    # Relationships
    category: Optional[Category] = Relationship(back_populates="products")
    # Inventory rows live and die with their product
    inventory: List["Inventory"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
    invoices: List["Invoice"] = Relationship(back_populates="product")


class Inventory(SQLModel, table=True):
    __tablename__ = "inventory"

    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: Optional[int] = Field(default=None, foreign_key="products.id", index=True)
    stock_on_hand: int = Field(default=0, ge=0)

    # Relationships
    product: Optional[Product] = Relationship(back_populates="inventory")
