from typing import List, Optional, Tuple

from sqlalchemy.orm import selectinload
from sqlmodel import func, select

from maventoys.models import Category, Inventory, Invoice, Product, Sale

from .base import SQLModelRepository, to_rows

# Line amount after its own percentage discount
NET_LINE_AMOUNT = Invoice.subtotal - Invoice.subtotal * Invoice.discount / 100.0


class CategoryRepository(SQLModelRepository[Category]):
    model = Category

    def category_sales(self) -> List[Tuple[int, str, float]]:
        """(id, name, total_sales) over active categories and active products."""
        total_sales = func.sum(NET_LINE_AMOUNT)
        query = (
            select(Category.id, Category.name, total_sales.label("total_sales"))
            .join(Product, Product.category_id == Category.id)
            .join(Invoice, Invoice.product_id == Product.id)
            .where(Category.active == True, Product.active == True)  # noqa: E712
            .group_by(Category.id, Category.name)
            .order_by(total_sales.desc())
        )
        return to_rows(self.session.exec(query).all())


class ProductRepository(SQLModelRepository[Product]):
    model = Product
    load_options = (selectinload(Product.inventory),)

    def save_with_inventory(self, product: Product, inventory: Inventory) -> Product:
        def link(parent: Product, row: Inventory):
            row.product_id = parent.id

        return self.save_with_children(product, [inventory], link)

    def find_by_category(self, category_id: int) -> List[Product]:
        query = (
            select(Product)
            .where(Product.category_id == category_id)
            .options(*self.load_options)
            .order_by(Product.id)
        )
        return list(self.session.exec(query).all())

    def find_by_name(self, name: str) -> List[Product]:
        query = (
            select(Product)
            .where(Product.name == name)
            .options(*self.load_options)
            .order_by(Product.creation_date.desc(), Product.id.desc())
        )
        return list(self.session.exec(query).all())

    def best_sellers_by_category(self, category_id: int, limit: int = 5) -> List[Product]:
        quantity_sold = func.sum(Invoice.quantity)
        query = (
            select(Product)
            .join(Invoice, Invoice.product_id == Product.id)
            .where(Product.category_id == category_id)
            .options(*self.load_options)
            .group_by(Product.id)
            .order_by(quantity_sold.desc())
            .limit(limit)
        )
        return list(self.session.exec(query).all())

    def sales_for_product(self, product_id: int) -> List[Sale]:
        query = (
            select(Sale)
            .join(Invoice, Invoice.sale_id == Sale.id)
            .where(Invoice.product_id == product_id)
            .distinct()
            .order_by(Sale.id)
        )
        return list(self.session.exec(query).all())


class InventoryRepository(SQLModelRepository[Inventory]):
    model = Inventory

    def stock_for_product(self, product_id: int) -> Optional[int]:
        query = select(func.sum(Inventory.stock_on_hand)).where(Inventory.product_id == product_id)
        stock = self.session.exec(query).one()
        return int(stock) if stock is not None else None
