from typing import List, Tuple

from sqlmodel import func, select

from maventoys.models import Sale, Store

from .base import SQLModelRepository, to_rows


class StoreRepository(SQLModelRepository[Store]):
    model = Store

    def top_sellers(self, limit: int = 5) -> List[Tuple[int, str, float]]:
        """(id, name, total_sales) of the stores with the highest sales total."""
        total_sales = func.sum(Sale.total)
        query = (
            select(Store.id, Store.name, total_sales.label("total_sales"))
            .join(Sale, Sale.store_id == Store.id)
            .group_by(Store.id, Store.name)
            .order_by(total_sales.desc())
            .limit(limit)
        )
        return to_rows(self.session.exec(query).all())
