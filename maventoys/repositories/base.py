"""Data access over one SQLModel session.

Repositories own commits and rollbacks; services decide what to write.
"""
import logging
import math
from typing import Callable, Generic, Iterable, List, Optional, Tuple, Type, TypeVar

from sqlmodel import Session, SQLModel, func, select

from maventoys.specs import FilterSpec

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=SQLModel)
C = TypeVar("C", bound=SQLModel)


class PageResult(Generic[T]):
    """One page of rows plus the metadata a client needs to paginate."""

    def __init__(self, items: List[T], total_elements: int, page: int, size: int):
        self.items = items
        self.total_elements = total_elements
        self.page = page
        self.size = size

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    def map(self, func: Callable) -> "PageResult":
        return PageResult([func(item) for item in self.items], self.total_elements, self.page, self.size)


class SQLModelRepository(Generic[T]):
    model: Type[T]
    # loader options applied to list queries
    load_options: tuple = ()

    def __init__(self, session: Session):
        self.session = session

    def get(self, id: int) -> Optional[T]:
        return self.session.get(self.model, id)

    def save(self, entity: T) -> T:
        self.session.add(entity)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(entity)
        return entity

    def save_with_children(self, parent: T, children: Iterable[C],
                           link: Callable[[T, C], None]) -> T:
        """Persist ``parent`` and its owned ``children`` in one transaction.

        The parent is flushed first so each child can be linked to its new
        id. Nothing is committed unless every row was written.
        """
        children = list(children)
        try:
            self.session.add(parent)
            self.session.flush()
            for child in children:
                link(parent, child)
                self.session.add(child)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.warning("Rolled back %s with %d child rows", self.model.__name__, len(children))
            raise
        self.session.refresh(parent)
        return parent

    def find_all(self) -> List[T]:
        return list(self.session.exec(select(self.model).order_by(self.model.id)).all())

    def find_active(self) -> List[T]:
        query = (
            select(self.model)
            .where(self.model.active == True)  # noqa: E712
            .options(*self.load_options)
            .order_by(self.model.id)
        )
        return list(self.session.exec(query).all())

    def count(self, spec: Optional[FilterSpec] = None) -> int:
        query = select(func.count()).select_from(self.model)
        if spec is not None:
            query = query.where(spec.to_condition())
        return self.session.exec(query).one()

    def find_page(self, spec: Optional[FilterSpec], page: int, size: int) -> PageResult[T]:
        """One page of rows matching ``spec``, ordered by id.

        Pages past the last row come back empty with the real total, without
        sending the offset to the database.
        """
        total_elements = self.count(spec)
        if page * size >= total_elements:
            return PageResult([], total_elements, page, size)

        query = select(self.model).options(*self.load_options)
        if spec is not None:
            query = query.where(spec.to_condition())
        query = query.order_by(self.model.id).offset(page * size).limit(size)

        items = list(self.session.exec(query).all())
        return PageResult(items, total_elements, page, size)


def to_rows(results) -> List[Tuple]:
    return [tuple(row) for row in results]
