"""Optional-field filter predicates for paginated listings.

A :class:`FilterSpec` holds ``(field_name, MatchMode, value)`` triples and
turns the ones with a usable value into a single AND condition. Identifier
fields match with equality, free-text fields with a case-insensitive
substring search. A spec with nothing to filter on matches every row.
"""
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from sqlalchemy import and_, func, true

from maventoys.models import Category, Employee, Product, Sale, Store


class MatchMode(str, Enum):
    EQUALS = "equals"
    CONTAINS = "contains"


Criterion = Tuple[str, MatchMode, Any]


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class FilterSpec:
    def __init__(self, model, criteria: Optional[Iterable[Criterion]] = None):
        self.model = model
        self.criteria: List[Criterion] = list(criteria or [])

    def conditions(self) -> list:
        conditions = []
        for field_name, mode, value in self.criteria:
            if is_blank(value):
                continue
            column = getattr(self.model, field_name)
            if mode == MatchMode.CONTAINS:
                conditions.append(func.lower(column).contains(str(value).lower(), autoescape=True))
            else:
                conditions.append(column == value)
        return conditions

    def to_condition(self):
        conditions = self.conditions()
        if not conditions:
            return true()
        if len(conditions) == 1:
            return conditions[0]
        return and_(*conditions)

    def and_(self, other: "FilterSpec") -> "FilterSpec":
        if other.model is not self.model:
            raise ValueError("Cannot combine filters of different models")
        return FilterSpec(self.model, self.criteria + other.criteria)

    def is_empty(self) -> bool:
        return not self.conditions()


def store_spec(id: Optional[int] = None, name: Optional[str] = None, location: Optional[str] = None) -> FilterSpec:
    return FilterSpec(Store, [
        ("id", MatchMode.EQUALS, id),
        ("name", MatchMode.CONTAINS, name),
        ("location", MatchMode.CONTAINS, location),
    ])


def employee_spec(id: Optional[int] = None, first_name: Optional[str] = None,
                  last_name: Optional[str] = None) -> FilterSpec:
    return FilterSpec(Employee, [
        ("id", MatchMode.EQUALS, id),
        ("first_name", MatchMode.CONTAINS, first_name),
        ("last_name", MatchMode.CONTAINS, last_name),
    ])


def product_spec(id: Optional[int] = None, name: Optional[str] = None) -> FilterSpec:
    return FilterSpec(Product, [
        ("id", MatchMode.EQUALS, id),
        ("name", MatchMode.CONTAINS, name),
    ])


def category_spec(id: Optional[int] = None, name: Optional[str] = None) -> FilterSpec:
    return FilterSpec(Category, [
        ("id", MatchMode.EQUALS, id),
        ("name", MatchMode.CONTAINS, name),
    ])


def sale_spec(id: Optional[int] = None, store_id: Optional[int] = None,
              employee_id: Optional[int] = None) -> FilterSpec:
    return FilterSpec(Sale, [
        ("id", MatchMode.EQUALS, id),
        ("store_id", MatchMode.EQUALS, store_id),
        ("employee_id", MatchMode.EQUALS, employee_id),
    ])
