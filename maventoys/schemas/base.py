from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys; snake_case is accepted on input too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ApiResponse(CamelModel, Generic[T]):
    message: str
    data: Optional[T] = None


class Page(CamelModel, Generic[T]):
    content: List[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
