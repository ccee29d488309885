"""Generic paged response schema."""

from typing import Generic, TypeVar

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel

T = TypeVar("T")


class PageDataResponse(BaseSchemaModel, Generic[T]):
    """One page of records plus the total number of matching records."""

    rows: list[T] = Field(default_factory=list, description="Records on this page")
    total: int = Field(0, ge=0, description="Total number of matching records")
