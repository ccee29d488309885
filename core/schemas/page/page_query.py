"""Paging parameters for list queries."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class PageQuery(BaseSchemaModel):
    """Page number and size requested by the client."""

    page: int = Field(1, ge=1, description="Page number, starting at 1")
    size: int = Field(10, ge=1, le=1000, description="Records per page")

    @property
    def offset(self) -> int:
        """Number of records skipped before this page."""
        return (self.page - 1) * self.size
