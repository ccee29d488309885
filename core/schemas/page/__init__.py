"""Paging schemas."""

from core.schemas.page.page_data_response import PageDataResponse
from core.schemas.page.page_query import PageQuery

__all__ = ["PageDataResponse", "PageQuery"]
