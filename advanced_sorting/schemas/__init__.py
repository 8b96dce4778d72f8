"""Pydantic schemas for API request/response validation."""

from advanced_sorting.schemas.common import ErrorDetail, ErrorResponse, error_body
from advanced_sorting.schemas.sorting import ImdbTopListStatus, SortedItemResult

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "error_body",
    "ImdbTopListStatus",
    "SortedItemResult",
]
