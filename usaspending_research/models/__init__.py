"""Shared pydantic models - the contract between compiler, projections and handlers."""

from .search_filter import CONTRACT_AWARD_TYPE_CODES, DateRange, SearchFilterSpec
from .normalized import (
    CompetitionRow,
    NormalizedResult,
    PlaceOfPerformance,
    RecipientMatch,
    SpendingPeriod,
)
from .tool_result import ToolFailure, ToolResult, ToolSuccess

__all__ = [
    "CONTRACT_AWARD_TYPE_CODES",
    "DateRange",
    "SearchFilterSpec",
    "CompetitionRow",
    "NormalizedResult",
    "PlaceOfPerformance",
    "RecipientMatch",
    "SpendingPeriod",
    "ToolFailure",
    "ToolResult",
    "ToolSuccess",
]
