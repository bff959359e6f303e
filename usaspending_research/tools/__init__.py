"""Tool handlers: each composes filters, projections and the client into a ToolResult."""

from .competition import (
    RecipientAggregate,
    aggregate_by_recipient,
    analyze_competition,
    rank_recipients,
)
from .envelope import render_result, tool_boundary
from .lookups import (
    get_award_details,
    get_recipient_details,
    search_idv_awards,
    search_recipients,
)
from .search import search_awards, search_new_awards, search_transactions
from .spending import get_spending_over_time

__all__ = [
    "RecipientAggregate",
    "aggregate_by_recipient",
    "analyze_competition",
    "rank_recipients",
    "render_result",
    "tool_boundary",
    "get_award_details",
    "get_recipient_details",
    "search_idv_awards",
    "search_recipients",
    "search_awards",
    "search_new_awards",
    "search_transactions",
    "get_spending_over_time",
]
