"""Award and transaction search handlers."""

import logging
from datetime import date
from typing import Optional

from ..client import UsaSpendingClient
from ..filters import compile_filters
from ..models import SearchFilterSpec, ToolResult, ToolSuccess
from ..projections import AWARD_PROJECTION, TRANSACTION_PROJECTION, filter_base_awards
from ._upstream import page_total, results_of
from .envelope import tool_boundary, with_warnings

logger = logging.getLogger(__name__)


def _action_window(
    spec: SearchFilterSpec,
    start_date: str,
    end_date: Optional[str],
    param: str,
) -> SearchFilterSpec:
    """Pin the spec to an action-date window; a missing end means a single day."""
    if not (start_date or "").strip():
        raise ValueError(f"{param} is required (YYYY-MM-DD or a phrase like 'yesterday')")
    return spec.model_copy(
        update={
            "start_date": start_date,
            "end_date": end_date or start_date,
            "date_range": None,
            "fiscal_year": None,
        }
    )


def _window_bounds(filters: dict) -> tuple[str, str]:
    period = filters["time_period"][0]
    return period["start_date"], period["end_date"]


@tool_boundary("search_awards")
async def search_awards(
    client: UsaSpendingClient,
    spec: SearchFilterSpec,
    limit: int = 10,
    today: Optional[date] = None,
) -> ToolResult:
    """Awards with ANY transaction activity in the window, largest first.

    No dates at all means all history.
    """
    compiled = compile_filters(spec, today=today)
    response = await client.search_awards(
        AWARD_PROJECTION.build_body(compiled.filters, limit=limit)
    )
    awards = AWARD_PROJECTION.project_all(results_of(response))
    total = page_total(response)

    return ToolSuccess(
        with_warnings(
            {
                "summary": f"Found {total} awards (showing {len(awards)})",
                "total": total,
                "awards": [award.to_payload() for award in awards],
            },
            compiled.warnings,
        )
    )


@tool_boundary("search_new_awards")
async def search_new_awards(
    client: UsaSpendingClient,
    award_start_date: str,
    award_end_date: Optional[str] = None,
    spec: Optional[SearchFilterSpec] = None,
    limit: int = 10,
    today: Optional[date] = None,
) -> ToolResult:
    """Base awards (modification "0") signed in the action-date window.

    The transaction endpoint has no native base-award predicate, so
    modifications are dropped after the fetch and ``total`` counts what is
    left of the fetched page.
    """
    spec = _action_window(
        spec or SearchFilterSpec(), award_start_date, award_end_date, "award_start_date"
    )
    compiled = compile_filters(spec, today=today)
    start, end = _window_bounds(compiled.filters)

    response = await client.search_transactions(
        TRANSACTION_PROJECTION.build_body(compiled.filters, limit=limit)
    )
    transactions = TRANSACTION_PROJECTION.project_all(results_of(response))
    new_awards = filter_base_awards(transactions)
    logger.info(
        "new_awards_filtered fetched=%d base_awards=%d",
        len(transactions),
        len(new_awards),
    )

    return ToolSuccess(
        with_warnings(
            {
                "summary": (
                    f"Found {len(new_awards)} new awards signed between {start} and {end} "
                    f"(filtered from {len(transactions)} total transactions)"
                ),
                "total": len(new_awards),
                "awards": [award.to_payload() for award in new_awards],
            },
            compiled.warnings,
        )
    )


@tool_boundary("search_transactions")
async def search_transactions(
    client: UsaSpendingClient,
    action_start_date: str,
    action_end_date: Optional[str] = None,
    spec: Optional[SearchFilterSpec] = None,
    limit: int = 10,
    today: Optional[date] = None,
) -> ToolResult:
    """Every transaction (base awards and modifications) in the action-date window."""
    spec = _action_window(
        spec or SearchFilterSpec(), action_start_date, action_end_date, "action_start_date"
    )
    compiled = compile_filters(spec, today=today)
    start, end = _window_bounds(compiled.filters)

    response = await client.search_transactions(
        TRANSACTION_PROJECTION.build_body(compiled.filters, limit=limit)
    )
    transactions = TRANSACTION_PROJECTION.project_all(results_of(response))
    total = page_total(response)

    return ToolSuccess(
        with_warnings(
            {
                "summary": (
                    f"Found {total} transactions with action dates {start} to {end} "
                    f"(showing {len(transactions)})"
                ),
                "total": total,
                "transactions": [tx.to_payload() for tx in transactions],
            },
            compiled.warnings,
        )
    )
