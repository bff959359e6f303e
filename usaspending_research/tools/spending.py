"""Spending-over-time handler."""

from datetime import date
from typing import Literal, Optional

from ..client import UsaSpendingClient
from ..filters import compile_filters
from ..models import SearchFilterSpec, ToolResult, ToolSuccess
from ..projections import project_spending_period
from ._upstream import results_of
from .envelope import tool_boundary, with_warnings

SpendingGroup = Literal["fiscal_year", "quarter", "month"]


@tool_boundary("get_spending_over_time")
async def get_spending_over_time(
    client: UsaSpendingClient,
    spec: SearchFilterSpec,
    group: SpendingGroup = "fiscal_year",
    today: Optional[date] = None,
) -> ToolResult:
    """Obligations bucketed by fiscal year, quarter or month.

    Buckets follow transaction activity (when money was obligated), not the
    original award date.
    """
    compiled = compile_filters(spec, today=today)
    response = await client.get_spending_over_time(
        {"filters": compiled.filters, "group": group}
    )
    periods = [project_spending_period(row) for row in results_of(response)]
    total = sum(period.aggregated_amount for period in periods)

    results = []
    for period in periods:
        row = period.model_dump(exclude_none=True)
        row["period"] = period.label()
        results.append(row)

    return ToolSuccess(
        with_warnings(
            {
                "summary": f"Spending trends grouped by {group} ({len(periods)} periods)",
                "group_by": group,
                "total_amount": round(total, 2),
                "results": results,
            },
            compiled.warnings,
        )
    )
