"""Competitive landscape: who is winning, and how much of the shown market.

Aggregation runs in memory over one fetched page (at most 100 awards). Market
share is measured against the recipients actually shown, so the returned
``market_share_pct`` values always sum to 100 (within rounding) even though
the analyzed page may hold more recipients than ``limit``.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Iterable, Optional

from ..client import UsaSpendingClient
from ..dates import format_date, one_year_before
from ..filters import compile_filters
from ..models import CompetitionRow, SearchFilterSpec, ToolResult, ToolSuccess
from ..projections import COMPETITION_PROJECTION
from ._upstream import page_total, results_of
from .envelope import tool_boundary, with_warnings

logger = logging.getLogger(__name__)

FETCH_LIMIT = 100


@dataclass
class RecipientAggregate:
    """Running totals for one recipient name within a single fetched page."""

    name: str
    uei: str = ""
    total_amount: float = 0.0
    award_count: int = 0
    award_ids: list[str] = field(default_factory=list)

    def add(self, row: CompetitionRow) -> None:
        self.total_amount += row.amount
        self.award_count += 1
        self.award_ids.append(row.award_id)

    @property
    def avg_award_size(self) -> float:
        return self.total_amount / self.award_count if self.award_count else 0.0

    def to_payload(self, market_size: float) -> dict[str, Any]:
        share = (self.total_amount / market_size) * 100 if market_size else 0.0
        return {
            "name": self.name,
            "uei": self.uei,
            "total_amount": round(self.total_amount, 2),
            "award_count": self.award_count,
            "market_share_pct": round(share, 2),
            "avg_award_size": round(self.avg_award_size, 2),
            "award_ids": list(self.award_ids),
        }


def aggregate_by_recipient(rows: Iterable[CompetitionRow]) -> list[RecipientAggregate]:
    """Group rows by recipient name, largest total first.

    The UEI kept is the one on the first row seen for that name. Ties keep
    first-seen order.
    """
    aggregates: dict[str, RecipientAggregate] = {}
    for row in rows:
        aggregate = aggregates.get(row.recipient_name)
        if aggregate is None:
            aggregate = RecipientAggregate(name=row.recipient_name, uei=row.recipient_uei)
            aggregates[row.recipient_name] = aggregate
        aggregate.add(row)
    return sorted(aggregates.values(), key=lambda a: a.total_amount, reverse=True)


def rank_recipients(aggregates: list[RecipientAggregate], limit: int) -> tuple[float, list[dict]]:
    """Truncate to the top ``limit`` and compute shares against that top-N total."""
    top = aggregates[:limit]
    market_size = sum(aggregate.total_amount for aggregate in top)
    return market_size, [aggregate.to_payload(market_size) for aggregate in top]


def _with_trailing_year(spec: SearchFilterSpec, today: Optional[date]) -> SearchFilterSpec:
    if spec.has_dates():
        return spec
    return spec.model_copy(
        update={
            "start_date": one_year_before(today),
            "end_date": format_date(today or date.today()),
        }
    )


@tool_boundary("analyze_competition")
async def analyze_competition(
    client: UsaSpendingClient,
    spec: SearchFilterSpec,
    limit: int = 20,
    today: Optional[date] = None,
) -> ToolResult:
    """Top recipients by award amount over a bounded window (trailing year by default)."""
    compiled = compile_filters(_with_trailing_year(spec, today), today=today)
    response = await client.search_awards(
        COMPETITION_PROJECTION.build_body(compiled.filters, limit=FETCH_LIMIT)
    )
    rows = COMPETITION_PROJECTION.project_all(results_of(response))
    aggregates = aggregate_by_recipient(rows)
    market_size, top_recipients = rank_recipients(aggregates, limit)
    logger.info(
        "competition_aggregated awards=%d recipients=%d shown=%d",
        len(rows),
        len(aggregates),
        len(top_recipients),
    )

    return ToolSuccess(
        with_warnings(
            {
                "summary": f"Competitive analysis showing top {len(top_recipients)} recipients",
                "time_period": compiled.filters["time_period"][0],
                "total_awards_analyzed": page_total(response),
                "awards_fetched": len(rows),
                "total_market_size": round(market_size, 2),
                "top_recipients": top_recipients,
            },
            compiled.warnings,
        )
    )
