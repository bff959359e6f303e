"""Filter compiler - flat SearchFilterSpec to the nested USAspending filter object.

Each compiled key comes from one independent builder. A builder returns None
when its source parameter is absent or empty, and the key is then omitted;
empty lists are never sent upstream. ``award_type_codes`` is the exception:
it is always present and defaults to the four contract types.

Agency filters are always scoped to the awarding toptier agency. There is no
path to filter by funding agency or subtier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..dates import (
    format_date,
    get_fiscal_year_range,
    one_year_before,
    parse_date_range,
    parse_natural_date,
)
from ..models import CONTRACT_AWARD_TYPE_CODES, SearchFilterSpec

logger = logging.getLogger(__name__)


@dataclass
class CompiledFilter:
    """Nested filter object plus any date-fallback warnings raised while compiling.

    Attributes:
        filters: The ``filters`` body sent to the search endpoints.
        warnings: Human-readable notes for dates that had to be guessed.
    """

    filters: dict[str, Any]
    warnings: list[str] = field(default_factory=list)


def _non_empty(values: Optional[list[str]]) -> Optional[list[str]]:
    return list(values) if values else None


def build_keywords_filter(keywords: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(keywords)


def build_time_filter(
    start_date: Optional[str],
    end_date: Optional[str],
    today: Optional[date] = None,
) -> Optional[list[dict[str, str]]]:
    """Explicit bounds to a one-element ``time_period`` list.

    No bounds at all means "search all history" and yields None. A single
    bound gets its partner synthesized: one year before today for a missing
    start, today for a missing end.
    """
    if not start_date and not end_date:
        return None
    if today is None:
        today = date.today()
    start = start_date or one_year_before(today)
    end = end_date or format_date(today)
    return [{"start_date": start, "end_date": end}]


def build_recipient_filter(recipient_name: Optional[str]) -> Optional[list[str]]:
    return [recipient_name] if recipient_name else None


def build_agency_filter(agency_name: Optional[str]) -> Optional[list[dict[str, str]]]:
    if not agency_name:
        return None
    return [{"type": "awarding", "tier": "toptier", "name": agency_name}]


def build_naics_filter(naics_codes: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(naics_codes)


def build_psc_filter(psc_codes: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(psc_codes)


def build_amount_filter(
    min_amount: Optional[float],
    max_amount: Optional[float],
) -> Optional[list[dict[str, float]]]:
    """Absent bounds are left out entirely, not sent as zero."""
    if min_amount is None and max_amount is None:
        return None
    bounds: dict[str, float] = {}
    if min_amount is not None:
        bounds["lower_bound"] = min_amount
    if max_amount is not None:
        bounds["upper_bound"] = max_amount
    return [bounds]


def build_place_of_performance_filter(state: Optional[str]) -> Optional[list[dict[str, str]]]:
    return [{"country": "USA", "state": state}] if state else None


def build_set_aside_filter(set_aside_types: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(set_aside_types)


def build_competition_filter(extent_competed: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(extent_competed)


def build_contract_pricing_filter(pricing_types: Optional[list[str]]) -> Optional[list[str]]:
    return _non_empty(pricing_types)


def resolve_time_period(
    spec: SearchFilterSpec,
    today: Optional[date] = None,
) -> tuple[Optional[list[dict[str, str]]], list[str]]:
    """Pick the one honored date mechanism: fiscal year > named range > start/end.

    Returns:
        (time_period value or None, warnings)
    """
    if spec.fiscal_year:
        return [get_fiscal_year_range(spec.fiscal_year).as_time_period()], []

    if spec.date_range:
        resolved = parse_date_range(spec.date_range, today=today)
        warnings = [resolved.warning] if resolved.warning else []
        return [resolved.to_date_range().as_time_period()], warnings

    warnings: list[str] = []
    start = end = None
    if spec.start_date:
        parsed = parse_natural_date(spec.start_date, today=today)
        start = parsed.value
        if parsed.warning:
            warnings.append(parsed.warning)
    if spec.end_date:
        parsed = parse_natural_date(spec.end_date, today=today)
        end = parsed.value
        if parsed.warning:
            warnings.append(parsed.warning)
    return build_time_filter(start, end, today=today), warnings


def compile_filters(spec: SearchFilterSpec, today: Optional[date] = None) -> CompiledFilter:
    """Compile a SearchFilterSpec into the upstream ``filters`` object.

    Pure: the same spec and ``today`` always give identical output, key order
    included.

    Args:
        spec: Caller-facing search parameters.
        today: Anchor for default-date synthesis. Defaults to the local date.
    """
    filters: dict[str, Any] = {
        "award_type_codes": list(spec.award_type_codes or CONTRACT_AWARD_TYPE_CODES),
    }

    time_period, warnings = resolve_time_period(spec, today=today)

    builders = (
        ("keywords", build_keywords_filter(spec.keywords)),
        ("time_period", time_period),
        ("recipient_search_text", build_recipient_filter(spec.recipient_name)),
        ("agencies", build_agency_filter(spec.agency_name)),
        ("naics_codes", build_naics_filter(spec.naics_codes)),
        ("psc_codes", build_psc_filter(spec.psc_codes)),
        ("award_amounts", build_amount_filter(spec.min_amount, spec.max_amount)),
        ("place_of_performance_locations", build_place_of_performance_filter(spec.state)),
        ("set_aside_type_codes", build_set_aside_filter(spec.set_aside_types)),
        ("extent_competed_type_codes", build_competition_filter(spec.extent_competed)),
        ("contract_pricing_type_codes", build_contract_pricing_filter(spec.contract_pricing_types)),
    )
    for key, value in builders:
        if value is not None:
            filters[key] = value

    logger.debug("filters_compiled keys=%s warnings=%d", ",".join(filters), len(warnings))
    return CompiledFilter(filters=filters, warnings=warnings)
