"""Date expression resolution (natural phrases, fiscal years)."""

from .resolver import (
    ResolvedDate,
    ResolvedRange,
    format_date,
    get_current_fiscal_year,
    get_fiscal_year_range,
    one_year_before,
    parse_date_range,
    parse_natural_date,
    subtract_months,
    subtract_years,
)

__all__ = [
    "ResolvedDate",
    "ResolvedRange",
    "format_date",
    "get_current_fiscal_year",
    "get_fiscal_year_range",
    "one_year_before",
    "parse_date_range",
    "parse_natural_date",
    "subtract_months",
    "subtract_years",
]
