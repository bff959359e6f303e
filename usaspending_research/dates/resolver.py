"""Natural-language date resolution.

Turns phrases such as "yesterday", "last 30 days" or "last quarter" and
federal fiscal years into concrete ISO ``YYYY-MM-DD`` dates.

Month and year arithmetic is calendar based and clamps to the last valid day
of the target month: 2024-03-31 minus one month is 2024-02-29, and
2024-02-29 minus one year is 2023-02-28.

Unparseable input never raises. Single dates fall back to today and ranges to
the last 30 days; the fallback is reported through ``warning`` on the result
and a WARNING log record.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..models import DateRange

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_DAYS_AGO_RE = re.compile(r"^(\d+)\s+days?\s+ago$")
_LAST_DAYS_RE = re.compile(r"^last\s+(\d+)\s+days?$")
_LAST_MONTHS_RE = re.compile(r"^last\s+(\d+)\s+months?$")
_YEARS_AGO_RE = re.compile(r"^(\d+)\s+years?\s+ago$")

# Generic calendar formats tried after the phrase table
_FALLBACK_FORMATS = (
    "%m/%d/%Y",
    "%Y/%m/%d",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
)

DEFAULT_RANGE_DAYS = 30


@dataclass(frozen=True)
class ResolvedDate:
    """A single resolved date.

    Attributes:
        value: ISO date string.
        warning: Set when the input could not be parsed and ``value`` is a guess.
    """

    value: str
    warning: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.warning is not None


@dataclass(frozen=True)
class ResolvedRange:
    """A resolved start/end pair, with ``warning`` set on fallback."""

    start_date: str
    end_date: str
    warning: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.warning is not None

    def to_date_range(self) -> DateRange:
        return DateRange(start_date=self.start_date, end_date=self.end_date)


def format_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def subtract_months(value: date, months: int) -> date:
    """Step back ``months`` calendar months, clamping the day to the target month."""
    month_index = value.year * 12 + (value.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return value.replace(year=year, month=month, day=min(value.day, last_day))


def subtract_years(value: date, years: int) -> date:
    return subtract_months(value, years * 12)


def one_year_before(today: Optional[date] = None) -> str:
    """Default start for a range with no explicit start bound."""
    return format_date(subtract_years(today or date.today(), 1))


def _resolve_offset_phrase(lower: str, today: date) -> Optional[date]:
    """Resolve phrases that name a point in the past.

    None if the phrase is not recognized, or if its offset lands outside the
    representable calendar ("999999 days ago").
    """
    try:
        return _offset_date(lower, today)
    except (OverflowError, ValueError):
        logger.warning("date_out_of_range input=%r", lower)
        return None


def _offset_date(lower: str, today: date) -> Optional[date]:
    if lower == "today":
        return today
    if lower == "yesterday":
        return today - timedelta(days=1)

    match = _DAYS_AGO_RE.match(lower) or _LAST_DAYS_RE.match(lower)
    if match:
        return today - timedelta(days=int(match.group(1)))

    if lower == "last week":
        return today - timedelta(days=7)
    if lower == "last month":
        return subtract_months(today, 1)

    match = _LAST_MONTHS_RE.match(lower)
    if match:
        return subtract_months(today, int(match.group(1)))

    if lower == "last quarter":
        return subtract_months(today, 3)
    if lower == "last year":
        return subtract_years(today, 1)

    match = _YEARS_AGO_RE.match(lower)
    if match:
        return subtract_years(today, int(match.group(1)))
    return None


def _parse_calendar_date(text: str) -> Optional[date]:
    """Generic calendar-date fallback (ISO datetimes and common US formats)."""
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_natural_date(text: str, today: Optional[date] = None) -> ResolvedDate:
    """Resolve a single date expression.

    Args:
        text: ``YYYY-MM-DD`` (returned unchanged) or a phrase such as
            "yesterday", "N days ago", "last month", "2 years ago".
        today: Anchor date. Defaults to the local calendar date.

    Returns:
        ResolvedDate; falls back to today with a warning when unparseable.
    """
    if today is None:
        today = date.today()

    stripped = (text or "").strip()
    if ISO_DATE_RE.match(stripped):
        return ResolvedDate(stripped)

    resolved = _resolve_offset_phrase(stripped.lower(), today)
    if resolved is None and stripped:
        resolved = _parse_calendar_date(stripped)
    if resolved is not None:
        return ResolvedDate(format_date(resolved))

    warning = f"Could not parse date '{text}', defaulting to today ({format_date(today)})"
    logger.warning("date_fallback input=%r resolved=%s", text, format_date(today))
    return ResolvedDate(format_date(today), warning=warning)


def parse_date_range(text: str, today: Optional[date] = None) -> ResolvedRange:
    """Resolve a range phrase into a start/end pair.

    "today" and "yesterday" collapse start and end to the same day; the
    "last ..." phrases end today and start by subtraction.
    """
    if today is None:
        today = date.today()

    lower = (text or "").strip().lower()
    end = format_date(today)

    if lower in ("today", "yesterday"):
        day = format_date(_resolve_offset_phrase(lower, today))
        return ResolvedRange(day, day)

    if (
        _LAST_DAYS_RE.match(lower)
        or _LAST_MONTHS_RE.match(lower)
        or lower in ("last week", "last month", "last quarter", "last year")
    ):
        start = _resolve_offset_phrase(lower, today)
        if start is not None:
            return ResolvedRange(format_date(start), end)

    start = format_date(today - timedelta(days=DEFAULT_RANGE_DAYS))
    warning = (
        f"Could not parse date range '{text}', defaulting to last "
        f"{DEFAULT_RANGE_DAYS} days ({start} to {end})"
    )
    logger.warning("date_range_fallback input=%r start=%s end=%s", text, start, end)
    return ResolvedRange(start, end, warning=warning)


def get_fiscal_year_range(fiscal_year: int) -> DateRange:
    """Federal fiscal year: Oct 1 of the prior calendar year through Sep 30."""
    return DateRange(
        start_date=f"{fiscal_year - 1}-10-01",
        end_date=f"{fiscal_year}-09-30",
    )


def get_current_fiscal_year(today: Optional[date] = None) -> int:
    """October through December belong to the next fiscal year."""
    if today is None:
        today = date.today()
    return today.year + 1 if today.month >= 10 else today.year
