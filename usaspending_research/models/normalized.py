"""Normalized result shapes, independent of which upstream endpoint produced them.

Every field is optional: upstream may omit any column, and projection must
never fail on a missing key. Serialized camelCase with absent fields dropped.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PlaceOfPerformance(_CamelModel):
    state: Optional[str] = None
    state_code: Optional[str] = None
    city: Optional[str] = None
    county: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    congressional_district: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


class NormalizedResult(_CamelModel):
    """One award, transaction or IDV child record.

    ``performance_period_start``/``performance_period_end`` describe when the
    contracted work happens. They are not the signing date; only transaction
    records carry that, as ``action_date``.
    """

    source: str
    id: Optional[str] = None
    internal_id: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    total_outlays: Optional[float] = None
    recipient_name: Optional[str] = None
    recipient_uei: Optional[str] = None
    recipient_id: Optional[str] = None
    awarding_agency: Optional[str] = None
    awarding_sub_agency: Optional[str] = None
    performance_period_start: Optional[str] = None
    performance_period_end: Optional[str] = None
    action_date: Optional[str] = None
    modification_number: Optional[str] = None
    parent_award_id: Optional[str] = None
    contract_type: Optional[str] = None
    naics_code: Optional[str] = None
    naics_description: Optional[str] = None
    psc_code: Optional[str] = None
    psc_description: Optional[str] = None
    place_of_performance: Optional[PlaceOfPerformance] = None


class RecipientMatch(_CamelModel):
    """Recipient autocomplete hit; ``hash`` feeds get_recipient_details."""

    hash: Optional[str] = None
    name: Optional[str] = None
    uei: Optional[str] = None
    duns: Optional[str] = None
    level: Optional[str] = None


class CompetitionRow(BaseModel):
    """Minimal award row used only for recipient aggregation."""

    award_id: str = ""
    recipient_name: str = "Unknown"
    amount: float = 0.0
    recipient_uei: str = ""
    contract_type: Optional[str] = None


class SpendingPeriod(BaseModel):
    """One bucket of the spending-over-time series."""

    fiscal_year: Optional[str] = None
    quarter: Optional[str] = None
    month: Optional[str] = None
    aggregated_amount: float = 0.0

    def label(self) -> str:
        if self.month:
            return f"FY{self.fiscal_year}-M{self.month}"
        if self.quarter:
            return f"FY{self.fiscal_year}-Q{self.quarter}"
        return f"FY{self.fiscal_year}"
