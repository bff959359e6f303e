"""SearchFilterSpec - caller-facing search parameters shared by every search tool."""

from typing import Optional

from pydantic import BaseModel, Field

# A=BPA Call, B=Purchase Order, C=Delivery Order, D=Definitive Contract
CONTRACT_AWARD_TYPE_CODES = ["A", "B", "C", "D"]


class DateRange(BaseModel):
    """Concrete ISO date pair used for ``time_period`` filters."""

    start_date: str = Field(..., description="YYYY-MM-DD")
    end_date: str = Field(..., description="YYYY-MM-DD")

    def as_time_period(self) -> dict[str, str]:
        return {"start_date": self.start_date, "end_date": self.end_date}


class SearchFilterSpec(BaseModel):
    """Flat, loosely specified search parameters.

    Only one date mechanism is honored, in precedence order
    ``fiscal_year`` > ``date_range`` > ``start_date``/``end_date``.
    Unset fields are omitted from the compiled filter.
    """

    keywords: Optional[list[str]] = Field(None, description="Keywords searched in award descriptions")
    recipient_name: Optional[str] = Field(None, description="Contractor/recipient name")
    agency_name: Optional[str] = Field(None, description="Awarding toptier agency name")
    naics_codes: Optional[list[str]] = Field(None, description="NAICS codes")
    psc_codes: Optional[list[str]] = Field(None, description="Product Service Codes")

    # Dates
    start_date: Optional[str] = Field(None, description="YYYY-MM-DD or natural phrase ('30 days ago')")
    end_date: Optional[str] = Field(None, description="YYYY-MM-DD or natural phrase ('today')")
    date_range: Optional[str] = Field(None, description="Natural range phrase ('last quarter')")
    fiscal_year: Optional[int] = Field(None, description="Federal fiscal year (Oct 1 - Sep 30)")

    # Financial
    min_amount: Optional[float] = Field(None, description="Lower award amount bound in dollars")
    max_amount: Optional[float] = Field(None, description="Upper award amount bound in dollars")

    # Classification
    state: Optional[str] = Field(None, description="Place of performance state code")
    award_type_codes: Optional[list[str]] = Field(None, description="Defaults to contract types A-D")
    set_aside_types: Optional[list[str]] = Field(None, description="Set-aside type codes (SDVOSBC, 8A, WOSB)")
    extent_competed: Optional[list[str]] = Field(None, description="Extent competed codes (A, D, E, CDO)")
    contract_pricing_types: Optional[list[str]] = Field(None, description="Pricing type codes (FFPF, TM, CPFF)")

    def has_dates(self) -> bool:
        """True if any date mechanism was supplied."""
        return bool(self.fiscal_year or self.date_range or self.start_date or self.end_date)
