"""Raw upstream record shapes.

Each shape is keyed by the upstream column names through aliases. Values are
coerced leniently: a missing, empty or malformed value becomes None instead of
raising, so projection never fails on a partial record.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value).strip()
    return text or None


def _as_amount(value: Any) -> Optional[float]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_mapping(value: Any) -> Optional[dict[str, Any]]:
    return dict(value) if isinstance(value, dict) else None


LenientText = Annotated[Optional[str], BeforeValidator(_as_text)]
LenientAmount = Annotated[Optional[float], BeforeValidator(_as_amount)]
LenientMapping = Annotated[Optional[dict[str, Any]], BeforeValidator(_as_mapping)]


class _RawShape(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AwardRecordShape(_RawShape):
    """Row from ``search/spending_by_award/``.

    "Start Date"/"End Date" are the period of performance, not the signing date.
    """

    kind: Literal["award"] = "award"
    award_id: LenientText = Field(None, alias="Award ID")
    generated_internal_id: LenientText = None
    description: LenientText = Field(None, alias="Description")
    award_amount: LenientAmount = Field(None, alias="Award Amount")
    total_outlays: LenientAmount = Field(None, alias="Total Outlays")
    recipient_name: LenientText = Field(None, alias="Recipient Name")
    recipient_uei: LenientText = Field(None, alias="Recipient UEI")
    recipient_id: LenientText = None
    awarding_agency: LenientText = Field(None, alias="awarding_toptier_agency_name")
    awarding_sub_agency: LenientText = Field(None, alias="awarding_subtier_agency_name")
    start_date: LenientText = Field(None, alias="Start Date")
    end_date: LenientText = Field(None, alias="End Date")
    contract_award_type: LenientText = Field(None, alias="Contract Award Type")
    naics_code: LenientText = Field(None, alias="NAICS Code")
    naics_description: LenientText = Field(None, alias="NAICS Description")
    psc_code: LenientText = Field(None, alias="Product or Service Code")
    psc_description: LenientText = Field(None, alias="Product or Service Code Description")
    pop_state_name: LenientText = Field(None, alias="Place of Performance State Name")
    pop_state_code: LenientText = Field(None, alias="Place of Performance State Code")
    pop_city_name: LenientText = Field(None, alias="Place of Performance City Name")
    pop_county_name: LenientText = Field(None, alias="Place of Performance County Name")
    pop_zip5: LenientText = Field(None, alias="Place of Performance Zip5")
    pop_country_name: LenientText = Field(None, alias="Place of Performance Country Name")
    pop_congressional_district: LenientText = Field(
        None, alias="Place of Performance Congressional District"
    )


class TransactionRecordShape(_RawShape):
    """Row from ``search/spending_by_transaction/``."""

    kind: Literal["transaction"] = "transaction"
    award_id: LenientText = Field(None, alias="Award ID")
    generated_internal_id: LenientText = None
    action_date: LenientText = Field(None, alias="Action Date")
    transaction_amount: LenientAmount = Field(None, alias="Transaction Amount")
    modification_number: LenientText = Field(None, alias="Modification Number")
    description: LenientText = Field(None, alias="Description")
    recipient_name: LenientText = Field(None, alias="Recipient Name")
    awarding_agency: LenientText = Field(None, alias="awarding_toptier_agency_name")
    awarding_sub_agency: LenientText = Field(None, alias="awarding_subtier_agency_name")
    naics_code: LenientText = None
    naics_description: LenientText = None
    psc_code: LenientText = Field(None, alias="product_or_service_code")
    psc_description: LenientText = Field(None, alias="product_or_service_code_description")


class IdvChildShape(_RawShape):
    """Row from ``idvs/activity/`` (a task order or child award)."""

    kind: Literal["idv_child"] = "idv_child"
    piid: LenientText = None
    generated_unique_award_id: LenientText = None
    parent_award_piid: LenientText = None
    awarding_agency: LenientText = None
    recipient_name: LenientText = None
    recipient_id: LenientText = None
    obligated_amount: LenientAmount = None
    period_of_performance_start_date: LenientText = None
    period_of_performance_potential_end_date: LenientText = None


RawRecord = Annotated[
    Union[AwardRecordShape, TransactionRecordShape, IdvChildShape],
    Field(discriminator="kind"),
]


class CompetitionRecordShape(_RawShape):
    award_id: LenientText = Field(None, alias="Award ID")
    recipient_name: LenientText = Field(None, alias="Recipient Name")
    award_amount: LenientAmount = Field(None, alias="Award Amount")
    recipient_uei: LenientText = Field(None, alias="Recipient UEI")
    contract_award_type: LenientText = Field(None, alias="Contract Award Type")


class RecipientRecordShape(_RawShape):
    recipient_hash: LenientText = None
    recipient_name: LenientText = None
    recipient_uei: LenientText = None
    recipient_unique_id: LenientText = None
    recipient_level: LenientText = None


class SpendingPeriodShape(_RawShape):
    aggregated_amount: LenientAmount = None
    time_period: LenientMapping = None
