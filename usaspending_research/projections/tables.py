"""Projection tables: what to request per endpoint family and how to normalize it.

Every ``project_*`` function is total. It accepts whatever the upstream
returned for one row and never raises; absent upstream fields simply stay
absent in the normalized record.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from ..models import (
    CompetitionRow,
    NormalizedResult,
    PlaceOfPerformance,
    RecipientMatch,
    SpendingPeriod,
)
from .fields import AWARD_FIELDS, COMPETITION_FIELDS, TRANSACTION_FIELDS
from .shapes import (
    AwardRecordShape,
    CompetitionRecordShape,
    IdvChildShape,
    RawRecord,
    RecipientRecordShape,
    SpendingPeriodShape,
    TransactionRecordShape,
)


def _validate(shape_cls, raw: Any):
    """Build a raw shape from an arbitrary upstream row without raising."""
    if not isinstance(raw, Mapping):
        raw = {}
    return shape_cls.model_validate({k: v for k, v in raw.items() if k != "kind"})


def normalize_record(record: RawRecord) -> NormalizedResult:
    """Project any tagged raw shape into the single NormalizedResult type."""
    if isinstance(record, AwardRecordShape):
        place = PlaceOfPerformance(
            state=record.pop_state_name,
            state_code=record.pop_state_code,
            city=record.pop_city_name,
            county=record.pop_county_name,
            zip=record.pop_zip5,
            country=record.pop_country_name,
            congressional_district=record.pop_congressional_district,
        )
        return NormalizedResult(
            source="award",
            id=record.award_id,
            internal_id=record.generated_internal_id,
            description=record.description,
            amount=record.award_amount,
            total_outlays=record.total_outlays,
            recipient_name=record.recipient_name,
            recipient_uei=record.recipient_uei,
            recipient_id=record.recipient_id,
            awarding_agency=record.awarding_agency,
            awarding_sub_agency=record.awarding_sub_agency,
            performance_period_start=record.start_date,
            performance_period_end=record.end_date,
            contract_type=record.contract_award_type,
            naics_code=record.naics_code,
            naics_description=record.naics_description,
            psc_code=record.psc_code,
            psc_description=record.psc_description,
            place_of_performance=None if place.is_empty() else place,
        )

    if isinstance(record, TransactionRecordShape):
        return NormalizedResult(
            source="transaction",
            id=record.award_id,
            internal_id=record.generated_internal_id,
            description=record.description,
            amount=record.transaction_amount,
            recipient_name=record.recipient_name,
            awarding_agency=record.awarding_agency,
            awarding_sub_agency=record.awarding_sub_agency,
            action_date=record.action_date,
            modification_number=record.modification_number,
            naics_code=record.naics_code,
            naics_description=record.naics_description,
            psc_code=record.psc_code,
            psc_description=record.psc_description,
        )

    return NormalizedResult(
        source="idv_child",
        id=record.piid,
        internal_id=record.generated_unique_award_id,
        amount=record.obligated_amount,
        recipient_name=record.recipient_name,
        recipient_id=record.recipient_id,
        awarding_agency=record.awarding_agency,
        performance_period_start=record.period_of_performance_start_date,
        performance_period_end=record.period_of_performance_potential_end_date,
        parent_award_id=record.parent_award_piid,
    )


def project_award(raw: Any) -> NormalizedResult:
    return normalize_record(_validate(AwardRecordShape, raw))


def project_transaction(raw: Any) -> NormalizedResult:
    return normalize_record(_validate(TransactionRecordShape, raw))


def project_idv_child(raw: Any) -> NormalizedResult:
    return normalize_record(_validate(IdvChildShape, raw))


def project_competition(raw: Any) -> CompetitionRow:
    record = _validate(CompetitionRecordShape, raw)
    return CompetitionRow(
        award_id=record.award_id or "",
        recipient_name=record.recipient_name or "Unknown",
        amount=record.award_amount or 0.0,
        recipient_uei=record.recipient_uei or "",
        contract_type=record.contract_award_type,
    )


def project_recipient(raw: Any) -> RecipientMatch:
    record = _validate(RecipientRecordShape, raw)
    return RecipientMatch(
        hash=record.recipient_hash,
        name=record.recipient_name,
        uei=record.recipient_uei,
        duns=record.recipient_unique_id,
        level=record.recipient_level,
    )


def project_spending_period(raw: Any) -> SpendingPeriod:
    record = _validate(SpendingPeriodShape, raw)
    period = record.time_period or {}

    def _text(key: str):
        value = period.get(key)
        return None if value is None else str(value)

    return SpendingPeriod(
        fiscal_year=_text("fiscal_year"),
        quarter=_text("quarter"),
        month=_text("month"),
        aggregated_amount=record.aggregated_amount or 0.0,
    )


def is_base_award(record: NormalizedResult) -> bool:
    """Modification number "0", or none at all, marks the original award action."""
    return (record.modification_number or "") in ("", "0")


def filter_base_awards(records: list[NormalizedResult]) -> list[NormalizedResult]:
    """Keep only base awards; the upstream API has no native predicate for this."""
    return [record for record in records if is_base_award(record)]


@dataclass(frozen=True)
class ProjectionTable:
    """Field list, sort column and row projection for one endpoint family."""

    name: str
    endpoint: str
    fields: tuple[str, ...]
    sort_field: str
    project: Callable[[Any], Any]

    def build_body(
        self,
        filters: dict[str, Any],
        limit: int,
        page: int = 1,
        order: str = "desc",
    ) -> dict[str, Any]:
        """Request body for the search endpoints: filters, fields, limit, page, sort, order."""
        return {
            "filters": filters,
            "fields": list(self.fields),
            "limit": limit,
            "page": page,
            "sort": self.sort_field,
            "order": order,
        }

    def project_all(self, rows: Any) -> list[Any]:
        if not isinstance(rows, list):
            return []
        return [self.project(row) for row in rows]


AWARD_PROJECTION = ProjectionTable(
    name="award",
    endpoint="search/spending_by_award/",
    fields=AWARD_FIELDS,
    sort_field="Award Amount",
    project=project_award,
)

TRANSACTION_PROJECTION = ProjectionTable(
    name="transaction",
    endpoint="search/spending_by_transaction/",
    fields=TRANSACTION_FIELDS,
    sort_field="Transaction Amount",
    project=project_transaction,
)

COMPETITION_PROJECTION = ProjectionTable(
    name="competition",
    endpoint="search/spending_by_award/",
    fields=COMPETITION_FIELDS,
    sort_field="Award Amount",
    project=project_competition,
)
