"""Field projection tables per upstream endpoint family."""

from .fields import AWARD_FIELDS, COMPETITION_FIELDS, TRANSACTION_FIELDS
from .shapes import AwardRecordShape, IdvChildShape, RawRecord, TransactionRecordShape
from .tables import (
    AWARD_PROJECTION,
    COMPETITION_PROJECTION,
    TRANSACTION_PROJECTION,
    ProjectionTable,
    filter_base_awards,
    is_base_award,
    normalize_record,
    project_award,
    project_competition,
    project_idv_child,
    project_recipient,
    project_spending_period,
    project_transaction,
)

__all__ = [
    "AWARD_FIELDS",
    "COMPETITION_FIELDS",
    "TRANSACTION_FIELDS",
    "AwardRecordShape",
    "IdvChildShape",
    "RawRecord",
    "TransactionRecordShape",
    "AWARD_PROJECTION",
    "COMPETITION_PROJECTION",
    "TRANSACTION_PROJECTION",
    "ProjectionTable",
    "filter_base_awards",
    "is_base_award",
    "normalize_record",
    "project_award",
    "project_competition",
    "project_idv_child",
    "project_recipient",
    "project_spending_period",
    "project_transaction",
]
