"""Upstream field names requested from each search endpoint family.

The award and transaction endpoints name the same concepts differently
("Award Amount" vs "Transaction Amount", "NAICS Code" vs "naics_code").
"""

# spending_by_award
AWARD_FIELDS = (
    "Award ID",
    "Recipient Name",
    "Start Date",
    "End Date",
    "Award Amount",
    "Total Outlays",
    "awarding_agency_code",
    "awarding_toptier_agency_name",
    "awarding_subtier_agency_name",
    "Description",
    "def_codes",
    "COVID-19 Obligations",
    "COVID-19 Outlays",
    "Infrastructure Obligations",
    "Infrastructure Outlays",
    "recipient_id",
    "Recipient UEI",
    "recipient_parent_id",
    "Recipient Parent UEI",
    "prime_award_recipient_id",
    "prime_award_recipient_uei",
    "Contract Award Type",
    "NAICS Code",
    "NAICS Description",
    "Product or Service Code",
    "Product or Service Code Description",
    "Place of Performance City Code",
    "Place of Performance City Name",
    "Place of Performance County Code",
    "Place of Performance County Name",
    "Place of Performance State Code",
    "Place of Performance State Name",
    "Place of Performance Country Name",
    "Place of Performance Zip5",
    "Place of Performance Congressional District",
)

# spending_by_transaction
TRANSACTION_FIELDS = (
    "Award ID",
    "Recipient Name",
    "Action Date",
    "Transaction Amount",
    "awarding_toptier_agency_name",
    "awarding_subtier_agency_name",
    "Description",
    "Modification Number",
    "naics_code",
    "naics_description",
    "product_or_service_code",
    "product_or_service_code_description",
)

# spending_by_award, aggregation only
COMPETITION_FIELDS = (
    "Award ID",
    "Recipient Name",
    "Award Amount",
    "Recipient UEI",
    "Contract Award Type",
)
