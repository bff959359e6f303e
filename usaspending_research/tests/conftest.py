"""Pytest configuration and fixtures."""

import os

import pytest

from usaspending_research.client import UsaSpendingClient
from usaspending_research.config import Settings

BASE_URL = "https://api.usaspending.gov/api/v2"


@pytest.fixture
def settings(monkeypatch):
    """Default settings, isolated from the developer's environment."""
    for key in list(os.environ):
        if key.upper().startswith("USASPENDING_"):
            monkeypatch.delenv(key)
    return Settings(_env_file=None)


@pytest.fixture
def make_client(settings):
    """Factory for clients with no throttle spacing and no backoff wait."""

    def _make(**overrides) -> UsaSpendingClient:
        options = {
            "base_url": BASE_URL,
            "max_retries": 2,
            "retry_delay": 0,
            "request_delay": 0,
        }
        options.update(overrides)
        return UsaSpendingClient(settings, **options)

    return _make


@pytest.fixture
def sample_award_search_response():
    """Sample spending_by_award response (two contracts)."""
    return {
        "limit": 10,
        "results": [
            {
                "internal_id": 123456,
                "Award ID": "36C10G22K0075",
                "generated_internal_id": "CONT_AWD_36C10G22K0075_3600_36C79119D0006_3600",
                "Recipient Name": "ODDBALL, INC.",
                "Recipient UEI": "ABC123DEF456",
                "recipient_id": "f1e2d3-C",
                "Award Amount": 12500000.0,
                "Total Outlays": 4000000.0,
                "Description": "VA.GOV MODERNIZATION SUPPORT",
                "Start Date": "2022-03-01",
                "End Date": "2025-02-28",
                "Contract Award Type": "DELIVERY ORDER",
                "awarding_toptier_agency_name": "Department of Veterans Affairs",
                "awarding_subtier_agency_name": "Veterans Affairs",
                "NAICS Code": "541511",
                "NAICS Description": "CUSTOM COMPUTER PROGRAMMING SERVICES",
                "Product or Service Code": "DA01",
                "Place of Performance State Code": "VA",
                "Place of Performance City Name": "ARLINGTON",
            },
            {
                "Award ID": "47QTCA19D00AB",
                "generated_internal_id": "CONT_AWD_47QTCA19D00AB_4732",
                "Recipient Name": "AD HOC LLC",
                "Award Amount": "3400000.50",
                "Start Date": "2023-10-01",
            },
        ],
        "page_metadata": {"page": 1, "total": 57, "hasNext": True, "limit": 10},
    }


@pytest.fixture
def sample_transaction_search_response():
    """Sample spending_by_transaction response: base awards mixed with modifications."""
    return {
        "results": [
            {
                "Award ID": "NEW-001",
                "generated_internal_id": "CONT_AWD_NEW-001",
                "Action Date": "2024-03-14",
                "Transaction Amount": 900000,
                "Modification Number": "0",
                "Recipient Name": "NAVA PBC",
            },
            {
                "Award ID": "OLD-002",
                "Action Date": "2024-03-14",
                "Transaction Amount": 250000,
                "Modification Number": "P00004",
                "Recipient Name": "TRUSS WORKS",
            },
            {
                "Award ID": "NEW-003",
                "Action Date": "2024-03-14",
                "Transaction Amount": 300000,
                "Recipient Name": "SKYLIGHT",
            },
            {
                "Award ID": "OLD-004",
                "Action Date": "2024-03-14",
                "Transaction Amount": 120000,
                "Modification Number": "1",
                "Recipient Name": "FEARLESS",
            },
        ],
        "page_metadata": {"page": 1, "total": 4, "hasNext": False},
    }


@pytest.fixture
def sample_competition_response():
    """Five awards across three recipients (one row missing its recipient)."""
    return {
        "results": [
            {"Award ID": "A-1", "Recipient Name": "ALPHA", "Award Amount": 600.0, "Recipient UEI": "UEI-A"},
            {"Award ID": "B-1", "Recipient Name": "BRAVO", "Award Amount": 300.0, "Recipient UEI": "UEI-B"},
            {"Award ID": "A-2", "Recipient Name": "ALPHA", "Award Amount": 200.0},
            {"Award ID": "X-1", "Award Amount": 100.0},
            {"Award ID": "B-2", "Recipient Name": "BRAVO", "Award Amount": "not a number"},
        ],
        "page_metadata": {"page": 1, "total": 812},
    }
