"""Helpers for reading the loosely shaped search responses."""

from typing import Any


def results_of(response: Any) -> list[Any]:
    """The ``results`` array, or [] when the upstream omitted it."""
    if not isinstance(response, dict):
        return []
    results = response.get("results")
    return results if isinstance(results, list) else []


def page_total(response: Any) -> int:
    """``page_metadata.total`` from a paginated search, 0 when absent."""
    if not isinstance(response, dict):
        return 0
    metadata = response.get("page_metadata") or {}
    try:
        return int(metadata.get("total") or 0)
    except (TypeError, ValueError):
        return 0
