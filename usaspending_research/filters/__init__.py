"""Filter compilation for the USAspending search endpoints."""

from .compiler import (
    CompiledFilter,
    build_agency_filter,
    build_amount_filter,
    build_time_filter,
    compile_filters,
    resolve_time_period,
)

__all__ = [
    "CompiledFilter",
    "build_agency_filter",
    "build_amount_filter",
    "build_time_filter",
    "compile_filters",
    "resolve_time_period",
]
