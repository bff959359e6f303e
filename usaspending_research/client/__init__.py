"""Resilient HTTP access to the USAspending API."""

from .throttle import RequestThrottle
from .usaspending import UsaSpendingClient

__all__ = ["RequestThrottle", "UsaSpendingClient"]
