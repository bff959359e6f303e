"""Exception taxonomy for upstream failures.

Not-found lookups and unparseable dates are not errors: the client returns
``None`` for a 404 and the date resolver reports a warning instead.
"""


class UsaSpendingError(Exception):
    """Base class for every failure surfaced by the fetch client."""


class UpstreamHTTPError(UsaSpendingError):
    """Non-2xx response that was not (or no longer) eligible for retry."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"USAspending API error ({status_code}): {detail}")


class RateLimitExceededError(UsaSpendingError):
    """Retries exhausted against HTTP 429."""

    def __init__(self, retries: int):
        self.retries = retries
        super().__init__(
            f"USAspending API rate limit exceeded after {retries} retries. "
            "Please try again later."
        )


class UpstreamTimeoutError(UsaSpendingError):
    """Request exceeded the configured per-request ceiling."""

    def __init__(self, url: str, timeout: float):
        self.url = url
        self.timeout = timeout
        super().__init__(f"USAspending API request timed out after {timeout:g}s ({url})")


class UpstreamConnectionError(UsaSpendingError):
    """Transport failure (DNS, connection reset, ...) that outlived its retries."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"USAspending API request failed ({url}): {reason}")
