"""USAspending.gov API client - the only component that performs network I/O.

API Docs: https://api.usaspending.gov/docs/endpoints
Base endpoint: https://api.usaspending.gov/api/v2

Every call goes through ``execute``:
- throttled to a minimum spacing between dispatches (``RequestThrottle``)
- HTTP 429 and transient transport errors retried with exponential backoff
  (``retry_delay * 2**attempt``); timeouts are never retried
- non-2xx responses translated into ``UpstreamHTTPError``
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, Optional
from urllib.parse import quote

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..config import Settings
from ..errors import (
    RateLimitExceededError,
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamTimeoutError,
    UsaSpendingError,
)
from .throttle import RequestThrottle

logger = logging.getLogger(__name__)

USER_AGENT = "usaspending-research/0.3"
ERROR_TEXT_LIMIT = 500


class _RateLimited(Exception):
    """Internal retry signal for HTTP 429; never escapes ``execute``."""

    def __init__(self, response: httpx.Response):
        self.response = response
        super().__init__(f"rate limited ({response.status_code})")


def _is_retryable(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TimeoutException):
        return False
    return isinstance(exc, (_RateLimited, httpx.TransportError))


def _error_detail(response: httpx.Response) -> str:
    """Upstream ``detail`` message, else the raw body, else the reason phrase."""
    text = response.text
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("detail"):
        return str(data["detail"])
    return text[:ERROR_TEXT_LIMIT] if text else response.reason_phrase


class UsaSpendingClient:
    """Async client for the USAspending v2 API.

    Use as an async context manager, or call ``aclose()`` when done.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_delay: Optional[float] = None,
        request_delay: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize client.

        Args:
            settings: Defaults for every option below (falls back to ``Settings()``).
            base_url: API root, e.g. https://api.usaspending.gov/api/v2
            timeout: Per-request ceiling in seconds.
            max_retries: Retries after the first attempt.
            retry_delay: Backoff base in seconds.
            request_delay: Minimum spacing between dispatches in seconds.
            http_client: Pre-built httpx client (owned by the caller).
            sleep: Backoff sleep function.
        """
        settings = settings or Settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.retry_delay = retry_delay if retry_delay is not None else settings.retry_delay
        self.request_delay = (
            request_delay if request_delay is not None else settings.request_delay
        )
        self._sleep = sleep
        self._throttle = RequestThrottle(self.request_delay)
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            },
        )

    async def __aenter__(self) -> "UsaSpendingClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    # ------------------------------------------------------------------
    # Core dispatch
    # ------------------------------------------------------------------

    async def execute(
        self,
        endpoint: str,
        method: str = "POST",
        body: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Perform one logical API call with throttling, retry and error translation.

        Raises:
            RateLimitExceededError: 429 persisted through every retry.
            UpstreamTimeoutError: the request exceeded ``timeout``.
            UpstreamConnectionError: transport failure persisted through every retry.
            UpstreamHTTPError: any other non-2xx response.
        """
        url = self.url_for(endpoint)
        response: Optional[httpx.Response] = None
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries + 1),
                wait=wait_exponential(multiplier=self.retry_delay, exp_base=2, min=0),
                retry=retry_if_exception(_is_retryable),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                sleep=self._sleep,
                reraise=True,
            ):
                with attempt:
                    response = await self._send(
                        method, url, body, attempt.retry_state.attempt_number
                    )
        except _RateLimited:
            raise RateLimitExceededError(self.max_retries) from None
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            raise UpstreamTimeoutError(url, self.timeout) from exc
        except httpx.TransportError as exc:
            raise UpstreamConnectionError(url, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            detail = _error_detail(response)
            logger.error(
                "usaspending_error method=%s url=%s status=%d detail=%r",
                method,
                url,
                response.status_code,
                detail[:200],
            )
            raise UpstreamHTTPError(response.status_code, detail)

        try:
            return response.json()
        except ValueError as exc:
            raise UsaSpendingError(
                f"USAspending API returned malformed JSON ({url})"
            ) from exc

    async def _send(
        self,
        method: str,
        url: str,
        body: Optional[dict[str, Any]],
        attempt: int,
    ) -> httpx.Response:
        await self._throttle.wait()
        logger.info(
            "usaspending_request method=%s url=%s attempt=%d/%d",
            method,
            url,
            attempt,
            self.max_retries + 1,
        )
        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._http.request(method, url, json=body),
                timeout=self.timeout,
            )
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.warning(
                "usaspending_response method=%s url=%s attempt=%d result=failure "
                "error=%s duration_ms=%.0f",
                method,
                url,
                attempt,
                type(exc).__name__,
                duration_ms,
            )
            raise

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "usaspending_response method=%s url=%s attempt=%d status=%d duration_ms=%.0f",
            method,
            url,
            attempt,
            response.status_code,
            duration_ms,
        )
        if response.status_code == 429:
            raise _RateLimited(response)
        return response

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def search_awards(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.execute("search/spending_by_award/", body=body)

    async def search_transactions(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.execute("search/spending_by_transaction/", body=body)

    async def get_spending_over_time(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.execute("search/spending_over_time/", body=body)

    async def get_idv_activity(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self.execute("idvs/activity/", body=body)

    async def search_recipients(self, search_text: str, limit: int = 10) -> dict[str, Any]:
        return await self.execute(
            "autocomplete/recipient/",
            body={"search_text": search_text, "limit": limit},
        )

    async def get_award_details(self, award_id: str) -> Optional[dict[str, Any]]:
        """Award by generated_unique_award_id; None if the API confirms it is absent."""
        return await self._get_entity(f"awards/{quote(award_id, safe='')}/")

    async def get_recipient_details(self, recipient_hash: str) -> Optional[dict[str, Any]]:
        """Recipient profile by hash; None if the API confirms it is absent."""
        return await self._get_entity(f"recipient/{quote(recipient_hash, safe='')}/")

    async def _get_entity(self, endpoint: str) -> Optional[dict[str, Any]]:
        try:
            return await self.execute(endpoint, method="GET")
        except UpstreamHTTPError as exc:
            if exc.status_code == 404:
                logger.info("usaspending_not_found url=%s", self.url_for(endpoint))
                return None
            raise
