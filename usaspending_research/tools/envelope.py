"""Tool boundary: every invocation ends in a ToolSuccess or a ToolFailure.

``tool_boundary`` is the only place exceptions are caught; ``render_result``
is the only place results become text.
"""

import functools
import json
import logging
import time
from typing import Any, Awaitable, Callable

from ..models import ToolFailure, ToolResult, ToolSuccess

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[ToolResult]]


def tool_boundary(name: str) -> Callable[[Handler], Handler]:
    """Wrap a handler so no exception escapes it.

    Upstream failures keep their message (``USAspending API error (500): ...``);
    anything else becomes a failure naming the exception.
    """

    def decorator(func: Handler) -> Handler:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> ToolResult:
            start = time.monotonic()
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                duration_ms = (time.monotonic() - start) * 1000
                logger.error(
                    "tool_complete tool=%s result=failure error=%s duration_ms=%.0f",
                    name,
                    exc,
                    duration_ms,
                )
                return ToolFailure(str(exc) or type(exc).__name__)

            duration_ms = (time.monotonic() - start) * 1000
            logger.info(
                "tool_complete tool=%s result=%s duration_ms=%.0f",
                name,
                "success" if isinstance(result, ToolSuccess) else "failure",
                duration_ms,
            )
            return result

        return wrapper

    return decorator


def render_result(result: ToolResult) -> str:
    """Render a tool outcome as the text returned to the host."""
    if isinstance(result, ToolFailure):
        return f"Error: {result.message}"
    if isinstance(result.payload, str):
        return result.payload
    return json.dumps(result.payload, indent=2, default=str)


def with_warnings(payload: dict[str, Any], warnings: list[str]) -> dict[str, Any]:
    """Attach date-fallback warnings, if any, to a success payload."""
    if warnings:
        payload["warnings"] = list(warnings)
    return payload
