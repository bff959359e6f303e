"""ToolResult - explicit success/failure outcome of one tool invocation.

Handlers return one of these; text rendering happens once, at the tool
boundary (see ``tools.envelope.render_result``).
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class ToolSuccess:
    """Well-formed result.

    ``payload`` is a JSON document (dict with a ``summary``) or plain text for
    confirmed-absent lookups.
    """

    payload: Union[dict[str, Any], str]


@dataclass(frozen=True)
class ToolFailure:
    """Human-readable error message; never mixed with result data."""

    message: str


ToolResult = Union[ToolSuccess, ToolFailure]
