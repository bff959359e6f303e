"""Single-entity lookups and identifier searches."""

from ..client import UsaSpendingClient
from ..models import ToolResult, ToolSuccess
from ..projections import project_idv_child, project_recipient
from ._upstream import results_of
from .envelope import tool_boundary


@tool_boundary("get_award_details")
async def get_award_details(client: UsaSpendingClient, award_id: str) -> ToolResult:
    """Full award record. A confirmed-absent award is a text result, not an error."""
    award = await client.get_award_details(award_id)
    if award is None:
        return ToolSuccess(
            f"Award with ID {award_id} not found. Tip: Use the 'internalId' field "
            "(generated_unique_award_id) from search_awards results, not the simple PIID."
        )

    recipient = (award.get("recipient") or {}).get("recipient_name")
    summary = f"Award {award.get('piid') or award_id}"
    if recipient:
        summary += f" to {recipient}"
    return ToolSuccess({"summary": summary, "award": award})


@tool_boundary("search_recipients")
async def search_recipients(
    client: UsaSpendingClient,
    search_text: str,
    limit: int = 10,
) -> ToolResult:
    response = await client.search_recipients(search_text, limit=limit)
    recipients = [project_recipient(row) for row in results_of(response)]
    return ToolSuccess(
        {
            "summary": f"Found {len(recipients)} recipients matching '{search_text}'",
            "total": len(recipients),
            "recipients": [recipient.to_payload() for recipient in recipients],
        }
    )


@tool_boundary("get_recipient_details")
async def get_recipient_details(client: UsaSpendingClient, recipient_hash: str) -> ToolResult:
    recipient = await client.get_recipient_details(recipient_hash)
    if recipient is None:
        return ToolSuccess(f"Recipient with hash {recipient_hash} not found")

    name = recipient.get("name") or recipient_hash
    return ToolSuccess({"summary": f"Recipient profile for {name}", "recipient": recipient})


@tool_boundary("search_idv_awards")
async def search_idv_awards(
    client: UsaSpendingClient,
    award_id: str,
    limit: int = 25,
) -> ToolResult:
    """Task orders and child awards under one IDV.

    The count covers the fetched page only; the endpoint reports no total.
    """
    response = await client.get_idv_activity({"award_id": award_id, "limit": limit, "page": 1})
    children = [project_idv_child(row) for row in results_of(response)]
    return ToolSuccess(
        {
            "summary": f"Found {len(children)} child awards under this IDV",
            "idv_id": award_id,
            "count": len(children),
            "child_awards": [child.to_payload() for child in children],
        }
    )
