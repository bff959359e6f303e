"""Smoke tests for the MCP server wiring."""

import pytest
from fastmcp import Client

from usaspending_research.server import build_server

EXPECTED_TOOLS = {
    "search_awards",
    "search_new_awards",
    "search_transactions",
    "get_award_details",
    "search_recipients",
    "get_recipient_details",
    "search_idv_awards",
    "get_spending_over_time",
    "analyze_competition",
}


@pytest.mark.asyncio
async def test_all_tools_and_prompt_registered(settings):
    mcp = build_server(settings)

    async with Client(mcp) as client:
        tools = await client.list_tools()
        prompts = await client.list_prompts()

    assert {tool.name for tool in tools} == EXPECTED_TOOLS
    assert [prompt.name for prompt in prompts] == ["daily_competitive_brief"]


@pytest.mark.asyncio
async def test_limit_bounds_are_in_the_schema(settings):
    mcp = build_server(settings)

    async with Client(mcp) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    limit = tools["search_awards"].inputSchema["properties"]["limit"]
    assert limit["minimum"] == 1
    assert limit["maximum"] == 100
    assert tools["search_recipients"].inputSchema["properties"]["limit"]["maximum"] == 50
    assert "award_start_date" in tools["search_new_awards"].inputSchema["required"]
    assert tools["search_new_awards"].inputSchema["properties"]["award_start_date"]["minLength"] == 1
    assert tools["search_transactions"].inputSchema["properties"]["action_start_date"]["minLength"] == 1
