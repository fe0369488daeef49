"""
Tests for the FastMCP server assembly and tool execution wrapper.
"""

import json

import pytest

from woocommerce_mcp.formatters.response_formatter import result_text, to_tool_result
from woocommerce_mcp.mcp_server_fastmcp import create_server, handle_tool_execution


@pytest.mark.asyncio
async def test_exposes_the_five_tools(credentials):
    server = create_server(credentials, session_id="test")

    tools = {tool.name: tool for tool in await server.list_tools()}

    assert set(tools) == {"customer", "order", "product", "report", "feedback"}
    assert tools["order"].inputSchema["properties"]["action"]["type"] == "string"
    assert "create" in tools["order"].description
    assert "create" not in tools["customer"].description
    assert set(tools["product"].inputSchema["required"]) == {"action", "data"}
    assert set(tools["report"].inputSchema["required"]) == {"type"}
    assert set(tools["feedback"].inputSchema["required"]) == {"request"}


@pytest.mark.asyncio
async def test_tool_execution_passes_result_through():
    async def adapter(value):
        return to_tool_result({"value": value})

    result = await handle_tool_execution("echo", "session-1", adapter, value=3)

    assert result.isError is False
    assert json.loads(result_text(result)) == {"value": 3}


@pytest.mark.asyncio
async def test_tool_execution_converts_unexpected_errors():
    async def adapter():
        raise RuntimeError("boom")

    result = await handle_tool_execution("broken", "session-1", adapter)

    assert result.isError is True
    assert result_text(result) == "Error in broken: boom"
