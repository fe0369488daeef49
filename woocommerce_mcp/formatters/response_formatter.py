"""
Tool result envelopes

Every tool answers with the same MCP ``CallToolResult`` shape; only the
``isError`` marker distinguishes a failure from a success.
"""

import json
from typing import Any

from mcp.types import CallToolResult, TextContent


def to_tool_result(data: Any) -> CallToolResult:
    """Wrap a JSON-serializable payload as a successful tool result"""
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(data, indent=2, default=str))],
        isError=False
    )


def to_error_result(message: str) -> CallToolResult:
    """Wrap a human readable message as a failed tool result"""
    return CallToolResult(
        content=[TextContent(type="text", text=message)],
        isError=True
    )


def result_text(result: CallToolResult) -> str:
    """Text of the first content block"""
    return result.content[0].text if result.content else ""
