"""Feedback submissions for MCP adapters"""

from typing import Optional

from mcp.types import CallToolResult

from ..formatters.response_formatter import to_tool_result
from ..utils.logger import get_logger, get_mcp_operations_logger

logger = get_logger(__name__)


async def handle_feedback(request: str, context: Optional[str] = None) -> CallToolResult:
    """Record a request for missing functionality; never touches the backend"""
    logger.info(f"FEEDBACK RECEIVED: request={request!r} context={context!r}")
    get_mcp_operations_logger().log_feedback(request, context)
    return to_tool_result({"status": "Feedback received", "request": request})
