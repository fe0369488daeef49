"""Customer operations for MCP adapters"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult

from .utils import run_entity_action
from ..formatters.response_formatter import to_error_result, to_tool_result
from ..formatters.transformers import transform_customer
from ..utils.logger import get_logger
from ..woocommerce_client import WooCommerceClient

logger = get_logger(__name__)

CUSTOMER_ACTIONS = ("search", "get", "edit")


async def handle_customer(client: WooCommerceClient, action: str, data: Optional[Dict[str, Any]] = None,
                          format: Optional[str] = None) -> CallToolResult:
    """MCP adapter for searching, fetching and editing customers"""
    try:
        result = await run_entity_action(
            client, "customers", transform_customer, CUSTOMER_ACTIONS, action, data, format
        )
        return to_tool_result(result)
    except Exception as e:
        logger.error(f"Customer {action} failed: {e}")
        return to_error_result(f"Customer operation failed: {e}")
