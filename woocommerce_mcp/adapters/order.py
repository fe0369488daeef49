"""Order operations for MCP adapters"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult

from .utils import run_entity_action
from ..formatters.response_formatter import to_error_result, to_tool_result
from ..formatters.transformers import transform_order
from ..utils.logger import get_logger
from ..woocommerce_client import WooCommerceClient

logger = get_logger(__name__)

ORDER_ACTIONS = ("search", "get", "edit", "create")


async def handle_order(client: WooCommerceClient, action: str, data: Optional[Dict[str, Any]] = None,
                       format: Optional[str] = None) -> CallToolResult:
    """MCP adapter for order search, lookup, update and creation

    ``create`` posts the whole payload as a new order; the other actions
    behave like the customer tool.
    """
    try:
        result = await run_entity_action(
            client, "orders", transform_order, ORDER_ACTIONS, action, data, format
        )
        return to_tool_result(result)
    except Exception as e:
        logger.error(f"Order {action} failed: {e}")
        return to_error_result(f"Order operation failed: {e}")
