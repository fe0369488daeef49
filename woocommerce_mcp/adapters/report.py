"""Report operations for MCP adapters"""

from typing import Any, Dict, Optional

from mcp.types import CallToolResult

from ..formatters.response_formatter import to_error_result, to_tool_result
from ..utils.logger import get_logger
from ..woocommerce_client import WooCommerceClient

logger = get_logger(__name__)

# Report type -> WooCommerce reports endpoint
REPORT_ENDPOINTS = {
    "sales_trends": "reports/sales",
    "top_products": "reports/top_sellers",
    "customers_totals": "reports/customers/totals",
    "orders_totals": "reports/orders/totals",
    "products_totals": "reports/products/totals",
}

REPORT_TYPES = tuple(REPORT_ENDPOINTS)


async def handle_report(client: WooCommerceClient, type: str,
                        filters: Optional[Dict[str, Any]] = None) -> CallToolResult:
    """MCP adapter for business reports

    Reports are always returned raw. Filters are forwarded untouched as
    query parameters; their meaning is up to the backend.
    """
    endpoint = REPORT_ENDPOINTS.get(type)
    if endpoint is None:
        logger.warning(f"Rejected unknown report type: {type}")
        return to_error_result(f"Invalid report type: {type}")

    try:
        report = await client.get(endpoint, filters)
        return to_tool_result(report)
    except Exception as e:
        logger.error(f"Report {type} failed: {e}")
        return to_error_result(f"Report generation failed: {e}")
