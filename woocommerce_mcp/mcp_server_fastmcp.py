#!/usr/bin/env python3
"""
WooCommerce MCP Server - Official FastMCP Implementation

Exposes a WooCommerce store's REST API as five MCP tools:

- customer: search, get or edit customers
- order: search, get, edit or create orders
- product: search, get or edit products
- report: sales trends, top sellers and totals reports
- feedback: report missing functionality

Entity tools answer with a reduced, validated ``simplified`` schema unless
``format="raw"`` is requested, in which case the WooCommerce JSON is returned
untouched. Every tool answers with a CallToolResult; failures carry
``isError=True`` and a message prefixed with the failing operation.
"""

import time
from typing import Any, Awaitable, Callable, Dict, Literal, Optional

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from .adapters import (
    handle_customer,
    handle_feedback,
    handle_order,
    handle_product,
    handle_report,
)
from .config import config
from .formatters.response_formatter import result_text, to_error_result
from .models.credentials import Credentials
from .utils import get_logger, setup_mcp_logging
from .utils.logger import get_mcp_operations_logger
from .woocommerce_client import WooCommerceClient

logger = get_logger(__name__)
mcp_ops_logger = get_mcp_operations_logger()

OutputFormat = Literal["raw", "simplified"]


async def handle_tool_execution(tool_name: str, session_id: str,
                                adapter_func: Callable[..., Awaitable[CallToolResult]],
                                *args, **kwargs) -> CallToolResult:
    """Generic handler for tool execution with request/response logging"""
    start_time = time.time()
    mcp_ops_logger.log_tool_request(tool_name, session_id, {"tool": tool_name, "parameters": kwargs})
    logger.info(f"[{tool_name}] Executing with session: {session_id}")

    try:
        result = await adapter_func(*args, **kwargs)
    except Exception as e:
        # adapters convert their own failures; anything reaching here is a bug
        execution_time_ms = (time.time() - start_time) * 1000
        mcp_ops_logger.log_tool_error(tool_name, session_id, e, execution_time_ms)
        logger.error(f"[{tool_name}] Unexpected error after {execution_time_ms:.2f}ms: {e}", exc_info=True)
        return to_error_result(f"Error in {tool_name}: {e}")

    execution_time_ms = (time.time() - start_time) * 1000
    mcp_ops_logger.log_tool_response(
        tool_name, session_id, result_text(result), execution_time_ms, is_error=bool(result.isError)
    )
    logger.info(f"[{tool_name}] Finished in {execution_time_ms:.2f}ms (error={bool(result.isError)})")
    return result


def create_server(credentials: Optional[Credentials] = None, session_id: str = "stdio",
                  transport: Optional[httpx.AsyncBaseTransport] = None) -> FastMCP:
    """Build a FastMCP server whose tools are bound to one WooCommerce client

    Args:
        credentials: Store credentials; incomplete credentials leave the
            client uninitialized so every backend tool reports an error
        session_id: Identifier used in operation logs
        transport: Optional httpx transport for the backend client (tests)
    """
    mcp = FastMCP(config.server.name)
    client = WooCommerceClient(
        credentials,
        timeout=config.api.timeout,
        transport=transport,
        debug_curl=config.api.debug_curl
    )

    @mcp.tool(
        name="customer",
        description="Search, get, or edit customer data. action is one of search, get, edit",
        structured_output=False
    )
    async def customer(
        action: str,
        data: Dict[str, Any],
        format: OutputFormat = "simplified"
    ) -> CallToolResult:
        return await handle_tool_execution("customer", session_id, handle_customer, client,
                                           action=action, data=data, format=format)

    @mcp.tool(
        name="order",
        description="Get, edit, or create order data. action is one of search, get, edit, create",
        structured_output=False
    )
    async def order(
        action: str,
        data: Dict[str, Any],
        format: OutputFormat = "simplified"
    ) -> CallToolResult:
        return await handle_tool_execution("order", session_id, handle_order, client,
                                           action=action, data=data, format=format)

    @mcp.tool(
        name="product",
        description="Search, get, or edit product data. action is one of search, get, edit",
        structured_output=False
    )
    async def product(
        action: str,
        data: Dict[str, Any],
        format: OutputFormat = "simplified"
    ) -> CallToolResult:
        return await handle_tool_execution("product", session_id, handle_product, client,
                                           action=action, data=data, format=format)

    @mcp.tool(
        name="report",
        description=(
            "Generate custom business reports. type is one of sales_trends, top_products, "
            "customers_totals, orders_totals, products_totals; filters are passed to WooCommerce as-is"
        ),
        structured_output=False
    )
    async def report(type: str, filters: Optional[Dict[str, Any]] = None) -> CallToolResult:
        return await handle_tool_execution("report", session_id, handle_report, client,
                                           type=type, filters=filters)

    @mcp.tool(name="feedback", description="Report missing functionality", structured_output=False)
    async def feedback(request: str, context: Optional[str] = None) -> CallToolResult:
        return await handle_tool_execution("feedback", session_id, handle_feedback,
                                           request=request, context=context)

    return mcp


# ============================================================================
# MAIN SERVER RUNNER
# ============================================================================

def main():
    """Main entry point: stdio with environment credentials, or streamable HTTP"""
    try:
        setup_mcp_logging(
            debug=config.logging.level.upper() == "DEBUG",
            log_file=config.logging.file,
            log_format=config.logging.format
        )

        if not config.validate():
            raise ValueError("Invalid configuration. Please check your .env file.")

        logger.info("=" * 60)
        logger.info("WooCommerce MCP Server - Official FastMCP Implementation")
        logger.info("=" * 60)
        logger.info(f"Server Name: {config.server.name}")
        logger.info(f"Server Version: {config.server.version}")
        logger.info(f"Transport: {config.server.transport}")
        logger.info("Tools: customer, order, product, report, feedback")
        logger.info("=" * 60)

        if config.server.transport == "http":
            from .api.server import run_http_server
            run_http_server()
        else:
            server = create_server(config.api.credentials, session_id="stdio")
            logger.info("STDIO transport ready for MCP client connection")
            server.run()

    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error(f"MCP Server startup FAILED: {e}")
        raise


if __name__ == "__main__":
    main()
