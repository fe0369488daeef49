"""
Integration tests against a live WooCommerce store.

Skipped unless WOOCOMMERCE_URL, WOOCOMMERCE_KEY and WOOCOMMERCE_SECRET are set.
"""

import json
import os

import pytest

from woocommerce_mcp.adapters import handle_customer, handle_order, handle_product, handle_report
from woocommerce_mcp.formatters.response_formatter import result_text
from woocommerce_mcp.models.credentials import Credentials
from woocommerce_mcp.woocommerce_client import WooCommerceClient

LIVE_CREDENTIALS = Credentials(
    url=os.getenv("WOOCOMMERCE_URL", ""),
    key=os.getenv("WOOCOMMERCE_KEY", ""),
    secret=os.getenv("WOOCOMMERCE_SECRET", "")
)

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not LIVE_CREDENTIALS.is_complete, reason="live WooCommerce credentials not configured"),
]


@pytest.fixture
def live_client():
    return WooCommerceClient(LIVE_CREDENTIALS)


@pytest.mark.asyncio
async def test_latest_order(live_client):
    result = await handle_order(live_client, "search", {"per_page": 1, "order": "desc"})

    assert result.isError is False, result_text(result)
    orders = json.loads(result_text(result))
    assert len(orders) <= 1


@pytest.mark.asyncio
async def test_latest_order_raw_keeps_order_key(live_client):
    result = await handle_order(live_client, "search", {"per_page": 1, "order": "desc"}, format="raw")

    orders = json.loads(result_text(result))
    if orders:
        assert "order_key" in orders[0]


@pytest.mark.asyncio
async def test_missing_order(live_client):
    result = await handle_order(live_client, "get", {"id": 99999999})

    assert result.isError is True
    assert "404 Not Found" in result_text(result)


@pytest.mark.asyncio
async def test_customers_and_products(live_client):
    customers = await handle_customer(live_client, "search", {"per_page": 5})
    products = await handle_product(live_client, "search", {"per_page": 5})

    assert customers.isError is False, result_text(customers)
    assert products.isError is False, result_text(products)


@pytest.mark.asyncio
async def test_sales_report(live_client):
    result = await handle_report(live_client, "sales_trends", {"period": "month"})

    assert result.isError is False, result_text(result)
    assert "total_sales" in json.loads(result_text(result))[0]
