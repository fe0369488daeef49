"""
Pytest configuration and shared fixtures for the WooCommerce MCP Server tests.
"""

import copy
import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from woocommerce_mcp.models.credentials import Credentials
from woocommerce_mcp.woocommerce_client import WooCommerceClient

STORE_URL = "https://shop.example.com"


class FakeWooCommerce:
    """In-memory stand-in for a WooCommerce store behind httpx.MockTransport"""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], httpx.Response] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, endpoint: str, json_body: Any = None,
            status_code: int = 200, text: Optional[str] = None):
        path = f"/wp-json/wc/v3/{endpoint}"
        if text is not None:
            response = httpx.Response(status_code, text=text)
        else:
            response = httpx.Response(status_code, json=json_body)
        self.routes[(method.upper(), path)] = response

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(
                404,
                json={"code": "woocommerce_rest_invalid_id", "message": "Invalid ID.", "data": {"status": 404}}
            )
        return response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def credentials():
    """Complete store credentials."""
    return Credentials(url=f"{STORE_URL}/", key="ck_test", secret="cs_test")


@pytest.fixture
def fake_store():
    return FakeWooCommerce()


@pytest.fixture
def wc_client(credentials, fake_store):
    """WooCommerce client wired to the fake store."""
    return WooCommerceClient(credentials, transport=fake_store.transport)


@pytest.fixture
def raw_billing():
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "company": "Analytical Engines Ltd",
        "address_1": "12 St James's Square",
        "address_2": "",
        "city": "London",
        "state": "LND",
        "postcode": "SW1Y 4JH",
        "country": "GB",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0000"
    }


@pytest.fixture
def raw_customer(raw_billing):
    """Customer object as returned by GET /customers/{id}."""
    return {
        "id": 25,
        "date_created": "2024-01-01T10:00:00",
        "email": "ada@example.com",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "role": "customer",
        "username": "ada",
        "billing": copy.deepcopy(raw_billing),
        "shipping": {"first_name": "Ada", "last_name": "Lovelace", "city": "London"},
        "is_paying_customer": True,
        "avatar_url": "https://secure.gravatar.com/avatar/x",
        "meta_data": []
    }


@pytest.fixture
def raw_order(raw_billing):
    """Order object as returned by GET /orders/{id}."""
    return {
        "id": 727,
        "parent_id": 0,
        "number": "727",
        "order_key": "wc_order_58d2d042d1d",
        "created_via": "rest-api",
        "status": "processing",
        "currency": "USD",
        "date_created": "2024-03-22T16:28:02",
        "total": "29.35",
        "customer_id": 25,
        "billing": copy.deepcopy(raw_billing),
        "payment_method": "bacs",
        "line_items": [
            {
                "id": 315,
                "name": "Woo Single #1",
                "product_id": 93,
                "variation_id": 0,
                "quantity": 2,
                "subtotal": "6.00",
                "total": "6.00",
                "sku": "",
                "price": 3
            },
            {
                "id": 316,
                "name": "Ship Your Idea",
                "product_id": 22,
                "variation_id": 23,
                "quantity": 1,
                "subtotal": "20.00",
                "total": "20.00",
                "sku": "",
                "price": 20
            }
        ],
        "shipping_lines": [],
        "meta_data": []
    }


@pytest.fixture
def raw_product():
    """Product object as returned by GET /products/{id}."""
    return {
        "id": 794,
        "name": "Premium Quality",
        "slug": "premium-quality-19",
        "type": "simple",
        "status": "publish",
        "sku": "PQ-19",
        "price": "21.99",
        "regular_price": "21.99",
        "sale_price": "",
        "manage_stock": True,
        "stock_quantity": 12,
        "stock_status": "instock",
        "categories": [{"id": 9, "name": "Clothing", "slug": "clothing"}]
    }
