"""MCP Adapter Modules

This package contains the tool handlers organized by functionality:
- utils: Shared entity routing (search/get/edit/create)
- customer, order, product: Entity tools with raw/simplified output
- report: Business reports
- feedback: Missing functionality requests
"""

from .customer import handle_customer, CUSTOMER_ACTIONS
from .order import handle_order, ORDER_ACTIONS
from .product import handle_product, PRODUCT_ACTIONS
from .report import handle_report, REPORT_TYPES
from .feedback import handle_feedback

__all__ = [
    'handle_customer',
    'handle_order',
    'handle_product',
    'handle_report',
    'handle_feedback',
    'CUSTOMER_ACTIONS',
    'ORDER_ACTIONS',
    'PRODUCT_ACTIONS',
    'REPORT_TYPES'
]
