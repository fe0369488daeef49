"""Simplified entity schemas and tool payload records"""

from .schemas import (
    BillingInfo,
    SimplifiedCustomer,
    SimplifiedLineItem,
    SimplifiedOrder,
    SimplifiedProduct,
    ENTITY_SCHEMAS
)
from .payloads import parse_payload, split_id

__all__ = [
    'BillingInfo',
    'SimplifiedCustomer',
    'SimplifiedLineItem',
    'SimplifiedOrder',
    'SimplifiedProduct',
    'ENTITY_SCHEMAS',
    'parse_payload',
    'split_id'
]
