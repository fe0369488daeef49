"""Data models for the WooCommerce MCP Server"""

from .credentials import Credentials

__all__ = [
    'Credentials'
]
