"""Service layer for the WooCommerce MCP Server"""

from .session_service import SessionRegistry, generate_session_id

__all__ = [
    'SessionRegistry',
    'generate_session_id'
]
