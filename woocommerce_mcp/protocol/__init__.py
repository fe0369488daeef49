"""
Protocol Package - MCP Protocol Handling

This package contains:
- JSON-RPC error responses returned by the HTTP transport
- Initialize request detection
"""

from .errors import (
    MCPError,
    InvalidSession,
    ErrorCode,
    is_initialize_request
)

__all__ = [
    'MCPError',
    'InvalidSession',
    'ErrorCode',
    'is_initialize_request'
]
