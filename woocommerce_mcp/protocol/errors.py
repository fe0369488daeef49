"""
MCP Protocol Error Handling

JSON-RPC error objects surfaced directly by the HTTP transport, before a
request ever reaches a tool.
"""

from typing import Optional, Any, Dict
from enum import IntEnum


class ErrorCode(IntEnum):
    """JSON-RPC 2.0 error codes used by the transport"""

    # Implementation-defined errors (-32000 to -32099)
    SERVER_ERROR = -32000          # Transport/session level failure


class MCPError(Exception):
    """Base class for all MCP protocol errors"""

    def __init__(
        self,
        code: int,
        message: str,
        data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize MCP error

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            data: Optional additional error data
        """
        self.code = code
        self.message = message
        self.data = data or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to JSON-RPC error format"""
        error_dict = {
            "code": int(self.code),
            "message": self.message
        }
        if self.data:
            error_dict["data"] = self.data
        return error_dict

    def to_response(self, request_id: Optional[Any] = None) -> Dict[str, Any]:
        """Create complete JSON-RPC error response"""
        return {
            "jsonrpc": "2.0",
            "error": self.to_dict(),
            "id": request_id
        }


class InvalidSession(MCPError):
    """No session id and not an initialize request, or an unknown session id"""

    def __init__(self, message: str = "Bad Request: No valid session ID provided", data: Optional[Dict] = None):
        super().__init__(ErrorCode.SERVER_ERROR, message, data)


def is_initialize_request(body: Any) -> bool:
    """True when the body is a single JSON-RPC ``initialize`` request"""
    return (
        isinstance(body, dict)
        and body.get("jsonrpc") == "2.0"
        and body.get("method") == "initialize"
        and "id" in body
    )
