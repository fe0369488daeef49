"""
WooCommerce-specific exception classes.

Every failure raised inside a tool operation derives from WooCommerceError and
is converted into an error result by the adapters.
"""

from typing import Optional

NOT_INITIALIZED_MESSAGE = (
    "WooCommerce API credentials are not initialized. "
    "Please connect with the required credentials."
)


class WooCommerceError(Exception):
    """Base class for all WooCommerce adapter errors"""


class ClientNotInitializedError(WooCommerceError):
    """Raised when the client is used without a complete set of credentials."""

    def __init__(self, message: str = NOT_INITIALIZED_MESSAGE):
        super().__init__(message)


class WooCommerceAPIError(WooCommerceError):
    """Raised when the WooCommerce REST API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, body: str, endpoint: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"WooCommerce API error: {status_code} {reason} - {body}")


class TransformationError(WooCommerceError):
    """Raised when a raw entity cannot be narrowed to its simplified schema."""

    def __init__(self, kind: str, detail: str):
        self.kind = kind
        self.detail = detail
        super().__init__(f"Failed to transform {kind} data: {detail}")


class InvalidPayloadError(WooCommerceError):
    """Raised when a tool payload does not match the record type of its action."""


class UnknownOperationError(WooCommerceError):
    """Raised for an unrecognized report type or unsupported action."""
