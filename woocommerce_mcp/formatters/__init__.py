"""Response simplification and tool result formatting"""

from .transformers import (
    transform_entity,
    transform_customer,
    transform_order,
    transform_product,
    transform_array
)
from .response_formatter import to_tool_result, to_error_result, result_text

__all__ = [
    'transform_entity',
    'transform_customer',
    'transform_order',
    'transform_product',
    'transform_array',
    'to_tool_result',
    'to_error_result',
    'result_text'
]
