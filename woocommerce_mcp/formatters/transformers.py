"""
Response Simplifier

Narrows raw WooCommerce entities to the schemas in ``data_models.schemas``.
One generic routine validates every entity kind; a failure on any required
field aborts the whole transformation.
"""

from typing import Any, Callable, Dict, List

from pydantic import ValidationError

from ..data_models.schemas import ENTITY_SCHEMAS
from ..exceptions import TransformationError


def _format_errors(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def transform_entity(kind: str, raw: Any) -> Dict[str, Any]:
    """Validate ``raw`` against the simplified schema of ``kind`` and return the projection"""
    schema = ENTITY_SCHEMAS.get(kind)
    if schema is None:
        raise TransformationError(kind, "unknown entity kind")
    if not isinstance(raw, dict):
        raise TransformationError(kind, f"expected a JSON object, got {type(raw).__name__}")

    try:
        return schema.model_validate(raw).model_dump()
    except ValidationError as e:
        raise TransformationError(kind, _format_errors(e)) from e


def transform_customer(customer: Any) -> Dict[str, Any]:
    return transform_entity("customer", customer)


def transform_order(order: Any) -> Dict[str, Any]:
    return transform_entity("order", order)


def transform_product(product: Any) -> Dict[str, Any]:
    return transform_entity("product", product)


def transform_array(items: Any, transformer: Callable[[Any], Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Apply ``transformer`` to each element in order; the first failure aborts"""
    if not isinstance(items, list):
        raise TransformationError("collection", f"expected a JSON array, got {type(items).__name__}")
    return [transformer(item) for item in items]
