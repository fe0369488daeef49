"""Shared utilities for MCP adapters"""

from typing import Any, Callable, Dict, Optional, Sequence

from ..data_models.payloads import parse_payload, split_id
from ..exceptions import UnknownOperationError
from ..formatters.transformers import transform_array
from ..utils.logger import get_logger
from ..woocommerce_client import WooCommerceClient

logger = get_logger(__name__)

OUTPUT_FORMATS = ("raw", "simplified")
DEFAULT_FORMAT = "simplified"


def resolve_format(output_format: Optional[str]) -> str:
    """Default to ``simplified``; reject anything that is not a known format"""
    if output_format is None:
        return DEFAULT_FORMAT
    if output_format not in OUTPUT_FORMATS:
        raise UnknownOperationError(f"Unsupported format: {output_format}")
    return output_format


async def run_entity_action(
    client: WooCommerceClient,
    resource: str,
    transformer: Callable[[Any], Dict[str, Any]],
    allowed_actions: Sequence[str],
    action: str,
    data: Optional[Dict[str, Any]],
    output_format: Optional[str] = None
) -> Any:
    """Route one entity tool call to the REST API and shape the answer

    Args:
        client: WooCommerce client bound to the session's credentials
        resource: Collection endpoint, e.g. ``orders``
        transformer: Single-entity simplifier for this resource
        allowed_actions: Actions the tool exposes
        action: Requested action
        data: Tool payload; ``id`` addresses the resource for get/edit
        output_format: ``raw`` or ``simplified`` (default)

    Returns:
        Backend JSON for ``raw``, simplified entity or list otherwise
    """
    if action not in allowed_actions:
        raise UnknownOperationError(f"Unsupported action: {action}")

    output_format = resolve_format(output_format)
    payload = parse_payload(action, data)
    data = data or {}

    if action == "search":
        raw = await client.get(resource, data)
        if output_format == "raw":
            return raw
        return transform_array(raw, transformer)

    if action == "get":
        resource_id, _ = split_id(payload)
        raw = await client.get(f"{resource}/{resource_id}")
    elif action == "edit":
        resource_id, updates = split_id(payload)
        raw = await client.put(f"{resource}/{resource_id}", updates)
    else:
        raw = await client.post(resource, data)

    if output_format == "raw":
        return raw
    return transformer(raw)
