"""Per-action payload records for the entity tools"""

from typing import Any, Dict, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from ..exceptions import InvalidPayloadError, UnknownOperationError

ResourceId = Union[StrictInt, StrictStr]


class SearchPayload(BaseModel):
    """List query; every key is forwarded to the backend as a query parameter"""
    model_config = ConfigDict(extra="allow")


class CreatePayload(BaseModel):
    """New resource body, posted as-is"""
    model_config = ConfigDict(extra="allow")


class GetPayload(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: ResourceId


class EditPayload(BaseModel):
    """``id`` addresses the resource; the remaining keys form the partial update"""
    model_config = ConfigDict(extra="allow")

    id: ResourceId


ACTION_PAYLOADS: Dict[str, Type[BaseModel]] = {
    "search": SearchPayload,
    "get": GetPayload,
    "edit": EditPayload,
    "create": CreatePayload,
}


def parse_payload(action: str, data: Any) -> BaseModel:
    """Validate ``data`` against the record type of ``action``"""
    model = ACTION_PAYLOADS.get(action)
    if model is None:
        raise UnknownOperationError(f"Unsupported action: {action}")
    if data is None:
        data = {}
    try:
        return model.model_validate(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'data'}: {err['msg']}" for err in e.errors()
        )
        raise InvalidPayloadError(f"Invalid data for '{action}': {details}") from e


def split_id(payload: BaseModel) -> Tuple[Union[int, str], Dict[str, Any]]:
    """Return ``(id, remaining fields)`` of a get/edit payload"""
    fields = payload.model_dump()
    resource_id = fields.pop("id")
    return resource_id, fields
