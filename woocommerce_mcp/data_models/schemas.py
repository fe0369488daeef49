"""
Simplified WooCommerce entity schemas
=====================================

Reduced, stable projections of the customer, order and product objects
returned by the WooCommerce REST API. These models are the compatibility
surface of the ``simplified`` output format: every field is required,
types are checked strictly, and unknown keys are dropped.
"""

from typing import Annotated, List, Optional

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, StrictInt, StrictStr

# Development stores live on .local and .test hosts; their addresses are valid syntax
for _dev_domain in ("local", "test"):
    if _dev_domain in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_dev_domain)


def _check_email(value: str) -> str:
    # syntax only, no DNS; the raw value is kept as-is
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"invalid email address: {e}") from e
    return value


Email = Annotated[StrictStr, AfterValidator(_check_email)]


class SimplifiedModel(BaseModel):
    """Base for simplified entities: extra keys ignored"""
    model_config = ConfigDict(extra="ignore")


class BillingInfo(SimplifiedModel):
    first_name: StrictStr
    last_name: StrictStr
    email: Email
    phone: StrictStr
    address_1: StrictStr
    city: StrictStr
    state: StrictStr
    postcode: StrictStr
    country: StrictStr


class SimplifiedCustomer(SimplifiedModel):
    id: StrictInt
    email: Email
    first_name: StrictStr
    last_name: StrictStr
    role: StrictStr
    username: StrictStr
    billing: BillingInfo


class SimplifiedLineItem(SimplifiedModel):
    id: StrictInt
    name: StrictStr
    product_id: StrictInt
    quantity: StrictInt
    total: StrictStr


class SimplifiedOrder(SimplifiedModel):
    id: StrictInt
    status: StrictStr
    date_created: StrictStr
    total: StrictStr
    customer_id: StrictInt
    billing: BillingInfo
    line_items: List[SimplifiedLineItem]


class SimplifiedProduct(SimplifiedModel):
    id: StrictInt
    name: StrictStr
    sku: StrictStr
    price: StrictStr
    stock_quantity: Optional[StrictInt]
    stock_status: StrictStr


# Entity kind -> schema; the single source of truth for the simplifier
ENTITY_SCHEMAS = {
    "customer": SimplifiedCustomer,
    "order": SimplifiedOrder,
    "product": SimplifiedProduct,
}
