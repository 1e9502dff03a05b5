"""Server-side schema for incoming order payloads.

The payload arrives in the camelCase shape the storefront page sends. Every
field failure is reported, not just the first one.
"""
import math
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

DECIMAL_PATTERN = r"^\d+(\.\d+)?$"


class OrderInput(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    product_id: StrictStr = Field(alias="productId")
    customer_name: StrictStr = Field(alias="customerName")
    customer_email: StrictStr = Field(alias="customerEmail")
    customer_phone: StrictStr = Field(alias="customerPhone")
    customer_address: StrictStr = Field(alias="customerAddress")
    size: StrictStr = Field(alias="size")
    # The 1-10 bound is a checkout rule; the server only checks the shape.
    quantity: StrictInt = Field(alias="quantity")
    unit_price: StrictStr = Field(alias="unitPrice", pattern=DECIMAL_PATTERN)
    total_amount: StrictStr = Field(alias="totalAmount", pattern=DECIMAL_PATTERN)

    @field_validator("unit_price", "total_amount")
    @classmethod
    def check_finite_amount(cls, value: str) -> str:
        # the webhook reports amounts as JSON numbers
        if not math.isfinite(float(value)):
            raise ValueError("amount is too large")
        return value


def format_errors(exc: ValidationError) -> List[Dict[str, Any]]:
    failures = []
    for err in exc.errors(include_url=False, include_context=False, include_input=False):
        path = [str(part) for part in err["loc"]]
        failures.append({
            "field": ".".join(path) or None,
            "path": path,
            "code": err["type"],
            "message": err["msg"],
        })
    return failures


def validate_order_input(raw: Any) -> Tuple[Optional[OrderInput], List[Dict[str, Any]]]:
    try:
        return OrderInput.model_validate(raw), []
    except ValidationError as e:
        return None, format_errors(e)
