"""Checkout rules the storefront page applies before an order is submitted.

These mirror what the browser does: required-field and email checks on the
customer form, quantity clamping, and building the order payload with a
client-computed total. The server re-validates the payload shape on arrival.
"""
import re
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Awaitable, Callable, Dict, Optional

from ..products.model import Product

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

DEFAULT_SIZE = "M"
MIN_QUANTITY = 1
MAX_QUANTITY = 10


@dataclass
class CustomerDetails:
    full_name: str
    email: str
    phone: str
    address: str


@dataclass
class CheckoutResult:
    ok: bool
    errors: Dict[str, str] = field(default_factory=dict)
    response: Any = None


def validate_customer(details: CustomerDetails) -> Dict[str, str]:
    errors: Dict[str, str] = {}

    if not details.full_name.strip():
        errors["fullName"] = "Full name is required"

    if not details.email.strip():
        errors["email"] = "Email is required"
    elif not EMAIL_RE.fullmatch(details.email):
        errors["email"] = "Please enter a valid email address"

    if not details.phone.strip():
        errors["phone"] = "Phone number is required"

    if not details.address.strip():
        errors["address"] = "Delivery address is required"

    return errors


def adjust_quantity(current: int, change: int) -> int:
    return max(MIN_QUANTITY, min(MAX_QUANTITY, current + change))


def order_total(unit_price: str, quantity: int) -> str:
    total = Decimal(unit_price) * quantity
    return str(total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def build_order_payload(
    product: Product, details: CustomerDetails, size: str = DEFAULT_SIZE, quantity: int = MIN_QUANTITY
) -> Dict[str, Any]:
    return {
        "productId": product.id,
        "customerName": details.full_name,
        "customerEmail": details.email,
        "customerPhone": details.phone,
        "customerAddress": details.address,
        "size": size,
        "quantity": quantity,
        "unitPrice": product.price,
        "totalAmount": order_total(product.price, quantity),
    }


async def submit_checkout(
    product: Optional[Product],
    details: CustomerDetails,
    submit: Callable[[Dict[str, Any]], Awaitable[Any]],
    size: str = DEFAULT_SIZE,
    quantity: int = MIN_QUANTITY,
) -> CheckoutResult:
    """Validate the form and, only if it passes, hand the payload to ``submit`` once."""
    if product is None:
        return CheckoutResult(ok=False, errors={"product": "Product not found"})

    errors = validate_customer(details)
    if errors:
        return CheckoutResult(ok=False, errors=errors)

    quantity = adjust_quantity(quantity, 0)
    response = await submit(build_order_payload(product, details, size, quantity))
    return CheckoutResult(ok=True, response=response)
