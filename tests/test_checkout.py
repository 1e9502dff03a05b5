"""Tests for the checkout form rules."""

import pytest

from storefront.orders.checkout import (
    CustomerDetails,
    adjust_quantity,
    build_order_payload,
    order_total,
    submit_checkout,
    validate_customer,
)
from storefront.orders.schema import validate_order_input


def valid_details(**overrides) -> CustomerDetails:
    values = {
        "full_name": "Mona Adel",
        "email": "mona@example.com",
        "phone": "+20 100 123 4567",
        "address": "12 Nile St, Cairo",
    }
    values.update(overrides)
    return CustomerDetails(**values)


class RecordingSubmit:
    def __init__(self):
        self.calls = []

    async def __call__(self, payload):
        self.calls.append(payload)
        return {"id": "order-1"}


class TestValidateCustomer:
    def test_valid_form(self):
        assert validate_customer(valid_details()) == {}

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.com", "a@@b.com", "@b.com", "a@b.co\n"])
    def test_invalid_email(self, email):
        errors = validate_customer(valid_details(email=email))

        assert errors == {"email": "Please enter a valid email address"}

    def test_blank_fields_after_trim(self):
        errors = validate_customer(valid_details(full_name="  ", email=" ", phone="", address="\n"))

        assert errors == {
            "fullName": "Full name is required",
            "email": "Email is required",
            "phone": "Phone number is required",
            "address": "Delivery address is required",
        }


class TestQuantity:
    @pytest.mark.parametrize("current,change,expected", [(1, -1, 1), (1, 1, 2), (10, 1, 10), (5, -2, 3)])
    def test_clamped(self, current, change, expected):
        assert adjust_quantity(current, change) == expected

    def test_total_has_two_decimals(self):
        assert order_total("300.00", 3) == "900.00"
        assert order_total("19.5", 2) == "39.00"


class TestSubmitCheckout:
    @pytest.mark.asyncio
    async def test_payload_passes_server_schema(self, product):
        payload = build_order_payload(product, valid_details(), "L", 2)

        order_input, errors = validate_order_input(payload)

        assert errors == []
        assert order_input.unit_price == "300.00"
        assert order_input.total_amount == "600.00"
        assert order_input.size == "L"

    @pytest.mark.asyncio
    async def test_valid_form_submits_once(self, product):
        submit = RecordingSubmit()

        result = await submit_checkout(product, valid_details(), submit, size="M", quantity=3)

        assert result.ok is True
        assert result.response == {"id": "order-1"}
        assert len(submit.calls) == 1
        assert submit.calls[0]["totalAmount"] == "900.00"

    @pytest.mark.asyncio
    async def test_defaults_to_size_m_and_single_item(self, product):
        submit = RecordingSubmit()

        await submit_checkout(product, valid_details(), submit)

        assert submit.calls[0]["size"] == "M"
        assert submit.calls[0]["quantity"] == 1
        assert submit.calls[0]["totalAmount"] == "300.00"

    @pytest.mark.asyncio
    async def test_invalid_form_never_submits(self, product):
        submit = RecordingSubmit()

        result = await submit_checkout(product, valid_details(email="not-an-email"), submit)

        assert result.ok is False
        assert "email" in result.errors
        assert submit.calls == []

    @pytest.mark.asyncio
    async def test_missing_product(self):
        submit = RecordingSubmit()

        result = await submit_checkout(None, valid_details(), submit)

        assert result.ok is False
        assert submit.calls == []
