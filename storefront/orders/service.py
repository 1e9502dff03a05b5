import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from prometheus_client import Counter

from ..common.config import settings
from ..common.store import MemoryStore
from ..notifications.webhook import NotificationResult, WebhookNotifier
from .model import Order
from .schema import validate_order_input

_logger = logging.getLogger(__name__)

ORDERS_CREATED = Counter("orders_created_total", "Orders accepted and stored")


@dataclass
class SubmitResult:
    ok: bool
    order: Optional[Order] = None
    errors: List[Dict[str, Any]] = field(default_factory=list)
    notification: Optional[NotificationResult] = None


class OrderService:
    def __init__(self, store: MemoryStore, notifier: WebhookNotifier):
        self.store = store
        self.notifier = notifier

    async def submit_order(self, raw_input: Any) -> SubmitResult:
        """Validate, store, notify, then record whether the webhook went out.

        Validation failures come back as a result with every field error.
        The notification outcome never changes whether the order is accepted.
        """
        order_input, errors = validate_order_input(raw_input)
        if order_input is None:
            _logger.info("Order rejected | errors=%s", len(errors))
            return SubmitResult(ok=False, errors=errors)

        order = await self.store.create_order(order_input)
        ORDERS_CREATED.inc()
        _logger.info(
            "Order created | order_id=%s product_id=%s size=%s qty=%s total=%s",
            order.id, order.product_id, order.size, order.quantity, order.total_amount,
        )

        product = await self.store.get_product(order.product_id)
        product_name = product.name if product else settings.DEFAULT_PRODUCT_NAME

        notification = await self.notifier.notify(order, product_name)
        await self.store.update_order_webhook_status(order.id, notification.sent)
        order.webhook_sent = notification.sent

        return SubmitResult(ok=True, order=order, notification=notification)

    async def get_order(self, order_id: str) -> Optional[Order]:
        return await self.store.get_order(order_id)
