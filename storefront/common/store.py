import logging
import threading
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from ..orders.model import ORDER_STATUS_PENDING, NewOrder, Order
from ..products.model import Product

_logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class MemoryStore:
    """Process-lifetime holder of the product and order records.

    Callers always receive copies, so nothing outside the store holds a
    reference into its state. The lock keeps each operation atomic when the
    store is shared across threads; under the event loop no operation
    suspends mid-mutation anyway.
    """

    def __init__(self) -> None:
        self._products: Dict[str, Product] = {}
        self._orders: Dict[str, Order] = {}
        self._lock = threading.Lock()

    async def create_product(
        self,
        name: str,
        description: str,
        price: str,
        image_url: str,
        original_price: Optional[str] = None,
        thumbnail_urls: Optional[Sequence[str]] = None,
        is_active: bool = True,
    ) -> Product:
        product = Product(
            id=str(uuid.uuid4()),
            name=name,
            description=description,
            price=price,
            image_url=image_url,
            original_price=original_price,
            thumbnail_urls=list(thumbnail_urls or []),
            is_active=is_active,
            created_at=_now(),
        )
        with self._lock:
            if is_active:
                # only one product may be on offer at a time
                for existing in self._products.values():
                    if existing.is_active:
                        existing.is_active = False
                        _logger.info("Deactivated product | product_id=%s", existing.id)
            self._products[product.id] = product
        return replace(product, thumbnail_urls=list(product.thumbnail_urls))

    async def get_product(self, product_id: str) -> Optional[Product]:
        with self._lock:
            product = self._products.get(product_id)
            if product is None:
                return None
            return replace(product, thumbnail_urls=list(product.thumbnail_urls))

    async def get_active_product(self) -> Optional[Product]:
        with self._lock:
            for product in self._products.values():
                if product.is_active:
                    return replace(product, thumbnail_urls=list(product.thumbnail_urls))
        return None

    async def create_order(self, order_input: NewOrder) -> Order:
        order = Order(
            id=str(uuid.uuid4()),
            product_id=order_input.product_id,
            customer_name=order_input.customer_name,
            customer_email=order_input.customer_email,
            customer_phone=order_input.customer_phone,
            customer_address=order_input.customer_address,
            size=order_input.size,
            quantity=order_input.quantity,
            unit_price=order_input.unit_price,
            total_amount=order_input.total_amount,
            status=ORDER_STATUS_PENDING,
            webhook_sent=False,
            created_at=_now(),
        )
        with self._lock:
            self._orders[order.id] = order
        return replace(order)

    async def get_order(self, order_id: str) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            return replace(order) if order is not None else None

    async def update_order_webhook_status(self, order_id: str, sent: bool) -> None:
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                _logger.debug("Webhook status for unknown order ignored | order_id=%s", order_id)
                return
            order.webhook_sent = sent

    async def list_orders(self) -> List[Order]:
        with self._lock:
            return [replace(o) for o in self._orders.values()]
