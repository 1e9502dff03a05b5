import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import aiohttp
from prometheus_client import Counter

from ..common.config import get_webhook_url, settings
from ..orders.model import Order

_logger = logging.getLogger(__name__)

WEBHOOK_RESULTS = Counter("webhook_notifications_total", "Order webhook notification attempts", ["outcome"])


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one webhook attempt. Only ``sent`` matters to the caller."""

    sent: bool
    outcome: str
    status: Optional[int] = None
    error: Optional[str] = None


def build_payload(order: Order, product_name: str) -> Dict[str, Any]:
    return {
        "orderId": order.id,
        "product": {
            "name": product_name,
            "size": order.size,
            "quantity": order.quantity,
            "price": float(order.unit_price),
            "total": float(order.total_amount),
        },
        "customer": {
            "fullName": order.customer_name,
            "email": order.customer_email,
            "phone": order.customer_phone,
            "address": order.customer_address,
        },
        "timestamp": order.created_at.isoformat() if order.created_at else None,
        "currency": settings.WEBHOOK_CURRENCY,
        "source": settings.WEBHOOK_SOURCE,
    }


class WebhookNotifier:
    """Best-effort POST of new orders to an external webhook.

    ``notify`` never raises: every failure mode is logged and reported
    through the returned NotificationResult.
    """

    def __init__(
        self,
        url_resolver: Callable[[], Optional[str]] = get_webhook_url,
        timeout: Optional[float] = None,
        session_factory: Callable[[], Any] = aiohttp.ClientSession,
    ):
        self._url_resolver = url_resolver
        self._timeout = settings.WEBHOOK_TIMEOUT if timeout is None else timeout
        self._session_factory = session_factory

    async def notify(self, order: Order, product_name: str) -> NotificationResult:
        url = self._url_resolver()
        if not url:
            _logger.warning("No webhook URL configured | order_id=%s", order.id)
            WEBHOOK_RESULTS.labels(outcome="skipped").inc()
            return NotificationResult(sent=False, outcome="skipped")

        payload = build_payload(order, product_name)
        try:
            async with self._session_factory() as session:
                async with session.post(
                    url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                    timeout=aiohttp.ClientTimeout(total=self._timeout),
                ) as resp:
                    status = resp.status
                    reason = resp.reason
        except Exception as e:
            _logger.error("Error sending webhook | order_id=%s err=%r", order.id, e)
            WEBHOOK_RESULTS.labels(outcome="error").inc()
            return NotificationResult(sent=False, outcome="error", error=repr(e))

        if 200 <= status < 300:
            _logger.info("Webhook delivered | order_id=%s status=%s", order.id, status)
            WEBHOOK_RESULTS.labels(outcome="sent").inc()
            return NotificationResult(sent=True, outcome="sent", status=status)

        _logger.error("Webhook failed | order_id=%s status=%s reason=%s", order.id, status, reason)
        WEBHOOK_RESULTS.labels(outcome="failed").inc()
        return NotificationResult(sent=False, outcome="failed", status=status)
