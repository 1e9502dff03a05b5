from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Protocol

ORDER_STATUS_PENDING = "pending"


@dataclass
class Order:
    id: str
    product_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    size: str
    quantity: int
    unit_price: str
    total_amount: str
    status: str = ORDER_STATUS_PENDING
    webhook_sent: bool = False
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "productId": self.product_id,
            "customerName": self.customer_name,
            "customerEmail": self.customer_email,
            "customerPhone": self.customer_phone,
            "customerAddress": self.customer_address,
            "size": self.size,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "totalAmount": self.total_amount,
            "status": self.status,
            "webhookSent": self.webhook_sent,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class NewOrder(Protocol):
    """Customer-supplied order fields; the store assigns the rest."""

    product_id: str
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    size: str
    quantity: int
    unit_price: str
    total_amount: str
