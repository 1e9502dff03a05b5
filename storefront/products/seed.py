import logging
from typing import Optional

from ..common.config import settings
from ..common.store import MemoryStore
from .model import Product

_logger = logging.getLogger(__name__)


DEFAULT_THUMBNAIL_URLS = [
    "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?auto=format&fit=crop&w=200&h=200",
    "https://images.unsplash.com/photo-1503341504253-dff4815485f1?auto=format&fit=crop&w=200&h=200",
    "https://images.unsplash.com/photo-1562157873-818bc0726f68?auto=format&fit=crop&w=200&h=200",
]


async def seed_default_product(store: MemoryStore) -> Optional[Product]:
    """Put the default product on offer unless one is already active."""
    existing = await store.get_active_product()
    if existing is not None:
        _logger.info("Active product already present | product_id=%s", existing.id)
        return None
    product = await store.create_product(
        name=settings.DEFAULT_PRODUCT_NAME,
        description=settings.DEFAULT_PRODUCT_DESCRIPTION,
        price=settings.DEFAULT_PRODUCT_PRICE,
        original_price=settings.DEFAULT_PRODUCT_ORIGINAL_PRICE or None,
        image_url=settings.DEFAULT_PRODUCT_IMAGE_URL,
        thumbnail_urls=DEFAULT_THUMBNAIL_URLS,
        is_active=True,
    )
    _logger.info("Seeded product | product_id=%s name=%s price=%s", product.id, product.name, product.price)
    return product
