from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Product:
    id: str
    name: str
    description: str
    price: str
    image_url: str
    original_price: Optional[str] = None
    thumbnail_urls: List[str] = field(default_factory=list)
    is_active: bool = True
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "originalPrice": self.original_price,
            "imageUrl": self.image_url,
            "thumbnailUrls": list(self.thumbnail_urls),
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
