import os
from dataclasses import dataclass
from typing import Optional


WEBHOOK_URL_VARS = ("N8N_WEBHOOK_URL", "WEBHOOK_URL")


def _get_float(env_name: str, default: float) -> float:
    val = os.getenv(env_name)
    if val is None or not val.strip():
        return default
    return float(val)


def get_webhook_url() -> Optional[str]:
    """Resolve the webhook endpoint from the environment on every call.

    The first variable that is set to a non-empty value wins.
    """
    for name in WEBHOOK_URL_VARS:
        val = os.getenv(name)
        if val:
            return val
    return None


@dataclass
class Settings:
    # App
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "5000"))
    INSTANCE_ID: str = os.getenv("INSTANCE_ID", "unknown")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Webhook
    WEBHOOK_TIMEOUT: float = _get_float("WEBHOOK_TIMEOUT", 10.0)
    WEBHOOK_CURRENCY: str = os.getenv("WEBHOOK_CURRENCY", "EGP")
    WEBHOOK_SOURCE: str = os.getenv("WEBHOOK_SOURCE", "website")

    # Static downloads
    DOWNLOADS_DIR: str = os.getenv("DOWNLOADS_DIR", os.path.join(os.getcwd(), "client", "public", "downloads"))
    PROJECT_SOURCE_PATH: str = os.getenv("PROJECT_SOURCE_PATH", os.path.join(os.getcwd(), "project-source.tar.gz"))

    # Defaults for seeding
    DEFAULT_PRODUCT_NAME: str = os.getenv("DEFAULT_PRODUCT_NAME", "Luxury Cropped Black T-Shirt")
    DEFAULT_PRODUCT_DESCRIPTION: str = os.getenv("DEFAULT_PRODUCT_DESCRIPTION", "Minimal. Premium cotton. Built for grind.")
    DEFAULT_PRODUCT_PRICE: str = os.getenv("DEFAULT_PRODUCT_PRICE", "300.00")
    DEFAULT_PRODUCT_ORIGINAL_PRICE: str = os.getenv("DEFAULT_PRODUCT_ORIGINAL_PRICE", "350.00")
    DEFAULT_PRODUCT_IMAGE_URL: str = os.getenv(
        "DEFAULT_PRODUCT_IMAGE_URL",
        "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?auto=format&fit=crop&w=800&h=800",
    )


settings = Settings()
