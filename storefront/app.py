import logging
import time
from typing import Optional

from quart import Quart, jsonify, request
from werkzeug.exceptions import InternalServerError

from .common.config import settings
from .common.store import MemoryStore
from .downloads.controller import bp as downloads_bp
from .notifications.webhook import WebhookNotifier
from .orders.controller import bp as orders_bp
from .orders.service import OrderService
from .products.controller import bp as products_bp
from .products.seed import seed_default_product

# Prometheus metrics
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST


log = logging.getLogger(__name__)

# Basic metrics with proper buckets for latency
REQUEST_COUNT = Counter("http_requests_total", "Total HTTP requests", ["method", "endpoint", "status"])
REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0, 7.5, 10.0, float("inf"))
)


def normalize_endpoint(path: str) -> str:
    # Group dynamic routes to keep label cardinality low
    if path.startswith("/api/orders/"):
        return "/api/orders/<id>"
    if path.startswith("/downloads/"):
        return "/downloads/*"
    return path


def create_app(store: Optional[MemoryStore] = None, notifier: Optional[WebhookNotifier] = None) -> Quart:
    app = Quart(__name__)

    store = store if store is not None else MemoryStore()
    notifier = notifier if notifier is not None else WebhookNotifier()
    app.extensions["store"] = store
    app.extensions["order_service"] = OrderService(store, notifier)

    # Blueprints
    app.register_blueprint(products_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(downloads_bp)

    @app.before_request
    async def before_request():
        request._start_time = time.time()
        log.info("[Instance %s] %s %s", settings.INSTANCE_ID, request.method, request.path)

    @app.after_request
    async def after_request(response):
        try:
            if hasattr(request, "_start_time"):
                duration = time.time() - request._start_time
                endpoint = normalize_endpoint(request.path)
                REQUEST_LATENCY.labels(endpoint=endpoint).observe(duration)
                REQUEST_COUNT.labels(
                    method=request.method,
                    endpoint=endpoint,
                    status=str(response.status_code)
                ).inc()
                response.headers["X-Instance-ID"] = settings.INSTANCE_ID
        except Exception as e:
            log.error("Error recording metrics: %s", e)
        return response

    @app.errorhandler(500)
    async def internal_error(error: InternalServerError):
        # Quart has already logged the traceback; keep the body generic
        original = getattr(error, "original_exception", None) or error
        log.error("Internal error | %s %s err=%r", request.method, request.path, original)
        return jsonify({"message": "Internal server error"}), 500

    @app.get("/metrics")
    async def metrics():
        data = generate_latest()
        return app.response_class(data, mimetype=CONTENT_TYPE_LATEST)

    @app.get("/health")
    async def health():
        return jsonify({"status": "ok"})

    @app.before_serving
    async def startup():
        logging.basicConfig(level=settings.LOG_LEVEL)
        log.info("Seeding product...")
        await seed_default_product(store)
        log.info("Store ready.")

    return app
