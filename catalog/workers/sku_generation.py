"""RQ worker job: generate SKUs for a product's option permutations."""
import logging
from catalog import create_app, extensions
from flask import current_app, has_app_context
from catalog.services import sku_service

logger = logging.getLogger(__name__)

_worker_app = None


def _get_app():
    """Return an app instance for worker execution.

    Reuse the current app when already inside an app context (tests/CLI),
    otherwise lazily create the worker app once.
    """
    global _worker_app
    if has_app_context():
        return current_app._get_current_object()
    if _worker_app is None:
        _worker_app = create_app()
    return _worker_app


def generate_skus_job(product_id, admin_id=None):
    """Generate missing SKUs for a product.

    Distributed lock: two workers never generate for the same product at
    once, which would create duplicate permutations.
    """
    app = _get_app()
    with app.app_context():
        if extensions.redis_client is None:
            return sku_service.generate_skus_from_product(product_id, admin_id)

        lock = extensions.redis_client.lock(f"sku_gen:{product_id}", timeout=600)
        if not lock.acquire(blocking=False):
            logger.info("Lock held for product %d, skipping", product_id)
            return None

        try:
            return sku_service.generate_skus_from_product(product_id, admin_id)
        except Exception:
            logger.exception("SKU generation failed for product %d", product_id)
            raise
        finally:
            lock.release()
