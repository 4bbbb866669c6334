"""SKU generation from a product's option values."""
import itertools
import logging
import math
from flask import current_app
from catalog.extensions import db
from catalog.models.audit_log import AuditLog
from catalog.models.product import Product
from catalog.models.sku import Sku

logger = logging.getLogger(__name__)


class SkuGenerationLimitError(ValueError):
    def __init__(self, count, limit):
        super().__init__(
            f"{count} option permutations exceed the limit of {limit} SKUs."
        )
        self.count = count
        self.limit = limit


def _sku_options(options):
    return [option for option in options if option.use_in_sku_generation]


def count_permutations(options):
    """Number of permutations generate_permutations would build, without building them."""
    sku_options = _sku_options(options)
    if not sku_options:
        return 0
    return math.prod(len(option.allowed_values) for option in sku_options)


def generate_permutations(options):
    """Every combination of allowed values across the SKU-generating options.

    Options flagged out of SKU generation are skipped; unset counts as in.
    An option with no allowed values leaves nothing to combine.
    """
    value_lists = [list(option.allowed_values) for option in _sku_options(options)]
    if not value_lists:
        return []
    return [list(combo) for combo in itertools.product(*value_lists)]


def sku_name(product, permutation):
    """e.g. "Classic Tee / Red / M", values in option display order."""
    name = " / ".join([product.name] + [v.attribute_value for v in permutation])
    return name[:255]


def generate_skus_from_product(product_id, admin_id=None):
    """Create one SKU per option-value permutation the product lacks.

    Returns the number of SKUs created, None for an unknown product, or -1
    when the product has no options at all.
    """
    product = db.session.get(Product, product_id)
    if not product:
        return None
    if not product.product_options:
        return -1

    count = count_permutations(product.product_options)
    limit = current_app.config["SKU_PERMUTATION_LIMIT"]
    if count > limit:
        raise SkuGenerationLimitError(count, limit)

    permutations = generate_permutations(product.product_options)
    existing = {sku.option_value_ids() for sku in product.skus}
    created = 0
    for permutation in permutations:
        ids = frozenset(v.id for v in permutation)
        if ids in existing:
            continue
        product.skus.append(
            Sku(name=sku_name(product, permutation), option_values=permutation)
        )
        existing.add(ids)
        created += 1

    db.session.add(
        AuditLog(
            admin_id=admin_id,
            action="GENERATE_SKUS",
            entity_type="Product",
            entity_id=product.id,
            payload={"created": created, "permutations": len(permutations)},
        )
    )
    db.session.commit()
    logger.info("Generated %d SKUs for product %d", created, product.id)
    return created


def find_matching_sku(product, attributes):
    """Return the SKU whose option values match ``attributes``, if any.

    ``attributes`` maps option attribute_name to the chosen attribute_value.
    Only SKUs carrying one value per SKU-generating option are candidates.
    """
    attributes = attributes or {}
    expected = len(_sku_options(product.product_options))
    if not expected:
        return None
    for sku in product.skus:
        if len(sku.option_values) != expected:
            continue
        if all(
            attributes.get(v.product_option.attribute_name) == v.attribute_value
            for v in sku.option_values
        ):
            return sku
    return None


def enqueue_sku_generation(product_id, admin_id=None):
    """Queue background SKU generation. Returns the job, or None if queueing is off."""
    from catalog import extensions
    from catalog.workers.sku_generation import generate_skus_job

    job = extensions.task_queue.enqueue(
        generate_skus_job, product_id, admin_id, job_timeout=600
    )
    if job is not None:
        logger.info("Enqueued SKU generation job %s for product %d", job.id, product_id)
    return job
