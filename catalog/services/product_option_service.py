import logging
import re
from decimal import Decimal, InvalidOperation
from catalog.extensions import db
from catalog.models.audit_log import AuditLog
from catalog.models.product import Product
from catalog.models.product_option import ProductOption
from catalog.models.product_option_value import ProductOptionValue
from catalog.models.types import ProductOptionType, ProductOptionValidationType

logger = logging.getLogger(__name__)

OPTION_TEXT_FIELDS = (
    "attribute_name",
    "label",
    "validation_string",
    "error_code",
    "error_message",
)
OPTION_FLAG_FIELDS = ("required", "use_in_sku_generation")


def _parse_enum(enum_cls, code, field):
    if code is None:
        return None
    member = enum_cls.get_instance(str(code).upper())
    if member is None:
        raise ValueError(f"Unknown {field}: {code}")
    return member


def _parse_int(value, field):
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field} must be an integer.")


def _parse_flag(value, field):
    if value is None or isinstance(value, bool):
        return value
    raise ValueError(f"{field} must be true, false or null.")


def apply_option_fields(option, data):
    """Copy recognised request keys onto ``option``.

    Only keys present in ``data`` are touched, so PATCH semantics fall out
    naturally. An explicit null clears the field.
    """
    if "type" in data:
        option.type = _parse_enum(ProductOptionType, data["type"], "type")
    if "validation_type" in data:
        option.product_option_validation_type = _parse_enum(
            ProductOptionValidationType, data["validation_type"], "validation_type"
        )
    for field in OPTION_TEXT_FIELDS:
        if field in data:
            value = data[field]
            setattr(option, field, None if value is None else str(value))
    for field in OPTION_FLAG_FIELDS:
        if field in data:
            setattr(option, field, _parse_flag(data[field], field))
    if "display_order" in data:
        option.display_order = _parse_int(data["display_order"], "display_order")
    if (
        option.product_option_validation_type is ProductOptionValidationType.REGEX
        and option.validation_string
    ):
        try:
            re.compile(option.validation_string)
        except re.error as e:
            raise ValueError(f"validation_string is not a valid pattern: {e}")
    return option


def _audit(admin_id, action, entity_type, entity_id, payload=None):
    db.session.add(
        AuditLog(
            admin_id=admin_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            payload=payload,
        )
    )


def get_option(option_id):
    return db.session.get(ProductOption, option_id)


def list_options(option_type=None):
    """Options sorted for admin listings, optionally filtered by type."""
    query = ProductOption.query
    if option_type is not None:
        query = query.filter(ProductOption.type_code == option_type.code)
    return query.order_by(
        ProductOption.display_order.asc(), ProductOption.id.asc()
    ).all()


def create_option(data, admin_id=None):
    value_payloads = data.get("allowed_values") or []
    if not isinstance(value_payloads, list):
        raise ValueError("allowed_values must be a list.")

    option = apply_option_fields(ProductOption(), data)
    option.allowed_values.extend(
        _build_value(value_data, default_order=i)
        for i, value_data in enumerate(value_payloads)
    )
    db.session.add(option)
    db.session.flush()  # get option.id
    _audit(
        admin_id,
        "CREATE_OPTION",
        "ProductOption",
        option.id,
        {"type": option.type_code, "label": option.label},
    )
    db.session.commit()
    logger.info("Created product option %d (%s)", option.id, option.label)
    return option


def update_option(option_id, data, admin_id=None):
    option = get_option(option_id)
    if not option:
        return None
    apply_option_fields(option, data)
    _audit(
        admin_id,
        "UPDATE_OPTION",
        "ProductOption",
        option.id,
        {k: v for k, v in data.items() if k != "allowed_values"},
    )
    db.session.commit()
    return option


def delete_option(option_id, admin_id=None):
    """Delete an option with its allowed values; linked products survive."""
    option = get_option(option_id)
    if not option:
        return False

    _audit(
        admin_id,
        "DELETE_OPTION",
        "ProductOption",
        option.id,
        {"label": option.label, "product_ids": [p.id for p in option.products]},
    )
    _delete_skus(sku for value in option.allowed_values for sku in value.skus)
    db.session.delete(option)  # cascades to allowed values + xref rows
    db.session.commit()
    logger.info("Deleted product option %d", option_id)
    return True


def _delete_skus(skus):
    """Drop SKUs whose option-value permutation is about to lose a member."""
    for sku in set(skus):
        db.session.delete(sku)


def _build_value(data, default_order=0):
    if not isinstance(data, dict):
        raise ValueError("Each allowed value must be an object.")
    attribute_value = data.get("attribute_value")
    if not attribute_value:
        raise ValueError("attribute_value is required.")

    price_adjustment = data.get("price_adjustment")
    if price_adjustment is not None:
        try:
            price_adjustment = Decimal(str(price_adjustment))
        except InvalidOperation:
            raise ValueError("price_adjustment must be a decimal amount.")

    display_order = _parse_int(data.get("display_order"), "display_order")
    return ProductOptionValue(
        attribute_value=str(attribute_value),
        display_order=default_order if display_order is None else display_order,
        price_adjustment=price_adjustment,
    )


def add_allowed_value(option_id, data, admin_id=None):
    option = get_option(option_id)
    if not option:
        return None

    value = _build_value(data, default_order=len(option.allowed_values))
    option.allowed_values.append(value)
    db.session.flush()
    _audit(
        admin_id,
        "ADD_VALUE",
        "ProductOptionValue",
        value.id,
        {"option_id": option.id, "attribute_value": value.attribute_value},
    )
    db.session.commit()
    return value


def remove_allowed_value(option_id, value_id, admin_id=None):
    value = db.session.get(ProductOptionValue, value_id)
    if not value or value.product_option_id != option_id:
        return False

    _audit(
        admin_id,
        "REMOVE_VALUE",
        "ProductOptionValue",
        value.id,
        {"option_id": option_id, "attribute_value": value.attribute_value},
    )
    _delete_skus(value.skus)
    value.product_option.allowed_values.remove(value)  # delete-orphan
    db.session.commit()
    return True


def assign_option(product_id, option_id, admin_id=None):
    """Link an option to a product. Returns the product, or None if either is missing."""
    product = db.session.get(Product, product_id)
    option = get_option(option_id)
    if not product or not option:
        return None

    if option not in product.product_options:
        product.product_options.append(option)
        _audit(
            admin_id,
            "ASSIGN_OPTION",
            "Product",
            product.id,
            {"option_id": option.id},
        )
        db.session.commit()
    return product


def unassign_option(product_id, option_id, admin_id=None):
    product = db.session.get(Product, product_id)
    option = get_option(option_id)
    if not product or not option or option not in product.product_options:
        return None

    product.product_options.remove(option)
    _delete_skus(
        sku for sku in product.skus
        if any(v.product_option_id == option.id for v in sku.option_values)
    )
    _audit(
        admin_id,
        "UNASSIGN_OPTION",
        "Product",
        product.id,
        {"option_id": option.id},
    )
    db.session.commit()
    return product


def get_stats():
    """Option counts by type code for the stats command."""
    rows = (
        db.session.query(ProductOption.type_code, db.func.count(ProductOption.id))
        .group_by(ProductOption.type_code)
        .all()
    )
    return {code or "UNSET": count for code, count in rows}
