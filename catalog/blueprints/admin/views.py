"""JSON admin API for product options, allowed values and SKU generation."""
import hmac
import logging
from flask import abort, current_app, request
from werkzeug.exceptions import HTTPException
from catalog.blueprints.admin import admin_bp
from catalog.extensions import db
from catalog.models.product import Product
from catalog.models.product_option import ProductOption
from catalog.models.presentation import describe_entity
from catalog.models.product_option_value import ProductOptionValue
from catalog.models.types import ProductOptionType
from catalog.services import product_option_service, sku_service
from catalog.services.validation_service import (
    OptionValidationError,
    validate_product_attributes,
)

logger = logging.getLogger(__name__)


@admin_bp.before_request
def require_admin_token():
    expected = current_app.config.get("ADMIN_API_TOKEN", "")
    header = request.headers.get("Authorization", "")
    token = header[len("Bearer "):] if header.startswith("Bearer ") else ""
    if not expected or not hmac.compare_digest(token.encode(), expected.encode()):
        logger.warning("Rejected admin request to %s", request.path)
        abort(403)


@admin_bp.errorhandler(HTTPException)
def json_error(e):
    return {"error": e.name.lower()}, e.code


@admin_bp.errorhandler(ValueError)
def invalid_input(e):
    db.session.rollback()
    return {"error": "invalid input", "detail": str(e)}, 400


def _admin_id():
    raw = request.headers.get("X-Admin-Id")
    try:
        return int(raw) if raw else None
    except ValueError:
        return None


def _json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        abort(400)
    return data


def _locale():
    return request.args.get("locale") or None


@admin_bp.route("/product-options", methods=["GET"])
def list_options():
    option_type = None
    code = request.args.get("type")
    if code:
        option_type = ProductOptionType.get_instance(code.upper())
        if option_type is None:
            raise ValueError(f"Unknown type: {code}")
    locale = _locale()
    options = product_option_service.list_options(option_type)
    return {"items": [o.to_dict(locale) for o in options]}


@admin_bp.route("/product-options", methods=["POST"])
def create_option():
    option = product_option_service.create_option(_json_body(), _admin_id())
    return option.to_dict(_locale()), 201


@admin_bp.route("/product-options/metadata", methods=["GET"])
def option_metadata():
    return {
        "product_option": describe_entity(ProductOption),
        "product_option_value": describe_entity(ProductOptionValue),
    }


@admin_bp.route("/product-options/<int:option_id>", methods=["GET"])
def get_option(option_id):
    option = product_option_service.get_option(option_id)
    if not option:
        abort(404)
    data = option.to_dict(_locale())
    data["main_entity_name"] = option.get_main_entity_name(_locale())
    data["product_ids"] = [p.id for p in option.products]
    return data


@admin_bp.route("/product-options/<int:option_id>", methods=["PATCH"])
def update_option(option_id):
    option = product_option_service.update_option(option_id, _json_body(), _admin_id())
    if not option:
        abort(404)
    return option.to_dict(_locale())


@admin_bp.route("/product-options/<int:option_id>", methods=["DELETE"])
def delete_option(option_id):
    if not product_option_service.delete_option(option_id, _admin_id()):
        abort(404)
    return "", 204


@admin_bp.route("/product-options/<int:option_id>/values", methods=["POST"])
def add_value(option_id):
    value = product_option_service.add_allowed_value(option_id, _json_body(), _admin_id())
    if not value:
        abort(404)
    return value.to_dict(_locale()), 201


@admin_bp.route(
    "/product-options/<int:option_id>/values/<int:value_id>", methods=["DELETE"]
)
def remove_value(option_id, value_id):
    if not product_option_service.remove_allowed_value(option_id, value_id, _admin_id()):
        abort(404)
    return "", 204


@admin_bp.route("/products/<int:product_id>/options/<int:option_id>", methods=["POST"])
def assign_option(product_id, option_id):
    product = product_option_service.assign_option(product_id, option_id, _admin_id())
    if not product:
        abort(404)
    return product.to_dict(_locale())


@admin_bp.route("/products/<int:product_id>/options/<int:option_id>", methods=["DELETE"])
def unassign_option(product_id, option_id):
    product = product_option_service.unassign_option(product_id, option_id, _admin_id())
    if not product:
        abort(404)
    return product.to_dict(_locale())


@admin_bp.route("/products/<int:product_id>/generate-skus", methods=["POST"])
def generate_skus(product_id):
    if not db.session.get(Product, product_id):
        abort(404)

    if request.args.get("async") == "1":
        job = sku_service.enqueue_sku_generation(product_id, _admin_id())
        if job is not None:
            return {"job_id": job.id, "status": "queued"}, 202
        # Queue disabled: fall through and generate inline

    created = sku_service.generate_skus_from_product(product_id, _admin_id())
    if created == -1:
        return {"created": 0, "detail": "product has no options"}
    return {"created": created}


@admin_bp.route("/products/<int:product_id>/validate-options", methods=["POST"])
def validate_options(product_id):
    product = db.session.get(Product, product_id)
    if not product:
        abort(404)

    attributes = _json_body().get("attributes") or {}
    if not isinstance(attributes, dict):
        raise ValueError("attributes must be an object.")
    try:
        validate_product_attributes(product, attributes)
    except OptionValidationError as e:
        return {
            "valid": False,
            "attribute_name": e.attribute_name,
            "error_code": e.error_code,
            "error_message": e.error_message,
        }, 422

    sku = sku_service.find_matching_sku(product, attributes)
    return {"valid": True, "sku_id": sku.id if sku else None}
