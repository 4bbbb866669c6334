from catalog.models.types import ProductOptionType, ProductOptionValidationType, TriState
from catalog.models.product_option import ProductOption, product_option_xref
from catalog.models.product_option_value import ProductOptionValue, sku_option_value_xref
from catalog.models.product import Product
from catalog.models.sku import Sku
from catalog.models.audit_log import AuditLog

__all__ = [
    "ProductOptionType",
    "ProductOptionValidationType",
    "TriState",
    "ProductOption",
    "product_option_xref",
    "ProductOptionValue",
    "sku_option_value_xref",
    "Product",
    "Sku",
    "AuditLog",
]
