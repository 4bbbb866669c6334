#!/usr/bin/env python3
"""Seed sample options and products for local development."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from catalog import create_app
from catalog.extensions import db
from catalog.models.product import Product
from catalog.models.product_option import ProductOption
from catalog.services import product_option_service
from catalog.services.sku_service import generate_skus_from_product

app = create_app()

SAMPLE_OPTIONS = [
    {
        "type": "COLOR",
        "attribute_name": "color",
        "label": "Color",
        "required": True,
        "display_order": 1,
        "values": ["Red", "Navy", "Forest Green", "Black"],
    },
    {
        "type": "SIZE",
        "attribute_name": "size",
        "label": "Size",
        "required": True,
        "display_order": 2,
        "values": ["XS", "S", "M", "L", "XL"],
    },
    {
        "type": "SELECT",
        "attribute_name": "sleeve",
        "label": "Sleeve",
        "required": False,
        "display_order": 3,
        "values": ["Short", "Long"],
    },
    {
        "type": "TEXT",
        "attribute_name": "monogram",
        "label": "Monogram",
        "required": False,
        "use_in_sku_generation": False,
        "display_order": 4,
        "validation_type": "REGEX",
        "validation_string": "[A-Z]{1,3}",
        "error_code": "INVALID_MONOGRAM",
        "error_message": "Monograms are one to three capital letters.",
        "values": [],
    },
]

SAMPLE_PRODUCTS = [
    {"name": "Classic Crew Tee", "options": ["color", "size"]},
    {"name": "Oxford Shirt", "options": ["color", "size", "sleeve", "monogram"]},
    {"name": "Canvas Tote", "options": ["color", "monogram"]},
    {"name": "Enamel Mug", "options": []},
]


def seed():
    with app.app_context():
        db.create_all()

        if ProductOption.query.first():
            print("Options already exist. Skipping seed.")
            return

        options = {}
        for entry in SAMPLE_OPTIONS:
            data = {k: v for k, v in entry.items() if k != "values"}
            data["allowed_values"] = [
                {"attribute_value": v, "display_order": i}
                for i, v in enumerate(entry["values"])
            ]
            option = product_option_service.create_option(data)
            options[option.attribute_name] = option
            print(f"  Option {option.id}: {option.label} ({len(option.allowed_values)} values)")

        for entry in SAMPLE_PRODUCTS:
            product = Product(name=entry["name"])
            product.product_options.extend(options[name] for name in entry["options"])
            db.session.add(product)
            db.session.commit()

            created = generate_skus_from_product(product.id)
            print(f"  Product {product.id}: {product.name}, SKUs generated: {created}")

        print(f"\nSeeded {len(SAMPLE_OPTIONS)} options and {len(SAMPLE_PRODUCTS)} products.")


if __name__ == "__main__":
    seed()
