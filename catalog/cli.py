"""Flask CLI commands for catalog administration."""
import click
from flask import current_app


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Create all tables."""
        from catalog.extensions import db

        db.create_all()
        click.echo(
            f"Database initialized at {current_app.config['SQLALCHEMY_DATABASE_URI']}."
        )

    @app.cli.command("seed-demo")
    def seed_demo():
        """Seed demo options and a product that uses them (idempotent)."""
        from catalog.extensions import db
        from catalog.models.product import Product
        from catalog.models.product_option import ProductOption
        from catalog.services import product_option_service

        # Only seed if no options exist yet
        if ProductOption.query.first():
            click.echo("Product options already exist, skipping demo seed.")
            return

        demo_options = [
            {
                "type": "COLOR",
                "attribute_name": "color",
                "label": "Color",
                "required": True,
                "display_order": 1,
                "allowed_values": [
                    {"attribute_value": "Red", "display_order": 1},
                    {"attribute_value": "Navy", "display_order": 2},
                    {"attribute_value": "Black", "display_order": 3},
                ],
            },
            {
                "type": "SIZE",
                "attribute_name": "size",
                "label": "Size",
                "required": True,
                "display_order": 2,
                "allowed_values": [
                    {"attribute_value": "S", "display_order": 1},
                    {"attribute_value": "M", "display_order": 2},
                    {"attribute_value": "L", "display_order": 3, "price_adjustment": "2.00"},
                ],
            },
            {
                "type": "TEXT",
                "attribute_name": "monogram",
                "label": "Monogram",
                "required": False,
                "use_in_sku_generation": False,
                "display_order": 3,
                "validation_type": "REGEX",
                "validation_string": "[A-Z]{1,3}",
                "error_code": "INVALID_MONOGRAM",
                "error_message": "Monograms are one to three capital letters.",
            },
        ]
        options = [product_option_service.create_option(data) for data in demo_options]

        product = Product(name="Classic Crew Tee", description="Demo product")
        product.product_options.extend(options)
        db.session.add(product)
        db.session.commit()
        click.echo(
            f"Seeded {len(options)} demo options and product {product.id}: {product.name}"
        )

    @app.cli.command("create-product")
    @click.option("--name", required=True)
    @click.option("--description", default="")
    def create_product(name, description):
        """Create a product directly (for testing)."""
        from catalog.extensions import db
        from catalog.models.product import Product

        product = Product(name=name, description=description)
        db.session.add(product)
        db.session.commit()
        click.echo(f"Created product {product.id}: {name}")

    @app.cli.command("create-option")
    @click.option("--label", required=True)
    @click.option("--type", "option_type", default="TEXT", help="Option type code")
    @click.option("--attribute-name", default=None)
    @click.option("--required/--optional", default=False)
    @click.option("--display-order", type=int, default=None)
    @click.option("--value", "values", multiple=True, help="Allowed value, repeatable")
    def create_option(label, option_type, attribute_name, required, display_order, values):
        """Create a product option with its allowed values."""
        from catalog.services import product_option_service

        data = {
            "type": option_type,
            "label": label,
            "attribute_name": attribute_name or label.lower(),
            "required": required,
            "display_order": display_order,
            "allowed_values": [{"attribute_value": v} for v in values],
        }
        try:
            option = product_option_service.create_option(data)
        except ValueError as e:
            raise click.BadParameter(str(e))
        click.echo(
            f"Created option {option.id}: {option.label} "
            f"({option.type_code}, {len(option.allowed_values)} values)"
        )

    @app.cli.command("generate-skus")
    @click.argument("product_id", type=int)
    def generate_skus(product_id):
        """Generate SKUs for every missing option permutation of a product."""
        from catalog.services.sku_service import generate_skus_from_product

        try:
            created = generate_skus_from_product(product_id)
        except ValueError as e:
            raise click.ClickException(str(e))
        if created is None:
            raise click.ClickException(f"Product {product_id} not found.")
        if created == -1:
            click.echo(f"Product {product_id} has no options, nothing to generate.")
            return
        click.echo(f"Generated {created} SKUs for product {product_id}.")

    @app.cli.command("stats")
    def stats():
        """Show product option counts by type."""
        from catalog.services.product_option_service import get_stats

        s = get_stats()
        total = sum(s.values())
        click.echo(f"Total options: {total}")
        for option_type, count in sorted(s.items()):
            click.echo(f"  {option_type}: {count}")
