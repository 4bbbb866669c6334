from datetime import datetime, timezone
from catalog.extensions import db
from catalog.models.product_option import product_option_xref


class Product(db.Model):
    __tablename__ = "products"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, default="")
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    product_options = db.relationship(
        "ProductOption",
        secondary=product_option_xref,
        back_populates="products",
        lazy="select",
        order_by="ProductOption.display_order",
    )
    skus = db.relationship(
        "Sku",
        back_populates="product",
        lazy="select",
        cascade="all, delete-orphan",
        order_by="Sku.id",
    )

    def get_main_entity_name(self, locale=None):
        return self.name

    def to_dict(self, locale=None):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "product_options": [
                {"id": o.id, "label": o.get_label(locale)} for o in self.product_options
            ],
            "skus": [s.to_dict(locale) for s in self.skus],
        }

    def __repr__(self):
        return f"<Product {self.id}: {self.name}>"
