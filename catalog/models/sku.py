from datetime import datetime, timezone
from catalog.extensions import db
from catalog.models.product_option_value import sku_option_value_xref


class Sku(db.Model):
    __tablename__ = "skus"

    id = db.Column(db.Integer, primary_key=True)
    product_id = db.Column(
        db.Integer,
        db.ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = db.Column(db.String(255), nullable=False)
    created_at = db.Column(
        db.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    product = db.relationship("Product", back_populates="skus")
    option_values = db.relationship(
        "ProductOptionValue",
        secondary=sku_option_value_xref,
        back_populates="skus",
        lazy="select",
    )

    def option_value_ids(self):
        """Identity of the option-value permutation this SKU represents."""
        return frozenset(v.id for v in self.option_values)

    def to_dict(self, locale=None):
        return {
            "id": self.id,
            "name": self.name,
            "option_values": [
                {
                    "option_id": v.product_option_id,
                    "value_id": v.id,
                    "attribute_value": v.get_attribute_value(locale),
                }
                for v in sorted(self.option_values, key=lambda v: v.id)
            ],
        }

    def __repr__(self):
        return f"<Sku {self.id}: {self.name}>"
