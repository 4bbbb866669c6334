from catalog.extensions import db
from catalog.models.presentation import admin_field
from catalog.services import translation_service


sku_option_value_xref = db.Table(
    "sku_option_value_xref",
    db.Column(
        "sku_id",
        db.Integer,
        db.ForeignKey("skus.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "product_option_value_id",
        db.Integer,
        db.ForeignKey("product_option_values.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ProductOptionValue(db.Model):
    __tablename__ = "product_option_values"

    id = db.Column(db.Integer, primary_key=True)
    product_option_id = db.Column(
        db.Integer,
        db.ForeignKey("product_options.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attribute_value = db.Column(
        db.String(255),
        info=admin_field(
            "productOptionValue_attributeValue", prominent=True, translatable=True
        ),
    )  # "Red", "XL"
    display_order = db.Column(
        db.Integer, info=admin_field("productOptionValue_displayOrder")
    )
    price_adjustment = db.Column(
        db.Numeric(19, 5),
        info=admin_field("productOptionValue_adjustment", field_type="MONEY"),
    )

    product_option = db.relationship("ProductOption", back_populates="allowed_values")
    skus = db.relationship(
        "Sku", secondary=sku_option_value_xref, back_populates="option_values"
    )

    def get_attribute_value(self, locale=None):
        return translation_service.get_value(
            self, "attribute_value", self.attribute_value, locale
        )

    def to_dict(self, locale=None):
        return {
            "id": self.id,
            "attribute_value": self.get_attribute_value(locale),
            "display_order": self.display_order,
            "price_adjustment": (
                str(self.price_adjustment) if self.price_adjustment is not None else None
            ),
        }

    def __repr__(self):
        return f"<ProductOptionValue {self.attribute_value}>"
