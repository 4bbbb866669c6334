from catalog.extensions import db
from catalog.models.presentation import admin_collection, admin_field
from catalog.models.types import ProductOptionType, ProductOptionValidationType, TriState
from catalog.services import translation_service


product_option_xref = db.Table(
    "product_option_xref",
    db.Column(
        "product_option_id",
        db.Integer,
        db.ForeignKey("product_options.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    db.Column(
        "product_id",
        db.Integer,
        db.ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class ProductOption(db.Model):
    """A configurable attribute a product can expose, e.g. Color or Size."""

    __tablename__ = "product_options"
    __admin_presentation__ = {
        "friendly_name": "ProductOption_baseProductOption",
        "populate_to_one_fields": True,
    }

    id = db.Column(db.Integer, primary_key=True)
    type_code = db.Column(
        "option_type",
        db.String(255),
        info=admin_field(
            "productOption_Type",
            field_type="ENUMERATION",
            enumeration=ProductOptionType,
            name="type",
        ),
    )
    attribute_name = db.Column(
        db.String(255),
        info=admin_field("productOption_name", help_text="productOption_nameHelp"),
    )
    label = db.Column(
        db.String(255),
        info=admin_field(
            "productOption_Label",
            help_text="productOption_labelHelp",
            prominent=True,
            translatable=True,
        ),
    )
    required = db.Column(db.Boolean, info=admin_field("productOption_Required"))
    _use_in_sku_generation = db.Column(
        "use_in_sku_generation",
        db.Boolean,
        info=admin_field("productOption_UseInSKUGeneration", name="use_in_sku_generation"),
    )
    display_order = db.Column(
        db.Integer, index=True, info=admin_field("productOption_displayOrder")
    )
    validation_type_code = db.Column(
        "validation_type",
        db.String(255),
        info=admin_field(
            "productOption_validationType",
            group="productOption_validation",
            field_type="ENUMERATION",
            enumeration=ProductOptionValidationType,
            name="product_option_validation_type",
        ),
    )
    validation_string = db.Column(
        db.String(255),
        info=admin_field("productOption_validationString", group="productOption_validation"),
    )
    error_code = db.Column(
        db.String(255),
        info=admin_field("productOption_errorCode", group="productOption_validation"),
    )
    error_message = db.Column(
        db.String(255),
        info=admin_field("productOption_errorMessage", group="productOption_validation"),
    )

    # Relationships
    allowed_values = db.relationship(
        "ProductOptionValue",
        back_populates="product_option",
        lazy="select",
        cascade="all, delete-orphan",
        order_by="ProductOptionValue.display_order",
        info=admin_collection("ProductOption_Allowed_Values"),
    )
    products = db.relationship(
        "Product",
        secondary=product_option_xref,
        back_populates="product_options",
        lazy="select",
    )

    @property
    def type(self):
        return ProductOptionType.get_instance(self.type_code)

    @type.setter
    def type(self, value):
        self.type_code = ProductOptionType.to_code(value)

    @property
    def product_option_validation_type(self):
        return ProductOptionValidationType.get_instance(self.validation_type_code)

    @product_option_validation_type.setter
    def product_option_validation_type(self, value):
        self.validation_type_code = ProductOptionValidationType.to_code(value)

    @property
    def use_in_sku_generation_state(self):
        return TriState.of(self._use_in_sku_generation)

    @property
    def use_in_sku_generation(self):
        """Whether this option's values multiply into SKUs; True when never set."""
        return self.use_in_sku_generation_state.resolve(default=True)

    @use_in_sku_generation.setter
    def use_in_sku_generation(self, value):
        self._use_in_sku_generation = TriState.of(value).value

    def get_label(self, locale=None):
        return translation_service.get_value(self, "label", self.label, locale)

    def get_main_entity_name(self, locale=None):
        return self.get_label(locale)

    def to_dict(self, locale=None):
        return {
            "id": self.id,
            "type": self.type_code,
            "attribute_name": self.attribute_name,
            "label": self.get_label(locale),
            "required": self.required,
            "use_in_sku_generation": self.use_in_sku_generation,
            "use_in_sku_generation_set": (
                self.use_in_sku_generation_state is not TriState.UNSET
            ),
            "display_order": self.display_order,
            "validation_type": self.validation_type_code,
            "validation_string": self.validation_string,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "allowed_values": [v.to_dict(locale) for v in self.allowed_values],
        }

    def __repr__(self):
        return f"<ProductOption {self.id}: {self.label}>"
