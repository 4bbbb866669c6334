"""Tests for database models."""
import pytest
from catalog.models.product import Product
from catalog.models.product_option import ProductOption
from catalog.models.product_option_value import ProductOptionValue
from catalog.models.types import ProductOptionType, ProductOptionValidationType, TriState


def test_product_option_example(db):
    option = ProductOption(type=ProductOptionType.COLOR, label="Color")
    db.session.add(option)
    db.session.flush()

    assert option.id is not None
    assert option.use_in_sku_generation is True
    assert option.type is ProductOptionType.COLOR
    assert option.get_main_entity_name() == "Color"


def test_use_in_sku_generation_unset_reads_true():
    option = ProductOption()
    assert option.use_in_sku_generation_state is TriState.UNSET
    assert option.use_in_sku_generation is True


def test_use_in_sku_generation_explicit_false_is_kept(db):
    option = ProductOption(label="Engraving", use_in_sku_generation=False)
    db.session.add(option)
    db.session.flush()
    db.session.expire(option)

    assert option.use_in_sku_generation is False
    assert option.use_in_sku_generation_state is TriState.FALSE


def test_use_in_sku_generation_can_return_to_unset():
    option = ProductOption(use_in_sku_generation=False)
    option.use_in_sku_generation = None
    assert option.use_in_sku_generation_state is TriState.UNSET
    assert option.use_in_sku_generation is True

    option.use_in_sku_generation = TriState.FALSE
    assert option.use_in_sku_generation is False


@pytest.mark.parametrize("member", list(ProductOptionType))
def test_type_round_trips_through_code(member):
    option = ProductOption()
    option.type = member
    assert option.type_code == member.code
    assert option.type is member


def test_type_none_clears_code():
    option = ProductOption(type=ProductOptionType.SIZE)
    option.type = None
    assert option.type_code is None
    assert option.type is None


def test_unknown_stored_type_code_reads_none():
    option = ProductOption(type_code="HOLOGRAM")
    assert option.type is None


def test_validation_type_round_trip():
    option = ProductOption()
    option.product_option_validation_type = ProductOptionValidationType.REGEX
    assert option.validation_type_code == "REGEX"
    assert option.product_option_validation_type is ProductOptionValidationType.REGEX

    option.product_option_validation_type = None
    assert option.validation_type_code is None
    assert option.product_option_validation_type is None


def test_allowed_values_ordered_by_display_order(db):
    option = ProductOption(label="Size", attribute_name="size")
    option.allowed_values.extend([
        ProductOptionValue(attribute_value="L", display_order=3),
        ProductOptionValue(attribute_value="S", display_order=1),
        ProductOptionValue(attribute_value="M", display_order=2),
    ])
    db.session.add(option)
    db.session.flush()
    db.session.expire(option, ["allowed_values"])

    assert [v.attribute_value for v in option.allowed_values] == ["S", "M", "L"]
    assert all(v.product_option_id == option.id for v in option.allowed_values)


def test_deleting_option_removes_values_but_not_products(db):
    product = Product(name="Model Tee")
    option = ProductOption(label="Fit", attribute_name="fit")
    option.allowed_values.append(ProductOptionValue(attribute_value="Slim", display_order=1))
    product.product_options.append(option)
    db.session.add(product)
    db.session.flush()
    value_id = option.allowed_values[0].id
    product_id = product.id

    db.session.delete(option)
    db.session.flush()
    db.session.expire_all()

    assert db.session.get(ProductOptionValue, value_id) is None
    still_there = db.session.get(Product, product_id)
    assert still_there is not None
    assert still_there.product_options == []


def test_option_to_dict_marks_unset_flag(db):
    option = ProductOption(type=ProductOptionType.TEXT, label="Note")
    db.session.add(option)
    db.session.flush()

    data = option.to_dict()
    assert data["type"] == "TEXT"
    assert data["use_in_sku_generation"] is True
    assert data["use_in_sku_generation_set"] is False
    assert data["allowed_values"] == []


def test_tables_start_empty_between_tests(db):
    # Earlier tests commit through the services; the cleanup fixture removes them
    assert ProductOption.query.count() == 0
    assert Product.query.count() == 0
