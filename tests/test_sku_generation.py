"""Tests for SKU generation from option permutations."""
import pytest
from catalog.models.product import Product
from catalog.services import product_option_service, sku_service
from catalog.services.sku_service import (
    SkuGenerationLimitError,
    find_matching_sku,
    generate_permutations,
    generate_skus_from_product,
)


def _make_product(db, name, option_payloads):
    options = [product_option_service.create_option(p) for p in option_payloads]
    product = Product(name=name)
    product.product_options.extend(options)
    db.session.add(product)
    db.session.commit()
    return product, options


COLOR = {
    "type": "COLOR",
    "attribute_name": "color",
    "label": "Color",
    "display_order": 1,
    "allowed_values": [
        {"attribute_value": "Red"},
        {"attribute_value": "Blue"},
        {"attribute_value": "Black"},
    ],
}
SIZE = {
    "type": "SIZE",
    "attribute_name": "size",
    "label": "Size",
    "display_order": 2,
    "allowed_values": [{"attribute_value": "S"}, {"attribute_value": "M"}],
}
ENGRAVING = {
    "type": "TEXT",
    "attribute_name": "engraving",
    "label": "Engraving",
    "display_order": 3,
    "use_in_sku_generation": False,
    "allowed_values": [{"attribute_value": "Yes"}, {"attribute_value": "No"}],
}


def test_permutations_skip_options_flagged_out(db):
    _, options = _make_product(db, "Perm Tee", [COLOR, SIZE, ENGRAVING])
    permutations = generate_permutations(options)
    assert len(permutations) == 6
    assert all(len(p) == 2 for p in permutations)


def test_option_without_values_yields_no_permutations(db):
    empty = dict(SIZE, allowed_values=[])
    _, options = _make_product(db, "Empty Tee", [COLOR, empty])
    assert generate_permutations(options) == []


def test_generate_skus_is_incremental(db):
    product, options = _make_product(db, "Gen Tee", [COLOR, SIZE, ENGRAVING])

    assert generate_skus_from_product(product.id) == 6
    assert generate_skus_from_product(product.id) == 0

    size = next(o for o in options if o.attribute_name == "size")
    product_option_service.add_allowed_value(size.id, {"attribute_value": "L"})
    assert generate_skus_from_product(product.id) == 3

    db.session.expire_all()
    assert len(db.session.get(Product, product.id).skus) == 9


def test_generate_skus_without_options_returns_minus_one(db):
    product = Product(name="Plain Mug")
    db.session.add(product)
    db.session.commit()
    assert generate_skus_from_product(product.id) == -1


def test_generate_skus_unknown_product(db):
    assert generate_skus_from_product(987654) is None


def test_generate_skus_respects_limit(app, db, monkeypatch):
    product, _ = _make_product(db, "Limit Tee", [COLOR, SIZE])
    monkeypatch.setitem(app.config, "SKU_PERMUTATION_LIMIT", 5)

    with pytest.raises(SkuGenerationLimitError) as exc:
        generate_skus_from_product(product.id)
    assert exc.value.count == 6
    assert exc.value.limit == 5


def test_find_matching_sku(db):
    product, _ = _make_product(db, "Match Tee", [COLOR, SIZE])
    generate_skus_from_product(product.id)
    db.session.expire_all()
    product = db.session.get(Product, product.id)

    sku = find_matching_sku(product, {"color": "Blue", "size": "M"})
    assert sku is not None
    assert {v.attribute_value for v in sku.option_values} == {"Blue", "M"}
    assert find_matching_sku(product, {"color": "Green", "size": "M"}) is None


def test_sku_names_include_values(db):
    product, _ = _make_product(db, "Named Tee", [COLOR, SIZE])
    generate_skus_from_product(product.id)
    db.session.expire_all()

    names = {sku.name for sku in db.session.get(Product, product.id).skus}
    assert "Named Tee / Red / S" in names
    assert "Named Tee / Black / M" in names
    assert len(names) == 6


def test_removing_value_drops_its_skus(db):
    red_only = dict(COLOR, allowed_values=[{"attribute_value": "Red"}])
    product, options = _make_product(db, "Shrink Tee", [red_only, SIZE])
    assert generate_skus_from_product(product.id) == 2

    size = next(o for o in options if o.attribute_name == "size")
    small = next(v for v in size.allowed_values if v.attribute_value == "S")
    assert product_option_service.remove_allowed_value(size.id, small.id) is True

    db.session.expire_all()
    product = db.session.get(Product, product.id)
    assert [sorted(v.attribute_value for v in s.option_values) for s in product.skus] == [
        ["M", "Red"]
    ]

    sku = find_matching_sku(product, {"color": "Red", "size": "M"})
    assert {v.attribute_value for v in sku.option_values} == {"Red", "M"}
    assert find_matching_sku(product, {"color": "Red"}) is None
    assert generate_skus_from_product(product.id) == 0


def test_matching_ignores_partial_skus(db):
    product, _ = _make_product(db, "Partial Tee", [COLOR, SIZE])
    generate_skus_from_product(product.id)
    db.session.expire_all()
    product = db.session.get(Product, product.id)

    partial = product.skus[0]
    kept = partial.option_values[0]
    partial.option_values = [kept]
    db.session.flush()

    full = next(s for s in product.skus[1:] if kept in s.option_values)
    chosen = {v.product_option.attribute_name: v.attribute_value for v in full.option_values}
    assert find_matching_sku(product, chosen) is full


def test_limit_raises_before_building_permutations(app, db, monkeypatch):
    wide = [
        {
            "type": "SELECT",
            "attribute_name": f"wide{n}",
            "label": f"Wide {n}",
            "allowed_values": [{"attribute_value": f"v{i}"} for i in range(120)],
        }
        for n in range(3)
    ]
    product, options = _make_product(db, "Wide Tee", wide)
    monkeypatch.setitem(app.config, "SKU_PERMUTATION_LIMIT", 5)

    def must_not_build(options):
        raise AssertionError("permutations built before the limit check")

    monkeypatch.setattr(sku_service, "generate_permutations", must_not_build)

    assert sku_service.count_permutations(options) == 120 ** 3
    with pytest.raises(SkuGenerationLimitError) as exc:
        generate_skus_from_product(product.id)
    assert exc.value.count == 1728000


def test_unassign_and_delete_option_drop_skus(db):
    product, options = _make_product(db, "Drop Tee", [COLOR, SIZE])
    other, _ = _make_product(db, "Other Tee", [])
    other.product_options.extend(options)
    db.session.commit()
    assert generate_skus_from_product(product.id) == 6
    assert generate_skus_from_product(other.id) == 6

    color, size = options
    product_option_service.unassign_option(product.id, size.id)
    db.session.expire_all()
    assert db.session.get(Product, product.id).skus == []
    assert len(db.session.get(Product, other.id).skus) == 6
    assert generate_skus_from_product(product.id) == 3

    product_option_service.delete_option(color.id)
    db.session.expire_all()
    assert db.session.get(Product, product.id).skus == []
    assert db.session.get(Product, other.id).skus == []
