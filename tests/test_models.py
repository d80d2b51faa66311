import pytest
from werkzeug.datastructures import MultiDict

from farmstand.errors import ValidationError
from farmstand.models import CATEGORIES, ProductFields


def test_categories():
    assert CATEGORIES == ["fruit", "vegetable", "dairy"]


def test_from_form_converts_price_and_ignores_unknown_fields():
    form = MultiDict({"name": " Apple ", "price": "1.5", "category": "fruit", "_method": "PUT"})
    fields = ProductFields.from_form(form)
    assert fields == ProductFields(name="Apple", price=1.5, category="fruit")
    assert fields.as_dict() == {"name": "Apple", "price": 1.5, "category": "fruit"}


def test_from_form_accepts_any_category():
    fields = ProductFields.from_form({"name": "Honey", "price": "9", "category": "sweets"})
    assert fields.category == "sweets"


@pytest.mark.parametrize("form, field", [
    ({"price": "1", "category": "fruit"}, "name"),
    ({"name": "", "price": "1", "category": "fruit"}, "name"),
    ({"name": "Apple", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "cheap", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "nan", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "inf", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "-Infinity", "category": "fruit"}, "price"),
    ({"name": "Apple", "price": "1"}, "category"),
])
def test_from_form_create_requires_fields(form, field):
    with pytest.raises(ValidationError) as info:
        ProductFields.from_form(form)
    assert info.value.field == field
    assert info.value.status_code == 400


def test_from_form_partial_keeps_only_supplied_fields():
    fields = ProductFields.from_form({"price": "3"}, partial=True)
    assert fields.as_dict() == {"price": 3.0}


def test_from_form_partial_blank_price_is_not_replaced():
    fields = ProductFields.from_form({"name": "Pear", "price": ""}, partial=True)
    assert fields.as_dict() == {"name": "Pear"}


def test_from_form_partial_still_rejects_non_numeric_price():
    with pytest.raises(ValidationError):
        ProductFields.from_form({"price": "abc"}, partial=True)


def test_from_form_partial_blank_strings_are_not_replaced():
    fields = ProductFields.from_form({"name": "", "price": "2", "category": "  "}, partial=True)
    assert fields.as_dict() == {"price": 2.0}


def test_from_form_partial_rejects_nan_price():
    with pytest.raises(ValidationError) as info:
        ProductFields.from_form({"price": "nan"}, partial=True)
    assert info.value.field == "price"
