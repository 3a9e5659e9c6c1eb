import warnings

import pytest
from pydantic import ValidationError

from fruit_app.models.fruits import Fruit


def test_model_config_strips_and_reads_attributes():
    assert Fruit.model_config["str_strip_whitespace"] is True
    assert Fruit.model_config["from_attributes"] is True
    assert Fruit(name="  Apple ").name == "Apple"


def test_validation_emits_no_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        Fruit.model_validate({"name": "Pear", "price": "1.25"})
        with pytest.raises(ValidationError):
            Fruit.model_validate({"name": ""})


def test_price_serializes_as_number():
    assert Fruit(name="Kiwi", price="0.40").model_dump(mode="json")["price"] == 0.4
