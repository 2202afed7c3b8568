"""Tests for catalog products."""

import pytest

from cash_register.product import Product, format_number


class TestFormatQuantity:
    def test_unit_shows_bare_number(self, cheerios):
        assert cheerios.format_quantity(4) == "4"

    def test_weight_shows_unit(self, bananas):
        assert bananas.format_quantity(2.5) == "2.5 lb"

    def test_whole_float_has_no_decimal(self, bananas):
        assert bananas.format_quantity(2.0) == "2 lb"

    def test_kg(self):
        apples = Product("APPL", "Apples", 3.2, "kg")
        assert apples.format_quantity(1.25) == "1.25 kg"


class TestFormatNumber:
    @pytest.mark.parametrize("quantity,expected", [(1, "1"), (3.0, "3"), (0.5, "0.5"), (12.75, "12.75")])
    def test_format(self, quantity, expected):
        assert format_number(quantity) == expected


class TestProduct:
    def test_default_unit(self):
        assert Product("CHEE", "Cheerios", 6.99).unit == "unit"

    def test_unknown_unit_rejected(self):
        with pytest.raises(ValueError, match="Unknown pricing unit"):
            Product("MILK", "Milk", 1.29, "gallon")
