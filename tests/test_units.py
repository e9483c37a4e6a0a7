"""
Tests for height and weight unit conversion
"""

import pytest

from graphbook.units import (
    HeightUnit,
    UnsupportedUnitError,
    WeightUnit,
    convert_height,
    convert_weight,
)


class TestConvertHeight:
    def test_default_is_centimetres(self):
        assert convert_height(175.0) == 175.0

    def test_centimetre(self):
        assert convert_height(175.0, HeightUnit.CENTIMETRE) == 175.0

    def test_metre(self):
        assert convert_height(175.0, HeightUnit.METRE) == 1.75

    def test_foot(self):
        assert convert_height(175.0, HeightUnit.FOOT) == pytest.approx(5.74147, rel=1e-5)
        assert convert_height(175.0, HeightUnit.FOOT) == 175.0 / 30.48

    def test_accepts_unit_name(self):
        assert convert_height(175.0, "METRE") == 1.75

    def test_unknown_unit_raises(self):
        with pytest.raises(UnsupportedUnitError) as exc_info:
            convert_height(175.0, "MILE")

        assert exc_info.value.unit == "MILE"
        assert exc_info.value.quantity == "Height"
        assert str(exc_info.value) == 'Height unit "MILE" not supported.'

    def test_weight_unit_is_not_a_height_unit(self):
        with pytest.raises(UnsupportedUnitError):
            convert_height(175.0, "KILOGRAM")

    def test_missing_height_stays_missing(self):
        assert convert_height(None, HeightUnit.METRE) is None


class TestConvertWeight:
    def test_default_is_kilograms(self):
        assert convert_weight(70.0) == 70.0

    def test_kilogram(self):
        assert convert_weight(70.0, WeightUnit.KILOGRAM) == 70.0

    def test_gram_scales_by_one_hundred(self):
        assert convert_weight(70.0, WeightUnit.GRAM) == 7000.0

    def test_pound(self):
        assert convert_weight(70.0, WeightUnit.POUND) == pytest.approx(154.32358, rel=1e-6)

    def test_unknown_unit_raises(self):
        with pytest.raises(UnsupportedUnitError) as exc_info:
            convert_weight(70.0, "STONE")

        assert exc_info.value.unit == "STONE"
        assert str(exc_info.value) == 'Weight unit "STONE" not supported.'

    @pytest.mark.parametrize("unit", [None, *WeightUnit, "STONE"])
    def test_missing_weight_is_never_an_error(self, unit):
        assert convert_weight(None, unit) is None
