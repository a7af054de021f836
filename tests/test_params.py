"""Unit tests for URL parameter parsing."""

from decimal import Decimal

import pytest

from app.api import params
from app.utils.settings import MAX_PRICE


class TestPriceBounds:
    """Lenient min_price / max_price parsing."""

    def test_defaults_when_absent(self):
        assert params.price_bounds(None, None) == (Decimal("0"), MAX_PRICE)

    def test_parses_numbers(self):
        assert params.price_bounds("60", "70.5") == (Decimal("60"), Decimal("70.5"))

    @pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", "1,5"])
    def test_garbage_falls_back_to_default(self, raw):
        assert params.price_bounds(raw, raw) == (Decimal("0"), MAX_PRICE)


class TestPageWindow:
    """count clamped to [1, 10], start clamped to >= 0."""

    def test_defaults_when_absent(self):
        assert params.page_window(None, None) == (10, 0)

    def test_clamps_count(self):
        assert params.page_window("0", None) == (1, 0)
        assert params.page_window("-3", None) == (1, 0)
        assert params.page_window("50", None) == (10, 0)
        assert params.page_window("5", None) == (5, 0)

    def test_clamps_start(self):
        assert params.page_window(None, "-5") == (10, 0)
        assert params.page_window(None, "3") == (10, 3)

    def test_garbage_falls_back_to_default(self):
        assert params.page_window("ten", "1.5") == (10, 0)


class TestProductId:
    """Path id must be a positive integer."""

    def test_valid(self):
        assert params.product_id("42") == 42

    @pytest.mark.parametrize("raw", ["abc", "0", "-1", "1.5", ""])
    def test_invalid(self, raw):
        with pytest.raises(params.InvalidParam, match="Invalid product ID"):
            params.product_id(raw)


class TestDiscountPercent:
    """Format is checked before range."""

    @pytest.mark.parametrize("raw", ["0", "25", "99.5", "100"])
    def test_valid(self, raw):
        assert params.discount_percent(raw) == Decimal(raw)

    @pytest.mark.parametrize("raw", ["abc", "", "nan", "-inf", "10%"])
    def test_not_a_number(self, raw):
        with pytest.raises(params.InvalidParam) as exc:
            params.discount_percent(raw)
        assert str(exc.value) == "Invalid discount"

    @pytest.mark.parametrize("raw", ["-1", "101", "100.01", "-0.5"])
    def test_out_of_range(self, raw):
        with pytest.raises(params.InvalidParam) as exc:
            params.discount_percent(raw)
        assert str(exc.value) == "Discount must be >= 0 and <= 100"


class TestStrictNumberFormat:
    """Values Python accepts but clients must not rely on."""

    @pytest.mark.parametrize("raw", ["99999999999999999999", "-99999999999999999999"])
    def test_int_outside_int64_is_unparseable(self, raw):
        assert params.parse_int(raw) is None

    def test_int64_bounds_are_accepted(self):
        assert params.parse_int(str(params.INT64_MAX)) == params.INT64_MAX
        assert params.parse_int(str(params.INT64_MIN)) == params.INT64_MIN

    def test_huge_start_falls_back_to_default(self):
        assert params.page_window("5", "99999999999999999999") == (5, 0)

    def test_huge_product_id_is_invalid(self):
        with pytest.raises(params.InvalidParam, match="Invalid product ID"):
            params.product_id("99999999999999999999")

    @pytest.mark.parametrize("raw", ["1_0", "1_000"])
    def test_underscores_are_unparseable(self, raw):
        assert params.parse_int(raw) is None
        assert params.parse_decimal(raw) is None

    def test_discount_with_underscore_is_invalid(self):
        with pytest.raises(params.InvalidParam) as exc:
            params.discount_percent("1_0")
        assert str(exc.value) == "Invalid discount"
