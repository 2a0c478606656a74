from decimal import Decimal

import pytest

from eventplanner.exceptions import PackageNotFoundError
from eventplanner.services.vendor_pricing import calculate_vendor_booking_cost, find_package


def test_per_person_package_scales_by_quantity_and_applies_percentage_fee(caterer):
    cost = calculate_vendor_booking_cost(caterer, "pkg-buffet", quantity=50, hours=4)

    assert cost.base_price == Decimal("500.00")
    assert cost.additional_fees == {"service": Decimal("50.00")}
    assert cost.total == Decimal("550.00")


def test_per_hour_package_scales_by_hours_and_adds_flat_fee(caterer):
    cost = calculate_vendor_booking_cost(caterer, "pkg-bar", quantity=200, hours=3)

    assert cost.base_price == Decimal("225.00")
    assert cost.additional_fees == {"setup": Decimal("50.00")}
    assert cost.total == Decimal("275.00")


def test_flat_package_ignores_quantity_and_hours(caterer):
    cost = calculate_vendor_booking_cost(caterer, "pkg-cake", quantity=300, hours=12)
    assert cost.base_price == Decimal("400.00")
    assert cost.total == Decimal("400.00")


def test_fees_can_be_excluded(caterer):
    cost = calculate_vendor_booking_cost(caterer, "pkg-buffet", quantity=50, hours=4, include_fees=False)
    assert cost.additional_fees == {}
    assert cost.total == cost.base_price


def test_total_is_base_plus_fees(caterer):
    cost = calculate_vendor_booking_cost(caterer, "pkg-buffet", quantity=37, hours=4)
    assert cost.total == cost.base_price + sum(cost.additional_fees.values())


def test_unknown_package_raises(caterer):
    with pytest.raises(PackageNotFoundError) as exc:
        calculate_vendor_booking_cost(caterer, "pkg-missing", quantity=1, hours=1)

    assert exc.value.package_id == "pkg-missing"
    assert "Fork & Knife" in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_find_package_returns_package(caterer):
    assert find_package(caterer, "pkg-bar").name == "Open Bar"


def test_to_dict_outputs_floats(caterer):
    data = calculate_vendor_booking_cost(caterer, "pkg-buffet", quantity=50, hours=4).to_dict()
    assert data == {
        "base_price": 500.0, "additional_fees": {"service": 50.0}, "total": 550.0, "formatted_total": "$550.00",
    }
