from datetime import datetime, timezone
from decimal import Decimal

import pytest

from eventplanner.schemas.booking import Booking, Customer
from eventplanner.schemas.enums import EventType, FeeType, PriceType, VendorCategory
from eventplanner.schemas.vendor import AdditionalFee, Vendor, VendorPackage


def at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2026, 6, day, hour, minute, tzinfo=timezone.utc)


def make_booking(**overrides) -> Booking:
    fields = dict(
        event_name="Summer Wedding",
        event_type=EventType.WEDDING,
        venue_id="venue-1",
        customer_id="cust-1",
        customer=Customer(id="cust-1", user_id="user-1", name="Alex Morgan", email="alex@example.com"),
        start_date=at(10, 16),
        end_date=at(10, 23),
        attendee_count=100,
        total_amount=Decimal("1000.00"),
        deposit_amount=Decimal("500.00"),
    )
    fields.update(overrides)
    return Booking(**fields)


@pytest.fixture
def customer():
    return Customer(name="Alex Morgan", email="alex@example.com", user_id="user-1")


@pytest.fixture
def booking():
    return make_booking()


@pytest.fixture
def caterer():
    return Vendor(
        id="vendor-cater",
        name="Fork & Knife",
        category=VendorCategory.CATERING,
        rating=4.6,
        packages=[
            VendorPackage(
                id="pkg-buffet",
                name="Buffet",
                base_price=Decimal("10"),
                price_type=PriceType.PER_PERSON,
                additional_fees=[AdditionalFee(name="service", amount=Decimal("10"), type=FeeType.PERCENTAGE)],
            ),
            VendorPackage(
                id="pkg-bar",
                name="Open Bar",
                base_price=Decimal("75"),
                price_type=PriceType.PER_HOUR,
                additional_fees=[AdditionalFee(name="setup", amount=Decimal("50"))],
            ),
            VendorPackage(id="pkg-cake", name="Cake", base_price=Decimal("400")),
        ],
    )
