from datetime import date, datetime, time
from decimal import Decimal

import pytest
from conftest import at, make_booking

from eventplanner.config import settings
from eventplanner.exceptions import (
    BookingClosedError,
    InvalidStatusTransitionError,
    PackageNotFoundError,
    PaymentError,
)
from eventplanner.schemas.enums import BookingStatus, EventType, PaymentMethod, PaymentStatus
from eventplanner.services.booking_manager import (
    BookingFilters,
    booking_manager,
    format_booking_status,
    format_payment_status,
)


# ─── Creation ───


def test_create_booking_starts_as_unpaid_inquiry(customer):
    booking = booking_manager.create_booking(
        event_name="Product Launch",
        event_type="conference",
        venue_id="venue-9",
        customer=customer,
        start_date=at(10, 9),
        end_date=at(10, 17),
        attendee_count=250,
        total_amount=12000,
        deposit_amount=3000.5,
    )

    assert booking.status == BookingStatus.INQUIRY
    assert booking.payment_status == PaymentStatus.UNPAID
    assert booking.event_type == EventType.CONFERENCE
    assert booking.total_amount == Decimal("12000.00")
    assert booking.deposit_amount == Decimal("3000.50")
    assert booking.customer.id
    assert booking.customer_id == booking.customer.id
    assert booking.time_blocks == []
    assert booking.vendor_bookings == []
    assert booking.payments == []


def test_create_booking_keeps_existing_customer_id(customer):
    customer = customer.model_copy(update={"id": "cust-42"})
    booking = booking_manager.create_booking(
        "Gala", EventType.GALA, "venue-1", customer, at(10, 18), at(10, 23), 80, 5000, 1000,
    )
    assert booking.customer_id == "cust-42"


def test_create_booking_rejects_end_before_start(customer):
    with pytest.raises(ValueError):
        booking_manager.create_booking(
            "Gala", EventType.GALA, "venue-1", customer, at(10, 23), at(10, 18), 80, 5000, 1000,
        )


def test_create_booking_rejects_deposit_above_total(customer):
    with pytest.raises(ValueError):
        booking_manager.create_booking(
            "Gala", EventType.GALA, "venue-1", customer, at(10, 18), at(10, 23), 80, 1000, 1500,
        )


# ─── Status lifecycle ───


def test_status_update_returns_new_booking(booking):
    confirmed = booking_manager.update_booking_status(booking, BookingStatus.CONFIRMED)

    assert confirmed.status == BookingStatus.CONFIRMED
    assert booking.status == BookingStatus.INQUIRY
    assert confirmed.id == booking.id


def test_status_notes_are_appended(booking):
    updated = booking_manager.update_booking_status(booking, "pending", "Waiting on contract")
    updated = booking_manager.update_booking_status(updated, "confirmed", "Contract signed")

    assert updated.internal_notes == "Waiting on contract\n\nContract signed"


def test_cancellation_records_reason(booking):
    cancelled = booking_manager.update_booking_status(booking, BookingStatus.CANCELLED, "Client withdrew")

    assert cancelled.status == BookingStatus.CANCELLED
    assert cancelled.cancellation_reason == "Client withdrew"


def test_terminal_status_cannot_be_left(booking):
    cancelled = booking_manager.update_booking_status(booking, BookingStatus.CANCELLED)

    with pytest.raises(InvalidStatusTransitionError):
        booking_manager.update_booking_status(cancelled, BookingStatus.CONFIRMED)


def test_inquiry_cannot_jump_to_completed(booking):
    with pytest.raises(InvalidStatusTransitionError) as exc:
        booking_manager.update_booking_status(booking, BookingStatus.COMPLETED)
    assert exc.value.current == "inquiry"
    assert exc.value.target == "completed"


def test_same_status_is_allowed(booking):
    assert booking_manager.update_booking_status(booking, BookingStatus.INQUIRY).status == BookingStatus.INQUIRY


def test_transition_checks_can_be_disabled(booking, monkeypatch):
    monkeypatch.setattr(settings, "enforce_status_transitions", False)
    completed = booking_manager.update_booking_status(booking, BookingStatus.COMPLETED)
    assert completed.status == BookingStatus.COMPLETED


# ─── Payments ───


def test_deposit_then_balance_marks_paid(booking):
    booking, deposit = booking_manager.record_payment(
        booking, Decimal("500"), PaymentMethod.CREDIT_CARD, is_deposit=True,
    )
    assert deposit.is_deposit
    assert booking.payment_status == PaymentStatus.DEPOSIT_PAID
    assert booking.amount_paid == Decimal("500.00")

    booking, _ = booking_manager.record_payment(booking, Decimal("500"), PaymentMethod.BANK_TRANSFER)
    assert booking.payment_status == PaymentStatus.PAID
    assert booking.balance_due == Decimal("0.00")
    assert len(booking.payments) == 2


def test_small_payments_accumulate_to_partially_paid(booking):
    booking, _ = booking_manager.record_payment(booking, 200, PaymentMethod.CASH)
    assert booking.payment_status == PaymentStatus.UNPAID

    booking, _ = booking_manager.record_payment(booking, 400, PaymentMethod.CASH)
    assert booking.payment_status == PaymentStatus.PARTIALLY_PAID
    assert booking.balance_due == Decimal("400.00")


def test_short_deposit_does_not_mark_deposit_paid(booking):
    booking, _ = booking_manager.record_payment(booking, 100, PaymentMethod.CHECK, is_deposit=True)
    assert booking.payment_status == PaymentStatus.UNPAID


def test_deposit_covering_total_marks_paid():
    booking = make_booking(total_amount=Decimal("300.00"), deposit_amount=Decimal("300.00"))
    booking, _ = booking_manager.record_payment(booking, 300, PaymentMethod.PAYPAL, is_deposit=True)
    assert booking.payment_status == PaymentStatus.PAID


def test_payment_must_be_positive(booking):
    with pytest.raises(PaymentError):
        booking_manager.record_payment(booking, 0, PaymentMethod.CASH)
    with pytest.raises(PaymentError):
        booking_manager.record_payment(booking, -5, PaymentMethod.CASH)


def test_payment_carries_booking_and_transaction(booking):
    _, payment = booking_manager.record_payment(
        booking, 150, PaymentMethod.CREDIT_CARD, transaction_id="txn-1", notes="first instalment",
    )
    assert payment.booking_id == booking.id
    assert payment.amount == Decimal("150.00")
    assert payment.transaction_id == "txn-1"


def test_full_refund_marks_refunded(booking):
    booking, _ = booking_manager.record_payment(booking, 1000, PaymentMethod.CREDIT_CARD)
    booking, refund = booking_manager.record_refund(booking, 1000, PaymentMethod.CREDIT_CARD, "Venue closed")

    assert refund.is_refund
    assert booking.amount_paid == Decimal("0.00")
    assert booking.payment_status == PaymentStatus.REFUNDED


def test_partial_refund_recomputes_status(booking):
    booking, _ = booking_manager.record_payment(booking, 1000, PaymentMethod.CREDIT_CARD)

    booking, _ = booking_manager.record_refund(booking, 300, PaymentMethod.CREDIT_CARD)
    assert booking.payment_status == PaymentStatus.PARTIALLY_PAID

    booking, _ = booking_manager.record_refund(booking, 400, PaymentMethod.CREDIT_CARD)
    assert booking.payment_status == PaymentStatus.UNPAID
    assert booking.amount_paid == Decimal("300.00")


def test_refund_cannot_exceed_amount_paid(booking):
    booking, _ = booking_manager.record_payment(booking, 100, PaymentMethod.CASH)
    with pytest.raises(PaymentError):
        booking_manager.record_refund(booking, 150, PaymentMethod.CASH)


# ─── Vendors ───


def test_vendor_attachment_prices_for_attendees(booking, caterer):
    updated = booking_manager.add_vendor_booking(booking, caterer, "pkg-buffet", time(15, 0), time(23, 0))

    vendor_booking = updated.vendor_bookings[0]
    assert vendor_booking.vendor_id == "vendor-cater"
    assert vendor_booking.vendor_name == "Fork & Knife"
    assert vendor_booking.package_name == "Buffet"
    assert vendor_booking.event_id == booking.id
    assert vendor_booking.user_id == "user-1"
    assert vendor_booking.service_date == date(2026, 6, 10)
    assert vendor_booking.total_amount == Decimal("1100.00")
    assert vendor_booking.deposit_amount == Decimal("330.00")

    assert updated.total_amount == Decimal("2100.00")
    assert updated.deposit_amount == Decimal("830.00")
    assert booking.vendor_bookings == []


def test_vendor_attachment_uses_explicit_quantity_and_hours(booking, caterer):
    updated = booking_manager.add_vendor_booking(
        booking, caterer, "pkg-bar", "18:00", "22:00", quantity=10, hours=2,
    )
    assert updated.vendor_bookings[0].total_amount == Decimal("200.00")
    assert updated.vendor_bookings[0].start_time == time(18, 0)


def test_vendor_attachment_unknown_package(booking, caterer):
    with pytest.raises(PackageNotFoundError):
        booking_manager.add_vendor_booking(booking, caterer, "nope", time(15), time(16))


def test_vendor_attachment_rejected_on_closed_booking(booking, caterer):
    cancelled = booking_manager.update_booking_status(booking, BookingStatus.CANCELLED)
    with pytest.raises(BookingClosedError):
        booking_manager.add_vendor_booking(cancelled, caterer, "pkg-cake", time(15), time(16))


# ─── Search and stats ───


def test_filter_bookings_by_fields():
    wedding = make_booking(id="w", event_name="Garden Wedding", attendee_count=120)
    meeting = make_booking(
        id="m", event_name="Board Meeting", event_type=EventType.MEETING, venue_id="venue-2",
        attendee_count=12, start_date=at(20, 9), end_date=at(20, 11),
    )
    bookings = [wedding, meeting]

    assert booking_manager.filter_bookings(bookings, BookingFilters(event_type="meeting")) == [meeting]
    assert booking_manager.filter_bookings(bookings, BookingFilters(venue_id="venue-1")) == [wedding]
    assert booking_manager.filter_bookings(bookings, BookingFilters(min_attendees=50)) == [wedding]
    assert booking_manager.filter_bookings(bookings, BookingFilters(max_attendees=50)) == [meeting]
    assert booking_manager.filter_bookings(bookings, BookingFilters(start_date=at(15, 0))) == [meeting]
    assert booking_manager.filter_bookings(bookings, BookingFilters(end_date=at(15, 0))) == [wedding]
    assert booking_manager.filter_bookings(bookings, BookingFilters()) == bookings


def test_filter_search_term_matches_event_or_customer_name():
    booking = make_booking(event_name="Garden Wedding")

    assert booking_manager.filter_bookings([booking], BookingFilters(search_term="GARDEN")) == [booking]
    assert booking_manager.filter_bookings([booking], BookingFilters(search_term="morgan")) == [booking]
    assert booking_manager.filter_bookings([booking], BookingFilters(search_term="gala")) == []


def test_booking_stats():
    bookings = [
        make_booking(status=BookingStatus.CONFIRMED, total_amount=Decimal("1000")),
        make_booking(status=BookingStatus.PENDING, total_amount=Decimal("2000"), deposit_amount=Decimal("0")),
        make_booking(status=BookingStatus.CANCELLED, total_amount=Decimal("500"), deposit_amount=Decimal("0")),
        make_booking(
            status=BookingStatus.COMPLETED, total_amount=Decimal("1500"),
            start_date=at(2, 16), end_date=at(2, 23),
        ),
    ]

    stats = booking_manager.calculate_booking_stats(bookings, now=at(5, 0))

    assert stats.total_bookings == 4
    assert stats.confirmed_bookings == 2
    assert stats.pending_bookings == 1
    assert stats.total_revenue == Decimal("4500.00")
    assert stats.average_booking_value == Decimal("1500.00")
    assert stats.upcoming_bookings == 2
    assert stats.cancellation_rate == 25.0


def test_booking_stats_empty():
    stats = booking_manager.calculate_booking_stats([])
    assert stats.to_dict() == {
        "total_bookings": 0,
        "confirmed_bookings": 0,
        "pending_bookings": 0,
        "total_revenue": 0.0,
        "average_booking_value": 0.0,
        "upcoming_bookings": 0,
        "cancellation_rate": 0.0,
    }


def test_status_labels():
    assert format_booking_status(BookingStatus.CONFIRMED) == "Confirmed"
    assert format_booking_status("inquiry") == "Inquiry"
    assert format_booking_status("archived") == "Unknown"
    assert format_payment_status("deposit_paid") == "Deposit Paid"
    assert format_payment_status("bogus") == "Unknown"


def test_two_halves_without_deposit_flag_end_paid(booking):
    booking, _ = booking_manager.record_payment(booking, 500, PaymentMethod.BANK_TRANSFER)
    assert booking.payment_status == PaymentStatus.PARTIALLY_PAID

    booking, _ = booking_manager.record_payment(booking, 500, PaymentMethod.BANK_TRANSFER)
    assert booking.payment_status == PaymentStatus.PAID


def test_payment_after_full_refund_is_derived_from_ledger(booking):
    booking, _ = booking_manager.record_payment(booking, 1000, PaymentMethod.CREDIT_CARD)
    booking, _ = booking_manager.record_refund(booking, 1000, PaymentMethod.CREDIT_CARD)
    assert booking.payment_status == PaymentStatus.REFUNDED

    booking, _ = booking_manager.record_payment(booking, 100, PaymentMethod.CASH)
    assert booking.amount_paid == Decimal("100.00")
    assert booking.payment_status == PaymentStatus.UNPAID

    booking, _ = booking_manager.record_payment(booking, 400, PaymentMethod.CASH)
    assert booking.payment_status == PaymentStatus.PARTIALLY_PAID


def test_booking_stats_for_naive_bookings_without_now():
    booking = make_booking(start_date=datetime(2026, 6, 10, 16), end_date=datetime(2026, 6, 10, 20))

    stats = booking_manager.calculate_booking_stats([booking])
    assert stats.total_bookings == 1

    stats = booking_manager.calculate_booking_stats([booking], now=datetime(2026, 6, 1))
    assert stats.upcoming_bookings == 1
