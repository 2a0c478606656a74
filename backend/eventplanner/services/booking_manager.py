"""Booking manager — booking lifecycle, payment ledger and vendor attachment."""

import logging
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal

from pydantic import BaseModel

from eventplanner.config import settings
from eventplanner.data.currency import ZERO, percent_of, to_money
from eventplanner.exceptions import BookingClosedError, InvalidStatusTransitionError, PaymentError
from eventplanner.schemas.booking import Booking, Customer, EventTimeBlock, Payment
from eventplanner.schemas.budget import BudgetBreakdown
from eventplanner.schemas.common import UtcDatetime, assume_utc
from eventplanner.schemas.enums import BookingStatus, EventType, PaymentMethod, PaymentStatus
from eventplanner.schemas.vendor import Vendor, VendorBooking
from eventplanner.services.availability import check_venue_availability
from eventplanner.services.vendor_pricing import calculate_vendor_booking_cost, find_package

logger = logging.getLogger(__name__)

BOOKING_TRANSITIONS: dict[BookingStatus, set[BookingStatus]] = {
    BookingStatus.INQUIRY: {BookingStatus.PENDING, BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.PENDING: {BookingStatus.INQUIRY, BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.PENDING, BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.CANCELLED: set(),
    BookingStatus.COMPLETED: set(),
}

TERMINAL_STATUSES = {BookingStatus.CANCELLED, BookingStatus.COMPLETED}

BOOKING_STATUS_LABELS: dict[BookingStatus, str] = {
    BookingStatus.INQUIRY: "Inquiry",
    BookingStatus.PENDING: "Pending",
    BookingStatus.CONFIRMED: "Confirmed",
    BookingStatus.CANCELLED: "Cancelled",
    BookingStatus.COMPLETED: "Completed",
}

PAYMENT_STATUS_LABELS: dict[PaymentStatus, str] = {
    PaymentStatus.UNPAID: "Unpaid",
    PaymentStatus.DEPOSIT_PAID: "Deposit Paid",
    PaymentStatus.PARTIALLY_PAID: "Partially Paid",
    PaymentStatus.PAID: "Paid",
    PaymentStatus.REFUNDED: "Refunded",
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def format_booking_status(status: BookingStatus | str) -> str:
    try:
        return BOOKING_STATUS_LABELS[BookingStatus(status)]
    except ValueError:
        return "Unknown"


def format_payment_status(status: PaymentStatus | str) -> str:
    try:
        return PAYMENT_STATUS_LABELS[PaymentStatus(status)]
    except ValueError:
        return "Unknown"


def assert_booking_transition(current: BookingStatus, target: BookingStatus) -> None:
    if current == target:
        return
    if target not in BOOKING_TRANSITIONS.get(current, set()):
        raise InvalidStatusTransitionError(current.value, target.value)


def derive_payment_status(
    booking: Booking,
    paid: Decimal,
    amount: Decimal,
    is_deposit: bool,
) -> PaymentStatus:
    """Payment status once `paid` (ledger total including `amount`) is on record."""
    if is_deposit and amount >= booking.deposit_amount:
        return PaymentStatus.PAID if paid >= booking.total_amount else PaymentStatus.DEPOSIT_PAID
    if paid >= booking.total_amount:
        return PaymentStatus.PAID
    if paid >= booking.deposit_amount:
        return PaymentStatus.PARTIALLY_PAID
    if booking.payment_status == PaymentStatus.REFUNDED:
        # money is back on the ledger
        return PaymentStatus.UNPAID
    return booking.payment_status


class BookingFilters(BaseModel):
    event_type: EventType | None = None
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    status: BookingStatus | None = None
    payment_status: PaymentStatus | None = None
    venue_id: str | None = None
    min_attendees: int | None = None
    max_attendees: int | None = None
    search_term: str | None = None


@dataclass
class BookingStats:
    total_bookings: int
    confirmed_bookings: int
    pending_bookings: int
    total_revenue: Decimal
    average_booking_value: Decimal
    upcoming_bookings: int
    cancellation_rate: float

    def to_dict(self) -> dict:
        return {
            "total_bookings": self.total_bookings,
            "confirmed_bookings": self.confirmed_bookings,
            "pending_bookings": self.pending_bookings,
            "total_revenue": float(self.total_revenue),
            "average_booking_value": float(self.average_booking_value),
            "upcoming_bookings": self.upcoming_bookings,
            "cancellation_rate": self.cancellation_rate,
        }


class BookingManager:
    """Creates bookings and applies every change to them as a new value.

    Holds no state: the caller owns the booking list and must serialize
    check-availability-then-create when several writers share a venue.
    """

    def create_booking(
        self,
        event_name: str,
        event_type: EventType | str,
        venue_id: str,
        customer: Customer,
        start_date: datetime,
        end_date: datetime,
        attendee_count: int,
        total_amount: Decimal | float,
        deposit_amount: Decimal | float,
        deposit_due_date: date | None = None,
        balance_due_date: date | None = None,
        special_requirements: str | None = None,
        vendor_bookings: list[VendorBooking] | None = None,
        budget_breakdown: BudgetBreakdown | None = None,
        requirement_ids: list[str] | None = None,
        layout_ids: list[str] | None = None,
        time_blocks: list[EventTimeBlock] | None = None,
    ) -> Booking:
        """New booking in (inquiry, unpaid). Invalid dates or amounts raise ValidationError."""
        now = _now()
        if not customer.id:
            customer = customer.model_copy(update={
                "id": uuid.uuid4().hex,
                "created_at": now,
                "updated_at": now,
            })

        booking = Booking(
            event_name=event_name,
            event_type=event_type,
            venue_id=venue_id,
            customer_id=customer.id,
            customer=customer,
            start_date=start_date,
            end_date=end_date,
            attendee_count=attendee_count,
            status=BookingStatus.INQUIRY,
            payment_status=PaymentStatus.UNPAID,
            total_amount=to_money(total_amount),
            deposit_amount=to_money(deposit_amount),
            deposit_due_date=deposit_due_date,
            balance_due_date=balance_due_date,
            time_blocks=time_blocks or [],
            vendor_bookings=vendor_bookings or [],
            budget_breakdown=budget_breakdown,
            requirement_ids=requirement_ids,
            layout_ids=layout_ids,
            special_requirements=special_requirements,
            created_at=now,
            updated_at=now,
        )
        logger.info(f"Booking {booking.id} created for venue {venue_id} ({booking.event_type.value}, {attendee_count} guests)")
        return booking

    def update_booking_status(
        self,
        booking: Booking,
        status: BookingStatus | str,
        notes: str | None = None,
    ) -> Booking:
        status = BookingStatus(status)
        if settings.enforce_status_transitions:
            assert_booking_transition(booking.status, status)

        update: dict = {"status": status, "updated_at": _now()}
        if notes:
            update["internal_notes"] = f"{booking.internal_notes}\n\n{notes}" if booking.internal_notes else notes
            if status == BookingStatus.CANCELLED:
                update["cancellation_reason"] = notes

        logger.info(f"Booking {booking.id}: {booking.status.value} → {status.value}")
        return booking.model_copy(update=update)

    def record_payment(
        self,
        booking: Booking,
        amount: Decimal | float,
        payment_method: PaymentMethod | str,
        is_deposit: bool = False,
        transaction_id: str | None = None,
        notes: str | None = None,
    ) -> tuple[Booking, Payment]:
        """Append a payment to the ledger and re-derive the payment status from it."""
        amount = to_money(amount)
        if amount <= 0:
            raise PaymentError("Payment amount must be positive")

        payment = Payment(
            booking_id=booking.id,
            amount=amount,
            payment_method=payment_method,
            transaction_id=transaction_id,
            notes=notes,
            is_deposit=is_deposit,
        )
        paid = booking.amount_paid + amount
        payment_status = derive_payment_status(booking, paid, amount, is_deposit)

        logger.info(
            f"Booking {booking.id}: payment of {amount} recorded "
            f"(paid {paid} of {booking.total_amount}, {payment_status.value})"
        )
        updated = booking.model_copy(update={
            "payments": [*booking.payments, payment],
            "payment_status": payment_status,
            "updated_at": _now(),
        })
        return updated, payment

    def record_refund(
        self,
        booking: Booking,
        amount: Decimal | float,
        payment_method: PaymentMethod | str,
        notes: str | None = None,
    ) -> tuple[Booking, Payment]:
        amount = to_money(amount)
        if amount <= 0:
            raise PaymentError("Refund amount must be positive")
        if amount > booking.amount_paid:
            raise PaymentError(f"Refund of {amount} exceeds amount paid ({booking.amount_paid})")

        refund = Payment(
            booking_id=booking.id,
            amount=amount,
            payment_method=payment_method,
            notes=notes,
            is_refund=True,
        )
        remaining = booking.amount_paid - amount
        if remaining <= 0:
            payment_status = PaymentStatus.REFUNDED
        elif remaining >= booking.total_amount:
            payment_status = PaymentStatus.PAID
        elif remaining >= booking.deposit_amount:
            payment_status = PaymentStatus.PARTIALLY_PAID
        else:
            payment_status = PaymentStatus.UNPAID

        logger.info(f"Booking {booking.id}: refund of {amount} recorded ({payment_status.value})")
        updated = booking.model_copy(update={
            "payments": [*booking.payments, refund],
            "payment_status": payment_status,
            "updated_at": _now(),
        })
        return updated, refund

    def check_venue_availability(
        self,
        venue_id: str,
        start_date: datetime,
        end_date: datetime,
        existing_bookings: list[Booking],
    ) -> bool:
        return check_venue_availability(venue_id, start_date, end_date, existing_bookings)

    def add_vendor_booking(
        self,
        booking: Booking,
        vendor: Vendor,
        package_id: str,
        start_time: time | str,
        end_time: time | str,
        quantity: int | None = None,
        hours: int | float | None = None,
        custom_requirements: str | None = None,
    ) -> Booking:
        """Price the package, attach it, and fold its cost into the booking totals."""
        if booking.status in TERMINAL_STATUSES:
            raise BookingClosedError(f"Cannot add vendors to a {booking.status.value} booking")

        quantity = booking.attendee_count if quantity is None else quantity
        hours = settings.default_vendor_hours if hours is None else hours

        cost = calculate_vendor_booking_cost(vendor, package_id, quantity, hours)
        package = find_package(vendor, package_id)
        deposit = to_money(cost.total * settings.vendor_deposit_rate)

        vendor_booking = VendorBooking(
            vendor_id=vendor.id,
            vendor_name=vendor.name,
            package_id=package_id,
            package_name=package.name or None,
            event_id=booking.id,
            user_id=(booking.customer.user_id if booking.customer else None) or "",
            service_date=booking.start_date.date(),
            start_time=start_time,
            end_time=end_time,
            total_amount=cost.total,
            deposit_amount=deposit,
            custom_requirements=custom_requirements,
        )

        logger.info(f"Booking {booking.id}: vendor {vendor.name} attached ({package_id}, {cost.total})")
        return booking.model_copy(update={
            "vendor_bookings": [*booking.vendor_bookings, vendor_booking],
            "total_amount": booking.total_amount + cost.total,
            "deposit_amount": booking.deposit_amount + deposit,
            "updated_at": _now(),
        })

    def filter_bookings(self, bookings: list[Booking], filters: BookingFilters) -> list[Booking]:
        term = filters.search_term.lower() if filters.search_term else None

        def matches(b: Booking) -> bool:
            if filters.event_type and b.event_type != filters.event_type:
                return False
            if filters.start_date and b.end_date < filters.start_date:
                return False
            if filters.end_date and b.start_date > filters.end_date:
                return False
            if filters.status and b.status != filters.status:
                return False
            if filters.payment_status and b.payment_status != filters.payment_status:
                return False
            if filters.venue_id and b.venue_id != filters.venue_id:
                return False
            if filters.min_attendees is not None and b.attendee_count < filters.min_attendees:
                return False
            if filters.max_attendees is not None and b.attendee_count > filters.max_attendees:
                return False
            if term:
                customer_name = b.customer.name.lower() if b.customer else ""
                if term not in b.event_name.lower() and term not in customer_name:
                    return False
            return True

        return [b for b in bookings if matches(b)]

    def calculate_booking_stats(self, bookings: list[Booking], now: datetime | None = None) -> BookingStats:
        now = assume_utc(now) if now else _now()
        total = len(bookings)
        cancelled = sum(1 for b in bookings if b.status == BookingStatus.CANCELLED)
        active = [b for b in bookings if b.status != BookingStatus.CANCELLED]

        revenue = sum((b.total_amount for b in active), ZERO)
        average = to_money(revenue / len(active)) if active else ZERO

        return BookingStats(
            total_bookings=total,
            confirmed_bookings=sum(
                1 for b in bookings if b.status in (BookingStatus.CONFIRMED, BookingStatus.COMPLETED)
            ),
            pending_bookings=sum(1 for b in bookings if b.status == BookingStatus.PENDING),
            total_revenue=to_money(revenue),
            average_booking_value=average,
            upcoming_bookings=sum(
                1 for b in active if b.status != BookingStatus.COMPLETED and b.start_date > now
            ),
            cancellation_rate=percent_of(cancelled, total),
        )


booking_manager = BookingManager()
