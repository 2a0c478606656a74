import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from eventplanner.schemas.budget import BudgetBreakdown
from eventplanner.schemas.common import UtcDatetime
from eventplanner.schemas.enums import BookingStatus, EventType, PaymentMethod, PaymentStatus
from eventplanner.schemas.vendor import VendorBooking


def _new_id() -> str:
    return uuid.uuid4().hex


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Address(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class Customer(BaseModel):
    id: str | None = None  # assigned by create_booking when missing
    user_id: str | None = None
    name: str
    email: str = ""
    phone: str = ""
    organization: str | None = None
    address: Address | None = None
    notes: str | None = None
    created_at: UtcDatetime | None = None
    updated_at: UtcDatetime | None = None


class EventTimeBlock(BaseModel):
    """A titled interval [start_time, end_time) inside an event."""

    id: str = Field(default_factory=_new_id)
    title: str
    start_time: UtcDatetime
    end_time: UtcDatetime
    description: str | None = None
    location: str | None = None
    color: str | None = None
    is_required: bool = False

    @model_validator(mode="after")
    def _check_order(self):
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        return self


class Payment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    booking_id: str
    amount: Decimal
    payment_date: UtcDatetime = Field(default_factory=_now)
    payment_method: PaymentMethod
    transaction_id: str | None = None
    notes: str | None = None
    is_deposit: bool = False
    is_refund: bool = False
    created_at: UtcDatetime = Field(default_factory=_now)

    @property
    def signed_amount(self) -> Decimal:
        return -self.amount if self.is_refund else self.amount


class Booking(BaseModel):
    """One reserved venue interval with its financial and logistical state.

    Instances are never mutated; the booking manager returns updated copies.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_id)
    event_name: str
    event_type: EventType
    venue_id: str
    customer_id: str
    customer: Customer | None = None
    start_date: UtcDatetime
    end_date: UtcDatetime
    attendee_count: int = 0
    status: BookingStatus = BookingStatus.INQUIRY
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    total_amount: Decimal = Decimal("0.00")
    deposit_amount: Decimal = Decimal("0.00")
    deposit_due_date: date | None = None
    balance_due_date: date | None = None
    payments: list[Payment] = []
    time_blocks: list[EventTimeBlock] = []
    vendor_bookings: list[VendorBooking] = []
    budget_breakdown: BudgetBreakdown | None = None
    requirement_ids: list[str] | None = None
    layout_ids: list[str] | None = None
    special_requirements: str | None = None
    cancellation_reason: str | None = None
    internal_notes: str | None = None
    created_at: UtcDatetime = Field(default_factory=_now)
    updated_at: UtcDatetime = Field(default_factory=_now)

    @model_validator(mode="after")
    def _check_invariants(self):
        if self.end_date <= self.start_date:
            raise ValueError("end_date must be after start_date")
        if self.attendee_count < 0:
            raise ValueError("attendee_count must not be negative")
        if self.deposit_amount < 0:
            raise ValueError("deposit_amount must not be negative")
        if self.deposit_amount > self.total_amount:
            raise ValueError("deposit_amount must not exceed total_amount")
        return self

    @property
    def amount_paid(self) -> Decimal:
        """Running paid-to-date: payments minus refunds."""
        return sum((p.signed_amount for p in self.payments), Decimal("0.00"))

    @property
    def balance_due(self) -> Decimal:
        return max(self.total_amount - self.amount_paid, Decimal("0.00"))
