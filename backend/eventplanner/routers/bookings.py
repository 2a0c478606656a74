"""Bookings router — lifecycle, payments, vendors and scheduling over caller-held bookings."""

import logging
from datetime import date, time
from decimal import Decimal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from eventplanner.exceptions import (
    BookingClosedError,
    InvalidStatusTransitionError,
    PackageNotFoundError,
)
from eventplanner.schemas.booking import Booking, Customer
from eventplanner.schemas.common import UtcDatetime
from eventplanner.schemas.budget import BudgetBreakdown
from eventplanner.schemas.enums import BookingStatus, EventType, PaymentMethod
from eventplanner.schemas.vendor import Vendor
from eventplanner.services.availability import find_conflicting_bookings
from eventplanner.services.booking_manager import BookingFilters, booking_manager
from eventplanner.services.timeline_service import timeline_service

logger = logging.getLogger(__name__)

router = APIRouter()


class CreateBookingRequest(BaseModel):
    event_name: str
    event_type: EventType
    venue_id: str
    customer: Customer
    start_date: UtcDatetime
    end_date: UtcDatetime
    attendee_count: int
    total_amount: Decimal
    deposit_amount: Decimal
    deposit_due_date: date | None = None
    balance_due_date: date | None = None
    special_requirements: str | None = None
    budget_breakdown: BudgetBreakdown | None = None
    requirement_ids: list[str] | None = None
    existing_bookings: list[Booking] = []


class StatusRequest(BaseModel):
    booking: Booking
    status: BookingStatus
    notes: str | None = None


class PaymentRequest(BaseModel):
    booking: Booking
    amount: Decimal
    payment_method: PaymentMethod
    is_deposit: bool = False
    transaction_id: str | None = None
    notes: str | None = None


class RefundRequest(BaseModel):
    booking: Booking
    amount: Decimal
    payment_method: PaymentMethod
    notes: str | None = None


class AvailabilityRequest(BaseModel):
    venue_id: str
    start_date: UtcDatetime
    end_date: UtcDatetime
    existing_bookings: list[Booking] = []


class VendorAttachRequest(BaseModel):
    booking: Booking
    vendor: Vendor
    package_id: str
    start_time: time
    end_time: time
    quantity: int | None = None
    hours: float | None = None
    custom_requirements: str | None = None


class TimelineRequest(BaseModel):
    booking: Booking
    sort: bool = True


class SearchRequest(BaseModel):
    bookings: list[Booking]
    filters: BookingFilters = BookingFilters()


class StatsRequest(BaseModel):
    bookings: list[Booking]
    now: UtcDatetime | None = None


@router.post("/", status_code=201)
async def create_booking(req: CreateBookingRequest):
    """Create a booking after checking the venue against the supplied bookings."""
    if req.existing_bookings:
        conflicts = find_conflicting_bookings(req.venue_id, req.start_date, req.end_date, req.existing_bookings)
        if conflicts:
            raise HTTPException(
                status_code=409,
                detail={"message": "Venue is not available", "conflicts": [b.id for b in conflicts]},
            )

    try:
        return booking_manager.create_booking(
            event_name=req.event_name,
            event_type=req.event_type,
            venue_id=req.venue_id,
            customer=req.customer,
            start_date=req.start_date,
            end_date=req.end_date,
            attendee_count=req.attendee_count,
            total_amount=req.total_amount,
            deposit_amount=req.deposit_amount,
            deposit_due_date=req.deposit_due_date,
            balance_due_date=req.balance_due_date,
            special_requirements=req.special_requirements,
            budget_breakdown=req.budget_breakdown,
            requirement_ids=req.requirement_ids,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/status")
async def update_status(req: StatusRequest):
    try:
        return booking_manager.update_booking_status(req.booking, req.status, req.notes)
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/payments")
async def record_payment(req: PaymentRequest):
    try:
        booking, payment = booking_manager.record_payment(
            req.booking,
            req.amount,
            req.payment_method,
            is_deposit=req.is_deposit,
            transaction_id=req.transaction_id,
            notes=req.notes,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"booking": booking, "payment": payment}


@router.post("/refunds")
async def record_refund(req: RefundRequest):
    try:
        booking, refund = booking_manager.record_refund(req.booking, req.amount, req.payment_method, req.notes)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"booking": booking, "payment": refund}


@router.post("/availability")
async def check_availability(req: AvailabilityRequest):
    if req.start_date >= req.end_date:
        raise HTTPException(status_code=400, detail="start_date must be before end_date")

    conflicts = find_conflicting_bookings(req.venue_id, req.start_date, req.end_date, req.existing_bookings)
    return {
        "venue_id": req.venue_id,
        "available": not conflicts,
        "conflicts": [b.id for b in conflicts],
    }


@router.post("/vendors")
async def add_vendor(req: VendorAttachRequest):
    try:
        return booking_manager.add_vendor_booking(
            req.booking,
            req.vendor,
            req.package_id,
            req.start_time,
            req.end_time,
            quantity=req.quantity,
            hours=req.hours,
            custom_requirements=req.custom_requirements,
        )
    except PackageNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except BookingClosedError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/timeline")
async def build_timeline(req: TimelineRequest):
    blocks = timeline_service.generate_event_timeline(req.booking)
    if req.sort:
        blocks = timeline_service.sort_timeline(blocks)
    return {"booking_id": req.booking.id, "time_blocks": blocks}


@router.post("/search")
async def search_bookings(req: SearchRequest):
    return booking_manager.filter_bookings(req.bookings, req.filters)


@router.post("/stats")
async def booking_stats(req: StatsRequest):
    return booking_manager.calculate_booking_stats(req.bookings, now=req.now).to_dict()
