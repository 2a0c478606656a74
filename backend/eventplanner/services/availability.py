"""Venue availability — half-open interval conflict detection over a booking list."""

import logging
from collections.abc import Iterable
from datetime import datetime

from eventplanner.schemas.booking import Booking
from eventplanner.schemas.common import assume_utc
from eventplanner.schemas.enums import BookingStatus

logger = logging.getLogger(__name__)


def intervals_overlap(start1: datetime, end1: datetime, start2: datetime, end2: datetime) -> bool:
    """Overlap of [start1, end1) and [start2, end2). Shared boundaries do not overlap.

    Naive datetimes are taken as UTC.
    """
    start1, end1, start2, end2 = (assume_utc(d) for d in (start1, end1, start2, end2))
    return start1 < end2 and end1 > start2


def find_conflicting_bookings(
    venue_id: str,
    start: datetime,
    end: datetime,
    existing_bookings: Iterable[Booking],
) -> list[Booking]:
    """Non-cancelled bookings on the venue whose interval overlaps [start, end)."""
    return [
        b for b in existing_bookings
        if b.venue_id == venue_id
        and b.status != BookingStatus.CANCELLED
        and intervals_overlap(start, end, b.start_date, b.end_date)
    ]


def check_venue_availability(
    venue_id: str,
    start: datetime,
    end: datetime,
    existing_bookings: Iterable[Booking],
) -> bool:
    conflicts = find_conflicting_bookings(venue_id, start, end, existing_bookings)
    if conflicts:
        logger.info(
            f"Venue {venue_id} unavailable {start.isoformat()} → {end.isoformat()}: "
            f"{len(conflicts)} conflicting booking(s) ({', '.join(b.id for b in conflicts)})"
        )
        return False
    return True
