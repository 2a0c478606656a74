"""Timeline service — expands a booking into event time blocks."""

import logging
from datetime import datetime, timedelta

from eventplanner.config import settings
from eventplanner.data.timeline_templates import CYAN, INDIGO, TIMELINE_TEMPLATES
from eventplanner.schemas.booking import Booking, EventTimeBlock
from eventplanner.schemas.vendor import VendorBooking

logger = logging.getLogger(__name__)


class TimelineService:
    """Builds the schedule shown on the event calendar."""

    def generate_event_timeline(self, booking: Booking) -> list[EventTimeBlock]:
        """Existing blocks first, then start/end markers, vendor windows and template segments.

        The result is not sorted; use sort_timeline for display order.
        """
        blocks = self._marker_blocks(booking)
        blocks.extend(self._vendor_block(booking, vb) for vb in booking.vendor_bookings)
        blocks.extend(self._template_blocks(booking))
        return [*booking.time_blocks, *blocks]

    @staticmethod
    def sort_timeline(blocks: list[EventTimeBlock]) -> list[EventTimeBlock]:
        return sorted(blocks, key=lambda b: b.start_time)

    def _marker_blocks(self, booking: Booking) -> list[EventTimeBlock]:
        marker = timedelta(minutes=settings.timeline_marker_minutes)
        return [
            EventTimeBlock(
                title="Event Start",
                start_time=booking.start_date,
                end_time=min(booking.start_date + marker, booking.end_date),
                description="Event officially begins",
                is_required=True,
                color=INDIGO,
            ),
            EventTimeBlock(
                title="Event End",
                start_time=max(booking.end_date - marker, booking.start_date),
                end_time=booking.end_date,
                description="Event officially ends",
                is_required=True,
                color=INDIGO,
            ),
        ]

    def _vendor_block(self, booking: Booking, vendor_booking: VendorBooking) -> EventTimeBlock:
        tz = booking.start_date.tzinfo
        start = datetime.combine(vendor_booking.service_date, vendor_booking.start_time, tzinfo=tz)
        end = datetime.combine(vendor_booking.service_date, vendor_booking.end_time, tzinfo=tz)
        if end <= start:
            # Service runs past midnight
            end += timedelta(days=1)

        return EventTimeBlock(
            title=f"Vendor: {vendor_booking.vendor_name or vendor_booking.vendor_id}",
            start_time=start,
            end_time=end,
            description=f"Vendor service: {vendor_booking.package_name or vendor_booking.package_id}",
            is_required=True,
            color=CYAN,
        )

    def _template_blocks(self, booking: Booking) -> list[EventTimeBlock]:
        blocks = []
        for segment in TIMELINE_TEMPLATES.get(booking.event_type, ()):
            start = booking.start_date + timedelta(minutes=segment.start_offset)
            if start >= booking.end_date:
                logger.debug(f"Booking {booking.id} too short for segment '{segment.title}'")
                continue
            end = booking.end_date
            if segment.end_offset is not None:
                end = min(booking.start_date + timedelta(minutes=segment.end_offset), booking.end_date)

            blocks.append(EventTimeBlock(
                title=segment.title,
                start_time=start,
                end_time=end,
                description=segment.description,
                is_required=segment.is_required,
                color=segment.color,
            ))
        return blocks


timeline_service = TimelineService()
