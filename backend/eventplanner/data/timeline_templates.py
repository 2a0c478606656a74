"""Sub-event templates per event type.

Offsets are minutes from the booking start and do not scale with event length.
An end offset of None runs the segment until the booking ends. Event types
without an entry get no sub-event segments.
"""

from dataclasses import dataclass

from eventplanner.schemas.enums import EventType

INDIGO = "#4f46e5"
CYAN = "#0891b2"
PINK = "#be185d"
GREEN = "#059669"


@dataclass(frozen=True)
class TemplateSegment:
    title: str
    start_offset: int
    end_offset: int | None
    description: str
    color: str
    is_required: bool = True


TIMELINE_TEMPLATES: dict[EventType, tuple[TemplateSegment, ...]] = {
    EventType.WEDDING: (
        TemplateSegment("Ceremony", 0, 60, "Wedding ceremony", PINK),
        TemplateSegment(
            "Cocktail Hour", 60, 90,
            "Guests enjoy cocktails while wedding party takes photos", GREEN, is_required=False,
        ),
        TemplateSegment("Reception", 90, None, "Wedding reception with dinner and dancing", PINK),
    ),
    EventType.CONFERENCE: (
        TemplateSegment(
            "Registration & Breakfast", 0, 60,
            "Attendee check-in and breakfast", CYAN, is_required=False,
        ),
        TemplateSegment("Morning Sessions", 60, 210, "Morning conference sessions", CYAN),
        TemplateSegment("Lunch", 210, 270, "Lunch break", GREEN, is_required=False),
        TemplateSegment("Afternoon Sessions", 270, None, "Afternoon conference sessions", CYAN),
    ),
}
