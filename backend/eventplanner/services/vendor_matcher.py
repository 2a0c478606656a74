"""Vendor matcher — links the vendor catalog to requirements and checks vendor calendars."""

import logging
from datetime import date, datetime

from eventplanner.schemas.enums import RequirementCategory, VendorCategory
from eventplanner.schemas.requirement import Requirement
from eventplanner.schemas.vendor import Vendor

logger = logging.getLogger(__name__)

VENDOR_TO_REQUIREMENT_CATEGORY: dict[VendorCategory, RequirementCategory] = {
    VendorCategory.VENUE: RequirementCategory.SEATING,
    VendorCategory.CATERING: RequirementCategory.CATERING,
    VendorCategory.DECOR: RequirementCategory.DECOR,
    VendorCategory.ENTERTAINMENT: RequirementCategory.AUDIOVISUAL,
    VendorCategory.PHOTOGRAPHY: RequirementCategory.AUDIOVISUAL,
    VendorCategory.VIDEOGRAPHY: RequirementCategory.AUDIOVISUAL,
    VendorCategory.AUDIO_VISUAL: RequirementCategory.AUDIOVISUAL,
    VendorCategory.LIGHTING: RequirementCategory.LIGHTING,
    VendorCategory.TRANSPORTATION: RequirementCategory.LOGISTICS,
    VendorCategory.RENTALS: RequirementCategory.SEATING,
    VendorCategory.SECURITY: RequirementCategory.STAFFING,
    VendorCategory.STAFFING: RequirementCategory.STAFFING,
    VendorCategory.FLORAL: RequirementCategory.DECOR,
    VendorCategory.PLANNING: RequirementCategory.LOGISTICS,
    VendorCategory.OTHER: RequirementCategory.LOGISTICS,
}

SORT_KEYS = {
    "rating": lambda v: v.rating,
    "price": lambda v: min((p.base_price for p in v.packages), default=0),
    "name": lambda v: v.name.lower(),
    "date_created": lambda v: v.date_created,
    "popularity": lambda v: v.review_count,
}


def _as_date(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def check_vendor_availability(vendor: Vendor, start: date | datetime, end: date | datetime) -> bool:
    """True unless a day in [start, end] is explicitly marked unavailable."""
    if not vendor.available_dates:
        return True

    first = _as_date(start)
    last = _as_date(end)
    return not any(
        first <= day <= last
        for day, available in vendor.available_dates.items()
        if available is False
    )


def sort_vendors(vendors: list[Vendor], sort_by: str = "rating", order: str = "desc") -> list[Vendor]:
    key = SORT_KEYS.get(sort_by)
    if key is None:
        logger.warning(f"Unknown vendor sort key '{sort_by}' — order unchanged")
        return list(vendors)
    return sorted(vendors, key=key, reverse=(order != "asc"))


def vendor_categories_for(category: str) -> set[VendorCategory]:
    """Vendor categories that serve a requirement category."""
    return {vc for vc, rc in VENDOR_TO_REQUIREMENT_CATEGORY.items() if rc.value == category}


def find_vendors_for_requirements(
    vendors: list[Vendor],
    requirements: list[Requirement],
) -> dict[str, list[Vendor]]:
    """Best-rated matching vendors per requirement, keyed "title-description"."""
    recommended: dict[str, list[Vendor]] = {}

    for requirement in requirements:
        wanted = vendor_categories_for(requirement.category)
        if not wanted:
            continue

        matches = [
            v for v in vendors
            if v.category in wanted or any(sc in wanted for sc in v.sub_categories)
        ]
        if matches:
            recommended[f"{requirement.title}-{requirement.description}"] = sort_vendors(matches, "rating", "desc")

    return recommended
