"""Cost reference data — per-person and venue benchmarks, category shares, add-ons.

Static tables used by the budget engine. All amounts in USD.
"""

from decimal import Decimal

from eventplanner.schemas.enums import EventType, RequirementCategory

# ---------- Per-person cost by event type ----------

PER_PERSON_COST: dict[EventType, Decimal] = {
    EventType.WEDDING: Decimal("150"),
    EventType.CONFERENCE: Decimal("120"),
    EventType.CONCERT: Decimal("80"),
    EventType.EXHIBITION: Decimal("90"),
    EventType.BANQUET: Decimal("130"),
    EventType.MEETING: Decimal("70"),
    EventType.GRADUATION: Decimal("50"),
    EventType.TRADE_SHOW: Decimal("110"),
    EventType.GALA: Decimal("200"),
    EventType.CORPORATE: Decimal("100"),
}

# ---------- Venue base cost by event type ----------

VENUE_BASE_COST: dict[EventType, Decimal] = {
    EventType.WEDDING: Decimal("3000"),
    EventType.CONFERENCE: Decimal("5000"),
    EventType.CONCERT: Decimal("8000"),
    EventType.EXHIBITION: Decimal("7000"),
    EventType.BANQUET: Decimal("4000"),
    EventType.MEETING: Decimal("1500"),
    EventType.GRADUATION: Decimal("3000"),
    EventType.TRADE_SHOW: Decimal("10000"),
    EventType.GALA: Decimal("8000"),
    EventType.CORPORATE: Decimal("3500"),
}

# Used by the amenity estimator when an event type has no entry
FALLBACK_PER_PERSON_COST = Decimal("100")
FALLBACK_VENUE_BASE_COST = Decimal("3000")

# ---------- Typical share of the baseline per category ----------
# Shares sum to 1.00; custom allocations may not, and the rest stays unallocated.

CATEGORY_PERCENTAGE: dict[RequirementCategory, Decimal] = {
    RequirementCategory.CATERING: Decimal("0.35"),
    RequirementCategory.AUDIOVISUAL: Decimal("0.15"),
    RequirementCategory.DECOR: Decimal("0.12"),
    RequirementCategory.SEATING: Decimal("0.10"),
    RequirementCategory.STAFFING: Decimal("0.10"),
    RequirementCategory.LIGHTING: Decimal("0.08"),
    RequirementCategory.LOGISTICS: Decimal("0.05"),
    RequirementCategory.ACCESSIBILITY: Decimal("0.03"),
    RequirementCategory.SAFETY: Decimal("0.02"),
}

# ---------- Amenity add-ons (flat, per event) ----------

ADDON_COSTS: dict[str, Decimal] = {
    "bar": Decimal("1500"),
    "dance_floor": Decimal("1000"),
    "stage_small": Decimal("800"),
    "stage_medium": Decimal("1500"),
    "stage_large": Decimal("3000"),
    "technical_staff": Decimal("500"),
    "security": Decimal("400"),
    "valet": Decimal("1000"),
    "photography": Decimal("2000"),
    "videography": Decimal("2500"),
    # Entertainment
    "dj": Decimal("1200"),
    "band": Decimal("3500"),
    "speaker": Decimal("2000"),
    "performer": Decimal("1500"),
}

# ---------- Regional and seasonal adjustments ----------

REGION_MULTIPLIERS: dict[str, Decimal] = {
    "NORTHEAST": Decimal("1.3"),
    "WEST_COAST": Decimal("1.4"),
    "MIDWEST": Decimal("0.9"),
    "SOUTH": Decimal("0.85"),
    "SOUTHWEST": Decimal("0.95"),
    "INTERNATIONAL": Decimal("1.2"),
}

SEASON_MULTIPLIERS: dict[str, Decimal] = {
    "PEAK": Decimal("1.3"),      # summer, holidays
    "SHOULDER": Decimal("1.0"),  # spring, fall
    "OFF_PEAK": Decimal("0.8"),  # winter outside holidays
}

VENUE_SIZE_MULTIPLIERS: dict[str, Decimal] = {
    "small": Decimal("0.7"),
    "medium": Decimal("1.0"),
    "large": Decimal("1.5"),
}

# Baseline event length the duration factor is measured against
STANDARD_EVENT_HOURS = Decimal("4")

# Shares of the per-person total (and of add-ons) in the amenity estimator breakdown
ESTIMATE_PER_PERSON_SHARES: dict[str, Decimal] = {
    "Catering & Beverages": Decimal("0.40"),
    "Staff": Decimal("0.15"),
    "Decor & Furnishings": Decimal("0.15"),
    "Technical Equipment": Decimal("0.10"),
    "Additional Amenities": Decimal("0.10"),
    "Miscellaneous": Decimal("0.10"),
}

ESTIMATE_ADDON_SHARES: dict[str, Decimal] = {
    "Entertainment": Decimal("0.40"),
    "Technical Equipment": Decimal("0.30"),
    "Additional Amenities": Decimal("0.30"),
}


def get_region_multiplier(region: str | None) -> Decimal | None:
    """Region multiplier, or None when the region is unknown. No region means 1."""
    if not region:
        return Decimal("1")
    return REGION_MULTIPLIERS.get(region.upper())


def get_season_multiplier(season: str | None) -> Decimal | None:
    """Season multiplier, or None when the season is unknown. No season means 1."""
    if not season:
        return Decimal("1")
    return SEASON_MULTIPLIERS.get(season.upper())
