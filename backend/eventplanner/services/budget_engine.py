"""Budget engine — baseline budgeting, category allocation and industry benchmarking.

Two independent estimators live here:

    planned      requirement list → category allocations → fees/taxes/contingency
    exploratory  per-person + venue + amenity add-ons, no requirement list needed

They encode different intents and can disagree for the same event; both sit behind
the BudgetEstimator interface (see ESTIMATOR_MAP).
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal

from eventplanner.config import settings
from eventplanner.data.cost_tables import (
    ADDON_COSTS,
    CATEGORY_PERCENTAGE,
    ESTIMATE_ADDON_SHARES,
    ESTIMATE_PER_PERSON_SHARES,
    FALLBACK_PER_PERSON_COST,
    FALLBACK_VENUE_BASE_COST,
    PER_PERSON_COST,
    STANDARD_EVENT_HOURS,
    VENUE_BASE_COST,
    VENUE_SIZE_MULTIPLIERS,
    get_region_multiplier,
    get_season_multiplier,
)
from eventplanner.data.currency import ZERO, percent_of, split_evenly, to_decimal, to_money
from eventplanner.schemas.budget import (
    OTHER_CATEGORY,
    BudgetBreakdown,
    BudgetItem,
    BudgetOptions,
    CategoryBudget,
    EventTypeEstimateOptions,
)
from eventplanner.schemas.enums import EventType, RequirementCategory
from eventplanner.schemas.requirement import EventRequirements, Requirement
from eventplanner.services.requirement_mapper import (
    budget_bucket,
    create_budget_items_from_requirements,
)

logger = logging.getLogger(__name__)

ESTIMATE_BREAKDOWN_LABELS = (
    "Catering & Beverages",
    "Staff",
    "Decor & Furnishings",
    "Entertainment",
    "Technical Equipment",
    "Additional Amenities",
    "Miscellaneous",
)


def _multiplier(lookup, key: str | None, label: str) -> Decimal:
    value = lookup(key)
    if value is None:
        logger.warning(f"Unknown {label} '{key}' — no {label} adjustment applied")
        return Decimal("1")
    return value


# ─── Planned (requirement-based) budgeting ───


def calculate_baseline_budget(
    event_type: EventType | str,
    attendee_count: int,
    options: BudgetOptions | None = None,
) -> Decimal:
    """(per-person × attendees + venue base) × region × season."""
    options = options or BudgetOptions()
    event_type = EventType(event_type)

    per_person = PER_PERSON_COST[event_type]
    custom = (options.custom_per_person_cost or {}).get(event_type.value)
    if custom:
        per_person = to_decimal(custom)

    venue_base = VENUE_BASE_COST[event_type]
    region = _multiplier(get_region_multiplier, options.region, "region")
    season = _multiplier(get_season_multiplier, options.season, "season")

    return to_money((per_person * attendee_count + venue_base) * region * season)


def distribute_budget_to_categories(
    total_budget: Decimal,
    options: BudgetOptions | None = None,
) -> dict[str, Decimal]:
    """Share of the budget per category. Shares need not sum to 1."""
    options = options or BudgetOptions()
    if options.custom_category_allocation is not None:
        shares = {k: to_decimal(v) for k, v in options.custom_category_allocation.items()}
    else:
        shares = {c.value: pct for c, pct in CATEGORY_PERCENTAGE.items()}

    total_budget = to_decimal(total_budget)
    return {
        category.value: to_money(total_budget * shares.get(category.value, ZERO))
        for category in RequirementCategory
    }


def apply_costs_to_budget_items(
    budget_items: list[BudgetItem],
    category_allocations: dict[str, Decimal],
) -> list[BudgetItem]:
    """Fill in zero-cost items from what their category has left.

    Items with an explicit cost keep it and consume the category allocation; the
    remainder is split evenly (to the cent) over the zero-cost items of that
    category. A category whose items all carry explicit costs leaves its
    remainder unspent. Items outside the budget categories pass through as-is.
    Input order is preserved.
    """
    by_category: dict[str, list[int]] = {}
    for index, item in enumerate(budget_items):
        by_category.setdefault(budget_bucket(item.category), []).append(index)

    filled: dict[int, Decimal] = {}
    for category, indexes in by_category.items():
        if category == OTHER_CATEGORY:
            continue
        remaining = to_decimal(category_allocations.get(category, ZERO))
        remaining -= sum((budget_items[i].estimated_cost for i in indexes if budget_items[i].estimated_cost > 0), ZERO)

        unpriced = [i for i in indexes if budget_items[i].estimated_cost <= 0]
        filled.update(zip(unpriced, split_evenly(remaining, len(unpriced))))

    return [
        item.model_copy(update={"estimated_cost": filled[index]}) if index in filled else item
        for index, item in enumerate(budget_items)
    ]


def generate_budget_breakdown(
    event_type: EventType | str,
    attendee_count: int,
    requirements: list[Requirement],
    options: BudgetOptions | None = None,
) -> BudgetBreakdown:
    options = options or BudgetOptions()

    total_budget = calculate_baseline_budget(event_type, attendee_count, options)
    allocations = distribute_budget_to_categories(total_budget, options)

    items = create_budget_items_from_requirements(requirements)
    items = apply_costs_to_budget_items(items, allocations)
    items = items + list(options.additional_items)

    categories: dict[str, CategoryBudget] = {}
    for key in [c.value for c in RequirementCategory] + [OTHER_CATEGORY]:
        cat_items = [i for i in items if budget_bucket(i.category) == key]
        allocated = sum((i.estimated_cost for i in cat_items), ZERO)
        budgeted = allocations.get(key, ZERO)
        categories[key] = CategoryBudget(
            budgeted=budgeted,
            allocation=to_money(allocated),
            percentage=percent_of(allocated, total_budget),
            unallocated=max(to_money(budgeted - allocated), ZERO),
            items=cat_items,
        )

    service_fees = to_money(total_budget * settings.service_fee_rate) if options.include_service_fee else ZERO
    taxes = to_money(total_budget * settings.tax_rate) if options.include_tax else ZERO
    contingency = to_money(total_budget * settings.contingency_rate) if options.include_contingency else ZERO

    breakdown = BudgetBreakdown(
        total_budget=total_budget,
        categories=categories,
        service_fees=service_fees,
        taxes=taxes,
        contingency=contingency,
        grand_total=total_budget + service_fees + taxes + contingency,
    )

    if breakdown.unallocated_total > 0:
        logger.info(
            f"Budget for {EventType(event_type).value} ({attendee_count} guests): "
            f"{breakdown.unallocated_total} of category allocations left unassigned"
        )
    return breakdown


def generate_recommended_budget(
    event_requirements: EventRequirements,
    options: BudgetOptions | None = None,
) -> BudgetBreakdown:
    return generate_budget_breakdown(
        event_requirements.event_type,
        event_requirements.attendee_count,
        event_requirements.requirements,
        options,
    )


# ─── Exploratory (amenity-based) estimate ───


@dataclass
class EventTypeEstimate:
    base_cost: Decimal
    per_person_cost: Decimal
    venue_cost: Decimal
    amenities_cost: Decimal
    total_cost: Decimal  # after duration factor
    adjusted_total: Decimal  # after region and season
    breakdown: dict[str, Decimal] = field(default_factory=dict)
    ignored_amenities: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "base_cost": float(self.base_cost),
            "per_person_cost": float(self.per_person_cost),
            "venue_cost": float(self.venue_cost),
            "amenities_cost": float(self.amenities_cost),
            "total_cost": float(self.total_cost),
            "adjusted_total": float(self.adjusted_total),
            "breakdown": {k: float(v) for k, v in self.breakdown.items()},
            "ignored_amenities": self.ignored_amenities,
        }


def estimate_budget_by_event_type(
    event_type: EventType | str,
    attendee_count: int,
    venue_size: str | None = None,
    duration_hours: Decimal | float | None = None,
    amenities: list[str] | None = None,
    region: str | None = None,
    season: str | None = None,
) -> EventTypeEstimate:
    event_type = EventType(event_type)
    per_person = PER_PERSON_COST.get(event_type, FALLBACK_PER_PERSON_COST)

    venue_cost = VENUE_BASE_COST.get(event_type, FALLBACK_VENUE_BASE_COST)
    if venue_size:
        size_multiplier = VENUE_SIZE_MULTIPLIERS.get(venue_size.lower())
        if size_multiplier is None:
            logger.warning(f"Unknown venue size '{venue_size}' — using standard venue cost")
        else:
            venue_cost = venue_cost * size_multiplier

    duration_factor = Decimal("1")
    if duration_hours:
        duration_factor = max(Decimal("1"), to_decimal(duration_hours) / STANDARD_EVENT_HOURS)

    amenities_cost = ZERO
    ignored: list[str] = []
    for amenity in amenities or []:
        price = ADDON_COSTS.get(amenity)
        if price is None:
            ignored.append(amenity)
            continue
        amenities_cost += price
    if ignored:
        logger.warning(f"Ignoring unknown amenities: {', '.join(ignored)}")

    people_cost = per_person * attendee_count
    base_cost = people_cost + venue_cost + amenities_cost
    total_cost = base_cost * duration_factor
    adjusted_total = (
        total_cost
        * _multiplier(get_region_multiplier, region, "region")
        * _multiplier(get_season_multiplier, season, "season")
    )

    breakdown = {"Venue Rental": to_money(venue_cost)}
    for label in ESTIMATE_BREAKDOWN_LABELS:
        breakdown[label] = to_money(
            people_cost * ESTIMATE_PER_PERSON_SHARES.get(label, ZERO)
            + amenities_cost * ESTIMATE_ADDON_SHARES.get(label, ZERO)
        )

    return EventTypeEstimate(
        base_cost=to_money(base_cost),
        per_person_cost=to_money(per_person),
        venue_cost=to_money(venue_cost),
        amenities_cost=to_money(amenities_cost),
        total_cost=to_money(total_cost),
        adjusted_total=to_money(adjusted_total),
        breakdown=breakdown,
        ignored_amenities=ignored,
    )


# ─── Benchmarking ───


@dataclass
class IndustryComparison:
    industry_average: Decimal
    difference: Decimal
    percentage_difference: float
    is_above_average: bool

    def to_dict(self) -> dict:
        return {
            "industry_average": float(self.industry_average),
            "difference": float(self.difference),
            "percentage_difference": self.percentage_difference,
            "is_above_average": self.is_above_average,
        }


def compare_budget_to_industry_average(
    event_type: EventType | str,
    attendee_count: int,
    budget: Decimal | float,
) -> IndustryComparison:
    """Compare against per-person × attendees + venue base, with no multipliers."""
    event_type = EventType(event_type)
    average = to_money(PER_PERSON_COST[event_type] * attendee_count + VENUE_BASE_COST[event_type])
    difference = to_money(to_decimal(budget) - average)

    return IndustryComparison(
        industry_average=average,
        difference=difference,
        percentage_difference=percent_of(difference, average),
        is_above_average=difference > 0,
    )


# ─── Strategies ───


@dataclass
class BudgetEstimate:
    strategy: str
    total: Decimal
    breakdown: dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "strategy": self.strategy,
            "total": float(self.total),
            "breakdown": {k: float(v) for k, v in self.breakdown.items()},
        }


class BudgetEstimator(ABC):
    strategy: str = ""

    @abstractmethod
    def estimate(
        self,
        event_type: EventType | str,
        attendee_count: int,
        requirements: list[Requirement] | None = None,
        options: dict | None = None,
    ) -> BudgetEstimate:
        ...


class RequirementBudgetEstimator(BudgetEstimator):
    """Planned budgeting from a requirement list."""

    strategy = "planned"

    def estimate(self, event_type, attendee_count, requirements=None, options=None) -> BudgetEstimate:
        opts = BudgetOptions.model_validate(options or {})
        result = generate_budget_breakdown(event_type, attendee_count, requirements or [], opts)

        breakdown = {key: cat.allocation for key, cat in result.categories.items() if cat.allocation > 0}
        for label, amount in (
            ("Service Fees", result.service_fees),
            ("Taxes", result.taxes),
            ("Contingency", result.contingency),
        ):
            if amount > 0:
                breakdown[label] = amount

        return BudgetEstimate(strategy=self.strategy, total=result.grand_total, breakdown=breakdown)


class AmenityBudgetEstimator(BudgetEstimator):
    """Exploratory budgeting when no requirement list exists yet."""

    strategy = "exploratory"

    def estimate(self, event_type, attendee_count, requirements=None, options=None) -> BudgetEstimate:
        opts = EventTypeEstimateOptions.model_validate(options or {})
        if requirements:
            logger.debug(f"Exploratory estimate ignores {len(requirements)} requirement(s)")

        result = estimate_budget_by_event_type(event_type, attendee_count, **opts.model_dump())
        return BudgetEstimate(strategy=self.strategy, total=result.adjusted_total, breakdown=result.breakdown)


ESTIMATOR_MAP: dict[str, type[BudgetEstimator]] = {
    "planned": RequirementBudgetEstimator,
    "exploratory": AmenityBudgetEstimator,
}


def get_estimator(strategy: str) -> BudgetEstimator:
    estimator_cls = ESTIMATOR_MAP.get(strategy)
    if estimator_cls is None:
        raise ValueError(f"Unknown budget strategy '{strategy}'. Expected one of: {', '.join(ESTIMATOR_MAP)}")
    return estimator_cls()
