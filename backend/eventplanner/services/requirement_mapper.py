"""Requirement mapper — turns externally tracked requirements into budget lines.

Each requirement becomes exactly one BudgetItem. Only requirements whose category
is a budget category receive a share of the category allocations; anything else
is budgeted under "other" at its own estimate.
"""

from collections import defaultdict

from eventplanner.data.currency import to_money
from eventplanner.schemas.budget import OTHER_CATEGORY, BudgetItem
from eventplanner.schemas.enums import RequirementCategory, RequirementPriority
from eventplanner.schemas.requirement import Requirement

HIGH_PRIORITIES = {RequirementPriority.CRITICAL, RequirementPriority.HIGH}

BUDGET_CATEGORIES = {c.value for c in RequirementCategory}


def category_value(category) -> str:
    return str(getattr(category, "value", category))


def is_budget_category(category: str) -> bool:
    return category_value(category) in BUDGET_CATEGORIES


def budget_bucket(category: str) -> str:
    """Breakdown key for a category: the category itself, or "other"."""
    value = category_value(category)
    return value if value in BUDGET_CATEGORIES else OTHER_CATEGORY


def create_budget_items_from_requirements(requirements: list[Requirement]) -> list[BudgetItem]:
    return [
        BudgetItem(
            requirement_id=req.id,
            category=category_value(req.category),
            title=req.title,
            description=req.description,
            estimated_cost=to_money(req.estimated_cost or 0),
            vendor=req.responsible,
            notes=req.notes,
            is_required=req.priority in HIGH_PRIORITIES,
        )
        for req in requirements
    ]


def group_requirements_by_category(requirements: list[Requirement]) -> dict[str, list[Requirement]]:
    """Requirements per budget category; every budget category is present, plus "other" when used."""
    grouped: dict[str, list[Requirement]] = defaultdict(list)
    for category in RequirementCategory:
        grouped[category.value] = []
    for req in requirements:
        grouped[budget_bucket(req.category)].append(req)
    return dict(grouped)
