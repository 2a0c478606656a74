from eventplanner.schemas.common import UtcDatetime, assume_utc
from eventplanner.schemas.enums import (
    BookingStatus,
    EventType,
    FeeType,
    PaymentMethod,
    PaymentStatus,
    PriceType,
    RequirementCategory,
    RequirementPriority,
    RequirementStatus,
    VendorBookingStatus,
    VendorCategory,
)
from eventplanner.schemas.budget import (
    OTHER_CATEGORY,
    BudgetBreakdown,
    BudgetItem,
    BudgetOptions,
    CategoryBudget,
    EventTypeEstimateOptions,
)
from eventplanner.schemas.requirement import EventRequirements, Requirement
from eventplanner.schemas.vendor import AdditionalFee, Vendor, VendorBooking, VendorPackage
from eventplanner.schemas.booking import Address, Booking, Customer, EventTimeBlock, Payment

__all__ = [
    "OTHER_CATEGORY",
    "AdditionalFee",
    "Address",
    "Booking",
    "BookingStatus",
    "BudgetBreakdown",
    "BudgetItem",
    "BudgetOptions",
    "CategoryBudget",
    "Customer",
    "EventRequirements",
    "EventTimeBlock",
    "EventType",
    "EventTypeEstimateOptions",
    "FeeType",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
    "PriceType",
    "Requirement",
    "RequirementCategory",
    "RequirementPriority",
    "RequirementStatus",
    "UtcDatetime",
    "Vendor",
    "VendorBooking",
    "VendorBookingStatus",
    "VendorCategory",
    "VendorPackage",
    "assume_utc",
]
