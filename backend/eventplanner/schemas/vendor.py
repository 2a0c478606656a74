import uuid
from datetime import date, datetime, time, timezone
from decimal import Decimal

from pydantic import BaseModel, Field

from eventplanner.schemas.common import UtcDatetime
from eventplanner.schemas.enums import FeeType, PriceType, VendorBookingStatus, VendorCategory


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AdditionalFee(BaseModel):
    name: str
    amount: Decimal
    type: FeeType = FeeType.FLAT  # percentage fees are whole percents: 10 means 10%


class VendorPackage(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    services: list[str] = []
    base_price: Decimal
    price_type: PriceType = PriceType.FLAT
    min_quantity: int | None = None
    max_quantity: int | None = None
    min_hours: int | None = None
    max_hours: int | None = None
    includes_delivery: bool = False
    additional_fees: list[AdditionalFee] = []
    lead_time_days: int = 0


class Vendor(BaseModel):
    id: str
    name: str
    category: VendorCategory = VendorCategory.OTHER
    sub_categories: list[VendorCategory] = []
    packages: list[VendorPackage] = []
    rating: float = 0.0  # overall, 1-5
    review_count: int = 0
    available_dates: dict[date, bool] | None = None  # day → available
    tags: list[str] = []
    verified: bool = False
    featured: bool = False
    date_created: UtcDatetime = Field(default_factory=_now)


class VendorBooking(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    vendor_id: str
    vendor_name: str | None = None
    package_id: str
    package_name: str | None = None
    event_id: str
    user_id: str = ""
    booking_date: UtcDatetime = Field(default_factory=_now)
    service_date: date
    start_time: time
    end_time: time
    status: VendorBookingStatus = VendorBookingStatus.INQUIRY
    total_amount: Decimal
    deposit_amount: Decimal
    deposit_paid: bool = False
    balance_paid: bool = False
    balance_due_date: date | None = None
    custom_requirements: str | None = None
    notes: str | None = None
