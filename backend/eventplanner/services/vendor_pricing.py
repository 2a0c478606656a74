"""Vendor pricing — prices a vendor package for a given headcount and duration."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal

from eventplanner.data.currency import format_price, to_decimal, to_money
from eventplanner.exceptions import PackageNotFoundError
from eventplanner.schemas.enums import FeeType, PriceType
from eventplanner.schemas.vendor import Vendor, VendorPackage

logger = logging.getLogger(__name__)


@dataclass
class VendorCost:
    base_price: Decimal
    additional_fees: dict[str, Decimal] = field(default_factory=dict)
    total: Decimal = Decimal("0.00")

    def to_dict(self) -> dict:
        return {
            "base_price": float(self.base_price),
            "additional_fees": {name: float(amount) for name, amount in self.additional_fees.items()},
            "total": float(self.total),
            "formatted_total": format_price(self.total),
        }


def find_package(vendor: Vendor, package_id: str) -> VendorPackage:
    package = next((p for p in vendor.packages if p.id == package_id), None)
    if package is None:
        raise PackageNotFoundError(package_id, vendor.name)
    return package


def calculate_vendor_booking_cost(
    vendor: Vendor,
    package_id: str,
    quantity: int,
    hours: int | float | Decimal,
    include_fees: bool = True,
) -> VendorCost:
    """Price a package.

    Per-person packages scale by quantity, per-hour packages by hours; flat and
    custom packages keep their base price. Percentage fees apply to the scaled
    base price.
    """
    package = find_package(vendor, package_id)

    base_price = package.base_price
    if package.price_type == PriceType.PER_PERSON:
        base_price = base_price * to_decimal(quantity)
    elif package.price_type == PriceType.PER_HOUR:
        base_price = base_price * to_decimal(hours)
    base_price = to_money(base_price)

    fees: dict[str, Decimal] = {}
    if include_fees:
        for fee in package.additional_fees:
            if fee.type == FeeType.FLAT:
                fees[fee.name] = to_money(fee.amount)
            elif fee.type == FeeType.PERCENTAGE:
                fees[fee.name] = to_money(fee.amount / Decimal("100") * base_price)

    total = base_price + sum(fees.values(), Decimal("0.00"))

    logger.debug(
        f"Priced {vendor.name}/{package.id} ({package.price_type.value}): "
        f"base={base_price} fees={sum(fees.values(), Decimal('0'))} total={total}"
    )
    return VendorCost(base_price=base_price, additional_fees=fees, total=total)
