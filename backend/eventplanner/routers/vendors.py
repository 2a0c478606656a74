"""Vendors router — package pricing, requirement matching and vendor calendars."""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from eventplanner.exceptions import PackageNotFoundError
from eventplanner.schemas.requirement import Requirement
from eventplanner.schemas.vendor import Vendor
from eventplanner.services.vendor_matcher import check_vendor_availability, find_vendors_for_requirements
from eventplanner.services.vendor_pricing import calculate_vendor_booking_cost

logger = logging.getLogger(__name__)

router = APIRouter()


class CostRequest(BaseModel):
    vendor: Vendor
    package_id: str
    quantity: int = 1
    hours: float = 4
    include_fees: bool = True


class MatchRequest(BaseModel):
    vendors: list[Vendor]
    requirements: list[Requirement]


class VendorAvailabilityRequest(BaseModel):
    vendor: Vendor
    start_date: date
    end_date: date


@router.post("/cost")
async def vendor_cost(req: CostRequest):
    try:
        cost = calculate_vendor_booking_cost(req.vendor, req.package_id, req.quantity, req.hours, req.include_fees)
    except PackageNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return cost.to_dict()


@router.post("/match")
async def match_vendors(req: MatchRequest):
    matches = find_vendors_for_requirements(req.vendors, req.requirements)
    return {key: [v.id for v in vendors] for key, vendors in matches.items()}


@router.post("/availability")
async def vendor_availability(req: VendorAvailabilityRequest):
    if req.start_date > req.end_date:
        raise HTTPException(status_code=400, detail="start_date must not be after end_date")
    return {
        "vendor_id": req.vendor.id,
        "available": check_vendor_availability(req.vendor, req.start_date, req.end_date),
    }
