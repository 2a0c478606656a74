"""Domain errors. All subclass ValueError so callers can catch them the same way."""


class PackageNotFoundError(ValueError):
    def __init__(self, package_id: str, vendor_name: str):
        super().__init__(f"Package with ID {package_id} not found for vendor {vendor_name}")
        self.package_id = package_id
        self.vendor_name = vendor_name


class InvalidStatusTransitionError(ValueError):
    def __init__(self, current: str, target: str):
        super().__init__(f"Invalid booking transition: {current} → {target}")
        self.current = current
        self.target = target


class BookingClosedError(ValueError):
    """Raised when a cancelled or completed booking is modified."""


class PaymentError(ValueError):
    """Raised for payments or refunds the ledger cannot accept."""
