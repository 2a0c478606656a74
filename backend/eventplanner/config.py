from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Budget surcharges (share of the baseline budget)
    service_fee_rate: Decimal = Decimal("0.22")
    tax_rate: Decimal = Decimal("0.08")
    contingency_rate: Decimal = Decimal("0.15")

    # Vendor bookings
    vendor_deposit_rate: Decimal = Decimal("0.30")
    default_vendor_hours: int = 4

    # Timeline
    timeline_marker_minutes: int = 30  # length of the Event Start / Event End blocks

    # Booking lifecycle
    enforce_status_transitions: bool = True

    # Display
    currency: str = "USD"

    # CORS
    cors_origins: str = "http://localhost:5173"

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
