"""Currency utilities — cent-exact money arithmetic and display formatting."""

from decimal import ROUND_HALF_UP, Decimal

from eventplanner.config import settings

CENT = Decimal("0.01")
ZERO = Decimal("0.00")

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$", "CAD": "CA$", "GBP": "£", "EUR": "€",
    "JPY": "¥", "AUD": "A$", "SGD": "S$", "HKD": "HK$",
    "INR": "₹", "AED": "AED", "CHF": "CHF",
}


def to_decimal(value) -> Decimal:
    """Coerce int/float/str/Decimal to Decimal without float noise. None becomes 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value) -> Decimal:
    """Quantize to cents, half-up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def split_evenly(amount, parts: int) -> list[Decimal]:
    """Split an amount into `parts` cent-exact shares that sum to the amount.

    The first `remainder` shares carry one extra cent. Negative amounts yield
    zero shares.
    """
    if parts <= 0:
        return []
    cents = int(to_money(amount) / CENT)
    if cents <= 0:
        return [ZERO for _ in range(parts)]
    base, remainder = divmod(cents, parts)
    return [
        (Decimal(base + (1 if i < remainder else 0)) * CENT).quantize(CENT)
        for i in range(parts)
    ]


def percent_of(part, whole) -> float:
    """Return part/whole as a percentage rounded to 2 places, 0 when whole is 0."""
    whole = to_decimal(whole)
    if whole == 0:
        return 0.0
    return round(float(to_decimal(part) / whole * 100), 2)


def format_price(amount, currency: str | None = None) -> str:
    """Format a price with currency symbol for display. Defaults to the configured currency."""
    currency = currency or settings.currency
    symbol = CURRENCY_SYMBOLS.get(currency, currency + " ")
    return f"{symbol}{to_money(amount):,.2f}"
