import enum


class EventType(str, enum.Enum):
    WEDDING = "wedding"
    CONFERENCE = "conference"
    CONCERT = "concert"
    EXHIBITION = "exhibition"
    BANQUET = "banquet"
    MEETING = "meeting"
    GRADUATION = "graduation"
    TRADE_SHOW = "trade_show"
    GALA = "gala"
    CORPORATE = "corporate"


class RequirementCategory(str, enum.Enum):
    """Budget categories. Requirements outside this set fall into the "other" bucket."""
    SEATING = "seating"
    CATERING = "catering"
    AUDIOVISUAL = "audiovisual"
    LIGHTING = "lighting"
    DECOR = "decor"
    ACCESSIBILITY = "accessibility"
    STAFFING = "staffing"
    LOGISTICS = "logistics"
    SAFETY = "safety"


class RequirementPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RequirementStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    NOT_APPLICABLE = "not_applicable"


class BookingStatus(str, enum.Enum):
    INQUIRY = "inquiry"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, enum.Enum):
    UNPAID = "unpaid"
    DEPOSIT_PAID = "deposit_paid"
    PARTIALLY_PAID = "partially_paid"
    PAID = "paid"
    REFUNDED = "refunded"


class PaymentMethod(str, enum.Enum):
    CREDIT_CARD = "credit_card"
    BANK_TRANSFER = "bank_transfer"
    PAYPAL = "paypal"
    CHECK = "check"
    CASH = "cash"
    OTHER = "other"


class VendorCategory(str, enum.Enum):
    VENUE = "venue"
    CATERING = "catering"
    DECOR = "decor"
    ENTERTAINMENT = "entertainment"
    PHOTOGRAPHY = "photography"
    VIDEOGRAPHY = "videography"
    AUDIO_VISUAL = "audio_visual"
    LIGHTING = "lighting"
    TRANSPORTATION = "transportation"
    RENTALS = "rentals"
    SECURITY = "security"
    STAFFING = "staffing"
    FLORAL = "floral"
    PLANNING = "planning"
    OTHER = "other"


class PriceType(str, enum.Enum):
    FLAT = "flat"
    PER_PERSON = "per_person"
    PER_HOUR = "per_hour"
    CUSTOM = "custom"


class FeeType(str, enum.Enum):
    FLAT = "flat"
    PERCENTAGE = "percentage"


class VendorBookingStatus(str, enum.Enum):
    """Vendor-side status, tracked independently of the parent booking."""
    INQUIRY = "inquiry"
    PENDING = "pending"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
