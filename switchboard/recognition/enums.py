"""Enums for the intent recognition domain."""

from enum import Enum


class IntentType(str, Enum):
    """Closed intent catalog.

    Declaration order is significant: it breaks ties between equally
    scored intents, first declared wins.
    """

    BOOKING_REQUEST = "booking_request"
    BOOKING_CANCEL = "booking_cancel"
    BOOKING_RESCHEDULE = "booking_reschedule"
    BOOKING_INQUIRY = "booking_inquiry"
    SERVICE_INQUIRY = "service_inquiry"
    AVAILABILITY_CHECK = "availability_check"
    PRICE_INQUIRY = "price_inquiry"
    BUSINESS_HOURS = "business_hours"
    LOCATION_INQUIRY = "location_inquiry"
    GENERAL_GREETING = "general_greeting"
    COMPLAINT = "complaint"
    COMPLIMENT = "compliment"
    ESCALATION_REQUEST = "escalation_request"
    EMERGENCY = "emergency"
    OTHER = "other"


INTENT_ORDER: dict[IntentType, int] = {intent: i for i, intent in enumerate(IntentType)}


class EntityType(str, Enum):
    """Typed spans extracted from a message."""

    SERVICE_NAME = "service_name"
    DATE = "date"
    TIME = "time"
    DURATION = "duration"
    PERSON_NAME = "person_name"
    PHONE_NUMBER = "phone_number"
    EMAIL = "email"
    LOCATION = "location"
    PRICE = "price"
    APPOINTMENT_ID = "appointment_id"
    URGENCY_LEVEL = "urgency_level"


class BusinessDomain(str, Enum):
    """Tenant business verticals."""

    HEALTHCARE = "healthcare"
    BEAUTY = "beauty"
    LEGAL = "legal"
    EDUCATION = "education"
    SPORTS = "sports"
    CONSULTING = "consulting"
    OTHER = "other"


class UrgencyLevel(str, Enum):
    HIGH = "alta"
    MEDIUM = "media"
    LOW = "baixa"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
