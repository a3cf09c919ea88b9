"""
Pydantic models for job alert subscriptions
"""
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .job import ALL_INDIA


DEFAULT_DEADLINE_DAYS = 3


class AlertType(str, Enum):
    NEW_JOB = "New Job"
    DEADLINE = "Deadline"
    ADMIT_CARD = "Admit Card"
    RESULT = "Result"


class AlertFrequency(str, Enum):
    INSTANT = "Instant"
    DAILY = "Daily"
    WEEKLY = "Weekly"


class NotificationChannel(str, Enum):
    WHATSAPP = "WhatsApp"
    TELEGRAM = "Telegram"
    EMAIL = "Email"


class AlertPreferences(BaseModel):
    """Notification subscription of one user"""
    contact: str = Field("", description="Phone number or email address")
    is_subscribed: bool = Field(False, description="Whether alerts are switched on")
    categories: List[str] = Field(default_factory=list, description="Job categories, e.g. SSC, Banking")
    alert_types: List[AlertType] = Field(
        default_factory=lambda: [AlertType.NEW_JOB, AlertType.DEADLINE]
    )
    locations: List[str] = Field(default_factory=lambda: [ALL_INDIA])
    frequency: AlertFrequency = Field(AlertFrequency.INSTANT)
    channels: List[NotificationChannel] = Field(
        default_factory=lambda: [NotificationChannel.WHATSAPP]
    )
    deadline_days: int = Field(DEFAULT_DEADLINE_DAYS, ge=0, description="Reminder lead time in days")
    last_updated: int = Field(0, ge=0, description="Epoch milliseconds of the last save")

    @field_validator('deadline_days', mode='before')
    @classmethod
    def default_deadline_days(cls, v):
        # Older saved preferences carry 0 or nothing here
        if not v:
            return DEFAULT_DEADLINE_DAYS
        return v

    @field_validator('contact', mode='before')
    @classmethod
    def strip_contact(cls, v):
        return (v or "").strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "contact": "9876543210",
                "is_subscribed": True,
                "categories": ["SSC", "Railways"],
                "alert_types": ["New Job", "Deadline"],
                "locations": ["All India", "Bihar"],
                "frequency": "Daily",
                "channels": ["WhatsApp"],
                "deadline_days": 3,
                "last_updated": 1724486400000
            }
        }
    )


class AlertDefaults(BaseModel):
    """Selections prefilled when a user asks for alerts on a specific job"""
    categories: List[str]
    alert_types: List[AlertType]


class ValidationResult(BaseModel):
    """Outcome of validating alert preferences, keyed by field"""
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


class SubscriptionResponse(BaseModel):
    """Result of saving alert preferences"""
    preferences: AlertPreferences
    validation: ValidationResult
    contact_kind: Optional[str] = None
