"""
Alert preference defaults and validation
"""
import logging
import time
from typing import List, Optional, Tuple

from ..config import settings
from ..models.alerts import (
    AlertDefaults,
    AlertPreferences,
    AlertType,
    ValidationResult,
)
from ..models.job import CategoryTag, JobPosting
from .classifier import classify

logger = logging.getLogger(__name__)


MIN_CONTACT_LENGTH = 5

# Categories a user can subscribe to
SUBSCRIBABLE_CATEGORIES: Tuple[str, ...] = (
    "SSC", "Banking", "Railways", "Defence", "Teaching", "State Govt", "UPSC"
)

CONTACT_ERROR = "Please enter a valid Phone Number or Email."
CATEGORIES_ERROR = "Select at least one job category."
CHANNELS_ERROR = "Select a notification channel (WhatsApp/Telegram/Email)."


def default_preferences() -> AlertPreferences:
    """Preferences shown to a user who has never saved any"""
    return AlertPreferences(deadline_days=settings.default_deadline_days)


def defaults_for(job: JobPosting) -> AlertDefaults:
    """
    Derive alert selections from a specific posting

    Postings tagged OTHER subscribe to State Govt alerts, since there is no
    "Other" subscription. A job-specific alert always includes deadline
    reminders.
    """
    tag = classify(job)
    category = CategoryTag.STATE_GOVT if tag == CategoryTag.OTHER else tag
    return AlertDefaults(categories=[category.value], alert_types=[AlertType.DEADLINE])


def _merge(existing: List, extra: List) -> List:
    return existing + [item for item in extra if item not in existing]


def prefill_for_job(prefs: AlertPreferences, job: JobPosting) -> AlertPreferences:
    """Add the posting's defaults to existing preferences without duplicates"""
    defaults = defaults_for(job)
    return prefs.model_copy(update={
        "categories": _merge(prefs.categories, defaults.categories),
        "alert_types": _merge(prefs.alert_types, defaults.alert_types),
    })


def contact_kind(contact: str) -> str:
    """Tell an email address from a phone number"""
    return "email" if "@" in contact else "phone"


def validate_alert_preferences(prefs: AlertPreferences) -> ValidationResult:
    """
    Validate alert preferences before they are saved

    Args:
        prefs: Preferences as edited by the user

    Returns:
        ValidationResult with one message per failing field
    """
    errors = {}
    if len(prefs.contact) < MIN_CONTACT_LENGTH:
        errors["contact"] = CONTACT_ERROR
    if not prefs.categories:
        errors["categories"] = CATEGORIES_ERROR
    if not prefs.channels:
        errors["channels"] = CHANNELS_ERROR
    return ValidationResult(valid=not errors, errors=errors)


def subscribe(
    prefs: AlertPreferences,
    now: Optional[int] = None
) -> Tuple[AlertPreferences, ValidationResult]:
    """
    Switch alerts on for valid preferences

    Args:
        prefs: Preferences to subscribe with
        now: Timestamp in epoch milliseconds, defaults to the current time

    Returns:
        Tuple of (preferences, validation). Invalid preferences come back
        unchanged.
    """
    validation = validate_alert_preferences(prefs)
    if not validation.valid:
        logger.info(f"Alert subscription rejected: {sorted(validation.errors)}")
        return prefs, validation

    if now is None:
        now = int(time.time() * 1000)
    subscribed = prefs.model_copy(update={"is_subscribed": True, "last_updated": now})
    logger.info(
        f"Alert subscription saved for {contact_kind(prefs.contact)} contact: "
        f"{len(prefs.categories)} categories, {len(prefs.channels)} channels"
    )
    return subscribed, validation
