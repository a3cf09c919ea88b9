"""
Tests for alert preference defaults and validation
"""
from datetime import date

from sarkari_match.config import settings
from sarkari_match.models import (
    AlertFrequency,
    AlertPreferences,
    AlertType,
    JobPosting,
    NotificationChannel,
)
from sarkari_match.services.alert_service import (
    CATEGORIES_ERROR,
    CHANNELS_ERROR,
    CONTACT_ERROR,
    contact_kind,
    default_preferences,
    defaults_for,
    prefill_for_job,
    subscribe,
    validate_alert_preferences,
)


def make_job(job_name: str, state: str = "All India") -> JobPosting:
    return JobPosting(
        id="job-1",
        job_name=job_name,
        min_age=18,
        max_age=30,
        qualification="Graduate",
        state=state,
        deadline=date(2027, 1, 1),
    )


def test_contact_too_short_fails_first_scenario():
    prefs = AlertPreferences(contact="ab", categories=["SSC"], channels=["WhatsApp"])
    result = validate_alert_preferences(prefs)
    assert not result.valid
    assert result.errors == {"contact": CONTACT_ERROR}


def test_missing_categories_after_contact_fixed():
    prefs = AlertPreferences(contact="98765", categories=[], channels=["WhatsApp"])
    result = validate_alert_preferences(prefs)
    assert not result.valid
    assert result.errors == {"categories": CATEGORIES_ERROR}


def test_missing_channels():
    prefs = AlertPreferences(contact="user@example.com", categories=["Banking"], channels=[])
    result = validate_alert_preferences(prefs)
    assert result.errors == {"channels": CHANNELS_ERROR}


def test_all_failures_reported_together():
    result = validate_alert_preferences(AlertPreferences(categories=[], channels=[]))
    assert set(result.errors) == {"contact", "categories", "channels"}


def test_valid_preferences_accepted():
    prefs = AlertPreferences(contact="9876543210", categories=["SSC"])
    result = validate_alert_preferences(prefs)
    assert result.valid
    assert result.errors == {}


def test_defaults_for_keyword_job():
    defaults = defaults_for(make_job("SSC CGL 2024"))
    assert defaults.categories == ["SSC"]
    assert defaults.alert_types == [AlertType.DEADLINE]


def test_defaults_for_other_widen_to_state_govt():
    assert defaults_for(make_job("ISRO Technician B")).categories == ["State Govt"]
    assert defaults_for(make_job("Lekhpal", state="Uttar Pradesh")).categories == ["State Govt"]


def test_default_preferences():
    prefs = default_preferences()
    assert prefs.contact == ""
    assert not prefs.is_subscribed
    assert prefs.categories == []
    assert prefs.alert_types == [AlertType.NEW_JOB, AlertType.DEADLINE]
    assert prefs.locations == ["All India"]
    assert prefs.frequency == AlertFrequency.INSTANT
    assert prefs.channels == [NotificationChannel.WHATSAPP]
    assert prefs.deadline_days == 3
    assert prefs.last_updated == 0


def test_default_preferences_follow_settings(monkeypatch):
    monkeypatch.setattr(settings, "default_deadline_days", 5)
    assert default_preferences().deadline_days == 5


def test_prefill_merges_without_duplicates():
    prefs = AlertPreferences(categories=["Banking"], alert_types=["New Job"])
    prefilled = prefill_for_job(prefs, make_job("RRB NTPC"))
    assert prefilled.categories == ["Banking", "Railways"]
    assert prefilled.alert_types == [AlertType.NEW_JOB, AlertType.DEADLINE]

    again = prefill_for_job(prefilled, make_job("RRB Group D"))
    assert again.categories == ["Banking", "Railways"]
    assert again.alert_types == [AlertType.NEW_JOB, AlertType.DEADLINE]
    assert prefs.categories == ["Banking"]


def test_zero_deadline_days_normalized():
    assert AlertPreferences(deadline_days=0).deadline_days == 3
    assert AlertPreferences(deadline_days=None).deadline_days == 3
    assert AlertPreferences(deadline_days=7).deadline_days == 7


def test_contact_kind():
    assert contact_kind("user@example.com") == "email"
    assert contact_kind("9876543210") == "phone"


def test_subscribe_valid_preferences():
    prefs = AlertPreferences(contact="9876543210", categories=["SSC"])
    subscribed, validation = subscribe(prefs, now=1724486400000)
    assert validation.valid
    assert subscribed.is_subscribed
    assert subscribed.last_updated == 1724486400000
    assert not prefs.is_subscribed


def test_subscribe_invalid_preferences_unchanged():
    prefs = AlertPreferences(contact="ab", categories=["SSC"])
    subscribed, validation = subscribe(prefs, now=1)
    assert not validation.valid
    assert subscribed == prefs
    assert not subscribed.is_subscribed
