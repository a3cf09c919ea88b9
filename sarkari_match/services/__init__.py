"""
Services package for the Sarkari Job Eligibility Matcher
"""

from .eligibility_service import EligibilityService, check_eligibility, relax, satisfies
from .classifier import classify
from .competition_filter import filter_by_competition
from .alert_service import defaults_for, validate_alert_preferences
from .job_repository import JobRepository, InMemoryJobRepository, MongoJobRepository
from .preference_store import PreferenceStore, InMemoryPreferenceStore, MongoPreferenceStore

__all__ = [
    "EligibilityService",
    "check_eligibility",
    "relax",
    "satisfies",
    "classify",
    "filter_by_competition",
    "defaults_for",
    "validate_alert_preferences",
    "JobRepository",
    "InMemoryJobRepository",
    "MongoJobRepository",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "MongoPreferenceStore"
]
