"""
Models package for the Sarkari Job Eligibility Matcher
"""

from .job import (
    ALL,
    ALL_INDIA,
    ANY_STREAM,
    Qualification,
    ReservationCategory,
    Gender,
    CompetitionLevel,
    JobStatus,
    CategoryTag,
    JobPosting,
    JobSaveResponse
)

from .filters import (
    TierFilter,
    FilterState
)

from .user import (
    ApplicantProfile,
    EligibilityResult,
    JobMatch,
    SearchRequest,
    SearchResponse,
    FormErrorResponse,
    EligibilityTestRequest
)

from .alerts import (
    AlertType,
    AlertFrequency,
    NotificationChannel,
    AlertPreferences,
    AlertDefaults,
    ValidationResult,
    SubscriptionResponse
)

__all__ = [
    # Job models
    "ALL",
    "ALL_INDIA",
    "ANY_STREAM",
    "Qualification",
    "ReservationCategory",
    "Gender",
    "CompetitionLevel",
    "JobStatus",
    "CategoryTag",
    "JobPosting",
    "JobSaveResponse",

    # Filter models
    "TierFilter",
    "FilterState",

    # Applicant models
    "ApplicantProfile",
    "EligibilityResult",
    "JobMatch",
    "SearchRequest",
    "SearchResponse",
    "FormErrorResponse",
    "EligibilityTestRequest",

    # Alert models
    "AlertType",
    "AlertFrequency",
    "NotificationChannel",
    "AlertPreferences",
    "AlertDefaults",
    "ValidationResult",
    "SubscriptionResponse"
]
