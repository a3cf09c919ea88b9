"""
Eligibility service for checking an applicant against a job posting
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..models.job import (
    ALL,
    ALL_INDIA,
    ANY_STREAM,
    JobPosting,
    JobStatus,
    Qualification,
    ReservationCategory,
)
from ..models.user import ApplicantProfile, EligibilityResult

logger = logging.getLogger(__name__)


ELIGIBLE_REASON = "Eligible"

# Years added to the maximum age for each reserved category
RELAXATION_YEARS: Dict[ReservationCategory, int] = {
    ReservationCategory.GENERAL: 0,
    ReservationCategory.OBC: 3,
    ReservationCategory.SC: 5,
    ReservationCategory.ST: 5,
}

# Higher relaxation tiers suggested to applicants just over the limit
RELAXATION_HINT_TIERS: Tuple[Tuple[str, ReservationCategory], ...] = (
    ("OBC", ReservationCategory.OBC),
    ("SC/ST", ReservationCategory.SC),
)

QUALIFICATION_ORDER: Tuple[Qualification, ...] = (
    Qualification.TENTH,
    Qualification.TWELFTH,
    Qualification.GRADUATE,
    Qualification.POST_GRADUATE,
)


def relax(base_max_age: int, category: Optional[ReservationCategory]) -> int:
    """
    Apply category age relaxation to a maximum age

    Args:
        base_max_age: Maximum age advertised by the posting
        category: Applicant's reservation category, None when not given

    Returns:
        Maximum age the applicant is held to
    """
    if category is None:
        return base_max_age
    return base_max_age + RELAXATION_YEARS[category]


def qualification_rank(qualification: Qualification) -> int:
    """Position of a qualification in the hierarchy, 0 being the lowest"""
    return QUALIFICATION_ORDER.index(qualification)


def satisfies(applicant: Optional[Qualification], required: Qualification) -> bool:
    """
    Check whether an applicant's qualification meets a requirement

    An applicant without a qualification fails every requirement.
    """
    if applicant is None:
        return False
    return qualification_rank(applicant) >= qualification_rank(required)


def _label(value) -> str:
    return getattr(value, "value", value)


EligibilityCheck = Callable[[JobPosting, ApplicantProfile], Optional[str]]


class EligibilityService:
    """Ordered, short-circuiting eligibility pipeline.

    Each check returns None when it passes or the reason shown to the
    applicant when it fails. The first failing check decides the verdict.
    """

    def __init__(self):
        self.checks: List[Tuple[str, EligibilityCheck]] = [
            ("status", self._check_status),
            ("gender", self._check_gender),
            ("category", self._check_category),
            ("age_present", self._check_age_present),
            ("min_age", self._check_min_age),
            ("max_age", self._check_max_age),
            ("qualification", self._check_qualification),
            ("stream", self._check_stream),
            ("location", self._check_location),
        ]

    def check_eligibility(self, job: JobPosting, profile: ApplicantProfile) -> EligibilityResult:
        """
        Check whether an applicant may apply to a posting

        Args:
            job: Posting to check against
            profile: Complete snapshot of the applicant's profile

        Returns:
            EligibilityResult naming the first failing check, if any
        """
        for name, check in self.checks:
            reason = check(job, profile)
            if reason is not None:
                return EligibilityResult(eligible=False, reason=reason, failed_check=name)
        return EligibilityResult(eligible=True, reason=ELIGIBLE_REASON)

    def _check_status(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if job.status != JobStatus.ACTIVE:
            return "Job application closed."
        return None

    def _check_gender(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if job.gender != ALL and job.gender != profile.gender:
            return f"Restricted to {_label(job.gender)} candidates."
        return None

    def _check_category(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if job.category != ALL and job.category != profile.category:
            return f"Restricted to {_label(job.category)} category."
        return None

    def _check_age_present(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if profile.age is None:
            return "Age required. Please enter your age."
        return None

    def _check_min_age(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if profile.age < job.min_age:
            return f"Minimum age is {job.min_age}."
        return None

    def _check_max_age(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        relaxed_max = relax(job.max_age, profile.category)
        if profile.age > relaxed_max:
            return f"Over age limit ({relaxed_max}).{self._relaxation_hint(job, profile, relaxed_max)}"
        return None

    def _relaxation_hint(self, job: JobPosting, profile: ApplicantProfile, relaxed_max: int) -> str:
        """Point the applicant to the first higher tier that would cover their age"""
        for label, category in RELAXATION_HINT_TIERS:
            tier_max = relax(job.max_age, category)
            if tier_max > relaxed_max and profile.age <= tier_max:
                return f" Consider {label} category relaxation."
        return ""

    def _check_qualification(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if not satisfies(profile.qualification, job.qualification):
            return f"Requires {job.qualification.value}."
        return None

    def _check_stream(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if ANY_STREAM in job.required_streams:
            return None
        if profile.stream and profile.stream in job.required_streams:
            return None
        return f"Requires {' or '.join(job.required_streams)} stream."

    def _check_location(self, job: JobPosting, profile: ApplicantProfile) -> Optional[str]:
        if not profile.state_preference or job.state == ALL_INDIA:
            return None
        if job.state != profile.state_preference:
            return f"Job is for {job.state} residents only."
        return None


# Global eligibility service instance
eligibility_service = EligibilityService()


def check_eligibility(job: JobPosting, profile: ApplicantProfile) -> EligibilityResult:
    """Check a single posting with the shared pipeline"""
    return eligibility_service.check_eligibility(job, profile)
