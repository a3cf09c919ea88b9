"""
Matching service: catalog + profile -> eligible, tagged, filtered results
"""
import logging
from datetime import date
from typing import Iterable, List, Optional

from ..models.filters import FilterState
from ..models.job import ALL, JobPosting, JobStatus
from ..models.user import ApplicantProfile, JobMatch
from ..utils.validators import days_remaining
from .classifier import classify
from .competition_filter import filter_by_competition
from .eligibility_service import check_eligibility

logger = logging.getLogger(__name__)


def active_jobs(jobs: Iterable[JobPosting]) -> List[JobPosting]:
    """Postings open for matching, in catalog order"""
    return [job for job in jobs if job.status == JobStatus.ACTIVE]


def _to_match(job: JobPosting, profile: Optional[ApplicantProfile], today: Optional[date]) -> JobMatch:
    if profile is None:
        eligibility = None
    else:
        eligibility = check_eligibility(job, profile)
    return JobMatch(
        job=job,
        category_tag=classify(job),
        eligibility=eligibility,
        days_remaining=days_remaining(job.deadline, today)
    )


def match_jobs(
    jobs: Iterable[JobPosting],
    profile: ApplicantProfile,
    job_category: str = ALL,
    filter_state: Optional[FilterState] = None,
    today: Optional[date] = None
) -> List[JobMatch]:
    """
    Run the full search pipeline over a catalog

    Args:
        jobs: Job catalog
        profile: Complete applicant profile snapshot
        job_category: 'All' or a category tag value to keep
        filter_state: Competition filter state (defaults to no filtering)
        today: Reference date for days remaining

    Returns:
        Eligible postings that survive the category and competition filters
    """
    if filter_state is None:
        filter_state = FilterState()

    candidates = active_jobs(jobs)
    eligible = [job for job in candidates if check_eligibility(job, profile).eligible]

    if job_category != ALL:
        eligible = [job for job in eligible if classify(job).value == job_category]

    filtered = filter_by_competition(eligible, filter_state)
    logger.info(
        f"Matched {len(filtered)} of {len(candidates)} active jobs "
        f"(category={job_category}, smart_mode={filter_state.smart_mode})"
    )
    return [_to_match(job, profile, today) for job in filtered]


def explain_all(
    jobs: Iterable[JobPosting],
    profile: ApplicantProfile,
    today: Optional[date] = None
) -> List[JobMatch]:
    """Verdict for every active posting, eligible or not"""
    return [_to_match(job, profile, today) for job in active_jobs(jobs)]


def saved_jobs(
    jobs: Iterable[JobPosting],
    saved_ids: Iterable[str],
    today: Optional[date] = None
) -> List[JobMatch]:
    """Active postings the user bookmarked, without running eligibility"""
    saved = set(saved_ids)
    return [_to_match(job, None, today) for job in active_jobs(jobs) if job.id in saved]


def latest_jobs(
    jobs: Iterable[JobPosting],
    limit: int,
    today: Optional[date] = None
) -> List[JobMatch]:
    """First active postings of the catalog, untouched by eligibility"""
    return [_to_match(job, None, today) for job in active_jobs(jobs)[:limit]]
