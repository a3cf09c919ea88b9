"""
Utility functions for form validation and catalog checks
"""
import hashlib
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from ..models.job import JobPosting, JobStatus
from ..models.user import ApplicantProfile


def today_utc() -> date:
    """Current date in UTC"""
    return datetime.now(timezone.utc).date()


def days_remaining(deadline: date, today: Optional[date] = None) -> int:
    """
    Whole days left to apply, never negative

    Args:
        deadline: Last date to apply
        today: Reference date (defaults to today in UTC)

    Returns:
        Number of days remaining
    """
    if today is None:
        today = today_utc()
    return max(0, (deadline - today).days)


def generate_job_id(job_name: str) -> str:
    """
    Generate a unique job ID from the job name

    Args:
        job_name: Name of the posting

    Returns:
        Slug of the name with a short hash suffix
    """
    clean_name = re.sub(r'[^\w\s-]', '', job_name.lower())
    clean_name = re.sub(r'[\s_-]+', '-', clean_name).strip('-')

    if len(clean_name) > 50:
        clean_name = clean_name[:50].rstrip('-')

    hash_suffix = hashlib.md5(job_name.encode()).hexdigest()[:8]
    return f"{clean_name}-{hash_suffix}" if clean_name else f"job-{hash_suffix}"


def validate_job_form(job_data: Dict[str, Any]) -> List[str]:
    """
    Validate an admin job form before it is turned into a posting

    Args:
        job_data: Raw form fields

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []
    job_name = job_data.get('job_name')
    if not isinstance(job_name, str) or not job_name.strip():
        errors.append("Job Name is required")
    if not str(job_data.get('deadline') or '').strip():
        errors.append("Deadline is required")
    return errors


def validate_profile_form(profile: ApplicantProfile) -> Dict[str, str]:
    """
    Validate the search form; the fields a search cannot run without

    Args:
        profile: Applicant profile from the form

    Returns:
        Field name to error message (empty if valid)
    """
    errors = {}
    if profile.age is None:
        errors['age'] = "Age is required"
    if profile.qualification is None:
        errors['qualification'] = "Qualification is required"
    if profile.category is None:
        errors['category'] = "Category is required"
    return errors


def catalog_warnings(job: JobPosting, today: Optional[date] = None) -> List[str]:
    """
    Sanity warnings for a posting. Reported only, never enforced.

    Args:
        job: Posting to inspect
        today: Reference date (defaults to today in UTC)

    Returns:
        List of warning messages (empty if nothing looks off)
    """
    if today is None:
        today = today_utc()

    warnings = []
    if job.min_age < 0 or job.max_age < 0:
        warnings.append(f"Negative age limit ({job.min_age}-{job.max_age})")
    if job.min_age > job.max_age:
        warnings.append(f"Minimum age {job.min_age} exceeds maximum age {job.max_age}")
    if job.status == JobStatus.ACTIVE and job.deadline < today:
        warnings.append(f"Active posting has a past deadline ({job.deadline.isoformat()})")
    return warnings
