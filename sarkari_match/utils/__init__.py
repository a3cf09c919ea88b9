"""
Utility functions for the Sarkari Job Eligibility Matcher
"""

from .validators import (
    days_remaining,
    generate_job_id,
    validate_job_form,
    validate_profile_form,
    catalog_warnings
)

__all__ = [
    "days_remaining",
    "generate_job_id",
    "validate_job_form",
    "validate_profile_form",
    "catalog_warnings"
]
