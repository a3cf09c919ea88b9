"""
Pydantic models for applicant profiles and eligibility results
"""
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .job import (
    ALL,
    CategoryTag,
    Gender,
    JobPosting,
    Qualification,
    ReservationCategory,
)
from .filters import FilterState


class ApplicantProfile(BaseModel):
    """Applicant details entered in the search form.

    Optional fields accept the empty string the form sends for an untouched
    input and store it as None, so "unset" has a single representation.
    """
    age: Optional[int] = Field(None, ge=0, le=150, description="Applicant's age in years")
    qualification: Optional[Qualification] = Field(None, description="Highest qualification")
    stream: Optional[str] = Field(None, description="Subject stream, e.g. Science")
    category: Optional[ReservationCategory] = Field(None, description="Reservation category")
    gender: Gender = Field(..., description="Applicant's gender")
    state_preference: Optional[str] = Field(None, description="Preferred state, empty for any")

    @field_validator('age', 'qualification', 'stream', 'category', 'state_preference', mode='before')
    @classmethod
    def blank_as_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "age": 30,
                "qualification": "Graduate",
                "stream": "Science",
                "category": "OBC",
                "gender": "Male",
                "state_preference": ""
            }
        }
    )


class EligibilityResult(BaseModel):
    """Verdict of the eligibility pipeline for one posting"""
    eligible: bool = Field(..., description="Whether the applicant may apply")
    reason: str = Field(..., description="Human-readable verdict")
    failed_check: Optional[str] = Field(None, description="Name of the first failing check")

    model_config = ConfigDict(frozen=True)


class JobMatch(BaseModel):
    """A posting together with its tag and verdict, as rendered in results"""
    job: JobPosting
    category_tag: CategoryTag
    eligibility: Optional[EligibilityResult] = None
    days_remaining: int = Field(..., ge=0)


class SearchRequest(BaseModel):
    """Request body for a full eligibility search"""
    profile: ApplicantProfile
    job_category: str = Field(ALL, description="'All' or a category tag such as 'SSC'")
    filters: FilterState = Field(default_factory=FilterState)

    @field_validator('job_category')
    @classmethod
    def validate_job_category(cls, v):
        valid = [ALL] + [tag.value for tag in CategoryTag]
        if v not in valid:
            raise ValueError(f'job_category must be one of: {valid}')
        return v


class SearchResponse(BaseModel):
    """Result list of a search"""
    total_active_jobs: int
    eligible_jobs: int
    results: List[JobMatch]


class FormErrorResponse(BaseModel):
    """Field-level form errors"""
    errors: Dict[str, str]


class EligibilityTestRequest(BaseModel):
    """Admin request to evaluate an unsaved posting"""
    job: JobPosting
    profile: ApplicantProfile
