"""
Pydantic models for government job postings
"""
from datetime import date
from enum import Enum
from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator, ConfigDict


# Wildcard values used by postings
ALL = "All"
ALL_INDIA = "All India"
ANY_STREAM = "Any"


class Qualification(str, Enum):
    """Educational qualification, declared lowest first"""
    TENTH = "10th Pass"
    TWELFTH = "12th Pass"
    GRADUATE = "Graduate"
    POST_GRADUATE = "Post Graduate"


class ReservationCategory(str, Enum):
    """Applicant reservation category"""
    GENERAL = "General"
    OBC = "OBC"
    SC = "SC"
    ST = "ST"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"


class CompetitionLevel(str, Enum):
    """Coarse applicant-to-seat ratio label"""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class JobStatus(str, Enum):
    """Lifecycle of a posting; only ACTIVE postings are matchable"""
    ACTIVE = "Active"
    DRAFT = "Draft"
    CLOSED = "Closed"
    EXPIRED = "Expired"


class CategoryTag(str, Enum):
    """Subject-domain classification of a posting"""
    SSC = "SSC"
    BANKING = "Banking"
    DEFENCE = "Defence"
    TEACHING = "Teaching"
    RAILWAYS = "Railways"
    STATE_GOVT = "State Govt"
    OTHER = "Other"


CategoryRequirement = Union[Literal["All"], ReservationCategory]
GenderRequirement = Union[Literal["All"], Gender]


class JobPosting(BaseModel):
    """A published job posting as maintained by the admin panel"""
    id: str = Field(..., min_length=1, description="Unique posting identifier")
    job_name: str = Field(..., min_length=1, description="Display name of the posting")
    min_age: int = Field(..., description="Minimum age on the cut-off date")
    max_age: int = Field(..., description="Maximum age before any relaxation")
    qualification: Qualification = Field(..., description="Minimum qualification")
    category: CategoryRequirement = Field(ALL, description="Reserved category or 'All'")
    gender: GenderRequirement = Field(ALL, description="Restricted gender or 'All'")
    state: str = Field(ALL_INDIA, description="State of the posting or 'All India'")
    competition_level: CompetitionLevel = Field(CompetitionLevel.MEDIUM)
    status: JobStatus = Field(JobStatus.ACTIVE)
    deadline: date = Field(..., description="Last date to apply")
    required_streams: List[str] = Field(default_factory=lambda: [ANY_STREAM])
    salary_range: str = Field("", description="Free-text pay scale")
    apply_link: str = Field("", description="Where to apply")
    official_website: Optional[str] = None
    notification_link: Optional[str] = None
    syllabus_link: Optional[str] = None

    @field_validator('required_streams')
    @classmethod
    def default_streams(cls, v):
        streams = [s.strip() for s in v if s and s.strip()]
        return streams or [ANY_STREAM]

    @field_validator('state')
    @classmethod
    def default_state(cls, v):
        return v.strip() or ALL_INDIA

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "ssc-cgl-2024",
                "job_name": "SSC CGL 2024",
                "min_age": 18,
                "max_age": 27,
                "qualification": "Graduate",
                "category": "All",
                "gender": "All",
                "state": "All India",
                "competition_level": "High",
                "status": "Active",
                "deadline": "2025-08-24",
                "required_streams": ["Any"],
                "salary_range": "₹45,000 - ₹1,10,000",
                "apply_link": "https://ssc.gov.in"
            }
        }
    )


class JobSaveResponse(BaseModel):
    """Posting as saved by the admin panel, with sanity warnings"""
    job: JobPosting
    warnings: List[str] = Field(default_factory=list)
