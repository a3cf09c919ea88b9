"""
API routes for eligibility checking
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from ..database import get_job_repository
from ..models.user import (
    ApplicantProfile,
    EligibilityResult,
    FormErrorResponse,
    JobMatch,
    SearchRequest,
    SearchResponse,
)
from ..services.eligibility_service import check_eligibility
from ..services.job_repository import JobRepository
from ..services.matching_service import active_jobs, explain_all, match_jobs
from ..utils.validators import validate_profile_form

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eligibility", tags=["eligibility"])


@router.post(
    "/search",
    response_model=SearchResponse,
    responses={400: {"model": FormErrorResponse}}
)
async def search_jobs(
    request: SearchRequest,
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Find the active jobs an applicant may apply to
    """
    errors = validate_profile_form(request.profile)
    if errors:
        raise HTTPException(status_code=400, detail=FormErrorResponse(errors=errors).model_dump())

    try:
        jobs = await repository.list()
        results = match_jobs(
            jobs,
            request.profile,
            job_category=request.job_category,
            filter_state=request.filters
        )

        return SearchResponse(
            total_active_jobs=len(active_jobs(jobs)),
            eligible_jobs=len(results),
            results=results
        )

    except Exception as e:
        logger.error(f"Error in eligibility search: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")


@router.post("/check/{job_id}", response_model=EligibilityResult)
async def check_job(
    job_id: str,
    profile: ApplicantProfile,
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Check eligibility for a single job
    """
    try:
        job = await repository.get(job_id)

        if not job:
            raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")

        return check_eligibility(job, profile)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error checking job {job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")


@router.post("/explain", response_model=List[JobMatch])
async def explain_jobs(
    profile: ApplicantProfile,
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Verdict with reason for every active job
    """
    try:
        jobs = await repository.list()
        return explain_all(jobs, profile)

    except Exception as e:
        logger.error(f"Error explaining eligibility: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to check eligibility: {str(e)}")
