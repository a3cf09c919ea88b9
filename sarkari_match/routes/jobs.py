"""
API routes for the job catalog and admin CRUD
"""
import logging
from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query

from ..config import settings
from ..database import get_job_repository
from ..models.job import JobPosting, JobSaveResponse, JobStatus
from ..models.user import EligibilityResult, EligibilityTestRequest, JobMatch
from ..services.eligibility_service import check_eligibility
from ..services.job_repository import JobRepository
from ..services.matching_service import latest_jobs
from ..services.classifier import classify
from ..utils.validators import (
    catalog_warnings,
    days_remaining,
    generate_job_id,
    validate_job_form,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _build_job(job_data: Dict[str, Any], job_id: Optional[str] = None) -> JobPosting:
    """Turn a raw admin form into a posting or raise a 400"""
    errors = validate_job_form(job_data)
    if errors:
        raise HTTPException(status_code=400, detail=f"Invalid job data: {'; '.join(errors)}")

    data = dict(job_data)
    data["id"] = job_id or data.get("id") or generate_job_id(data["job_name"])
    try:
        return JobPosting(**data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid job data: {str(e)}")


@router.get("/", response_model=List[JobPosting])
async def get_jobs(
    status: Optional[JobStatus] = Query(None, description="Filter by status"),
    limit: int = Query(100, ge=1, le=1000, description="Maximum number of jobs to return"),
    offset: int = Query(0, ge=0, description="Number of jobs to skip"),
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Get the job catalog with optional filtering
    """
    try:
        jobs = await repository.list(status=status)
        return jobs[offset:offset + limit]

    except Exception as e:
        logger.error(f"Error fetching jobs: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve jobs: {str(e)}")


@router.get("/latest", response_model=List[JobMatch])
async def get_latest_jobs(repository: JobRepository = Depends(get_job_repository)):
    """
    Get the newest active jobs for the home page
    """
    try:
        jobs = await repository.list()
        return latest_jobs(jobs, settings.latest_jobs_limit)

    except Exception as e:
        logger.error(f"Error fetching latest jobs: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve jobs: {str(e)}")


@router.post("/eligibility-test", response_model=EligibilityResult)
async def run_eligibility_test(request: EligibilityTestRequest):
    """
    Evaluate an unsaved posting against a test profile
    """
    return check_eligibility(request.job, request.profile)


@router.get("/{job_id}", response_model=JobMatch)
async def get_job(job_id: str, repository: JobRepository = Depends(get_job_repository)):
    """
    Get a specific job with its category and days remaining
    """
    try:
        job = await repository.get(job_id)

        if not job:
            raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")

        return JobMatch(
            job=job,
            category_tag=classify(job),
            days_remaining=days_remaining(job.deadline)
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching job {job_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to retrieve job: {str(e)}")


@router.post("/", response_model=JobSaveResponse, status_code=201)
async def create_job(
    job_data: Dict[str, Any] = Body(...),
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Publish a new job
    """
    job = _build_job(job_data)
    try:
        if await repository.get(job.id):
            raise HTTPException(status_code=409, detail=f"Job already exists: {job.id}")

        await repository.put(job)
        return JobSaveResponse(job=job, warnings=catalog_warnings(job))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating job: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.put("/{job_id}", response_model=JobSaveResponse)
async def update_job(
    job_id: str,
    job_data: Dict[str, Any] = Body(...),
    repository: JobRepository = Depends(get_job_repository)
):
    """
    Replace an existing job
    """
    job = _build_job(job_data, job_id=job_id)
    try:
        if not await repository.get(job_id):
            raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")

        await repository.put(job)
        return JobSaveResponse(job=job, warnings=catalog_warnings(job))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.delete("/{job_id}")
async def delete_job(job_id: str, repository: JobRepository = Depends(get_job_repository)):
    """
    Delete a job
    """
    try:
        deleted = await repository.delete(job_id)

        if not deleted:
            raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")

        return {"job_id": job_id, "deleted": True}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting job {job_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
