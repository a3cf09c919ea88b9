"""
API routes for bookmarked jobs
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException

from ..database import get_job_repository, get_preference_store
from ..models.user import JobMatch
from ..services.job_repository import JobRepository
from ..services.matching_service import saved_jobs
from ..services.preference_store import PreferenceStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved", tags=["saved"])


@router.get("/{user_id}", response_model=List[JobMatch])
async def get_saved_jobs(
    user_id: str,
    repository: JobRepository = Depends(get_job_repository),
    store: PreferenceStore = Depends(get_preference_store)
):
    """
    Get the active jobs a user bookmarked
    """
    try:
        saved_ids = await store.get_saved_job_ids(user_id)
        jobs = await repository.list()
        return saved_jobs(jobs, saved_ids)

    except Exception as e:
        logger.error(f"Error fetching saved jobs: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/{user_id}/{job_id}")
async def toggle_saved_job(
    user_id: str,
    job_id: str,
    repository: JobRepository = Depends(get_job_repository),
    store: PreferenceStore = Depends(get_preference_store)
):
    """
    Bookmark a job, or remove the bookmark if it is already saved
    """
    try:
        saved_ids = await store.get_saved_job_ids(user_id)
        if job_id not in saved_ids and not await repository.get(job_id):
            raise HTTPException(status_code=404, detail=f"Job not found: {job_id}")

        saved_ids = await store.toggle_saved_job(user_id, job_id)
        return {"user_id": user_id, "job_id": job_id, "saved": job_id in saved_ids, "saved_job_ids": saved_ids}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error toggling saved job: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")
